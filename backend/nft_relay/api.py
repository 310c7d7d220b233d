from fastapi import APIRouter, Body, Depends, FastAPI, Query, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from functools import lru_cache
from typing import Any, Optional
from nft_relay import __version__
from nft_relay.config import get_settings
from nft_relay.integrations.bitscrunch_client import UNSET, BitsCrunchClient
from nft_relay.integrations.exceptions import IntegrationError, UpstreamError
from nft_relay.models.envelope import FailureEnvelope, SuccessEnvelope
import logging

# Configure logging
logging.basicConfig(level=get_settings().log_level)
logger = logging.getLogger(__name__)

VALIDATE_FAILURE_MESSAGE = "Failed to validate NFT metadata"
ANALYTICS_FAILURE_MESSAGE = "Failed to fetch NFT analytics"

# Relay path -> fixed failure message, for errors raised outside the route body
FAILURE_MESSAGES = {
    "/api/nfts/validate-nft": VALIDATE_FAILURE_MESSAGE,
    "/api/nfts/nft-analytics": ANALYTICS_FAILURE_MESSAGE,
}

app = FastAPI(
    title="NFT Relay API",
    description="Relays NFT validation and analytics requests to the bitsCrunch API",
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_bitscrunch_client() -> BitsCrunchClient:
    """One client per process, built from the startup settings."""
    return BitsCrunchClient(get_settings())


def _success(data) -> JSONResponse:
    return JSONResponse(status_code=200, content=SuccessEnvelope(data=data).model_dump())


def _failure(message: str, error, status_code: int = 500) -> JSONResponse:
    content = FailureEnvelope(message=message, error=error).model_dump()
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def _failure_message(request: Request) -> Optional[str]:
    return FAILURE_MESSAGES.get(request.url.path.rstrip("/"))


@app.exception_handler(IntegrationError)
async def integration_error_handler(request: Request, exc: IntegrationError):
    logger.error(f"Integration unavailable for {request.url.path}: {exc}")
    message = _failure_message(request) or "NFT provider integration is not configured"
    return _failure(message, str(exc))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Unparseable input on a relay route still gets the failure envelope."""
    message = _failure_message(request)
    if message is None:
        return await request_validation_exception_handler(request, exc)
    logger.warning(f"Rejected unparseable request to {request.url.path}: {exc.errors()}")
    return _failure(message, exc.errors(), status_code=400)


router = APIRouter()


@router.post("/validate-nft")
def validate_nft(
    body: Any = Body(default=None),
    client: BitsCrunchClient = Depends(get_bitscrunch_client),
):
    """
    Validate NFT metadata with bitsCrunch.

    - **tokenId**: The ID of the token to validate
    - **contractAddress**: The contract address of the NFT

    Any JSON body is accepted; fields that are not present are not forwarded.
    """
    fields = body if isinstance(body, dict) else {}
    token_id = fields.get("tokenId", UNSET)
    contract_address = fields.get("contractAddress", UNSET)
    logger.info(f"Validating NFT {fields.get('tokenId')} at {fields.get('contractAddress')}")
    try:
        result = client.validate_nft(token_id, contract_address)
    except UpstreamError as e:
        return _failure(VALIDATE_FAILURE_MESSAGE, e.payload)
    except Exception as e:
        logger.exception("Unexpected error validating NFT")
        return _failure(VALIDATE_FAILURE_MESSAGE, str(e))
    return _success(result)


@router.get("/nft-analytics")
def nft_analytics(
    token_id: Optional[str] = Query(default=None, alias="tokenId"),
    contract_address: Optional[str] = Query(default=None, alias="contractAddress"),
    client: BitsCrunchClient = Depends(get_bitscrunch_client),
):
    """
    Fetch analytics for an NFT from bitsCrunch.

    Missing query parameters are not rejected; the provider's answer is relayed.
    """
    logger.info(f"Fetching analytics for NFT {token_id} at {contract_address}")
    try:
        analytics = client.get_nft_analytics(token_id, contract_address)
    except UpstreamError as e:
        return _failure(ANALYTICS_FAILURE_MESSAGE, e.payload)
    except Exception as e:
        logger.exception("Unexpected error fetching NFT analytics")
        return _failure(ANALYTICS_FAILURE_MESSAGE, str(e))
    return _success(analytics)


app.include_router(router, prefix="/api/nfts", tags=["NFTs"])


@app.get("/")
def root():
    return {
        "message": "NFT Relay API",
        "version": __version__,
        "endpoints": {
            "health": "/health",
            "validate_nft": "/api/nfts/validate-nft",
            "nft_analytics": "/api/nfts/nft-analytics",
            "docs": "/docs",
        },
    }


@app.get("/health")
def health():
    return {"status": "healthy", "service": "NFT Relay"}
