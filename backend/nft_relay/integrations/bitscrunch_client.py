"""
bitsCrunch API integration

Thin wrapper over the bitsCrunch REST API used by the NFT routes. Each call
makes exactly one authenticated request and either returns the provider's
JSON body untouched or raises an UpstreamError.
"""

import logging
from typing import Any, Dict, Optional

import requests

from nft_relay.config import Settings
from nft_relay.integrations.exceptions import (
    IntegrationError,
    UpstreamProviderError,
    UpstreamTransportError,
)

logger = logging.getLogger(__name__)


# Marks a body field the caller never sent; an explicit None is forwarded as null.
UNSET = object()


def _drop_missing(values: Dict[str, Any], missing: Any = None) -> Dict[str, Any]:
    return {k: v for k, v in values.items() if v is not missing}


def _read_body(response: requests.Response) -> Any:
    """Parsed JSON if the body is JSON, raw text otherwise, None when empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class BitsCrunchClient:
    """bitsCrunch API client for NFT metadata validation and analytics"""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        if not settings.bitscrunch_api_base_url:
            raise IntegrationError("BITSCRUNCH_API_BASE_URL not set. Please add it to your .env file.")

        self.base_url = settings.bitscrunch_api_base_url.rstrip("/")
        self.api_key = settings.bitscrunch_api_key
        self.timeout = settings.request_timeout
        self.session = session or requests.Session()

    def _auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    def _send(self, method: str, path: str, action: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Error {action} with bitsCrunch API: {e}")
            raise UpstreamTransportError(str(e)) from e

        if 200 <= response.status_code < 300:
            return _read_body(response)

        message = f"Request failed with status code {response.status_code}"
        payload = _read_body(response)
        logger.error(f"Error {action} with bitsCrunch API: {message} ({payload!r})")
        if payload is None or payload == "":
            raise UpstreamTransportError(message)
        raise UpstreamProviderError(message, payload, status_code=response.status_code)

    def validate_nft(self, token_id: Any = UNSET, contract_address: Any = UNSET) -> Any:
        """
        Validate NFT metadata.

        Args:
            token_id: The ID of the token to validate, or UNSET to leave it out
            contract_address: The contract address of the NFT, or UNSET to leave it out

        Returns:
            The bitsCrunch response body, unmodified
        """
        headers = self._auth_headers()
        headers["Content-Type"] = "application/json"
        return self._send(
            "POST",
            "/validate-nft",
            "validating NFT",
            json=_drop_missing({"tokenId": token_id, "contractAddress": contract_address}, UNSET),
            headers=headers,
        )

    def get_nft_analytics(self, token_id: Any, contract_address: Any) -> Any:
        """
        Fetch analytics for a specific NFT.

        Missing arguments are left out of the query string rather than sent empty.
        """
        return self._send(
            "GET",
            "/nft-analytics",
            "fetching NFT analytics",
            params=_drop_missing({"tokenId": token_id, "contractAddress": contract_address}),
            headers=self._auth_headers(),
        )
