"""
Process entry point: serve the relay with uvicorn on the configured port.
"""

import logging

import uvicorn
from nft_relay.config import get_settings

logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    logger.info(f"Server running on http://{settings.host}:{settings.port}")
    uvicorn.run(
        "nft_relay.api:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
