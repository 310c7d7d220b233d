from typing import Any, Optional


class IntegrationError(RuntimeError):
    """Raised when an integration is misconfigured or cannot be built."""


class UpstreamError(RuntimeError):
    """Normalized upstream failure.

    ``kind`` tags the variant and ``payload`` is what gets relayed to the
    caller: the provider's error body when there is one, otherwise the
    transport message.
    """

    kind = "upstream"

    def __init__(self, message: str, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.payload = message if payload is None else payload


class UpstreamTransportError(UpstreamError):
    """No usable provider response (connection failure, timeout, empty error body)."""

    kind = "transport"

    def __init__(self, message: str):
        super().__init__(message)


class UpstreamProviderError(UpstreamError):
    """The provider answered with a non-success status and an error payload."""

    kind = "upstream"

    def __init__(self, message: str, payload: Any, status_code: Optional[int] = None):
        super().__init__(message, payload)
        self.status_code = status_code
