from nft_relay.integrations.exceptions import (
    UpstreamError,
    UpstreamProviderError,
    UpstreamTransportError,
)


def test_transport_error_payload_is_its_message():
    err = UpstreamTransportError("connection refused")

    assert isinstance(err, UpstreamError)
    assert err.kind == "transport"
    assert err.payload == "connection refused"
    assert str(err) == "connection refused"


def test_provider_error_prefers_provider_payload():
    err = UpstreamProviderError("Request failed with status code 404", {"error": "not found"}, status_code=404)

    assert isinstance(err, UpstreamError)
    assert err.kind == "upstream"
    assert err.payload == {"error": "not found"}
    assert err.message == "Request failed with status code 404"
