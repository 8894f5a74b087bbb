"""Unit tests for the CloudFormation callback client."""

import httpx
import pytest

from build_waiter.boundary.http import CallbackClient
from build_waiter.core.exceptions import DeliveryError

URL = "https://cfn-response.example.com/signed"


def test_put_returns_status_code(callback) -> None:
    """Should return the endpoint status on success."""
    client = CallbackClient(transport=httpx.MockTransport(callback))

    assert client.put(URL, '{"Status": "SUCCESS"}') == 200
    assert callback.requests[0].content == b'{"Status": "SUCCESS"}'


def test_put_raises_delivery_error_on_http_status(callback) -> None:
    """Should turn non-2xx responses into DeliveryError with the status code."""
    callback.status_code = 403
    client = CallbackClient(transport=httpx.MockTransport(callback))

    with pytest.raises(DeliveryError) as exc_info:
        client.put(URL, "{}")

    assert exc_info.value.status_code == 403


def test_put_raises_delivery_error_on_transport_failure(callback) -> None:
    """Should turn transport errors into DeliveryError."""
    callback.error = httpx.ReadTimeout("timed out")
    client = CallbackClient(transport=httpx.MockTransport(callback))

    with pytest.raises(DeliveryError, match="timed out"):
        client.put(URL, "{}")


def test_put_raises_delivery_error_on_unexpected_exception(callback) -> None:
    """Should turn errors outside httpx's hierarchy into DeliveryError."""
    callback.error = ValueError("unknown url type: '/not%20a%20url'")
    client = CallbackClient(transport=httpx.MockTransport(callback))

    with pytest.raises(DeliveryError, match="ValueError"):
        client.put(URL, "{}")

    assert len(callback.requests) == 1
