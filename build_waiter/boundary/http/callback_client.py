"""
Client for the CloudFormation response URL.

The response URL is a pre-signed S3 PUT. The signature does not cover a
content type, so the header is sent empty and the length explicitly.

Dependencies: httpx
System role: Callback endpoint adapter
"""

import httpx

from build_waiter.core.exceptions import DeliveryError


class CallbackClient:
    """Send one JSON body to a pre-signed callback URL."""

    def __init__(
        self,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize callback client.

        Args:
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self._timeout = timeout
        self._transport = transport

    def put(self, url: str, body: str) -> int:
        """
        PUT a serialized body to the callback URL.

        Args:
            url: Pre-signed response URL
            body: Serialized JSON body

        Returns:
            int: HTTP status code returned by the endpoint

        Raises:
            DeliveryError: Non-2xx response or any failure while sending
        """
        payload = body.encode("utf-8")
        headers = {
            "content-type": "",
            "content-length": str(len(payload)),
        }

        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.put(url, content=payload, headers=headers)
                response.raise_for_status()
                return response.status_code

        except httpx.HTTPStatusError as e:
            raise DeliveryError(
                f"Callback endpoint returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise DeliveryError(f"Callback request failed: {e}") from e
        except Exception as e:  # pylint: disable=broad-except
            raise DeliveryError(f"Callback request failed: {type(e).__name__}: {e}") from e
