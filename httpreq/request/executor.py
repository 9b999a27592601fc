"""
HTTP Executor.

Sends a PreparedRequest over httpx and hands back the streaming response.

One AsyncClient per invocation serves both http:// and https://.
No timeout is configured, nothing is retried, and redirects are left to
the httpx default (not followed). An unresponsive server blocks until the
transport itself gives up.

Usage:
    executor = HttpExecutor()
    async with executor.send(request) as response:
        print(response.status_code)
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from httpreq import __version__
from httpreq.core.exceptions import TransportError
from httpreq.core.logging import get_logger
from httpreq.request.builder import PreparedRequest

logger = get_logger(__name__)

USER_AGENT = f"httpreq/{__version__}"


class HttpExecutor:
    """
    Single-shot HTTP client.

    Features:
    - Streaming responses (body is never buffered whole)
    - Client and response closed on every exit path
    - Transport errors wrapped in TransportError

    The transport is injectable so tests can use httpx.MockTransport.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """
        Initialize the executor.

        Args:
            transport: Custom httpx transport. If None, httpx opens real connections.
        """
        self._transport = transport

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self._transport,
            timeout=None,
            follow_redirects=False,
            headers={"User-Agent": USER_AGENT},
        )

    @asynccontextmanager
    async def send(self, request: PreparedRequest) -> AsyncIterator[httpx.Response]:
        """
        Send the request and yield the response with its body unread.

        Args:
            request: Request produced by build_request

        Yields:
            httpx.Response opened in streaming mode

        Raises:
            TransportError: On connection, TLS, DNS or protocol failure
        """
        async with self._create_client() as client:
            http_request = client.build_request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.content or None,
            )

            logger.info("HTTP request", method=request.method, url=request.url)

            try:
                response = await client.send(http_request, stream=True)
            except httpx.TransportError as e:
                logger.error(
                    "HTTP request failed",
                    method=request.method,
                    url=request.url,
                    error=str(e),
                )
                raise TransportError(
                    f"{request.method} {request.url} failed: {str(e) or type(e).__name__}"
                ) from e

            logger.info(
                "HTTP response",
                method=request.method,
                url=request.url,
                status_code=response.status_code,
            )

            try:
                yield response
            finally:
                await response.aclose()
