"""
Response Printer.

Writes the status line, a body marker, then the response body as it
arrives. Any Content-Encoding (gzip, deflate) is undone by httpx, since
it advertises those encodings by default. No charset handling: the decoded
bytes are written unmodified.
"""

from typing import BinaryIO

import httpx

from httpreq.core.exceptions import StreamError
from httpreq.core.logging import get_logger

logger = get_logger(__name__)

STATUS_LINE = "RESPONSE STATUS CODE: {status_code}\n"
BODY_MARKER = "RESPONSE BODY\n"


async def print_response(response: httpx.Response, output: BinaryIO) -> int:
    """
    Stream a response to a binary output.

    Args:
        response: Response opened with stream=True
        output: Binary stream (e.g. stdout buffer)

    Returns:
        Number of body bytes written

    Raises:
        StreamError: If reading the body fails. Anything already written stays written.
    """
    output.write(STATUS_LINE.format(status_code=response.status_code).encode("ascii"))
    output.write(BODY_MARKER.encode("ascii"))
    output.flush()

    written = 0
    try:
        async for chunk in response.aiter_bytes():
            output.write(chunk)
            output.flush()
            written += len(chunk)
    except (httpx.HTTPError, httpx.StreamError) as e:
        logger.error("Response stream failed", bytes_written=written, error=str(e))
        raise StreamError(f"Failed reading response body: {str(e) or type(e).__name__}") from e

    logger.debug("Response body written", bytes_written=written)
    return written
