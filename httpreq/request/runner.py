"""
Request Runner.

Runs the linear pipeline for one invocation:
build -> execute -> print.
"""

from typing import BinaryIO

from httpreq.core.config import RequestConfiguration
from httpreq.request.builder import build_request
from httpreq.request.executor import HttpExecutor
from httpreq.request.printer import print_response


async def run_request(
    config: RequestConfiguration,
    output: BinaryIO,
    executor: HttpExecutor | None = None,
) -> int:
    """
    Perform the request described by config and print the response.

    Returns:
        HTTP status code of the response
    """
    request = build_request(config)
    executor = executor or HttpExecutor()
    async with executor.send(request) as response:
        await print_response(response, output)
        return response.status_code
