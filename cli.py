#!/usr/bin/env python3
"""
httpreq CLI.

Issues a single HTTP(S) request and prints the status code and the raw
response body to standard output. Log records and errors go to stderr.

Usage:
    python cli.py --help
    python cli.py --requesturl https://example.test/items --httpmethod get
    python cli.py --requesturl https://example.test/items --httpmethod post \\
        --requestbody '{"a":1}' --requestcontenttype application/json
    python cli.py --requesturl https://example.test/items --httpmethod put \\
        --requestfile item.json --requestcontenttype application/json \\
        --authtype bearer --authvalue TOKEN
"""

import asyncio
import sys
from typing import NoReturn

import click
import structlog

from httpreq.core.config import RequestConfiguration, parse_configuration
from httpreq.core.exceptions import ApplicationError
from httpreq.core.logging import get_logger, setup_logging
from httpreq.request.executor import HttpExecutor
from httpreq.request.runner import run_request


def _log_configuration(logger, config: RequestConfiguration) -> None:
    """Log the values the request will be built from. Never logs the auth value."""
    logger.info(
        "Request configuration",
        method=config.method.value,
        url=config.url,
        body_length=len(config.body) if config.body is not None else None,
        body_file=str(config.body_file_path) if config.body_file_path else None,
        content_type=config.content_type,
        auth_type=config.auth_type,
        has_auth=config.has_auth,
    )


def _fail(logger, error: ApplicationError) -> NoReturn:
    """Report an application error on stderr and exit non-zero."""
    logger.error("Request aborted", code=error.code, error=error.message)
    click.echo(click.style(f"Error: {error.message}", fg="red"), err=True)
    sys.exit(1)


@click.command()
@click.option(
    "--requesturl",
    default=None,
    help="Absolute http(s) URL to send the request to. Required.",
)
@click.option(
    "--httpmethod",
    default=None,
    help="HTTP method: get, post, put, patch or delete (any case). Required.",
)
@click.option(
    "--requestbody",
    default=None,
    help="Inline request body. Takes priority over --requestfile.",
)
@click.option(
    "--requestfile",
    default=None,
    help="Read the request body from this file.",
)
@click.option(
    "--requestcontenttype",
    default=None,
    help="Content-Type of the body. Required for post, put and patch.",
)
@click.option(
    "--authtype",
    default=None,
    help="Authorization scheme: bearer or basic (any case).",
)
@click.option(
    "--authvalue",
    default=None,
    help="Credential sent after the auth type. Required with --authtype.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output (INFO level logging).",
)
@click.option(
    "--debug", "-d",
    is_flag=True,
    help="Enable debug output (DEBUG level logging).",
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Log record format on stderr.",
)
def main(
    requesturl: str | None,
    httpmethod: str | None,
    requestbody: str | None,
    requestfile: str | None,
    requestcontenttype: str | None,
    authtype: str | None,
    authvalue: str | None,
    verbose: bool,
    debug: bool,
    log_format: str,
) -> None:
    """
    HTTP request utility.

    Sends one request and prints the response status and body.

    \b
    Examples:
        python cli.py --requesturl https://example.test/items --httpmethod get
        python cli.py --requesturl https://example.test/items --httpmethod delete --authtype bearer --authvalue TOKEN
        python cli.py --requesturl https://example.test/items --httpmethod post --requestbody '{"a":1}' --requestcontenttype application/json
        python cli.py --requesturl https://example.test/items --httpmethod patch --requestfile patch.json --requestcontenttype application/json
    """
    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = "WARNING"

    setup_logging(level=log_level, format_type=log_format)

    structlog.contextvars.bind_contextvars(source="cli")

    logger = get_logger(__name__)

    logger.debug("CLI invoked", log_level=log_level)

    try:
        config = parse_configuration(
            httpmethod=httpmethod,
            requesturl=requesturl,
            requestbody=requestbody,
            requestfile=requestfile,
            requestcontenttype=requestcontenttype,
            authtype=authtype,
            authvalue=authvalue,
        )
    except ApplicationError as e:
        _fail(logger, e)

    _log_configuration(logger, config)

    output = sys.stdout.buffer
    try:
        status_code = asyncio.run(run_request(config, output, HttpExecutor()))
    except ApplicationError as e:
        _fail(logger, e)

    logger.info("Request completed", status_code=status_code)


if __name__ == "__main__":
    main()
