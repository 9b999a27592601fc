"""
Request Builder.

Turns a validated RequestConfiguration into a wire-ready PreparedRequest.
Bodies are passed through verbatim: no escaping, encoding or validation.
"""

from dataclasses import dataclass, field

from httpreq.core.config import RequestConfiguration
from httpreq.core.exceptions import ConfigurationError
from httpreq.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PreparedRequest:
    """Method, URL, headers and body bytes for a single request."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    content: bytes = b""


def _read_body(config: RequestConfiguration) -> bytes:
    if config.body_file_path is not None:
        try:
            return config.body_file_path.read_bytes()
        except OSError as e:
            raise ConfigurationError(
                f"Could not read request file {config.body_file_path}: {e}",
                details={"requestfile": str(config.body_file_path)},
            ) from e
    if config.body is not None:
        # surrogateescape restores argv bytes that were not valid UTF-8
        return config.body.encode("utf-8", "surrogateescape")
    return b""


def build_headers(config: RequestConfiguration) -> dict[str, str]:
    """Assemble Content-Type and Authorization headers."""
    headers: dict[str, str] = {}
    if config.method.requires_body and config.content_type is not None:
        headers["Content-Type"] = config.content_type
    if config.has_auth:
        headers["Authorization"] = f"{config.auth_type} {config.auth_value}"
    return headers


def build_request(config: RequestConfiguration) -> PreparedRequest:
    """
    Build the outgoing request.

    GET and DELETE never carry a body. For body-bearing methods the file
    contents, when a file was given, are read as raw bytes here.

    Raises:
        ConfigurationError: If the request file cannot be read
    """
    content = _read_body(config) if config.method.requires_body else b""
    request = PreparedRequest(
        method=config.method.value,
        url=config.url,
        headers=build_headers(config),
        content=content,
    )
    logger.debug(
        "Request built",
        method=request.method,
        url=request.url,
        header_names=sorted(request.headers),
        content_length=len(request.content),
    )
    return request
