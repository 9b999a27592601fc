"""
Request Configuration.

The command line is the only configuration source. There are no settings
files and no environment variables.

parse_configuration() validates raw option values in a fixed order and
returns a frozen RequestConfiguration. Every failure is raised as
ConfigurationError before any network activity.

Validation order:
    method -> body source -> content type -> url -> auth type -> auth value
"""

from enum import Enum
from pathlib import Path

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from httpreq.core.exceptions import ConfigurationError


class HttpMethod(str, Enum):
    """Supported HTTP methods."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @property
    def requires_body(self) -> bool:
        """POST, PUT and PATCH carry a body and a content type."""
        return self in BODY_BEARING_METHODS


BODY_BEARING_METHODS = frozenset({HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH})


class AuthType(str, Enum):
    """Supported Authorization schemes (matched case-insensitively)."""

    BEARER = "bearer"
    BASIC = "basic"


ALLOWED_SCHEMES = frozenset({"http", "https"})


def _check_url(value: str) -> str:
    """Return value if it is an absolute http(s) URL, else raise ValueError."""
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as e:
        raise ValueError(f"Invalid request url '{value}': {e}") from e
    if url.scheme not in ALLOWED_SCHEMES or not url.host:
        raise ValueError(f"Request url must be an absolute http(s) URL: '{value}'")
    return value


def _check_header_value(option: str, value: str) -> str:
    """Header values are sent as ASCII."""
    if not value.isascii():
        raise ConfigurationError(
            f"{option} must be ASCII: {value!a}",
            details={option.lstrip("-"): value},
        )
    return value


class RequestConfiguration(BaseModel):
    """
    Validated, immutable request parameters for a single invocation.

    auth_type keeps the case the user supplied; it is sent verbatim as the
    Authorization scheme.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    method: HttpMethod
    url: str
    body: str | None = None
    body_file_path: Path | None = None
    content_type: str | None = None
    auth_type: str | None = None
    auth_value: str | None = None

    @field_validator("url")
    @classmethod
    def _validate_url(cls, value: str) -> str:
        return _check_url(value)

    @field_validator("auth_type")
    @classmethod
    def _validate_auth_type(cls, value: str | None) -> str | None:
        if value is not None and value.lower() not in {a.value for a in AuthType}:
            raise ValueError(f"Unsupported auth type '{value}' (expected bearer or basic)")
        return value

    @model_validator(mode="after")
    def _check_invariants(self) -> "RequestConfiguration":
        if self.body is not None and self.body_file_path is not None:
            raise ValueError("body and body_file_path are mutually exclusive")
        if self.method.requires_body:
            if self.body is None and self.body_file_path is None:
                raise ValueError(f"{self.method.value} requires a request body")
            if self.content_type is None:
                raise ValueError(f"{self.method.value} requires a content type")
        elif self.body is not None or self.body_file_path is not None or self.content_type is not None:
            raise ValueError(f"{self.method.value} does not take a request body")
        if self.auth_type is not None and self.auth_value is None:
            raise ValueError("auth_value is required when auth_type is set")
        return self

    @property
    def has_auth(self) -> bool:
        """True when an Authorization header will be sent."""
        return self.auth_type is not None and self.auth_value is not None


def parse_method(value: str | None) -> HttpMethod:
    """Map a case-insensitive method name to HttpMethod."""
    if value is None:
        raise ConfigurationError("Http method was not provided")
    try:
        return HttpMethod(value.upper())
    except ValueError:
        allowed = ", ".join(m.value.lower() for m in HttpMethod)
        raise ConfigurationError(
            f"Unsupported http method '{value}' (expected one of: {allowed})",
            details={"httpmethod": value},
        ) from None


def parse_configuration(
    *,
    httpmethod: str | None,
    requesturl: str | None,
    requestbody: str | None = None,
    requestfile: str | None = None,
    requestcontenttype: str | None = None,
    authtype: str | None = None,
    authvalue: str | None = None,
) -> RequestConfiguration:
    """
    Validate raw command-line values and build a RequestConfiguration.

    Args:
        httpmethod: get/post/put/patch/delete, any case
        requesturl: Absolute http(s) URL
        requestbody: Inline request body; wins over requestfile
        requestfile: Path of a file holding the request body
        requestcontenttype: Content-Type for body-bearing methods
        authtype: bearer or basic, any case
        authvalue: Credential sent after the auth type

    Returns:
        Frozen RequestConfiguration

    Raises:
        ConfigurationError: On the first missing or invalid value
    """
    method = parse_method(httpmethod)

    body: str | None = None
    body_file_path: Path | None = None
    content_type: str | None = None

    if method.requires_body:
        if requestbody is not None:
            body = requestbody
        elif requestfile is not None:
            body_file_path = Path(requestfile)
            if not body_file_path.is_file():
                raise ConfigurationError(
                    f"Request file not found: {requestfile}",
                    details={"requestfile": requestfile},
                )
        else:
            raise ConfigurationError("Request body was not provided")

        if requestcontenttype is None:
            raise ConfigurationError("Request content type was not provided")
        content_type = _check_header_value("--requestcontenttype", requestcontenttype)

    if requesturl is None:
        raise ConfigurationError("Request url was not provided")
    try:
        _check_url(requesturl)
    except ValueError as e:
        raise ConfigurationError(str(e), details={"requesturl": requesturl}) from e

    if authtype is not None and authtype.lower() not in {a.value for a in AuthType}:
        raise ConfigurationError(
            f"Unsupported auth type '{authtype}' (expected bearer or basic)",
            details={"authtype": authtype},
        )

    if authtype is not None and authvalue is None:
        raise ConfigurationError("Auth value was not provided")
    if authtype is not None:
        _check_header_value("--authvalue", authvalue)

    try:
        return RequestConfiguration(
            method=method,
            url=requesturl,
            body=body,
            body_file_path=body_file_path,
            content_type=content_type,
            auth_type=authtype,
            # auth value on its own means no auth
            auth_value=authvalue if authtype is not None else None,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid request configuration:\n{e}") from e
