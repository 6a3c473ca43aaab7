"""
Pure helpers that turn request state into wire form.

None of these functions touch the network, so the encoding rules can be
tested on their own.
"""

import json
from urllib.parse import quote, urlencode, urlsplit

from requests.exceptions import InvalidHeader
from requests.utils import check_header_validity

from .exceptions import InvalidEndpointError, ParameterSerializationError

ALLOWED_SCHEMES = ("http", "https")


def validate_endpoint(endpoint: object) -> str:
    """
    Check that an endpoint is an absolute http(s) URL

    Args:
        endpoint: Candidate endpoint

    Returns:
        The endpoint, unchanged

    Raises:
        InvalidEndpointError: If the endpoint is not a usable URL
    """
    if not isinstance(endpoint, str) or not endpoint.strip():
        raise InvalidEndpointError(
            f"Endpoint must be a non-empty string, got {endpoint!r}", endpoint
        )

    try:
        parts = urlsplit(endpoint)
        # Accessing port validates it
        _ = parts.port
    except ValueError as e:
        raise InvalidEndpointError(f"Malformed endpoint {endpoint!r}: {e}", endpoint) from e

    if parts.scheme.lower() not in ALLOWED_SCHEMES:
        raise InvalidEndpointError(
            f"Endpoint {endpoint!r} must use one of: {', '.join(ALLOWED_SCHEMES)}", endpoint
        )
    if not parts.hostname:
        raise InvalidEndpointError(f"Endpoint {endpoint!r} has no host", endpoint)
    if parts.fragment:
        raise InvalidEndpointError(f"Endpoint {endpoint!r} must not contain a fragment", endpoint)

    return endpoint


def check_parameter(name: object, value: object, kind: str) -> None:
    """
    Check that a key/value pair can be serialized

    Args:
        name: Header field or parameter name
        value: Value to store
        kind: "header", "query" or "body", used in the error message

    Header fields must also pass the same checks requests applies when it
    prepares a request, and header values must be latin-1 encodable.

    Raises:
        ParameterSerializationError: For non-string or non-UTF-8 data, or for
            header text the session would refuse to send
    """
    for label, item in (("name", name), ("value", value)):
        if not isinstance(item, str):
            raise ParameterSerializationError(
                f"{kind} {label} must be a string, got {type(item).__name__} for {name!r}",
                parameter=name,
                kind=kind,
            )
        try:
            item.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ParameterSerializationError(
                f"{kind} {label} for {name!r} is not valid UTF-8 text: {e.reason}",
                parameter=name,
                kind=kind,
            ) from e

    if kind == "header":
        check_header(name, value)


def check_header(name: str, value: str) -> None:
    """Reject header text that requests would fail on while preparing the request"""
    if not name:
        raise ParameterSerializationError(
            "header name must not be empty", parameter=name, kind="header"
        )
    if any(ch in item for item in (name, value) for ch in "\r\n"):
        raise ParameterSerializationError(
            f"header {name!r} must not contain line breaks", parameter=name, kind="header"
        )

    try:
        check_header_validity((name, value))
    except InvalidHeader as e:
        raise ParameterSerializationError(
            f"header {name!r} is not valid: {e}", parameter=name, kind="header"
        ) from e

    # http.client encodes names as ASCII and values as latin-1
    for label, item, encoding in (("name", name, "ascii"), ("value", value, "latin-1")):
        try:
            item.encode(encoding)
        except UnicodeEncodeError as e:
            raise ParameterSerializationError(
                f"header {label} for {name!r} must be {encoding} encodable: {e.reason}",
                parameter=name,
                kind="header",
            ) from e


def merge_header_value(existing: str | None, value: str) -> str:
    """Append a header value with a comma delimiter; None means the field is absent"""
    if existing is None:
        return value
    return f"{existing},{value}"


def build_query_string(params: dict[str, str]) -> str:
    """
    Percent-encode a parameter mapping as a query string

    Spaces become %20 and every reserved character is escaped.
    """
    for name, value in params.items():
        check_parameter(name, value, "query")
    return urlencode(list(params.items()), quote_via=quote, safe="")


def build_url(endpoint: str, params: dict[str, str]) -> str:
    """
    Append query parameters to an endpoint

    Returns the bare endpoint (no trailing "?") when there are no parameters.
    An endpoint that already carries a query string is extended with "&".
    """
    query = build_query_string(params)
    if not query:
        return endpoint
    if urlsplit(endpoint).query:
        return f"{endpoint}&{query}"
    return f"{endpoint.rstrip('?')}?{query}"


def build_json_body(params: dict[str, str]) -> bytes:
    """Serialize body parameters as a compact UTF-8 JSON object"""
    for name, value in params.items():
        check_parameter(name, value, "body")
    return json.dumps(params, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
