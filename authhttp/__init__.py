"""
authhttp - a thin request builder over a shared requests session
"""

from .exceptions import (
    AuthHttpError,
    ConfigurationError,
    HttpStatusError,
    InvalidEndpointError,
    MissingSessionError,
    ParameterSerializationError,
    RequestBuildError,
    SessionClosedError,
    TransportError,
)
from .http_client import HttpClient, get_default_http_client
from .request import HttpRequest
from .response import HttpResponse, raise_for_status, status_error_for

__all__ = [
    "AuthHttpError",
    "ConfigurationError",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpStatusError",
    "InvalidEndpointError",
    "MissingSessionError",
    "ParameterSerializationError",
    "RequestBuildError",
    "SessionClosedError",
    "TransportError",
    "get_default_http_client",
    "raise_for_status",
    "status_error_for",
]


def __getattr__(name):
    # default_http_client is built on first access, see http_client.get_default_http_client
    if name == "default_http_client":
        return get_default_http_client()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
