"""
Custom exceptions for authhttp
"""


class AuthHttpError(Exception):
    """Base exception for all authhttp errors"""

    pass


class RequestBuildError(AuthHttpError):
    """
    Raised when a request cannot be built.

    Every subclass means the request never reached the network.
    """

    pass


class InvalidEndpointError(RequestBuildError):
    """Raised when the endpoint is not an absolute http(s) URL"""

    def __init__(self, message: str, endpoint: object = None):
        self.endpoint = endpoint
        super().__init__(message)


class MissingSessionError(RequestBuildError):
    """Raised when a request is constructed without a session"""

    pass


class ParameterSerializationError(RequestBuildError):
    """
    Raised when a header, query or body entry cannot be serialized.

    This includes:
    - Non-string keys or values
    - Text that cannot be encoded as UTF-8 (e.g. lone surrogates)
    - Header text requests refuses to send (leading whitespace, ":" in a
      name, values outside latin-1)
    """

    def __init__(self, message: str, parameter: object = None, kind: str | None = None):
        self.parameter = parameter
        self.kind = kind
        super().__init__(message)


class SessionClosedError(RequestBuildError):
    """Raised when a request is dispatched through a client that has been closed"""

    pass


class TransportError(AuthHttpError):
    """
    Raised when a request was sent but the network call failed.

    Covers DNS, TLS, timeout and connection errors reported by the session.
    The underlying exception is available as __cause__.
    """

    def __init__(self, message: str, method: str | None = None, url: str | None = None):
        self.method = method
        self.url = url
        super().__init__(message)


class HttpStatusError(AuthHttpError):
    """
    Raised when the server answers with a 4xx or 5xx status.

    Produced only by the response status policy in authhttp.response; a plain
    send delivers such responses unchanged.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        headers: dict[str, str] | None = None,
        response_text: str | None = None,
        error_code: str | None = None,
        error_description: str | None = None,
    ):
        self.status_code = status_code
        self.headers = headers or {}
        self.response_text = response_text
        self.error_code = error_code
        self.error_description = error_description
        super().__init__(message)

    @property
    def server_unavailable(self) -> bool:
        """True for 5xx responses"""
        return 500 <= self.status_code <= 599

    def get_user_guidance(self) -> str:
        """Get user-friendly guidance based on status code"""
        if self.status_code == 400:
            return "The server rejected the request. Check the request parameters."
        elif self.status_code == 401:
            return "Authentication failed. Check the credentials sent with the request."
        elif self.status_code == 403:
            return "Access denied. The credentials lack permission for this endpoint."
        elif self.status_code == 404:
            return "Endpoint not found. Check the endpoint URL."
        elif self.status_code == 429:
            return "Rate limit exceeded. Wait a few moments and try again."
        elif self.server_unavailable:
            return "Server error. This is usually temporary.\nPlease try again in a few moments."
        else:
            return "Please check the request configuration and try again."


class ConfigurationError(AuthHttpError):
    """
    Raised when required configuration values are missing or invalid.

    Missing required values are caught early rather than silently falling
    back to hardcoded defaults.
    """

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        if config_key:
            super().__init__(f"Configuration error for '{config_key}': {message}")
        else:
            super().__init__(f"Configuration error: {message}")
