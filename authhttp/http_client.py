"""HTTP client abstraction: the shared session requests are dispatched through."""

import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Optional

import requests

from .config import Config, config
from .exceptions import SessionClosedError, TransportError
from .logging_config import get_module_logger, redact_url
from .response import HttpResponse

logger = get_module_logger("http_client")

Callback = Callable[[Optional[BaseException], Optional[HttpResponse]], Any]

SUPPORTED_METHODS = ("GET", "POST")


class HttpClient:
    """
    HTTP client wrapper for making requests.

    Wraps a requests.Session plus a worker pool. The client is shared by many
    HttpRequest instances and is owned by the caller, not by the requests.

    This abstraction enables:
    - Dependency injection for testing
    - Background dispatch with completion callbacks
    - Centralized HTTP configuration
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        max_workers: int | None = None,
        timeout: float | None = None,
        config_obj: Config | None = None,
    ):
        """
        Initialize HTTP client

        Args:
            session: requests.Session to send through (a new one is created if None)
            max_workers: Worker threads for background sends (defaults to config value)
            timeout: Default request timeout in seconds (defaults to config value)
            config_obj: Config object (uses global config if None)
        """
        self.config = config_obj or config
        self._owns_session = session is None

        if session is None:
            session = requests.Session()
            user_agent = self.config.get("http.headers.user_agent")
            if user_agent:
                session.headers["User-Agent"] = user_agent

        self.session = session
        if timeout is None:
            timeout = self.config.get("http.timeouts.request", 30)
        self.timeout = timeout
        self.max_workers = max_workers or self.config.get("http.executor.max_workers", 4)
        self._executor = ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="authhttp"
        )

    def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        params: Any | None = None,
        timeout: float | None = None,
        **kwargs,
    ) -> requests.Response:
        """
        Send a GET request and wait for the response.

        Args:
            url: URL to request
            headers: Optional HTTP headers
            params: Optional query parameters
            timeout: Optional request timeout in seconds (client default if None)
            **kwargs: Additional arguments to pass to Session.get()

        Returns:
            requests.Response object
        """
        if timeout is None:
            timeout = self.timeout
        return self.session.get(url, headers=headers, params=params, timeout=timeout, **kwargs)

    def post(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
        data: Any | None = None,
        timeout: float | None = None,
        **kwargs,
    ) -> requests.Response:
        """
        Send a POST request and wait for the response.

        Args:
            url: URL to request
            headers: Optional HTTP headers
            json: Optional JSON data to send
            data: Optional raw body or form data to send
            timeout: Optional request timeout in seconds (client default if None)
            **kwargs: Additional arguments to pass to Session.post()

        Returns:
            requests.Response object
        """
        if timeout is None:
            timeout = self.timeout
        return self.session.post(
            url, headers=headers, json=json, data=data, timeout=timeout, **kwargs
        )

    def execute_async(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None,
        callback: Callback,
    ) -> Future:
        """
        Run a request on the worker pool and report the outcome to a callback.

        The callback receives (error, None) or (None, response) exactly once,
        on a worker thread. The returned future resolves after the callback
        has run, to the HttpResponse or None.

        Args:
            method: "GET" or "POST"
            url: Fully built URL, query string included
            headers: Header fields to send
            body: Request body (POST only)
            callback: Completion handler

        Returns:
            Future for the background call

        Raises:
            SessionClosedError: If close() has already been called
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        try:
            return self._executor.submit(self._execute, method, url, headers, body, callback)
        except RuntimeError as e:
            # ThreadPoolExecutor refuses new work after shutdown
            raise SessionClosedError(
                f"Cannot send {method} {redact_url(url)}: the HTTP client is closed"
            ) from e

    def _execute(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None,
        callback: Callback,
    ) -> HttpResponse | None:
        """Worker body for execute_async()"""
        error: BaseException | None = None
        response: HttpResponse | None = None

        logger.debug(f"Sending {method} {redact_url(url)}")

        try:
            if method == "GET":
                raw = self.get(url, headers=headers)
            else:
                raw = self.post(url, headers=headers, data=body)
            response = HttpResponse.from_requests(raw)
            logger.debug(f"{method} {redact_url(url)} completed: HTTP {response.status_code}")
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error on {method} {redact_url(url)}: {e}")
            error = TransportError(
                f"{method} {redact_url(url)} failed: {e}", method=method, url=redact_url(url)
            )
            error.__cause__ = e
        except Exception as e:
            logger.exception(f"Unexpected error on {method} {redact_url(url)}")
            error = e

        try:
            callback(error, response)
        except Exception:
            logger.exception(f"Completion callback for {method} {redact_url(url)} raised")

        return response

    def close(self):
        """Stop the worker pool; close the session too if this client created it."""
        self._executor.shutdown(wait=True)
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


_default_http_client: HttpClient | None = None
_default_lock = threading.Lock()


def get_default_http_client() -> HttpClient:
    """
    Return the shared client for callers that do not manage their own.

    The client (and its worker pool) is created on first use, not at import.
    """
    global _default_http_client
    with _default_lock:
        if _default_http_client is None:
            _default_http_client = HttpClient()
        return _default_http_client


def __getattr__(name: str) -> Any:
    if name == "default_http_client":
        return get_default_http_client()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
