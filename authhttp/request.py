"""
Request builder/dispatcher

HttpRequest collects header fields, query parameters and body parameters
for one endpoint and sends them through a shared HttpClient:

    request = HttpRequest("https://login.example.com/oauth2/v2.0/token", client)
    request.set_header_value("application/json", "Accept")
    request.set_body_parameter("password", "grant_type")
    request.send_post(on_complete)

The request can be sent again after further mutations; every send works on a
snapshot taken when it was called. Instances are not thread-safe and are meant
to have a single owner.
"""

from collections.abc import Mapping
from concurrent.futures import Future

from requests.structures import CaseInsensitiveDict

from .exceptions import MissingSessionError
from .http_client import Callback, HttpClient
from .logging_config import describe_parameters, get_module_logger, redact_url
from .serialization import (
    build_json_body,
    build_url,
    check_parameter,
    merge_header_value,
    validate_endpoint,
)

logger = get_module_logger("request")

JSON_CONTENT_TYPE = "application/json"


class HttpRequest:
    """
    A reusable GET/POST request against a single endpoint.

    The endpoint and session are fixed at construction. The session is
    borrowed: it is never closed or reconfigured by the request.
    """

    def __init__(self, endpoint: str, session: HttpClient):
        """
        Initialize request

        Args:
            endpoint: Absolute http(s) URL, without the query string added at send time
            session: Shared HttpClient used to execute the calls

        Raises:
            InvalidEndpointError: If the endpoint is not a usable URL
            MissingSessionError: If no session is given
        """
        self._endpoint = validate_endpoint(endpoint)
        if session is None:
            raise MissingSessionError("HttpRequest requires a session to send through")
        self._session = session

        self._headers: CaseInsensitiveDict = CaseInsensitiveDict()
        self._query_parameters: dict[str, str] = {}
        self._body_parameters: dict[str, str] = {}

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def session(self) -> HttpClient:
        return self._session

    # Whole-mapping accessors. Reads return copies; writes replace the mapping.

    @property
    def headers(self) -> CaseInsensitiveDict:
        return self._headers.copy()

    @headers.setter
    def headers(self, value: Mapping[str, str]):
        self._headers = CaseInsensitiveDict(self._validated(value, "header"))

    @property
    def query_parameters(self) -> dict[str, str]:
        return dict(self._query_parameters)

    @query_parameters.setter
    def query_parameters(self, value: Mapping[str, str]):
        self._query_parameters = self._validated(value, "query")

    @property
    def body_parameters(self) -> dict[str, str]:
        return dict(self._body_parameters)

    @body_parameters.setter
    def body_parameters(self, value: Mapping[str, str]):
        self._body_parameters = self._validated(value, "body")

    @staticmethod
    def _validated(value: Mapping[str, str] | None, kind: str) -> dict[str, str]:
        entries = dict(value or {})
        for name, item in entries.items():
            check_parameter(name, item, kind)
        return entries

    # Header fields

    def add_header_value(self, value: str, field: str):
        """
        Add a value to a header field

        If the field already has a value (an empty string counts), the new
        value is appended after a comma. Otherwise the field is set.
        """
        check_parameter(field, value, "header")
        self._headers[field] = merge_header_value(self._headers.get(field), value)

    def set_header_value(self, value: str, field: str):
        """Set a header field, replacing any existing value"""
        check_parameter(field, value, "header")
        self._headers[field] = value

    # Query parameters

    def set_query_parameter(self, value: str, parameter: str):
        check_parameter(parameter, value, "query")
        self._query_parameters[parameter] = value

    def remove_query_parameter(self, parameter: str):
        """Remove a query parameter; absent parameters are ignored"""
        self._query_parameters.pop(parameter, None)

    # Body parameters

    def set_body_parameter(self, value: str, parameter: str):
        check_parameter(parameter, value, "body")
        self._body_parameters[parameter] = value

    def remove_body_parameter(self, parameter: str):
        """Remove a body parameter; absent parameters are ignored"""
        self._body_parameters.pop(parameter, None)

    # Dispatch

    def send_get(self, callback: Callback) -> Future:
        """
        Send the request as GET

        Query parameters are percent-encoded into the URL; body parameters
        are not sent. Returns immediately.

        Args:
            callback: Called once with (error, None) or (None, HttpResponse)

        Returns:
            Future that resolves after the callback has run

        Raises:
            ParameterSerializationError: If the request cannot be serialized
                (nothing is sent in that case)
        """
        url = build_url(self._endpoint, self._query_parameters)
        headers = dict(self._headers)

        logger.debug(
            f"GET {redact_url(url)} query=[{describe_parameters(self._query_parameters)}]"
        )
        return self._session.execute_async("GET", url, headers, None, callback)

    def send_post(self, callback: Callback) -> Future:
        """
        Send the request as POST

        Body parameters are sent as a JSON object with a JSON content type
        (unless a Content-Type header was set explicitly). Query parameters
        still go into the URL. Returns immediately.

        Args:
            callback: Called once with (error, None) or (None, HttpResponse)

        Returns:
            Future that resolves after the callback has run

        Raises:
            ParameterSerializationError: If the request cannot be serialized
                (nothing is sent in that case)
        """
        url = build_url(self._endpoint, self._query_parameters)
        body = build_json_body(self._body_parameters)

        headers = CaseInsensitiveDict(self._headers)
        headers.setdefault("Content-Type", JSON_CONTENT_TYPE)

        logger.debug(
            f"POST {redact_url(url)} query=[{describe_parameters(self._query_parameters)}] "
            f"body=[{describe_parameters(self._body_parameters)}]"
        )
        return self._session.execute_async("POST", url, dict(headers), body, callback)

    def __repr__(self) -> str:
        return f"HttpRequest({redact_url(self._endpoint)!r})"
