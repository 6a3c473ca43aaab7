"""
Response representation and the optional status-code policy.

HttpRequest hands every server answer to its callback as an HttpResponse,
whatever the status. Callers that want 4xx/5xx treated as errors apply
status_error_for() or raise_for_status() themselves.
"""

import json
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any

import requests
from requests.structures import CaseInsensitiveDict

from .exceptions import HttpStatusError
from .logging_config import get_module_logger, mask_pii
from .parameters import OAUTH2_ERROR_CODES

logger = get_module_logger("response")


@dataclass
class HttpResponse:
    """Raw response delivered to send callbacks"""

    status_code: int
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    body: bytes = b""
    url: str = ""

    @classmethod
    def from_requests(cls, response: requests.Response) -> "HttpResponse":
        """Build from a requests.Response returned by the session"""
        return cls(
            status_code=response.status_code,
            headers=CaseInsensitiveDict(response.headers or {}),
            body=response.content or b"",
            url=response.url or "",
        )

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code <= 299

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Parse the body as JSON (raises ValueError on malformed content)"""
        return json.loads(self.body)


def _parse_oauth2_error(response: HttpResponse) -> tuple[str | None, str | None]:
    """Extract (error, error_description) from an OAuth2 error document, if any"""
    try:
        payload = response.json()
    except ValueError:
        return None, None

    if not isinstance(payload, dict):
        return None, None

    error_code = payload.get("error")
    if error_code not in OAUTH2_ERROR_CODES:
        if error_code is not None:
            logger.debug(f"Unrecognized OAuth2 error code: {error_code}")
        error_code = None

    description = payload.get("error_description")
    if not isinstance(description, str):
        description = None

    return error_code, description


def status_error_for(response: HttpResponse) -> HttpStatusError | None:
    """
    Classify a response by status code

    Args:
        response: Response delivered to a send callback

    Returns:
        HttpStatusError for 4xx/5xx responses, None otherwise
    """
    if response.status_code < 400:
        return None

    try:
        description = HTTPStatus(response.status_code).phrase
    except ValueError:
        description = "Unknown status"

    error_code = error_description = None
    if response.status_code in (400, 401):
        error_code, error_description = _parse_oauth2_error(response)

    logger.warning(
        f"HTTP error raised. Http Code: {response.status_code} "
        f"Description {mask_pii(error_description or description)}"
    )

    message = f"HTTP {response.status_code} {description}"
    if error_code:
        message = f"{message} ({error_code})"

    return HttpStatusError(
        message,
        status_code=response.status_code,
        headers=dict(response.headers),
        response_text=response.text,
        error_code=error_code,
        error_description=error_description,
    )


def raise_for_status(response: HttpResponse) -> HttpResponse:
    """Return the response unchanged, or raise HttpStatusError for 4xx/5xx"""
    error = status_error_for(response)
    if error is not None:
        raise error
    return response
