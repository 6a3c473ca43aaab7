"""
Tests for exception handling
"""

import pytest

from authhttp.exceptions import (
    AuthHttpError,
    ConfigurationError,
    HttpStatusError,
    InvalidEndpointError,
    MissingSessionError,
    ParameterSerializationError,
    RequestBuildError,
    TransportError,
)


class TestHierarchy:
    """Test that never-sent and sent-but-failed errors can be told apart"""

    @pytest.mark.parametrize(
        "error_cls", [InvalidEndpointError, MissingSessionError, ParameterSerializationError]
    )
    def test_build_errors(self, error_cls):
        error = error_cls("message")

        assert isinstance(error, RequestBuildError)
        assert isinstance(error, AuthHttpError)
        assert not isinstance(error, TransportError)

    def test_transport_error_is_not_a_build_error(self):
        error = TransportError("GET https://example.com failed")

        assert isinstance(error, AuthHttpError)
        assert not isinstance(error, RequestBuildError)

    def test_status_and_config_errors_share_base(self):
        assert issubclass(HttpStatusError, AuthHttpError)
        assert issubclass(ConfigurationError, AuthHttpError)


class TestErrorAttributes:
    def test_invalid_endpoint_error(self):
        error = InvalidEndpointError("bad endpoint", endpoint="ftp://x")

        assert error.endpoint == "ftp://x"
        assert "bad endpoint" in str(error)

    def test_parameter_serialization_error(self):
        error = ParameterSerializationError("bad value", parameter="username", kind="body")

        assert error.parameter == "username"
        assert error.kind == "body"

    def test_transport_error(self):
        error = TransportError("failed", method="POST", url="https://example.com/token")

        assert error.method == "POST"
        assert error.url == "https://example.com/token"

    def test_transport_error_minimal(self):
        error = TransportError("failed")

        assert error.method is None
        assert error.url is None


class TestHttpStatusError:
    """Test HttpStatusError exception"""

    def test_defaults(self):
        error = HttpStatusError("HTTP 400", status_code=400)

        assert error.headers == {}
        assert error.response_text is None
        assert error.error_code is None
        assert error.error_description is None

    @pytest.mark.parametrize(
        "status,expected", [(499, False), (500, True), (503, True), (599, True)]
    )
    def test_server_unavailable(self, status, expected):
        assert HttpStatusError("x", status_code=status).server_unavailable is expected

    def test_guidance_for_authentication_failure(self):
        guidance = HttpStatusError("x", status_code=401).get_user_guidance()

        assert "Authentication failed" in guidance

    def test_guidance_for_rate_limit(self):
        guidance = HttpStatusError("x", status_code=429).get_user_guidance()

        assert "Rate limit" in guidance

    def test_guidance_for_server_error(self):
        guidance = HttpStatusError("x", status_code=502).get_user_guidance()

        assert "temporary" in guidance

    def test_guidance_fallback(self):
        guidance = HttpStatusError("x", status_code=418).get_user_guidance()

        assert "check the request configuration" in guidance


class TestConfigurationError:
    def test_with_config_key(self):
        error = ConfigurationError("required value is missing", config_key="http.timeouts.request")

        assert error.config_key == "http.timeouts.request"
        assert str(error) == (
            "Configuration error for 'http.timeouts.request': required value is missing"
        )

    def test_without_config_key(self):
        error = ConfigurationError("bad file")

        assert error.config_key is None
        assert str(error) == "Configuration error: bad file"
