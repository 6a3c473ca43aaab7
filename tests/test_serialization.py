"""
Tests for serialization.py - pure request-encoding helpers
"""

import json

import pytest

from authhttp.exceptions import InvalidEndpointError, ParameterSerializationError
from authhttp.serialization import (
    build_json_body,
    build_query_string,
    build_url,
    check_parameter,
    merge_header_value,
    validate_endpoint,
)


class TestValidateEndpoint:
    @pytest.mark.parametrize(
        "endpoint",
        [
            "https://login.example.com/common/oauth2/v2.0/token",
            "http://localhost:8080/token",
            "HTTPS://EXAMPLE.COM",
            "https://example.com/path?api-version=1.0",
        ],
    )
    def test_accepts_http_urls(self, endpoint):
        assert validate_endpoint(endpoint) == endpoint

    @pytest.mark.parametrize(
        "endpoint",
        [
            "",
            None,
            b"https://example.com",
            "mailto:someone@example.com",
            "//example.com/token",
            "https:///token",
            "https://example.com:99999/",
            "https://example.com/token#fragment",
        ],
    )
    def test_rejects_unusable_endpoints(self, endpoint):
        with pytest.raises(InvalidEndpointError) as exc_info:
            validate_endpoint(endpoint)

        assert exc_info.value.endpoint == endpoint


class TestCheckParameter:
    def test_accepts_strings(self):
        check_parameter("grant_type", "password", "body")
        check_parameter("empty", "", "query")

    def test_rejects_non_string_name(self):
        with pytest.raises(ParameterSerializationError, match="name must be a string"):
            check_parameter(1, "value", "query")

    def test_rejects_lone_surrogate(self):
        with pytest.raises(ParameterSerializationError, match="not valid UTF-8"):
            check_parameter("name", "bad\udc80", "body")

    def test_rejects_empty_header_name(self):
        with pytest.raises(ParameterSerializationError):
            check_parameter("", "value", "header")

    def test_line_breaks_only_matter_for_headers(self):
        check_parameter("note", "line one\nline two", "body")
        with pytest.raises(ParameterSerializationError):
            check_parameter("X-Note", "line one\nline two", "header")

    @pytest.mark.parametrize(
        "name, value",
        [
            ("X-Field", " leading"),
            ("X-Field", "\tleading"),
            ("X:Y", "v"),
            (" X-Field", "v"),
            ("X-Field", "漢字"),
            ("X-Fïeld", "v"),
        ],
    )
    def test_rejects_header_text_requests_cannot_send(self, name, value):
        """Header text that would fail while the request is prepared is caught up front"""
        with pytest.raises(ParameterSerializationError) as exc_info:
            check_parameter(name, value, "header")

        assert exc_info.value.parameter == name
        assert exc_info.value.kind == "header"

    def test_header_rules_do_not_apply_to_parameters(self):
        check_parameter("name", "漢字", "query")
        check_parameter("name", "漢字", "body")
        check_parameter("name", " leading", "body")

    @pytest.mark.parametrize(
        "value", ["", "gzip, deflate", "Bearer abc.def", "trailing ", "café"]
    )
    def test_accepts_valid_header_values(self, value):
        check_parameter("X-Field", value, "header")


class TestMergeHeaderValue:
    def test_absent_field(self):
        assert merge_header_value(None, "v") == "v"

    def test_existing_field(self):
        assert merge_header_value("v1", "v2") == "v1,v2"

    def test_empty_existing_value_is_present(self):
        assert merge_header_value("", "v") == ",v"


class TestBuildQueryString:
    def test_empty_mapping(self):
        assert build_query_string({}) == ""

    def test_reserved_characters_are_escaped(self):
        query = build_query_string({"a b": "c&d=e/f?g#h+i"})

        assert query == "a%20b=c%26d%3De%2Ff%3Fg%23h%2Bi"

    def test_unreserved_characters_are_kept(self):
        assert build_query_string({"client_id": "abc-123.x~y"}) == "client_id=abc-123.x~y"

    def test_non_ascii_is_utf8_percent_encoded(self):
        assert build_query_string({"name": "é"}) == "name=%C3%A9"

    def test_empty_value(self):
        assert build_query_string({"prompt": ""}) == "prompt="

    def test_multiple_parameters(self):
        assert build_query_string({"a": "1", "b": "2"}) == "a=1&b=2"


class TestBuildUrl:
    def test_no_parameters_returns_bare_endpoint(self):
        assert build_url("https://example.com/token", {}) == "https://example.com/token"

    def test_appends_query(self):
        assert build_url("https://example.com/token", {"a": "1"}) == "https://example.com/token?a=1"

    def test_extends_existing_query(self):
        url = build_url("https://example.com/token?api-version=1.0", {"a": "1"})

        assert url == "https://example.com/token?api-version=1.0&a=1"

    def test_trailing_question_mark_not_doubled(self):
        url = build_url("https://example.com/token?", {"a": "1"})

        assert url == "https://example.com/token?a=1"


class TestBuildJsonBody:
    def test_compact_object(self):
        body = build_json_body({"grant_type": "password", "username": "alice"})

        assert body == b'{"grant_type":"password","username":"alice"}'

    def test_round_trips_to_same_mapping(self):
        params = {"scope": "openid profile", "quote": 'say "hi"', "path": "a\\b"}

        assert json.loads(build_json_body(params)) == params

    def test_empty_mapping(self):
        assert build_json_body({}) == b"{}"

    def test_non_ascii_is_utf8(self):
        body = build_json_body({"name": "Zoë"})

        assert body == '{"name":"Zoë"}'.encode()

    def test_rejects_non_string_values(self):
        with pytest.raises(ParameterSerializationError) as exc_info:
            build_json_body({"nested": {"a": "b"}})

        assert exc_info.value.kind == "body"
