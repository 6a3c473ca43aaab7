"""
Pytest configuration and shared fixtures
"""

import pytest

from authhttp.config import Config
from authhttp.http_client import HttpClient
from tests.test_helpers import CallbackRecorder, create_mock_session, create_test_config


@pytest.fixture
def test_config():
    """Config built from the test defaults, no files touched"""
    return Config(create_test_config())


@pytest.fixture
def mock_session():
    """requests.Session stand-in answering 200 with a small JSON body"""
    return create_mock_session(
        status_code=200,
        body=b'{"access_token":"abc"}',
        headers={"Content-Type": "application/json"},
    )


@pytest.fixture
def http_client(mock_session, test_config):
    """HttpClient sending through the mock session"""
    client = HttpClient(session=mock_session, config_obj=test_config)
    yield client
    client.close()


@pytest.fixture
def recorder():
    """Fresh completion callback recorder"""
    return CallbackRecorder()
