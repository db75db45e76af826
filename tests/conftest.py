"""Shared fixtures."""
import json
from unittest.mock import MagicMock

import pytest
import requests

from inflow_put.api import inflow_client
from inflow_put.api.inflow_client import InflowClient
from inflow_put.config import InflowApiConfig


def make_response(status_code, body=None, url="https://cloudapi.test/company-1/customers"):
    """Build a requests.Response with a JSON body (or empty)"""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    response._content = json.dumps(body).encode() if body is not None else b""
    return response


@pytest.fixture
def api_config():
    return InflowApiConfig(
        base_url="https://cloudapi.test",
        api_key="secret-key",
        company_id="company-1",
        timeout=15,
    )


@pytest.fixture
def mock_session():
    session = MagicMock()
    session.headers = {}
    session.put.return_value = make_response(200, {"ok": True})
    session.get.return_value = make_response(200, {"ok": True})
    return session


@pytest.fixture
def client(api_config, mock_session):
    return InflowClient(api_config, session=mock_session)


@pytest.fixture(autouse=True)
def reset_default_client():
    """Keep tests from sharing the module default client"""
    inflow_client.set_default_client(None)
    yield
    inflow_client.set_default_client(None)
