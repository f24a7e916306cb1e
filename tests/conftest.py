"""Common fixtures for LibreNMS client tests."""
import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from librenms_client import LibreNMSAPI

BASE_URL = "http://librenms.local:8000/"
API_URL = "http://librenms.local:8000/api/v0/"
TOKEN = "test-token-12345"


def _mock_response(body="", status=200, reason="OK", content_type="application/json"):
    response = MagicMock()
    response.status = status
    response.reason = reason
    response.headers = {"Content-Type": content_type}
    response.read = AsyncMock(return_value=body.encode("utf-8"))
    return response


@pytest.fixture
def mock_session():
    """Return a factory for fake aiohttp sessions answering with one response.

    session.request() returns an async context manager yielding the response,
    like aiohttp does.
    """

    def factory(body="", status=200, reason="OK", content_type="application/json"):
        response = _mock_response(body, status, reason, content_type)
        context = MagicMock()
        context.__aenter__ = AsyncMock(return_value=response)
        # __aexit__ must return None/False to not suppress exceptions
        context.__aexit__ = AsyncMock(return_value=None)

        session = MagicMock()
        session.closed = False
        session.close = AsyncMock()
        session.request = MagicMock(return_value=context)
        return session

    return factory


@pytest.fixture
def make_client(mock_session):
    """Return a factory for a client bound to a fake session.

    The factory returns (client, session) so tests can inspect what was sent.
    """

    def factory(body="", status=200, reason="OK"):
        session = mock_session(body, status=status, reason=reason)
        return LibreNMSAPI(BASE_URL, TOKEN, session=session), session

    return factory


@pytest.fixture
def sent():
    """Return a helper extracting (method, url, headers, json body) from a fake session."""

    def extract(session):
        args, kwargs = session.request.call_args
        data = kwargs.get("data")
        body = json.loads(data.decode("utf-8")) if data is not None else None
        return args[0], args[1], kwargs["headers"], body

    return extract
