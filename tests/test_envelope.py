"""Tests for the request/response envelope pipeline."""

import asyncio
import json
import socket
from unittest.mock import MagicMock

import aiohttp
import pytest

from librenms_client.infrastructure.api import (
    ApiResponse,
    build_request,
    check_response,
    decode_response,
    encode_body,
    send_request,
)
from librenms_client.infrastructure.errors import (
    LibreNMSAPIError,
    LibreNMSConnectionError,
    LibreNMSDecodeError,
    LibreNMSTimeoutError,
    LibreNMSValidationError,
)
from librenms_client.models import BaseResponse, DeviceResponse

API_URL = "http://librenms.local:8000/api/v0/"
TOKEN = "test-token-12345"


def _response(status=200, body="", reason="OK"):
    return ApiResponse(status=status, reason=reason, url=f"{API_URL}devices/1", body=body)


class TestBuildRequest:
    """Tests for build_request."""

    def test_get_without_body(self):
        request = build_request(API_URL, TOKEN, "GET", "devices/1")

        assert request.method == "GET"
        assert request.url == "http://librenms.local:8000/api/v0/devices/1"
        assert request.headers == {"Accept": "application/json", "X-Auth-Token": TOKEN}
        assert request.data is None

    def test_body_sets_content_type(self):
        request = build_request(API_URL, TOKEN, "post", "locations", body={"location": "HQ"})

        assert request.method == "POST"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.data) == {"location": "HQ"}

    def test_empty_dict_is_a_body(self):
        request = build_request(API_URL, TOKEN, "PATCH", "locations/1", body={})

        assert request.data == "{}"
        assert "Content-Type" in request.headers

    def test_body_is_not_html_escaped(self):
        request = build_request(API_URL, TOKEN, "POST", "rules", body={"rule": "a < b && c > d", "name": "Zürich"})

        assert "a < b && c > d" in request.data
        assert "Zürich" in request.data

    def test_query_params(self):
        request = build_request(API_URL, TOKEN, "GET", "alerts", params={"state": "0", "order": "timestamp desc"})

        assert request.url == "http://librenms.local:8000/api/v0/alerts?state=0&order=timestamp+desc"

    def test_empty_params_are_not_appended(self):
        request = build_request(API_URL, TOKEN, "GET", "alerts", params={})

        assert request.url == "http://librenms.local:8000/api/v0/alerts"

    def test_trailing_slash_path(self):
        request = build_request(API_URL, TOKEN, "POST", "devices/", body={"hostname": "r1"})

        assert request.url == "http://librenms.local:8000/api/v0/devices/"

    def test_unserializable_body(self):
        with pytest.raises(LibreNMSValidationError):
            encode_body({"when": object()})


class TestSendRequest:
    """Tests for send_request."""

    @pytest.mark.asyncio
    async def test_reads_response(self, mock_session):
        session = mock_session('{"status": "ok"}', status=200, reason="OK")
        request = build_request(API_URL, TOKEN, "PATCH", "locations/1", body={"lat": 1.5})

        response = await send_request(session, request)

        assert response.status == 200
        assert response.reason == "OK"
        assert response.body == '{"status": "ok"}'
        assert response.content_type == "application/json"
        args, kwargs = session.request.call_args
        assert args == ("PATCH", "http://librenms.local:8000/api/v0/locations/1")
        assert kwargs["data"] == b'{"lat": 1.5}'
        assert "timeout" not in kwargs

    @pytest.mark.asyncio
    async def test_passes_timeout(self, mock_session):
        session = mock_session("")
        timeout = aiohttp.ClientTimeout(total=5)

        await send_request(session, build_request(API_URL, TOKEN, "GET", "devices"), timeout=timeout)

        assert session.request.call_args.kwargs["timeout"] is timeout

    @pytest.mark.asyncio
    async def test_timeout(self):
        session = MagicMock()
        session.request = MagicMock(side_effect=asyncio.TimeoutError())

        with pytest.raises(LibreNMSTimeoutError) as exc_info:
            await send_request(session, build_request(API_URL, TOKEN, "GET", "devices"))

        assert isinstance(exc_info.value, LibreNMSConnectionError)
        assert isinstance(exc_info.value.__cause__, asyncio.TimeoutError)

    @pytest.mark.asyncio
    async def test_client_error(self):
        session = MagicMock()
        session.request = MagicMock(side_effect=aiohttp.ServerDisconnectedError())

        with pytest.raises(LibreNMSConnectionError) as exc_info:
            await send_request(session, build_request(API_URL, TOKEN, "GET", "devices"))

        assert not isinstance(exc_info.value, LibreNMSTimeoutError)
        assert "ServerDisconnectedError" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_connection_refused(self):
        """A real session against a closed local port fails with a connection error."""
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            sock.bind(("127.0.0.1", 0))
            port = sock.getsockname()[1]

        request = build_request(f"http://127.0.0.1:{port}/api/v0/", TOKEN, "GET", "devices")
        async with aiohttp.ClientSession() as session:
            with pytest.raises(LibreNMSConnectionError) as exc_info:
                await send_request(session, request)

        assert "connection refused" in str(exc_info.value)
        assert not isinstance(exc_info.value, LibreNMSTimeoutError)
        assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectorError)


class TestCheckResponse:
    """Tests for check_response."""

    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_success(self, status):
        check_response(_response(status=status))

    def test_error_envelope(self):
        body = '{"status": "error", "message": "Device does not exist"}'

        with pytest.raises(LibreNMSAPIError) as exc_info:
            check_response(_response(status=404, body=body, reason="Not Found"))

        error = exc_info.value
        assert error.status == 404
        assert error.message == "Device does not exist"
        assert error.api_status == "error"
        assert str(error) == "404 Not Found http://librenms.local:8000/api/v0/devices/1: Device does not exist"

    def test_empty_body_uses_status_line(self):
        with pytest.raises(LibreNMSAPIError) as exc_info:
            check_response(_response(status=500, reason="Internal Server Error"))

        assert exc_info.value.message == "500 Internal Server Error"
        assert str(exc_info.value) == "500 Internal Server Error http://librenms.local:8000/api/v0/devices/1"

    def test_null_message_uses_status_line(self):
        body = '{"status": "error", "message": null}'

        with pytest.raises(LibreNMSAPIError) as exc_info:
            check_response(_response(status=500, body=body, reason="Internal Server Error"))

        assert exc_info.value.message == "500 Internal Server Error"
        assert exc_info.value.api_status == "error"

    def test_non_envelope_body_used_verbatim(self):
        body = "<html><body>Bad Gateway</body></html>"

        with pytest.raises(LibreNMSAPIError) as exc_info:
            check_response(_response(status=502, body=body, reason="Bad Gateway"))

        assert exc_info.value.message == body

    def test_redirect_is_an_error(self):
        with pytest.raises(LibreNMSAPIError):
            check_response(_response(status=302, reason="Found"))


class TestDecodeResponse:
    """Tests for decode_response."""

    def test_decode(self):
        response = _response(body='{"status": "ok", "count": 1, "devices": [{"device_id": 1}]}')

        decoded = decode_response(response, DeviceResponse)

        assert decoded.status == "ok"
        assert decoded.devices[0].device_id == 1

    @pytest.mark.parametrize("body", ["", "   ", "\n"])
    def test_empty_body_is_a_no_op(self, body):
        decoded = decode_response(_response(body=body), DeviceResponse)

        assert decoded == DeviceResponse()

    def test_invalid_json(self):
        with pytest.raises(LibreNMSDecodeError) as exc_info:
            decode_response(_response(body="{not json"), BaseResponse)

        assert exc_info.value.url == "http://librenms.local:8000/api/v0/devices/1"

    def test_invalid_field(self):
        body = '{"status": "ok", "devices": [{"device_id": 1, "disabled": "yes"}]}'

        with pytest.raises(LibreNMSDecodeError) as exc_info:
            decode_response(_response(body=body), DeviceResponse)

        assert "disabled" in str(exc_info.value)
