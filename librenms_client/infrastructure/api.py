"""Request/response envelope for the LibreNMS API client.

Every call goes through the same single-attempt pipeline:
- build_request: URL, headers and JSON body of the outgoing request
- send_request: one round trip through the injected aiohttp session
- check_response: non-2xx statuses become LibreNMSAPIError
- decode_response: the JSON body is decoded into a typed envelope

There are no retries, no backoff and no caching at this layer. Timeouts and
connection pooling belong to the session.
"""

from __future__ import annotations

import errno
import json
from typing import Any, TypeVar
from urllib.parse import urlencode, urljoin

import aiohttp
from pydantic import BaseModel, Field, ValidationError

from ..constants import API_DEFAULTS, AUTH_HEADER
from ..models import ErrorResponse
from .errors import (
    LibreNMSAPIError,
    LibreNMSConnectionError,
    LibreNMSDecodeError,
    LibreNMSTimeoutError,
    LibreNMSValidationError,
)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ApiRequest(BaseModel):
    """An outgoing request, fully built and ready to send."""

    model_config = {"frozen": True}

    method: str
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    data: str | None = None


class ApiResponse(BaseModel):
    """What came back from the transport, before any decoding."""

    model_config = {"frozen": True}

    status: int
    reason: str = ""
    url: str
    content_type: str = ""
    body: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


def encode_body(body: Any) -> str:
    """Serialize a request body to JSON.

    Non-ASCII text and characters such as <, > and & are written as-is, so
    rule tree strings reach the API unmangled.

    Raises:
        LibreNMSValidationError: If the body is not JSON serializable.
    """
    try:
        return json.dumps(body, ensure_ascii=False)
    except (TypeError, ValueError) as err:
        raise LibreNMSValidationError(f"request body is not JSON serializable: {err}") from err


def build_request(
    api_url: str,
    token: str,
    method: str,
    path: str,
    *,
    body: Any = None,
    params: dict[str, str] | None = None,
) -> ApiRequest:
    """Build a request for a path relative to the API root.

    Args:
        api_url: API root, e.g. "http://librenms.local/api/v0/".
        token: API token sent in the auth header.
        method: HTTP method.
        path: Path relative to the API root, without a leading slash.
        body: JSON-serializable body. None sends no body; {} sends an empty object.
        params: Query parameters, appended only when non-empty.

    Returns:
        The built ApiRequest.
    """
    url = urljoin(api_url, path)
    if params:
        url = f"{url}?{urlencode(params)}"

    headers = {"Accept": API_DEFAULTS.ACCEPT, AUTH_HEADER: token}

    data = None
    if body is not None:
        data = encode_body(body)
        headers["Content-Type"] = API_DEFAULTS.CONTENT_TYPE

    return ApiRequest(method=method.upper(), url=url, headers=headers, data=data)


async def send_request(
    session: aiohttp.ClientSession,
    request: ApiRequest,
    *,
    timeout: aiohttp.ClientTimeout | None = None,
) -> ApiResponse:
    """Send a request once and read the whole response body.

    Raises:
        LibreNMSTimeoutError: If the transport timed out.
        LibreNMSConnectionError: For any other transport failure.
    """
    kwargs: dict[str, Any] = {"headers": request.headers}
    if request.data is not None:
        kwargs["data"] = request.data.encode("utf-8")
    if timeout is not None:
        kwargs["timeout"] = timeout

    try:
        async with session.request(request.method, request.url, **kwargs) as response:
            raw = await response.read()
            return ApiResponse(
                status=response.status,
                reason=response.reason or "",
                url=request.url,
                content_type=response.headers.get("Content-Type", ""),
                body=raw.decode("utf-8", errors="replace"),
            )
    except aiohttp.ClientConnectorError as err:
        if isinstance(err.os_error, ConnectionRefusedError) or err.os_error.errno == errno.ECONNREFUSED:
            reason = "connection refused"
        else:
            reason = str(err.os_error) or type(err.os_error).__name__
        raise LibreNMSConnectionError(
            f"{request.method} {request.url}: cannot connect to host {err.host}:{err.port}: {reason}"
        ) from err
    except TimeoutError as err:
        raise LibreNMSTimeoutError(f"{request.method} {request.url}: request timed out") from err
    except aiohttp.ClientError as err:
        raise LibreNMSConnectionError(f"{request.method} {request.url}: {type(err).__name__}: {err}") from err


def check_response(response: ApiResponse) -> None:
    """Raise LibreNMSAPIError if the response status is outside [200, 300).

    The error message is taken from the error envelope when the body is one,
    is the raw body text when it is not, and is the status line when the
    body is empty.
    """
    if response.ok:
        return

    message = ""
    api_status = ""
    if response.body:
        try:
            envelope = ErrorResponse.model_validate_json(response.body)
        except ValidationError:
            message = response.body
        else:
            message = envelope.message
            api_status = envelope.status

    raise LibreNMSAPIError(
        status=response.status,
        reason=response.reason,
        url=response.url,
        message=message,
        api_status=api_status,
    )


def decode_response(response: ApiResponse, model: type[ModelT]) -> ModelT:
    """Decode a successful response body into model.

    An empty body is a valid no-op and yields model() with its defaults.

    Raises:
        LibreNMSDecodeError: If the body is not valid JSON or does not match model.
    """
    if not response.body.strip():
        return model()

    try:
        return model.model_validate_json(response.body)
    except ValidationError as err:
        raise LibreNMSDecodeError(
            f"failure decoding {model.__name__} from {response.url}: {err}",
            url=response.url,
        ) from err
