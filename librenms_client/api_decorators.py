# api_decorators.py
"""Decorators for unified API method patterns.

These decorators provide a clean, consistent way to define API endpoints
by handling the common parts of every call: URL formatting, query
parameters, and the build/send/check/decode envelope pipeline.

Usage:
    @api_get("devices/{identifier}", response_model=DeviceResponse)
    async def get_device(self, response, identifier: int | str):
        return response

    @api_write("PATCH", "locations/{location_id}")
    async def update_location(self, location_id: int, location: LocationUpdateRequest):
        return location.to_api_payload()
"""

import functools
import inspect
import logging
import string
from collections.abc import Callable
from typing import Any
from urllib.parse import quote

from .models import BaseResponse

_LOGGER = logging.getLogger(__name__)


def _bind_arguments(func: Callable, args: tuple, kwargs: dict, skip: int) -> dict[str, Any]:
    """Map positional and keyword call arguments to parameter names.

    The first `skip` parameters of func are not part of the call arguments
    ('self', and 'response' for GET endpoints). Defaults are filled in.

    Raises:
        TypeError: If the arguments do not match the signature of func.
    """
    bound = inspect.signature(func).bind(*([None] * skip), *args, **kwargs)
    bound.apply_defaults()
    return dict(list(bound.arguments.items())[skip:])


def _format_path(url_template: str, bound: dict[str, Any]) -> str:
    """Fill the template placeholders, percent-quoting each path segment."""
    fields = {name for _, name, _, _ in string.Formatter().parse(url_template) if name}
    return url_template.format(**{name: quote(str(bound[name]), safe="") for name in fields})


def api_get(
    url_template: str,
    *,
    response_model: type[BaseResponse],
    query_arg: str | None = None,
):
    """Decorator for GET API endpoints.

    Handles:
    - URL formatting from the call arguments
    - Query parameters (if query_arg is specified)
    - The request/response envelope pipeline
    - Passing the decoded envelope to the decorated function

    Args:
        url_template: Path relative to the API root with placeholders
                      (e.g., "devices/{identifier}"). Placeholders are filled
                      from the decorated function's arguments by name.
        response_model: Envelope type the response body is decoded into.
        query_arg: Name of an argument holding a query model with to_params();
                   it is sent as the query string when not None.

    The decorated function receives the decoded envelope as its second
    argument and returns the final result, so it can post-process
    (flatten, filter) or just return it.

    Example:
        @api_get("services", response_model=NestedServiceResponse)
        async def get_services(self, response):
            return flatten_one_level(response, "services", ServiceResponse)
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            # Skip 'self' and 'response' (first two params)
            bound = _bind_arguments(func, args, kwargs, skip=2)
            path = _format_path(url_template, bound)

            params = None
            query = bound.get(query_arg) if query_arg else None
            if query is not None:
                params = query.to_params()

            response = await self._request("GET", path, params=params, response_model=response_model)

            return await func(self, response, *args, **kwargs)

        return wrapper

    return decorator


def api_write(
    method: str,
    url_template: str,
    *,
    response_model: type[BaseResponse] = BaseResponse,
):
    """Decorator for POST, PUT, PATCH and DELETE API endpoints.

    Handles:
    - URL formatting from the call arguments
    - Sending the body built by the decorated function
    - The request/response envelope pipeline

    Args:
        method: HTTP method.
        url_template: Path relative to the API root with placeholders
                      (e.g., "locations/{location_id}").
        response_model: Envelope type the response body is decoded into.

    The decorated function should validate its input and build and return
    the payload. Returning None sends no body; an empty dict is still sent.
    Exceptions raised by the function abort the call before any request.

    Example:
        @api_write("DELETE", "devices/{identifier}", response_model=DeviceResponse)
        async def delete_device(self, identifier: int | str):
            return None

        @api_write("PUT", "alerts/{alert_id}")
        async def ack_alert(self, alert_id: int, request: AlertAckRequest):
            return request.to_api_payload()
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            # Skip 'self' (first param)
            bound = _bind_arguments(func, args, kwargs, skip=1)
            path = _format_path(url_template, bound)

            # Call the decorated function to get payload
            body = await func(self, *args, **kwargs)

            if body == {}:
                _LOGGER.debug("Sending empty %s payload to %s", method, path)

            return await self._request(method, path, body=body, response_model=response_model)

        return wrapper

    return decorator
