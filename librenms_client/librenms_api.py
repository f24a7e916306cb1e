# librenms_api.py
import logging
from typing import Any
from urllib.parse import urljoin

import aiohttp

from .api_decorators import api_get, api_write
from .constants import (
    ALERT_ENDPOINT,
    ALERT_RULE_ENDPOINT,
    API_DEFAULTS,
    API_ROOT,
    DEVICE_ENDPOINT,
    DEVICE_GROUP_ENDPOINT,
    LOCATION_ENDPOINT,
    SERVICE_ENDPOINT,
)
from .infrastructure.api import build_request, check_response, decode_response, send_request
from .infrastructure.errors import LibreNMSAPIError, LibreNMSConfigError, LibreNMSValidationError
from .infrastructure.normalization import filter_to_one, flatten_one_level
from .models import (
    AlertAckRequest,
    AlertRuleCreateRequest,
    AlertRuleResponse,
    AlertRuleUpdateRequest,
    AlertsQuery,
    AlertsResponse,
    BaseResponse,
    DeviceCreateRequest,
    DeviceGroupCreateRequest,
    DeviceGroupCreateResponse,
    DeviceGroupResponse,
    DeviceGroupUpdateRequest,
    DeviceResponse,
    DevicesQuery,
    DeviceUpdateRequest,
    LocationCreateRequest,
    LocationResponse,
    LocationsResponse,
    LocationUpdateRequest,
    NestedServiceResponse,
    ServiceCreateRequest,
    ServiceResponse,
    ServiceUpdateRequest,
)
from .validators import normalize_base_url, validate_base_url, validate_rule_id

_LOGGER = logging.getLogger(__name__)


class LibreNMSAPI:
    """Async client for the LibreNMS REST API.

    Every operation makes exactly one HTTP request and returns the decoded
    response envelope, or raises a LibreNMSError subclass.

    Args:
        base_url: Server root, 'http[s]://<host>[:port]/'. The API root
                  (api/v0/) is appended by the client.
        token: API token, sent in the X-Auth-Token header.
        session: aiohttp session to send requests with. When omitted one is
                 created on first use and closed by close().
        logger: Logger for request/response debug output.
        log_level: Level for a child logger owned by this client, if given.
                   The shared or injected logger keeps its own level.
        timeout: Total timeout in seconds, or an aiohttp.ClientTimeout,
                 applied to every request. Defaults to the session's timeout.

    Raises:
        LibreNMSConfigError: If base_url is not a bare http(s) server root.

    Example:
        async with LibreNMSAPI("https://librenms.example.com/", token) as client:
            response = await client.get_device("router-1")
            print(response.devices[0].sys_name)
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        session: aiohttp.ClientSession | None = None,
        logger: logging.Logger | None = None,
        log_level: int | str | None = None,
        timeout: float | aiohttp.ClientTimeout | None = None,
    ):
        is_valid, error = validate_base_url(base_url)
        if not is_valid:
            raise LibreNMSConfigError(
                f"invalid base URL format, expected: '{API_DEFAULTS.BASE_URL_FORMAT}' ({error})"
            )

        self.base_url = normalize_base_url(base_url)
        self.api_url = urljoin(self.base_url, API_ROOT)
        self._token = token
        self._session = session
        self._owns_session = session is None

        self.logger = logger or _LOGGER
        if log_level is not None:
            self.logger = self.logger.getChild(f"client{id(self):x}")
            self.logger.setLevel(log_level)

        if timeout is not None and not isinstance(timeout, aiohttp.ClientTimeout):
            timeout = aiohttp.ClientTimeout(total=timeout)
        self.timeout = timeout

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or (self._owns_session and self._session.closed):
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self):
        """Close the aiohttp session, if the client created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: dict[str, str] | None = None,
        response_model: type[BaseResponse] = BaseResponse,
    ) -> BaseResponse:
        """Run one request through the envelope pipeline."""
        request = build_request(self.api_url, self._token, method, path, body=body, params=params)
        self.logger.debug("http request method=%s url=%s", request.method, request.url)

        session = await self._get_session()
        response = await send_request(session, request, timeout=self.timeout)
        self.logger.debug(
            "http response status=%d status_text=%s content_type=%s",
            response.status,
            response.reason,
            response.content_type,
        )

        try:
            check_response(response)
        except LibreNMSAPIError as err:
            self.logger.debug("API error %d %s for %s: %s", err.status, err.reason, err.url, err.message)
            raise
        return decode_response(response, response_model)

    # Devices
    @api_write("POST", f"{DEVICE_ENDPOINT}/", response_model=DeviceResponse)
    async def create_device(self, device: DeviceCreateRequest):
        """Add a device by hostname or IP."""
        return device.to_api_payload()

    @api_write("DELETE", f"{DEVICE_ENDPOINT}/{{identifier}}", response_model=DeviceResponse)
    async def delete_device(self, identifier: int | str):
        """Delete a device by ID or hostname. The response lists the deleted device."""
        return None

    @api_get(f"{DEVICE_ENDPOINT}/{{identifier}}", response_model=DeviceResponse)
    async def get_device(self, response, identifier: int | str):
        """Get a device by ID or hostname."""
        return response

    @api_get(DEVICE_ENDPOINT, response_model=DeviceResponse, query_arg="query")
    async def get_devices(self, response, query: DevicesQuery | None = None):
        """List devices, optionally filtered by query."""
        return response

    @api_write("PATCH", f"{DEVICE_ENDPOINT}/{{identifier}}")
    async def update_device(self, identifier: int | str, device: DeviceUpdateRequest):
        """Update the set columns of a device."""
        return device.to_api_payload()

    # Device groups
    @api_write("POST", DEVICE_GROUP_ENDPOINT, response_model=DeviceGroupCreateResponse)
    async def create_device_group(self, group: DeviceGroupCreateRequest):
        return group.to_api_payload()

    @api_write("DELETE", f"{DEVICE_GROUP_ENDPOINT}/{{identifier}}")
    async def delete_device_group(self, identifier: int | str):
        return None

    @api_get(DEVICE_GROUP_ENDPOINT, response_model=DeviceGroupResponse)
    async def get_device_group(self, response, identifier: int | str):
        """Get a device group by ID or name.

        The API has no endpoint for a single group, so all groups are fetched
        and the first match is kept. No match gives an empty response with
        count 0, not an error.
        """
        return filter_to_one(response, "groups", identifier)

    @api_get(DEVICE_GROUP_ENDPOINT, response_model=DeviceGroupResponse)
    async def get_device_groups(self, response):
        return response

    @api_write("PATCH", f"{DEVICE_GROUP_ENDPOINT}/{{identifier}}")
    async def update_device_group(self, identifier: int | str, group: DeviceGroupUpdateRequest):
        return group.to_api_payload()

    # Locations
    @api_write("POST", LOCATION_ENDPOINT)
    async def create_location(self, location: LocationCreateRequest):
        return location.to_api_payload()

    @api_write("DELETE", f"{LOCATION_ENDPOINT}/{{location_id}}")
    async def delete_location(self, location_id: int):
        return None

    @api_get("location/{location_id}", response_model=LocationResponse)
    async def get_location(self, response, location_id: int):
        return response

    @api_get(f"resources/{LOCATION_ENDPOINT}", response_model=LocationsResponse)
    async def get_locations(self, response):
        return response

    @api_write("PATCH", f"{LOCATION_ENDPOINT}/{{location_id}}")
    async def update_location(self, location_id: int, location: LocationUpdateRequest):
        """Update the set fields of a location.

        Sending a field with its current value makes the API fail with 500,
        so only set what changes.
        """
        return location.to_api_payload()

    # Services
    @api_write("POST", f"{SERVICE_ENDPOINT}/{{device_identifier}}", response_model=ServiceResponse)
    async def create_service(self, device_identifier: int | str, service: ServiceCreateRequest):
        return service.to_api_payload()

    @api_write("DELETE", f"{SERVICE_ENDPOINT}/{{service_id}}")
    async def delete_service(self, service_id: int):
        return None

    @api_get(SERVICE_ENDPOINT, response_model=NestedServiceResponse)
    async def get_service(self, response, service_id: int):
        """Get a service by ID.

        All services are fetched, flattened and filtered to the first one
        whose ID matches.
        """
        services = flatten_one_level(response, "services", ServiceResponse)
        return filter_to_one(services, "services", service_id)

    @api_get(SERVICE_ENDPOINT, response_model=NestedServiceResponse)
    async def get_services(self, response):
        return flatten_one_level(response, "services", ServiceResponse)

    @api_get(f"{SERVICE_ENDPOINT}/{{device_identifier}}", response_model=NestedServiceResponse)
    async def get_services_for_host(self, response, device_identifier: int | str):
        return flatten_one_level(response, "services", ServiceResponse)

    @api_write("PATCH", f"{SERVICE_ENDPOINT}/{{service_id}}", response_model=ServiceResponse)
    async def update_service(self, service_id: int, service: ServiceUpdateRequest):
        """Update the set fields of a service.

        Sending a field with its current value makes the API fail with 500,
        so only set what changes.
        """
        return service.to_api_payload()

    # Alerts
    @api_write("PUT", f"{ALERT_ENDPOINT}/{{alert_id}}")
    async def ack_alert(self, alert_id: int, request: AlertAckRequest | None = None):
        """Acknowledge an alert."""
        return (request or AlertAckRequest()).to_api_payload()

    @api_get(f"{ALERT_ENDPOINT}/{{alert_id}}", response_model=AlertsResponse)
    async def get_alert(self, response, alert_id: int):
        return response

    @api_get(ALERT_ENDPOINT, response_model=AlertsResponse, query_arg="query")
    async def get_alerts(self, response, query: AlertsQuery | None = None):
        """List alerts. Without a query the API returns only open alerts."""
        return response

    @api_write("PUT", f"{ALERT_ENDPOINT}/unmute/{{alert_id}}")
    async def unmute_alert(self, alert_id: int):
        return None

    # Alert rules
    @api_write("POST", ALERT_RULE_ENDPOINT)
    async def create_alert_rule(self, rule: AlertRuleCreateRequest):
        """Create an alert rule. An empty device list applies it to all devices."""
        return rule.to_api_payload()

    @api_write("DELETE", f"{ALERT_RULE_ENDPOINT}/{{rule_id}}")
    async def delete_alert_rule(self, rule_id: int):
        return None

    @api_get(f"{ALERT_RULE_ENDPOINT}/{{rule_id}}", response_model=AlertRuleResponse)
    async def get_alert_rule(self, response, rule_id: int):
        return response

    @api_get(ALERT_RULE_ENDPOINT, response_model=AlertRuleResponse)
    async def get_alert_rules(self, response):
        return response

    @api_write("PUT", ALERT_RULE_ENDPOINT)
    async def update_alert_rule(self, rule: AlertRuleUpdateRequest):
        """Update an alert rule identified by rule.rule_id.

        Raises:
            LibreNMSValidationError: If rule.rule_id is not set.
        """
        is_valid, error = validate_rule_id(rule.rule_id)
        if not is_valid:
            raise LibreNMSValidationError(error)
        return rule.to_api_payload()
