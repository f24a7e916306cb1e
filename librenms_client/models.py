"""Data models for the LibreNMS API client.

This module provides Pydantic models for the JSON wire format of the
LibreNMS API, together with the two flexible scalar codecs the API needs:
some endpoints send booleans as 0/1 and some send floats as strings, so
FlexibleBool and FlexibleFloat accept either representation on decode.

Update requests are partial: only fields that were explicitly set are sent,
because the API treats "field absent" differently from "field set to an
empty value".
"""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    Field,
    PlainSerializer,
    PlainValidator,
    PrivateAttr,
    field_validator,
)

from .constants import ALL_DEVICES
from .infrastructure.errors import LibreNMSDecodeError


# Flexible scalar codecs
def decode_flexible_bool(value: Any) -> bool:
    """Decode a boolean sent either as a JSON boolean or as a JSON integer.

    Any nonzero integer is truthy.

    Raises:
        LibreNMSDecodeError: If the value is neither a boolean nor an integer.

    Example:
        >>> decode_flexible_bool(True)
        True
        >>> decode_flexible_bool(0)
        False
        >>> decode_flexible_bool(2)
        True
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    raise LibreNMSDecodeError(f"cannot decode flexible bool from {type(value).__name__}: {value!r}")


def encode_flexible_bool(value: bool) -> int:
    """Encode a boolean the way the API expects it: 1 or 0."""
    return 1 if value else 0


def decode_flexible_float(value: Any) -> float:
    """Decode a float sent either as a JSON number or as a numeric JSON string.

    Raises:
        LibreNMSDecodeError: If the value is not a number or a parseable string.

    Example:
        >>> decode_flexible_float(37.5)
        37.5
        >>> decode_flexible_float("37.5")
        37.5
    """
    if isinstance(value, bool):
        raise LibreNMSDecodeError(f"cannot decode flexible float from bool: {value!r}")
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError as err:
            raise LibreNMSDecodeError(f"flexible float out of range: {value!r}") from err
    if isinstance(value, str):
        if value != value.strip():
            raise LibreNMSDecodeError(f"cannot parse flexible float from string {value!r}")
        try:
            return float(value)
        except ValueError as err:
            raise LibreNMSDecodeError(f"cannot parse flexible float from string {value!r}") from err
    raise LibreNMSDecodeError(f"cannot decode flexible float from {type(value).__name__}: {value!r}")


def encode_flexible_float(value: float) -> str:
    """Encode a float as the shortest positional decimal that round-trips it.

    No exponent notation and no trailing zeros.

    Raises:
        ValueError: If the value is NaN or infinite.

    Example:
        >>> encode_flexible_float(37.5)
        '37.5'
        >>> encode_flexible_float(100.0)
        '100'
        >>> encode_flexible_float(1e-07)
        '0.0000001'
    """
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"cannot encode non-finite float {value!r}")
    # repr() gives the shortest round-tripping digits, Decimal drops the exponent
    return format(Decimal(repr(value)).normalize(), "f")


FlexibleBool = Annotated[
    bool,
    PlainValidator(decode_flexible_bool),
    PlainSerializer(encode_flexible_bool, return_type=int),
]


def _flexible_float_to_json(value: float) -> int | float:
    """Prepare a float for the JSON writer so it comes out as a bare number.

    Integral values become ints so they are written without a trailing ".0",
    as encode_flexible_float would write them.

    Raises:
        ValueError: If the value is NaN or infinite.
    """
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"cannot encode non-finite float {value!r}")
    if value.is_integer():
        return int(value)
    return value


FlexibleFloat = Annotated[
    float,
    PlainValidator(decode_flexible_float),
    PlainSerializer(_flexible_float_to_json, return_type=Any, when_used="json"),
]


# Base model for all LibreNMS data models
class LibreNMSModel(BaseModel):
    """Base model for all LibreNMS data structures.

    Python attribute names are snake_case; wire names are set as aliases and
    either name can be used when constructing a model.
    """

    model_config = {"validate_assignment": True, "populate_by_name": True}


class PartialRequest(LibreNMSModel):
    """Base for requests that only carry the fields explicitly set.

    A field counts as set once it is passed to the constructor or assigned,
    even when the value is empty, zero or False. Booleans declared as
    FlexibleBool come out as 1/0.
    """

    def _set_values(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


def _rules_to_json(value: Any) -> Any:
    if isinstance(value, RuleTree):
        return value.to_json()
    return value


# Rule tree (device group rules, alert rule builders)
class RuleNode(LibreNMSModel):
    """A node of a rule tree. This is a recursive structure.

    A composite node defines condition and a list of child rules.
    A leaf node defines id, field, type, input, operator and value.
    """

    id: str | None = None
    condition: str | None = None
    field: str | None = None
    type: str | None = None
    input: str | None = None
    operator: str | None = None
    value: str | int | float | None = None
    rules: list[RuleNode] | None = None

    @property
    def is_composite(self) -> bool:
        return bool(self.rules)

    @property
    def is_leaf(self) -> bool:
        return not self.rules and self.field is not None

    def is_well_formed(self) -> bool:
        """Check that the node has children XOR leaf attributes, recursively.

        Advisory only: the API accepts malformed trees.
        """
        has_leaf_attributes = any(
            attr is not None for attr in (self.field, self.input, self.operator, self.value)
        )
        if self.is_composite == has_leaf_attributes:
            return False
        if self.is_composite:
            return self.condition is not None and all(rule.is_well_formed() for rule in self.rules)
        return True


class RuleTree(LibreNMSModel):
    """Top-level container of a rule tree.

    The API stores rules as an opaque JSON string, so the tree is serialized
    with to_json() and embedded as a single field value.

    Example:
        >>> tree = RuleTree(
        ...     condition="AND",
        ...     rules=[RuleNode(id="devices.os", field="devices.os", type="string",
        ...                     input="text", operator="equal", value="linux")],
        ... )
        >>> group = DeviceGroupCreateRequest(name="linux", type="dynamic", rules=tree)
    """

    condition: str = "AND"
    rules: list[RuleNode] = Field(default_factory=list)
    joins: list[list[str]] = Field(default_factory=list)
    valid: bool = True

    def is_well_formed(self) -> bool:
        return all(rule.is_well_formed() for rule in self.rules)

    def to_json(self) -> str:
        """Serialize to the compact JSON string the API expects."""
        return json.dumps(
            self.model_dump(exclude_none=True),
            ensure_ascii=False,
            separators=(",", ":"),
        )


# A rule tree embedded in a request as its JSON string
RulesJSON = Annotated[str, BeforeValidator(_rules_to_json)]


# Envelopes
class BaseResponse(LibreNMSModel):
    """Status/message/count wrapper common to every API response.

    count is only meaningful for collection responses, and the API does not
    always report it correctly; normalized responses recompute it.
    """

    status: str = ""
    message: str = ""
    count: int = 0

    @field_validator("status", "message", mode="before")
    @classmethod
    def _null_as_empty(cls, v):
        return "" if v is None else v

    @field_validator("count", mode="before")
    @classmethod
    def _null_as_zero(cls, v):
        return 0 if v is None else v


class ErrorResponse(LibreNMSModel):
    """Body of a non-2xx response."""

    status: str = ""
    message: str = ""

    @field_validator("status", "message", mode="before")
    @classmethod
    def _null_as_empty(cls, v):
        return "" if v is None else v


# Devices
class Device(LibreNMSModel):
    """A device in LibreNMS.

    Optional fields may be null in the API. Fields declared as FlexibleBool
    arrive as 0/1 from /devices and as true/false from /devices/:id.
    Unmodeled columns are kept as extra attributes.
    """

    model_config = {"extra": "allow"}

    device_id: int
    agent_uptime: int | None = None
    auth_algorithm: str | None = Field(default=None, alias="authalgo")
    auth_level: str | None = Field(default=None, alias="authlevel")
    auth_name: str | None = Field(default=None, alias="authname")
    auth_pass: str | None = Field(default=None, alias="authpass")
    bgp_local_as: int | None = Field(default=None, alias="bgpLocalAs")
    community: str | None = None
    crypto_algorithm: str | None = Field(default=None, alias="cryptoalgo")
    crypto_pass: str | None = Field(default=None, alias="cryptopass")
    disable_notify: FlexibleBool = False
    disabled: FlexibleBool = False
    display: str | None = None
    features: str | None = None
    hardware: str | None = None
    hostname: str = ""
    icon: str | None = None
    ignore: FlexibleBool = False
    ignore_status: FlexibleBool = False
    inserted: str | None = None
    ip: str | None = None
    last_discovered: str | None = None
    last_discovered_timetaken: FlexibleFloat | None = None
    last_ping: str | None = None
    last_ping_timetaken: FlexibleFloat | None = None
    last_poll_attempted: str | None = None
    last_polled: str | None = None
    last_polled_timetaken: FlexibleFloat | None = None
    latitude: FlexibleFloat | None = Field(default=None, alias="lat")
    longitude: FlexibleFloat | None = Field(default=None, alias="lng")
    location: str | None = None
    location_id: int | None = None
    max_depth: int | None = None
    notes: str | None = None
    os: str | None = None
    override_sys_location: FlexibleBool = Field(default=False, alias="override_sysLocation")
    overwrite_ip: str | None = None
    poller_group: int = 0
    port: int | None = None
    port_association_mode: int | None = None
    purpose: str | None = None
    retries: int | None = None
    serial: str | None = None
    snmp_disable: FlexibleBool = False
    snmp_version: str | None = Field(default=None, alias="snmpver")
    status: FlexibleBool = False
    status_reason: str | None = None
    sys_contact: str | None = Field(default=None, alias="sysContact")
    sys_descr: str | None = Field(default=None, alias="sysDescr")
    sys_name: str | None = Field(default=None, alias="sysName")
    sys_object_id: str | None = Field(default=None, alias="sysObjectID")
    timeout: int | None = None
    transport: str | None = None
    type: str | None = None
    uptime: int | None = None
    version: str | None = None


class DeviceCreateRequest(LibreNMSModel):
    """Request body for adding a device by hostname or IP.

    Only hostname is required; unset fields are left to the API defaults.
    """

    hostname: str = Field(..., min_length=1)
    display: str | None = None
    force_add: bool | None = None
    hardware: str | None = None
    location: str | None = None
    location_id: int | None = None
    os: str | None = None
    override_sys_location: bool | None = Field(default=None, alias="override_sysLocation")
    ping_fallback: bool | None = None
    poller_group: int | None = None
    port: int | None = None
    port_association_mode: int | None = None
    auth_algorithm: str | None = Field(default=None, alias="authalgo")  # MD5, SHA, SHA-224, SHA-256, SHA-384, SHA-512
    auth_level: str | None = Field(default=None, alias="authlevel")  # noAuthNoPriv, authNoPriv, authPriv
    auth_name: str | None = Field(default=None, alias="authname")
    auth_pass: str | None = Field(default=None, alias="authpass")
    crypto_algorithm: str | None = Field(default=None, alias="cryptoalgo")  # DES, AES, AES-192, AES-256, AES-256-C
    crypto_pass: str | None = Field(default=None, alias="cryptopass")
    community: str | None = None
    snmp_disable: bool | None = None
    snmp_version: str | None = Field(default=None, alias="snmpver")  # v1, v2c, v3
    sys_name: str | None = Field(default=None, alias="sysName")
    transport: str | None = None

    def to_api_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class DeviceUpdateRequest(PartialRequest):
    """Partial update of device columns.

    The device endpoint takes parallel lists of field names and values
    instead of a mapping. Columns without a named setter can be updated with
    set_field().

    Example:
        >>> request = DeviceUpdateRequest().set_notes("").set_ignore(False)
        >>> request.to_api_payload()
        {'field': ['notes', 'ignore'], 'data': ['', 0]}
    """

    display: str | None = None
    notes: str | None = None
    purpose: str | None = None
    hardware: str | None = None
    os: str | None = None
    location_id: int | None = None
    override_sys_location: FlexibleBool | None = Field(default=None, alias="override_sysLocation")
    disabled: FlexibleBool | None = None
    disable_notify: FlexibleBool | None = None
    ignore: FlexibleBool | None = None
    poller_group: int | None = None
    port: int | None = None
    transport: str | None = None
    snmp_version: str | None = Field(default=None, alias="snmpver")
    community: str | None = None

    _extra_fields: dict[str, Any] = PrivateAttr(default_factory=dict)

    def set_display(self, display: str) -> DeviceUpdateRequest:
        self.display = display
        return self

    def set_notes(self, notes: str) -> DeviceUpdateRequest:
        self.notes = notes
        return self

    def set_purpose(self, purpose: str) -> DeviceUpdateRequest:
        self.purpose = purpose
        return self

    def set_hardware(self, hardware: str) -> DeviceUpdateRequest:
        self.hardware = hardware
        return self

    def set_os(self, os: str) -> DeviceUpdateRequest:
        self.os = os
        return self

    def set_location_id(self, location_id: int) -> DeviceUpdateRequest:
        self.location_id = location_id
        return self

    def set_override_sys_location(self, override: bool) -> DeviceUpdateRequest:
        self.override_sys_location = override
        return self

    def set_disabled(self, disabled: bool) -> DeviceUpdateRequest:
        self.disabled = disabled
        return self

    def set_disable_notify(self, disable_notify: bool) -> DeviceUpdateRequest:
        self.disable_notify = disable_notify
        return self

    def set_ignore(self, ignore: bool) -> DeviceUpdateRequest:
        self.ignore = ignore
        return self

    def set_poller_group(self, poller_group: int) -> DeviceUpdateRequest:
        self.poller_group = poller_group
        return self

    def set_port(self, port: int) -> DeviceUpdateRequest:
        self.port = port
        return self

    def set_transport(self, transport: str) -> DeviceUpdateRequest:
        self.transport = transport
        return self

    def set_snmp_version(self, snmp_version: str) -> DeviceUpdateRequest:
        self.snmp_version = snmp_version
        return self

    def set_community(self, community: str) -> DeviceUpdateRequest:
        self.community = community
        return self

    def set_field(self, name: str, value: Any) -> DeviceUpdateRequest:
        """Set any device column by its wire name."""
        self._extra_fields[name] = value
        return self

    def to_api_payload(self) -> dict[str, list[Any]]:
        values = self._set_values()
        for name, value in self._extra_fields.items():
            values[name] = encode_flexible_bool(value) if isinstance(value, bool) else value
        return {"field": list(values), "data": list(values.values())}


class DevicesQuery(PartialRequest):
    """Query parameters for listing devices."""

    type: str | None = None
    query: str | None = None
    order: str | None = None
    device_id: int | None = None
    display: str | None = None
    hostname: str | None = None
    ipv4: str | None = None
    ipv6: str | None = None
    location: str | None = None
    location_id: int | None = None
    mac: str | None = None
    os: str | None = None
    sys_name: str | None = Field(default=None, alias="sysName")

    def to_params(self) -> dict[str, str]:
        return {name: str(value) for name, value in self._set_values().items() if value is not None}


# Device groups
class DeviceGroup(LibreNMSModel):
    """A device group in LibreNMS."""

    id: int
    name: str = ""
    description: str | None = Field(default=None, alias="desc")
    pattern: str | None = None
    rules: RuleTree | None = None
    type: str = ""

    @field_validator("rules", mode="before")
    @classmethod
    def _decode_rules(cls, v):
        # Static groups come back with null or [] rules; some versions send a JSON string
        if v is None or v == [] or v == "":
            return None
        if isinstance(v, str):
            return json.loads(v)
        return v


class DeviceGroupCreateRequest(LibreNMSModel):
    """Request body for creating a device group.

    rules accepts a RuleTree, which is serialized to the JSON string the API
    stores, or an already serialized string.
    """

    name: str = Field(..., min_length=1)
    type: str
    description: str | None = Field(default=None, alias="desc")
    devices: list[int] | None = None
    rules: RulesJSON | None = None

    def to_api_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class DeviceGroupUpdateRequest(PartialRequest):
    """Partial update of a device group. Only set fields are sent."""

    name: str | None = None
    description: str | None = Field(default=None, alias="desc")
    devices: list[int] | None = None
    rules: RulesJSON | None = None
    type: str | None = None

    def set_name(self, name: str) -> DeviceGroupUpdateRequest:
        self.name = name
        return self

    def set_description(self, description: str) -> DeviceGroupUpdateRequest:
        self.description = description
        return self

    def set_devices(self, devices: list[int]) -> DeviceGroupUpdateRequest:
        self.devices = devices
        return self

    def set_rules(self, rules: RuleTree | str) -> DeviceGroupUpdateRequest:
        self.rules = rules
        return self

    def set_type(self, group_type: str) -> DeviceGroupUpdateRequest:
        self.type = group_type
        return self

    def to_api_payload(self) -> dict[str, Any]:
        return self._set_values()


# Locations
class Location(LibreNMSModel):
    """A location in LibreNMS. Coordinates may arrive as strings."""

    id: int
    name: str = Field(default="", alias="location")
    fixed_coordinates: FlexibleBool = False
    latitude: FlexibleFloat | None = Field(default=None, alias="lat")
    longitude: FlexibleFloat | None = Field(default=None, alias="lng")
    timestamp: str | None = None


class LocationCreateRequest(LibreNMSModel):
    """Request body for creating a location."""

    name: str = Field(..., min_length=1, alias="location")
    latitude: float = Field(..., ge=-90, le=90, alias="lat")
    longitude: float = Field(..., ge=-180, le=180, alias="lng")
    fixed_coordinates: FlexibleBool = False

    def to_api_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class LocationUpdateRequest(PartialRequest):
    """Partial update of a location.

    Only set the field(s) you want to update: patching fields whose value has
    not changed makes the API answer with HTTP 500.
    """

    name: str | None = Field(default=None, alias="location")
    fixed_coordinates: FlexibleBool | None = None
    latitude: float | None = Field(default=None, alias="lat")
    longitude: float | None = Field(default=None, alias="lng")

    def set_name(self, name: str) -> LocationUpdateRequest:
        self.name = name
        return self

    def set_fixed_coordinates(self, fixed: bool) -> LocationUpdateRequest:
        self.fixed_coordinates = fixed
        return self

    def set_latitude(self, latitude: float) -> LocationUpdateRequest:
        self.latitude = latitude
        return self

    def set_longitude(self, longitude: float) -> LocationUpdateRequest:
        self.longitude = longitude
        return self

    def to_api_payload(self) -> dict[str, Any]:
        return self._set_values()


# Services
class Service(LibreNMSModel):
    """A service check in LibreNMS."""

    id: int = Field(..., alias="service_id")
    device_id: int
    changed: int | None = Field(default=None, alias="service_changed")
    description: str | None = Field(default=None, alias="service_desc")
    disabled: FlexibleBool = Field(default=False, alias="service_disabled")
    ds: str | None = Field(default=None, alias="service_ds")
    ignore: FlexibleBool = Field(default=False, alias="service_ignore")
    ip: str | None = Field(default=None, alias="service_ip")
    message: str | None = Field(default=None, alias="service_message")
    name: str | None = Field(default=None, alias="service_name")
    param: str | None = Field(default=None, alias="service_param")
    status: int = Field(default=0, alias="service_status")  # see ServiceStatus
    template_id: int | None = Field(default=None, alias="service_template_id")
    type: str | None = Field(default=None, alias="service_type")


class ServiceCreateRequest(LibreNMSModel):
    """Request body for adding a service to a device."""

    type: str = Field(..., min_length=1)
    name: str | None = None
    description: str | None = Field(default=None, alias="desc")
    ip: str | None = None
    ignore: FlexibleBool | None = None
    param: str | None = None

    def to_api_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ServiceUpdateRequest(PartialRequest):
    """Partial update of a service.

    Only set the field(s) you want to update: patching fields whose value has
    not changed makes the API answer with HTTP 500.
    """

    name: str | None = Field(default=None, alias="service_name")
    description: str | None = Field(default=None, alias="service_desc")
    ip: str | None = Field(default=None, alias="service_ip")
    ignore: FlexibleBool | None = Field(default=None, alias="service_ignore")
    param: str | None = Field(default=None, alias="service_param")
    type: str | None = Field(default=None, alias="service_type")

    def set_name(self, name: str) -> ServiceUpdateRequest:
        self.name = name
        return self

    def set_description(self, description: str) -> ServiceUpdateRequest:
        self.description = description
        return self

    def set_ip(self, ip: str) -> ServiceUpdateRequest:
        self.ip = ip
        return self

    def set_ignore(self, ignore: bool) -> ServiceUpdateRequest:
        self.ignore = ignore
        return self

    def set_param(self, param: str) -> ServiceUpdateRequest:
        self.param = param
        return self

    def set_type(self, service_type: str) -> ServiceUpdateRequest:
        self.type = service_type
        return self

    def to_api_payload(self) -> dict[str, Any]:
        return self._set_values()


# Alerts
class Alert(LibreNMSModel):
    """An alert in LibreNMS."""

    id: int
    device_id: int
    rule_id: int
    alerted: FlexibleBool = False
    open: FlexibleBool = False
    hostname: str | None = None
    info: str | None = None
    name: str | None = None
    note: str | None = None
    notes: str | None = None
    procedure_url: str | None = Field(default=None, alias="proc")
    severity: str | None = None  # see AlertSeverity
    state: int = 0  # see AlertState
    timestamp: str | None = None


class AlertAckRequest(LibreNMSModel):
    """Request body for acknowledging an alert.

    With until_clear=False the alert fires again if it gets worse, better or
    otherwise changes.
    """

    note: str | None = None
    until_clear: bool = False

    def to_api_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class AlertsQuery(PartialRequest):
    """Query parameters for listing alerts.

    Only set fields are sent, so state=0 (ok) is still a valid filter.
    """

    order: str | None = None
    rule_id: int | None = Field(default=None, alias="alert_rule")
    severity: str | None = None
    state: int | None = None

    def set_order(self, order: str) -> AlertsQuery:
        self.order = order
        return self

    def set_rule_id(self, rule_id: int) -> AlertsQuery:
        self.rule_id = rule_id
        return self

    def set_severity(self, severity: str) -> AlertsQuery:
        self.severity = severity
        return self

    def set_state(self, state: int) -> AlertsQuery:
        self.state = state
        return self

    def to_params(self) -> dict[str, str]:
        return {name: str(value) for name, value in self._set_values().items() if value is not None}


# Alert rules
class AlertRule(LibreNMSModel):
    """An alert rule in LibreNMS."""

    id: int
    name: str = ""
    builder: str | None = None
    devices: list[int] = Field(default_factory=list)
    disabled: FlexibleBool = False
    extra: str | None = None
    groups: list[int] = Field(default_factory=list)
    invert_map: FlexibleBool = False
    locations: list[int] = Field(default_factory=list)
    notes: str | None = None
    procedure_url: str | None = Field(default=None, alias="proc")
    query: str | None = None
    rule: str | None = None
    severity: str | None = None

    def rule_tree(self) -> RuleTree | None:
        """Parse the query-builder JSON of this rule, if any."""
        if not self.builder:
            return None
        return RuleTree.model_validate_json(self.builder)


class AlertRuleCreateRequest(LibreNMSModel):
    """Request body for creating an alert rule.

    Groups and locations can be empty; an empty device list is sent as
    [-1], which the API reads as "all devices".
    """

    name: str = Field(..., min_length=1)
    builder: RulesJSON
    severity: str
    devices: list[int] = Field(default_factory=list)
    groups: list[int] = Field(default_factory=list)
    locations: list[int] = Field(default_factory=list)
    count: int | None = None  # "Max Alerts" in the UI
    delay: str | None = None
    disabled: FlexibleBool | None = None
    interval: str | None = None
    mute: bool | None = None
    notes: str | None = None
    procedure_url: str | None = Field(default=None, alias="proc")
    query: str | None = None
    rule: str | None = None

    def to_api_payload(self) -> dict[str, Any]:
        payload = self.model_dump(by_alias=True, exclude_none=True)
        if not payload["devices"]:
            payload["devices"] = [ALL_DEVICES]
        return payload


class AlertRuleUpdateRequest(AlertRuleCreateRequest):
    """Request body for updating an alert rule; rule_id is required."""

    rule_id: int = 0


# Response envelopes
class DeviceResponse(BaseResponse):
    devices: list[Device] = Field(default_factory=list)


class DeviceGroupResponse(BaseResponse):
    groups: list[DeviceGroup] = Field(default_factory=list)


class DeviceGroupCreateResponse(BaseResponse):
    id: int | None = None


class LocationResponse(BaseResponse):
    location: Location | None = Field(default=None, alias="get_location")


class LocationsResponse(BaseResponse):
    locations: list[Location] = Field(default_factory=list)


class NestedServiceResponse(BaseResponse):
    """Services as the API delivers them: a list of lists of services.

    Every service arrives in the first inner list, which also makes the
    reported count always 1. Flattened into ServiceResponse before use.
    """

    services: list[list[Service]] | None = None


class ServiceResponse(BaseResponse):
    services: list[Service] = Field(default_factory=list)


class AlertsResponse(BaseResponse):
    alerts: list[Alert] = Field(default_factory=list)


class AlertRuleResponse(BaseResponse):
    rules: list[AlertRule] = Field(default_factory=list)
