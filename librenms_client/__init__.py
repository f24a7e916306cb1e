"""Async client for the LibreNMS REST API."""

from .constants import (
    ALL_DEVICES,
    API_DEFAULTS,
    API_VERSION,
    AlertSeverity,
    AlertState,
    DeviceGroupType,
    PortAssociationMode,
    ServiceStatus,
)
from .infrastructure.errors import (
    LibreNMSAPIError,
    LibreNMSConfigError,
    LibreNMSConnectionError,
    LibreNMSDecodeError,
    LibreNMSError,
    LibreNMSTimeoutError,
    LibreNMSValidationError,
)
from .librenms_api import LibreNMSAPI
from .models import (
    Alert,
    AlertAckRequest,
    AlertRule,
    AlertRuleCreateRequest,
    AlertRuleResponse,
    AlertRuleUpdateRequest,
    AlertsQuery,
    AlertsResponse,
    BaseResponse,
    Device,
    DeviceCreateRequest,
    DeviceGroup,
    DeviceGroupCreateRequest,
    DeviceGroupCreateResponse,
    DeviceGroupResponse,
    DeviceGroupUpdateRequest,
    DeviceResponse,
    DevicesQuery,
    DeviceUpdateRequest,
    FlexibleBool,
    FlexibleFloat,
    Location,
    LocationCreateRequest,
    LocationResponse,
    LocationsResponse,
    LocationUpdateRequest,
    RuleNode,
    RuleTree,
    Service,
    ServiceCreateRequest,
    ServiceResponse,
    ServiceUpdateRequest,
)

__all__ = [
    "LibreNMSAPI",
    # constants
    "ALL_DEVICES",
    "API_DEFAULTS",
    "API_VERSION",
    "AlertSeverity",
    "AlertState",
    "DeviceGroupType",
    "PortAssociationMode",
    "ServiceStatus",
    # errors
    "LibreNMSError",
    "LibreNMSAPIError",
    "LibreNMSConfigError",
    "LibreNMSConnectionError",
    "LibreNMSDecodeError",
    "LibreNMSTimeoutError",
    "LibreNMSValidationError",
    # models
    "FlexibleBool",
    "FlexibleFloat",
    "RuleNode",
    "RuleTree",
    "BaseResponse",
    "Device",
    "DeviceCreateRequest",
    "DeviceUpdateRequest",
    "DevicesQuery",
    "DeviceResponse",
    "DeviceGroup",
    "DeviceGroupCreateRequest",
    "DeviceGroupUpdateRequest",
    "DeviceGroupResponse",
    "DeviceGroupCreateResponse",
    "Location",
    "LocationCreateRequest",
    "LocationUpdateRequest",
    "LocationResponse",
    "LocationsResponse",
    "Service",
    "ServiceCreateRequest",
    "ServiceUpdateRequest",
    "ServiceResponse",
    "Alert",
    "AlertAckRequest",
    "AlertsQuery",
    "AlertsResponse",
    "AlertRule",
    "AlertRuleCreateRequest",
    "AlertRuleUpdateRequest",
    "AlertRuleResponse",
]
