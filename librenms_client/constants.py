"""Constants and Enums for the LibreNMS API client."""

from __future__ import annotations

from enum import Enum, IntEnum

from pydantic import BaseModel, Field

# API root, relative to the configured base URL
API_VERSION = "v0"
API_ROOT = f"api/{API_VERSION}/"

# Header carrying the static API token
AUTH_HEADER = "X-Auth-Token"

# Resource endpoints (relative to API_ROOT)
DEVICE_ENDPOINT = "devices"
DEVICE_GROUP_ENDPOINT = "devicegroups"
LOCATION_ENDPOINT = "locations"
SERVICE_ENDPOINT = "services"
ALERT_ENDPOINT = "alerts"
ALERT_RULE_ENDPOINT = "rules"

# Alert rules use -1 in the device list to mean "every device"
ALL_DEVICES = -1


class AlertState(IntEnum):
    """Alert states as reported by the alerts endpoint."""

    OK = 0
    ALERT = 1
    ACK = 2


class AlertSeverity(str, Enum):
    """Alert and alert rule severities."""

    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"


class ServiceStatus(IntEnum):
    """Service check status codes.

    The platform follows Nagios plugin conventions for these.
    """

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


class DeviceGroupType(str, Enum):
    """Device group membership types."""

    STATIC = "static"
    DYNAMIC = "dynamic"


class PortAssociationMode(IntEnum):
    """Port association modes accepted when adding a device."""

    IF_INDEX = 1
    IF_NAME = 2
    IF_DESCR = 3
    IF_ALIAS = 4


class APIDefaults(BaseModel):
    """Default values for client configuration.

    Immutable configuration values shared by every client instance.
    Per-client settings (session, logger, timeout) are passed to
    LibreNMSAPI directly.
    """

    model_config = {"frozen": True}

    BASE_URL_FORMAT: str = Field(
        default="http[s]://<host>[:port]/",
        description="Accepted shape of the base URL given to the client",
    )
    ACCEPT: str = Field(default="application/json", description="Accept header sent with every request")
    CONTENT_TYPE: str = Field(
        default="application/json",
        description="Content-Type header sent with requests carrying a body",
    )


# Create a default instance for easy access
API_DEFAULTS = APIDefaults()
