"""Infrastructure layer for the LibreNMS API client.

This package contains core infrastructure components:
- Error definitions (errors)
- Request/response envelope pipeline (api)
- Collection normalization (normalization)

Only the errors are re-exported here; api and normalization depend on the
models, which themselves depend on the errors.
"""

from .errors import (
    LibreNMSAPIError,
    LibreNMSConfigError,
    LibreNMSConnectionError,
    LibreNMSDecodeError,
    LibreNMSError,
    LibreNMSTimeoutError,
    LibreNMSValidationError,
)

__all__ = [
    "LibreNMSError",
    "LibreNMSConfigError",
    "LibreNMSConnectionError",
    "LibreNMSTimeoutError",
    "LibreNMSAPIError",
    "LibreNMSDecodeError",
    "LibreNMSValidationError",
]
