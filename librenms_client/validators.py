"""Input validation functions for the LibreNMS API client.

This module provides validation functions to ensure correct input before
anything is sent to the API. It includes validation for:
- The base URL given to the client (must be the bare server root)
- Resource identifiers required by update operations

Validators return a (is_valid, error_message) tuple; the client decides
which exception to raise.
"""

from __future__ import annotations

from urllib.parse import urlsplit


def normalize_base_url(base_url: str) -> str:
    """Append the trailing slash the base URL is expected to carry.

    Example:
        >>> normalize_base_url("http://librenms.local:8000")
        'http://librenms.local:8000/'
        >>> normalize_base_url("http://librenms.local:8000/")
        'http://librenms.local:8000/'
    """
    base_url = base_url.strip()
    if not base_url.endswith("/"):
        base_url += "/"
    return base_url


def validate_base_url(base_url: str) -> tuple[bool, str | None]:
    """Validate a base URL in the format 'http[s]://<host>[:port]/'.

    The API version root is appended by the client, so the URL must not carry
    any path of its own. A missing trailing slash is tolerated.

    Args:
        base_url: Base URL of the LibreNMS server.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid, otherwise contains description of the error.

    Example:
        >>> validate_base_url("https://librenms.example.com/")
        (True, None)
        >>> validate_base_url("http://librenms.local:8000")
        (True, None)
        >>> validate_base_url("http://librenms.local:8000/api")
        (False, "Base URL must not include a path, got '/api/'")
        >>> validate_base_url("librenms.local:8000/")
        (False, "Base URL scheme must be http or https")
    """
    if not base_url or not base_url.strip():
        return False, "Base URL cannot be empty"

    try:
        parts = urlsplit(normalize_base_url(base_url))
        port = parts.port
    except ValueError as err:
        return False, f"Base URL could not be parsed: {err}"

    if parts.scheme not in ("http", "https"):
        return False, "Base URL scheme must be http or https"

    if not parts.hostname:
        return False, "Base URL must include a host"

    if port is not None and port == 0:
        return False, "Base URL port must be between 1 and 65535"

    if parts.path != "/":
        return False, f"Base URL must not include a path, got '{parts.path}'"

    if parts.query or parts.fragment:
        return False, "Base URL must not include a query or fragment"

    return True, None


def validate_rule_id(rule_id: int | None) -> tuple[bool, str | None]:
    """Validate the alert rule ID required when updating a rule.

    Example:
        >>> validate_rule_id(7)
        (True, None)
        >>> validate_rule_id(0)
        (False, "rule ID is required for updating an alert rule")
    """
    if rule_id is None or rule_id < 1:
        return False, "rule ID is required for updating an alert rule"

    return True, None
