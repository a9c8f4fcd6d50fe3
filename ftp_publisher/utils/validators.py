"""Input validators for FTP Publisher.

Provides validation functions for host configuration fields. They are
pure: no network access, and values may arrive as strings straight from
a form or a command line.
"""

from typing import Any, List, Optional, Tuple


def _parse_int(value: Any) -> Optional[int]:
    """Parse an int from an int or numeric string, None if impossible."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def validate_name(name: str) -> Tuple[bool, Optional[str]]:
    """
    Validate a host configuration name.

    Args:
        name: Configuration name

    Returns:
        Tuple of (is_valid, error_message)
    """
    if _is_blank(name):
        return False, "Name is required"
    return True, None


def validate_hostname(hostname: str) -> Tuple[bool, Optional[str]]:
    """
    Validate a hostname.

    Args:
        hostname: Hostname or IP address

    Returns:
        Tuple of (is_valid, error_message)
    """
    if _is_blank(hostname):
        return False, "Hostname is required"
    return True, None


def validate_port(port: Any) -> Tuple[bool, Optional[str]]:
    """
    Validate a port number.

    Args:
        port: Port number, as int or string

    Returns:
        Tuple of (is_valid, error_message)
    """
    if _is_blank(port):
        return False, "Port is required"

    value = _parse_int(port)
    if value is None:
        return False, "Port must be a number"

    if value < 1 or value > 65535:
        return False, f"Port must be between 1 and 65535, got {value}"

    return True, None


def validate_timeout(timeout: Any) -> Tuple[bool, Optional[str]]:
    """
    Validate a timeout value in seconds.

    Args:
        timeout: Timeout in seconds, as int or string (0 disables it)

    Returns:
        Tuple of (is_valid, error_message)
    """
    if _is_blank(timeout):
        return False, "Timeout is required"

    value = _parse_int(timeout)
    if value is None:
        return False, "Timeout must be a number"

    if value < 0:
        return False, f"Timeout must not be negative, got {value}"

    return True, None


def validate_host_configuration(
    name: Any,
    hostname: Any,
    port: Any,
    timeout: Any
) -> List[str]:
    """
    Run every field validator.

    Returns:
        Error messages, empty if all fields are valid
    """
    errors = []
    for validator, value in (
        (validate_name, name),
        (validate_hostname, hostname),
        (validate_port, port),
        (validate_timeout, timeout),
    ):
        is_valid, error = validator(value)
        if not is_valid:
            errors.append(error)
    return errors
