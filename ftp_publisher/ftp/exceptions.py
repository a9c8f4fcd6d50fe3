"""FTP-specific exceptions for FTP Publisher.

Custom exception hierarchy for host sessions to provide clear error
handling and messages that name the host, user or directory involved
without ever echoing a password.
"""

from typing import List, Optional


class FTPError(Exception):
    """Base exception for all FTP-related errors."""

    def __init__(self, message: str, original_error: Exception = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self) -> str:
        if self.original_error:
            return f"{self.message}: {self.original_error}"
        return self.message


class FTPConnectionError(FTPError):
    """Failed to establish FTP connection, or the server refused it."""

    def __init__(
        self,
        host: str,
        port: int,
        reply_code: Optional[int] = None,
        original_error: Exception = None
    ):
        self.host = host
        self.port = port
        self.reply_code = reply_code
        message = f"Failed to connect to {host}:{port}"
        if reply_code is not None:
            message = f"{message} (server replied {reply_code})"
        super().__init__(message, original_error)


class FTPTimeoutError(FTPConnectionError):
    """Connection attempt timed out."""

    def __init__(self, host: str, port: int, timeout: int, original_error: Exception = None):
        self.timeout = timeout
        super().__init__(host, port, original_error=original_error)
        self.message = f"Connection to {host}:{port} timed out after {timeout} seconds"


class FTPAuthenticationError(FTPError):
    """FTP authentication (login) failed."""

    def __init__(self, host: str, username: str, original_error: Exception = None):
        self.host = host
        self.username = username
        message = f"Authentication failed for user '{username}' on {host}"
        super().__init__(message, original_error)


class FTPDirectoryError(FTPError):
    """Configured remote root directory could not be entered."""

    def __init__(self, path: str, host: str, original_error: Exception = None):
        self.path = path
        self.host = host
        message = f"Failed to change to remote root directory '{path}' on {host}"
        super().__init__(message, original_error)


class FTPNotConnectedError(FTPError):
    """Operation attempted without active FTP connection."""

    def __init__(self, operation: str = "Operation"):
        message = f"{operation} requires an active FTP connection"
        super().__init__(message)


class FTPValidationError(FTPError, ValueError):
    """Host configuration failed validation before any network access."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        message = "Invalid host configuration: " + "; ".join(self.errors)
        super().__init__(message)


class UnknownHostError(FTPError, KeyError):
    """No host configuration registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        message = f"No host configuration named '{name}'"
        super().__init__(message)

    def __str__(self) -> str:
        return self.message
