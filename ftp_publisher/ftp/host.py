"""FTP host configuration for FTP Publisher.

Provides FTPHostConfiguration, which turns a named set of connection
parameters into an authenticated FTPSession positioned at its absolute
remote root, plus the connection check used to check parameters before
they are saved.
"""

import logging
import socket
from dataclasses import dataclass, field
from ftplib import Error
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from pydantic import SecretStr

from ftp_publisher.ftp.client import SERVICE_READY, FTPClient, FTPLibClient
from ftp_publisher.ftp.exceptions import (
    FTPAuthenticationError,
    FTPConnectionError,
    FTPDirectoryError,
    FTPError,
    FTPTimeoutError,
    FTPValidationError,
)
from ftp_publisher.ftp.session import FTPSession
from ftp_publisher.utils.validators import validate_host_configuration


logger = logging.getLogger("ftp_publisher.host")


DEFAULT_PORT = 21
DEFAULT_TIMEOUT = 300

# Name given to the throwaway configuration built by check_connection
CHECK_NAME = "connection-test"

REDACTED = "********"


@dataclass
class BuildContext:
    """Build information passed through to session creation for logging."""
    build_id: str = ""
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("ftp_publisher.build")
    )
    workspace: Optional[Path] = None
    env: Dict[str, str] = field(default_factory=dict)


@dataclass
class ConnectionCheckResult:
    """Outcome of a connection check."""
    success: bool
    message: str

    def to_dict(self) -> dict:
        return {"success": self.success, "message": self.message}


def _disconnect_quietly(client: FTPClient, host_name: str) -> None:
    """Disconnect without letting a secondary error replace the primary one."""
    try:
        client.disconnect()
    except Exception as e:
        logger.warning(f"Error disconnecting from '{host_name}': {e}")


@dataclass(frozen=True)
class FTPHostConfiguration:
    """Connection parameters and remote root policy for one FTP host."""

    name: str
    hostname: str
    username: str = ""
    password: SecretStr = field(default_factory=lambda: SecretStr(""))
    remote_root_dir: Optional[str] = None
    port: int = DEFAULT_PORT
    timeout: int = DEFAULT_TIMEOUT
    use_active_data: bool = False
    client_factory: Callable[[], FTPClient] = field(
        default=FTPLibClient, compare=False, repr=False
    )

    def __post_init__(self):
        """Validate configuration after initialization."""
        errors = validate_host_configuration(self.name, self.hostname, self.port, self.timeout)
        if errors:
            raise FTPValidationError(errors)

        # Form and CLI values arrive as strings
        object.__setattr__(self, "port", int(self.port))
        object.__setattr__(self, "timeout", int(self.timeout))
        if not isinstance(self.password, SecretStr):
            object.__setattr__(self, "password", SecretStr(self.password or ""))

    def create_session(self, context: Optional[BuildContext] = None) -> FTPSession:
        """
        Connect, log in and resolve the absolute remote root.

        Args:
            context: Build information used for log output

        Returns:
            Open FTPSession owned by the caller

        Raises:
            FTPConnectionError: If the server is unreachable or not ready
            FTPAuthenticationError: If login fails
            FTPDirectoryError: If the configured remote root cannot be entered
        """
        context = context or BuildContext()
        build_log = context.logger

        client = self.client_factory()
        try:
            try:
                self._connect_and_login(client, build_log)
                absolute_remote_root = self._resolve_remote_root(client, build_log)
            except socket.timeout as e:
                raise FTPTimeoutError(self.hostname, self.port, self.timeout, e) from e
            except (Error, EOFError, OSError) as e:
                raise FTPConnectionError(self.hostname, self.port, original_error=e) from e
        except BaseException:
            _disconnect_quietly(client, self.name)
            raise

        if context.build_id:
            build_log.debug(f"Session for build {context.build_id} opened on '{self.name}'")
        return FTPSession(client, absolute_remote_root, host_name=self.name)

    create_client = create_session

    def test_connection(self) -> ConnectionCheckResult:
        """
        Connect and log in without resolving the remote root.

        Never raises; the connection is always closed afterwards.

        Returns:
            ConnectionCheckResult with a message safe to show to a user
        """
        client = None
        try:
            client = self.client_factory()
            self._connect_and_login(client, logger)
        except FTPError as e:
            return ConnectionCheckResult(False, self._redact(str(e)))
        except Exception as e:
            logger.debug(f"Unexpected error checking '{self.name}'", exc_info=True)
            return ConnectionCheckResult(
                False,
                self._redact(f"Failed to connect to {self.hostname}:{self.port}: {e}")
            )
        finally:
            if client is not None:
                _disconnect_quietly(client, self.name)

        return ConnectionCheckResult(True, f"Connected to {self.hostname}:{self.port} as '{self._login_name}'")

    def _connect_and_login(self, client: FTPClient, build_log: logging.Logger) -> None:
        """Apply timeouts, connect, check the greeting, pick the data mode and log in."""
        client.set_default_timeout(self.timeout)
        client.set_data_timeout(self.timeout)

        build_log.info(f"Connecting to {self.hostname}:{self.port}")
        try:
            client.connect(self.hostname, self.port)
        except socket.timeout as e:
            raise FTPTimeoutError(self.hostname, self.port, self.timeout, e) from e
        except OSError as e:
            raise FTPConnectionError(self.hostname, self.port, original_error=e) from e

        reply_code = client.get_reply_code()
        if reply_code != SERVICE_READY:
            raise FTPConnectionError(self.hostname, self.port, reply_code=reply_code)

        if self.use_active_data:
            build_log.debug("Using active data connections")
            client.enter_local_active_mode()
        else:
            build_log.debug("Using passive data connections")
            client.enter_local_passive_mode()

        if not client.login(self.username, self.password.get_secret_value()):
            raise FTPAuthenticationError(self.hostname, self.username)
        build_log.info(f"Logged in to {self.hostname} as '{self._login_name}'")

    @property
    def _login_name(self) -> str:
        # ftplib sends USER anonymous when no username is configured
        return self.username or "anonymous"

    def _resolve_remote_root(self, client: FTPClient, build_log: logging.Logger) -> str:
        """
        Work out the directory the session is anchored to.

        A blank remote root means "wherever the server put us". Anything
        else is entered and used verbatim, even when relative.
        """
        raw_root = self.remote_root_dir
        if raw_root is None or not raw_root.strip():
            absolute_remote_root = client.print_working_directory()
        else:
            if not client.change_working_directory(raw_root):
                raise FTPDirectoryError(raw_root, self.hostname)
            absolute_remote_root = raw_root

        build_log.info(f"Remote root on '{self.name}' is {absolute_remote_root}")
        return absolute_remote_root

    def _redact(self, message: str) -> str:
        password = self.password.get_secret_value()
        if password:
            message = message.replace(password, REDACTED)
        return message

    def to_dict(self) -> dict:
        """Convert to a dictionary for persistence. The password is not included."""
        return {
            "name": self.name,
            "hostname": self.hostname,
            "username": self.username,
            "remote_root_dir": self.remote_root_dir,
            "port": self.port,
            "timeout": self.timeout,
            "use_active_data": self.use_active_data,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], password: str = "") -> "FTPHostConfiguration":
        """Create a configuration from a dictionary, ignoring unknown keys."""
        valid_fields = {"name", "hostname", "username", "remote_root_dir",
                        "port", "timeout", "use_active_data"}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        return cls(password=SecretStr(password or ""), **filtered)


def check_connection(
    hostname: str,
    port: Any = DEFAULT_PORT,
    username: str = "",
    password: str = "",
    timeout: Any = DEFAULT_TIMEOUT,
    use_active_data: bool = False,
    client_factory: Callable[[], FTPClient] = FTPLibClient,
) -> ConnectionCheckResult:
    """
    Check that a host accepts the given parameters, before saving them.

    Port and timeout may be strings, as submitted by a form.

    Returns:
        ConnectionCheckResult; never raises
    """
    errors = validate_host_configuration(CHECK_NAME, hostname, port, timeout)
    if errors:
        return ConnectionCheckResult(False, "; ".join(errors))

    host = FTPHostConfiguration(
        name=CHECK_NAME,
        hostname=hostname,
        username=username,
        password=SecretStr(password or ""),
        port=port,
        timeout=timeout,
        use_active_data=use_active_data,
        client_factory=client_factory,
    )
    return host.test_connection()
