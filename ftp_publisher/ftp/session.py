"""Live FTP session for FTP Publisher.

An FTPSession owns one authenticated client plus the absolute remote
root resolved when it was created. Use it as a context manager so the
connection is closed on every exit path.
"""

import logging
from types import TracebackType
from typing import Optional, Type

from ftp_publisher.ftp.client import FTPClient
from ftp_publisher.ftp.exceptions import FTPNotConnectedError


logger = logging.getLogger("ftp_publisher.session")


class FTPSession:
    """
    Authenticated FTP connection anchored at an absolute remote root.

    Usage:
        with host.create_session(context) as session:
            session.client.change_working_directory("artifacts")
    """

    def __init__(self, client: FTPClient, absolute_remote_root: str, host_name: str = ""):
        """
        Initialize the session.

        Args:
            client: Connected and logged in client, owned by this session
            absolute_remote_root: Directory later relative operations start from
            host_name: Host configuration name, used in log messages
        """
        if absolute_remote_root is None:
            raise ValueError("absolute_remote_root is required")
        self._client = client
        self._absolute_remote_root = absolute_remote_root
        self._host_name = host_name
        self._closed = False

    @property
    def absolute_remote_root(self) -> str:
        """Remote directory the session is anchored to."""
        return self._absolute_remote_root

    @property
    def host_name(self) -> str:
        """Name of the host configuration that created this session."""
        return self._host_name

    @property
    def is_closed(self) -> bool:
        """True once close() has been called."""
        return self._closed

    @property
    def client(self) -> FTPClient:
        """
        Get the underlying client.

        Raises:
            FTPNotConnectedError: If the session was closed
        """
        if self._closed:
            raise FTPNotConnectedError("Session access")
        return self._client

    def close(self) -> None:
        """Disconnect the client. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        try:
            self._client.disconnect()
        except Exception as e:
            logger.warning(f"Error disconnecting from '{self._host_name}': {e}")

    def __enter__(self) -> "FTPSession":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return (
            f"FTPSession(host={self._host_name!r}, "
            f"absolute_remote_root={self._absolute_remote_root!r}, {state})"
        )
