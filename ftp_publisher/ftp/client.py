"""FTP client capability for FTP Publisher.

Defines the FTPClient interface that host configurations drive, and
FTPLibClient, the default implementation delegating to ftplib. Test
doubles and alternate transports implement FTPClient directly.
"""

import logging
from abc import ABC, abstractmethod
from ftplib import FTP, Error, error_perm, error_temp
from typing import Optional


logger = logging.getLogger("ftp_publisher.client")


# FTP reply code sent by a server ready to accept a new user
SERVICE_READY = 220


def parse_reply_code(response: str) -> int:
    """
    Extract the three digit reply code from a server response.

    Args:
        response: Raw response line, e.g. "220 Welcome"

    Returns:
        Reply code, or 0 if the response does not start with one
    """
    code = str(response)[:3]
    if len(code) == 3 and code.isdigit():
        return int(code)
    return 0


def _socket_timeout(seconds: int) -> Optional[float]:
    """Map a configured timeout to a socket timeout (0 means none)."""
    return float(seconds) if seconds else None


class FTPClient(ABC):
    """Primitive FTP operations a host session is built on."""

    @abstractmethod
    def set_default_timeout(self, seconds: int) -> None:
        """Set the control connection timeout, applied on connect."""

    @abstractmethod
    def set_data_timeout(self, seconds: int) -> None:
        """Set the timeout used for data transfer connections."""

    @abstractmethod
    def connect(self, host: str, port: int) -> None:
        """Open the control connection."""

    @abstractmethod
    def get_reply_code(self) -> int:
        """Reply code of the last server response."""

    @abstractmethod
    def enter_local_active_mode(self) -> None:
        """Use active data connections (server connects back)."""

    @abstractmethod
    def enter_local_passive_mode(self) -> None:
        """Use passive data connections (client connects to server)."""

    @abstractmethod
    def login(self, username: str, password: str) -> bool:
        """Authenticate, returning False if the server rejects the credentials."""

    @abstractmethod
    def change_working_directory(self, path: str) -> bool:
        """Change directory, returning False if the server refuses."""

    @abstractmethod
    def print_working_directory(self) -> str:
        """Current directory as reported by the server."""

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """True while the control connection is open."""

    @abstractmethod
    def disconnect(self) -> None:
        """Close the connection. Must not raise if already closed."""


class FTPLibClient(FTPClient):
    """FTPClient backed by ftplib.FTP."""

    def __init__(self, ftp: Optional[FTP] = None):
        """
        Initialize the client.

        Args:
            ftp: Optional ftplib instance, a fresh one is created if omitted
        """
        self._ftp = ftp if ftp is not None else FTP()
        self._ftp.set_debuglevel(0)
        self._default_timeout: Optional[float] = None
        self._data_timeout: Optional[float] = None
        self._reply_code = 0

    @property
    def ftp(self) -> FTP:
        """The underlying ftplib object."""
        return self._ftp

    @property
    def is_connected(self) -> bool:
        return self._ftp.sock is not None

    def set_default_timeout(self, seconds: int) -> None:
        self._default_timeout = _socket_timeout(seconds)

    def set_data_timeout(self, seconds: int) -> None:
        self._data_timeout = _socket_timeout(seconds)

    def connect(self, host: str, port: int) -> None:
        """
        Open the control connection and read the greeting.

        A greeting rejected by the server (4xx/5xx) is recorded as the
        reply code rather than raised, so the caller can inspect it.
        Transport failures (OSError, socket.timeout) propagate.
        """
        try:
            welcome = self._ftp.connect(host=host, port=port, timeout=self._default_timeout)
            self._reply_code = parse_reply_code(welcome)
        except Error as e:
            self._reply_code = parse_reply_code(str(e))
            logger.debug(f"Server rejected connection to {host}:{port}: {e}")

        # ftplib uses FTP.timeout for data connections opened after connect
        self._ftp.timeout = self._data_timeout

    def get_reply_code(self) -> int:
        return self._reply_code

    def enter_local_active_mode(self) -> None:
        self._ftp.set_pasv(False)

    def enter_local_passive_mode(self) -> None:
        self._ftp.set_pasv(True)

    def login(self, username: str, password: str) -> bool:
        """Log in; ftplib substitutes anonymous/anonymous@ for a blank username."""
        try:
            response = self._ftp.login(user=username, passwd=password)
        except (error_perm, error_temp) as e:
            self._reply_code = parse_reply_code(str(e))
            return False
        self._reply_code = parse_reply_code(response)
        return True

    def change_working_directory(self, path: str) -> bool:
        try:
            response = self._ftp.cwd(path)
        except (error_perm, error_temp) as e:
            self._reply_code = parse_reply_code(str(e))
            logger.debug(f"CWD {path} refused: {e}")
            return False
        self._reply_code = parse_reply_code(response)
        return True

    def print_working_directory(self) -> str:
        return self._ftp.pwd()

    def disconnect(self) -> None:
        """Close FTP connection gracefully."""
        if self._ftp.sock is None:
            return
        try:
            self._ftp.quit()
        except Exception as e:
            # Best effort close
            logger.debug(f"QUIT failed, closing socket: {e}")
            try:
                self._ftp.close()
            except OSError as close_error:
                logger.debug(f"Socket close failed: {close_error}")
