"""Secure credential storage for FTP Publisher.

Uses the system keyring (Windows Credential Manager, macOS Keychain,
Linux Secret Service) so FTP passwords never land in the hosts file.
"""

import logging
from typing import Optional

import keyring
from keyring.errors import KeyringError


logger = logging.getLogger("ftp_publisher.credentials")


class CredentialManager:
    """Secure credential storage using system keyring."""

    SERVICE_NAME = "ftp-publisher"

    def __init__(self, service_name: str = SERVICE_NAME):
        self._service_name = service_name

    @property
    def service_name(self) -> str:
        """Keyring service the passwords are stored under."""
        return self._service_name

    def _make_key(self, host: str, username: str) -> str:
        """
        Create a unique key for the credential.

        Args:
            host: FTP hostname
            username: FTP username

        Returns:
            Unique key string
        """
        return f"{host}:{username}"

    def save_password(self, host: str, username: str, password: str) -> bool:
        """
        Save FTP password securely.

        Args:
            host: FTP hostname
            username: FTP username
            password: Password to save

        Returns:
            True if saved successfully, False otherwise
        """
        try:
            keyring.set_password(self._service_name, self._make_key(host, username), password)
            return True
        except KeyringError as e:
            logger.warning(f"Could not save password for {username} on {host}: {e}")
            return False

    def get_password(self, host: str, username: str) -> Optional[str]:
        """
        Retrieve saved password.

        Args:
            host: FTP hostname
            username: FTP username

        Returns:
            Password string or None if not found
        """
        try:
            return keyring.get_password(self._service_name, self._make_key(host, username))
        except KeyringError as e:
            logger.warning(f"Could not read password for {username} on {host}: {e}")
            return None

    def delete_password(self, host: str, username: str) -> bool:
        """
        Remove saved password.

        Args:
            host: FTP hostname
            username: FTP username

        Returns:
            True if deleted successfully, False otherwise
        """
        try:
            keyring.delete_password(self._service_name, self._make_key(host, username))
            return True
        except KeyringError:
            return False

    def has_password(self, host: str, username: str) -> bool:
        """True if a password is saved for this host and user."""
        return self.get_password(host, username) is not None
