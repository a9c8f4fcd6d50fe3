"""Host configuration persistence for FTP Publisher.

Host configurations are saved as JSON; their passwords go to the system
keyring through CredentialManager and never touch the file.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ftp_publisher.config.credentials import CredentialManager
from ftp_publisher.config.paths import get_hosts_path
from ftp_publisher.config.registry import HostConfigurationRegistry
from ftp_publisher.ftp.exceptions import FTPValidationError
from ftp_publisher.ftp.host import FTPHostConfiguration


logger = logging.getLogger("ftp_publisher.store")


class HostConfigurationStore:
    """Loads and saves a HostConfigurationRegistry."""

    def __init__(
        self,
        hosts_path: Optional[Path] = None,
        credentials: Optional[CredentialManager] = None
    ):
        """
        Initialize the store.

        Args:
            hosts_path: Optional custom path, defaults to platform standard
            credentials: Password storage, defaults to the system keyring
        """
        self._hosts_path = hosts_path or get_hosts_path()
        self._credentials = credentials or CredentialManager()

    @property
    def hosts_path(self) -> Path:
        """Path to the hosts file."""
        return self._hosts_path

    def load(self) -> HostConfigurationRegistry:
        """
        Load host configurations from disk.

        Entries that fail validation are skipped with a warning.

        Returns:
            Registry (empty if the file is missing or unreadable)
        """
        registry = HostConfigurationRegistry()
        if not self._hosts_path.exists():
            return registry

        try:
            with open(self._hosts_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Ignoring unreadable hosts file {self._hosts_path}: {e}")
            return registry

        entries = data.get("hosts", []) if isinstance(data, dict) else None
        if not isinstance(entries, list):
            logger.warning(f"Ignoring malformed hosts file {self._hosts_path}")
            return registry

        for entry in entries:
            if not isinstance(entry, dict):
                logger.warning(f"Skipping malformed host entry {entry!r}")
                continue
            password = self._credentials.get_password(
                entry.get("hostname", ""), entry.get("username", "")
            )
            try:
                host = FTPHostConfiguration.from_dict(entry, password=password or "")
                registry.add(host)
            except (FTPValidationError, TypeError) as e:
                logger.warning(f"Skipping host entry {entry.get('name')!r}: {e}")

        return registry

    def save(self, registry: HostConfigurationRegistry) -> None:
        """
        Persist host configurations to disk and passwords to the keyring.

        Args:
            registry: Configurations to save
        """
        self._hosts_path.parent.mkdir(parents=True, exist_ok=True)

        for host in registry:
            password = host.password.get_secret_value()
            if password:
                self._credentials.save_password(host.hostname, host.username, password)

        data = {"hosts": [host.to_dict() for host in registry]}
        with open(self._hosts_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def forget(self, registry: HostConfigurationRegistry, name: str) -> FTPHostConfiguration:
        """
        Remove a host from the registry, its saved password and the file.

        Raises:
            UnknownHostError: If no configuration has that name
        """
        host = registry.remove(name)
        self._credentials.delete_password(host.hostname, host.username)
        self.save(registry)
        return host
