"""Host configuration registry for FTP Publisher.

The registry is a plain container owned by the caller and passed to
whatever needs to look hosts up by name.
"""

from typing import Dict, Iterator, List

from ftp_publisher.ftp.exceptions import FTPValidationError, UnknownHostError
from ftp_publisher.ftp.host import FTPHostConfiguration


class HostConfigurationRegistry:
    """Named FTP host configurations."""

    def __init__(self, hosts: List[FTPHostConfiguration] = None):
        self._hosts: Dict[str, FTPHostConfiguration] = {}
        for host in hosts or []:
            self.add(host)

    def add(self, host: FTPHostConfiguration, replace: bool = False) -> None:
        """
        Register a host configuration.

        Args:
            host: Configuration to add
            replace: If True, overwrite a configuration with the same name

        Raises:
            FTPValidationError: If the name is taken and replace is False
        """
        if host.name in self._hosts and not replace:
            raise FTPValidationError([f"Name '{host.name}' is already in use"])
        self._hosts[host.name] = host

    def get(self, name: str) -> FTPHostConfiguration:
        """
        Look up a configuration by name.

        Raises:
            UnknownHostError: If no configuration has that name
        """
        try:
            return self._hosts[name]
        except KeyError:
            raise UnknownHostError(name) from None

    def remove(self, name: str) -> FTPHostConfiguration:
        """
        Remove and return a configuration.

        Raises:
            UnknownHostError: If no configuration has that name
        """
        host = self.get(name)
        del self._hosts[name]
        return host

    @property
    def names(self) -> List[str]:
        """Registered names, in insertion order."""
        return list(self._hosts)

    def __contains__(self, name: object) -> bool:
        return name in self._hosts

    def __iter__(self) -> Iterator[FTPHostConfiguration]:
        return iter(list(self._hosts.values()))

    def __len__(self) -> int:
        return len(self._hosts)
