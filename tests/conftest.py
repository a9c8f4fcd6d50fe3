"""Pytest configuration and shared fixtures for FTP Publisher tests."""

import logging
from typing import List
from unittest.mock import MagicMock, call

import pytest

from ftp_publisher.ftp.client import SERVICE_READY, FTPClient
from ftp_publisher.ftp.host import BuildContext, FTPHostConfiguration


# Test constants
TEST_CFG_NAME = "myTestConfig"
TEST_HOSTNAME = "my.test.hostname"
TEST_USERNAME = "myTestUsername"
TEST_PASSWORD = "myTestPassword"


@pytest.fixture
def mock_client() -> MagicMock:
    """
    Provide an FTPClient double that records every call in order.

    Defaults describe a healthy server: ready greeting, accepted login,
    enterable directories and a working directory of /pub.
    """
    client = MagicMock(spec=FTPClient)
    client.get_reply_code.return_value = SERVICE_READY
    client.login.return_value = True
    client.change_working_directory.return_value = True
    client.print_working_directory.return_value = "/pub"
    return client


@pytest.fixture
def host(mock_client: MagicMock) -> FTPHostConfiguration:
    """Provide a host configuration wired to the mock client."""
    return FTPHostConfiguration(
        name=TEST_CFG_NAME,
        hostname=TEST_HOSTNAME,
        username=TEST_USERNAME,
        password=TEST_PASSWORD,
        remote_root_dir="",
        client_factory=lambda: mock_client,
    )


@pytest.fixture
def build_context() -> BuildContext:
    """Provide a build context logging to a test logger."""
    return BuildContext(build_id="42", logger=logging.getLogger("ftp_publisher.test.build"))


def expected_connect_and_login(host: FTPHostConfiguration) -> List:
    """Calls a session creation must make, in order, before resolving the root."""
    mode = call.enter_local_active_mode() if host.use_active_data else call.enter_local_passive_mode()
    return [
        call.set_default_timeout(host.timeout),
        call.set_data_timeout(host.timeout),
        call.connect(host.hostname, host.port),
        call.get_reply_code(),
        mode,
        call.login(host.username, host.password.get_secret_value()),
    ]
