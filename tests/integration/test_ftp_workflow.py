"""Integration tests for the session workflow.

Drives FTPHostConfiguration with the real ftplib client against a local
pyftpdlib server.
"""

from dataclasses import replace

import pytest

from ftp_publisher.ftp.exceptions import (
    FTPAuthenticationError,
    FTPConnectionError,
    FTPDirectoryError,
)
from ftp_publisher.ftp.host import BuildContext, FTPHostConfiguration, check_connection

from .mock_ftp_server import MockFTPServer


@pytest.fixture
def ftp_server():
    """Provide a running mock FTP server."""
    server = MockFTPServer()
    server.start()
    yield server
    server.stop()


@pytest.fixture
def ftp_host(ftp_server):
    """Provide a host configuration pointing at the mock server."""
    return FTPHostConfiguration(
        name="local",
        hostname=ftp_server.host,
        port=ftp_server.port,
        username=ftp_server.username,
        password=ftp_server.password,
        timeout=10,
    )


@pytest.fixture
def context():
    return BuildContext(build_id="integration")


class TestSessionWorkflow:
    """Integration tests for session creation and release."""

    def test_blank_root_uses_server_directory(self, ftp_host, context):
        """Test a blank root resolves to the login directory."""
        with ftp_host.create_session(context) as session:
            assert session.absolute_remote_root == "/"
            assert session.client.is_connected is True

        assert session.is_closed is True

    def test_absolute_root(self, ftp_host, context):
        """Test an absolute root is entered and kept verbatim."""
        host = replace(ftp_host, remote_root_dir="/var/www/releases")

        with host.create_session(context) as session:
            assert session.absolute_remote_root == "/var/www/releases"
            assert session.client.print_working_directory() == "/var/www/releases"

    def test_relative_root_kept_verbatim(self, ftp_host, context):
        """Test a relative root is entered but not re-queried."""
        host = replace(ftp_host, remote_root_dir="artifacts/nightly")

        with host.create_session(context) as session:
            assert session.absolute_remote_root == "artifacts/nightly"
            assert session.client.print_working_directory() == "/artifacts/nightly"

    def test_active_mode(self, ftp_host, context):
        host = replace(ftp_host, use_active_data=True, remote_root_dir="  ")

        with host.create_session(context) as session:
            assert session.absolute_remote_root == "/"

    def test_missing_root(self, ftp_host, context):
        host = replace(ftp_host, remote_root_dir="/does/not/exist")

        with pytest.raises(FTPDirectoryError, match="/does/not/exist"):
            host.create_session(context)

    def test_wrong_password(self, ftp_host, context):
        host = replace(ftp_host, password="wrongpassword")

        with pytest.raises(FTPAuthenticationError) as exc_info:
            host.create_session(context)

        assert "wrongpassword" not in str(exc_info.value)

    def test_connection_refused(self, ftp_server, context):
        """Test connecting to a port nobody listens on."""
        port = ftp_server.port
        ftp_server.stop()
        host = FTPHostConfiguration(name="gone", hostname="127.0.0.1", port=port, timeout=5)

        with pytest.raises(FTPConnectionError):
            host.create_session(context)


class TestConnectionCheck:
    """Integration tests for the connection check."""

    def test_check_success(self, ftp_server):
        result = check_connection(
            ftp_server.host,
            str(ftp_server.port),
            ftp_server.username,
            ftp_server.password,
            "10",
            False,
        )

        assert result.success is True

    def test_check_wrong_password(self, ftp_server):
        result = check_connection(
            ftp_server.host, ftp_server.port, ftp_server.username, "wrongpassword", 10
        )

        assert result.success is False
        assert "wrongpassword" not in result.message
