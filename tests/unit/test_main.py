"""Unit tests for the command line interface."""

import json
from unittest.mock import MagicMock, patch

import pytest

from ftp_publisher import main as cli
from ftp_publisher.config.registry import HostConfigurationRegistry
from ftp_publisher.ftp.exceptions import FTPDirectoryError
from ftp_publisher.ftp.host import FTPHostConfiguration, ConnectionCheckResult
from ftp_publisher.ftp.session import FTPSession


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from installing handlers on the package logger."""
    with patch.object(cli, "setup_logging") as mock_setup:
        yield mock_setup


@pytest.fixture
def host():
    return MagicMock(spec=FTPHostConfiguration)


@pytest.fixture
def store(host):
    """Patch the store so load() returns a registry holding the mock host."""
    registry = MagicMock(spec=HostConfigurationRegistry)
    registry.get.return_value = host
    real_host = FTPHostConfiguration(name="web", hostname="ftp.example.com", use_active_data=True)
    registry.__iter__.return_value = iter([real_host])

    with patch.object(cli, "HostConfigurationStore") as mock_store_class:
        mock_store_class.return_value.load.return_value = registry
        yield mock_store_class


class TestParser:

    def test_command_required(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.build_parser().parse_args([])
        assert exc_info.value.code == 2

    def test_hosts_file_option(self, tmp_path, store):
        hosts_file = tmp_path / "hosts.json"

        cli.main(["--hosts-file", str(hosts_file), "list"])

        store.assert_called_once_with(hosts_path=hosts_file)

    def test_verbose_enables_debug(self, store, no_logging_setup):
        import logging

        cli.main(["-v", "list"])

        assert no_logging_setup.call_args.kwargs["level"] == logging.DEBUG


class TestCommands:

    def test_list(self, store, capsys):
        assert cli.main(["list"]) == 0

        out = capsys.readouterr().out
        assert "web\tftp.example.com:21\tactive" in out

    def test_test_connection_success(self, store, host, capsys):
        host.test_connection.return_value = ConnectionCheckResult(True, "Connected to ftp.example.com:21")

        assert cli.main(["test-connection", "web"]) == 0

        result = json.loads(capsys.readouterr().out)
        assert result == {"success": True, "message": "Connected to ftp.example.com:21"}

    def test_test_connection_failure(self, store, host, capsys):
        host.test_connection.return_value = ConnectionCheckResult(False, "Authentication failed")

        assert cli.main(["test-connection", "web"]) == 1

        assert json.loads(capsys.readouterr().out)["success"] is False

    def test_test_connection_unknown_host(self, store, capsys):
        from ftp_publisher.ftp.exceptions import UnknownHostError
        store.return_value.load.return_value.get.side_effect = UnknownHostError("nope")

        assert cli.main(["test-connection", "nope"]) == 2

        assert "No host configuration named 'nope'" in capsys.readouterr().err

    def test_check_root(self, store, host, capsys):
        session = FTPSession(MagicMock(), "/var/www", host_name="web")
        host.create_session.return_value = session

        assert cli.main(["check-root", "web", "--build-id", "99"]) == 0

        assert capsys.readouterr().out.strip() == "/var/www"
        assert session.is_closed is True
        context = host.create_session.call_args.args[0]
        assert context.build_id == "99"

    def test_check_root_failure(self, store, host, capsys):
        host.create_session.side_effect = FTPDirectoryError("/missing", "ftp.example.com")

        assert cli.main(["check-root", "web"]) == 1

        assert "/missing" in capsys.readouterr().err
