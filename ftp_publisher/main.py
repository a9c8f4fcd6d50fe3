"""Command line entry point for FTP Publisher.

Lists configured hosts, checks a host's connection the way the
configuration form's "test connection" button would, and checks which
remote root a build would publish to.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config.store import HostConfigurationStore
from .ftp.exceptions import FTPError
from .ftp.host import BuildContext
from .utils.logging import get_logger, setup_logging


def cmd_list(args: argparse.Namespace, store: HostConfigurationStore) -> int:
    """Handle list subcommand."""
    registry = store.load()
    for host in registry:
        mode = "active" if host.use_active_data else "passive"
        print(f"{host.name}\t{host.hostname}:{host.port}\t{mode}")
    return 0


def cmd_test_connection(args: argparse.Namespace, store: HostConfigurationStore) -> int:
    """Handle test-connection subcommand."""
    try:
        host = store.load().get(args.name)
    except FTPError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    result = host.test_connection()
    print(json.dumps(result.to_dict()))
    return 0 if result.success else 1


def cmd_check_root(args: argparse.Namespace, store: HostConfigurationStore) -> int:
    """Handle check-root subcommand."""
    logger = get_logger()
    try:
        host = store.load().get(args.name)
        context = BuildContext(build_id=args.build_id, logger=get_logger("ftp_publisher.build"))
        with host.create_session(context) as session:
            print(session.absolute_remote_root)
    except FTPError as e:
        logger.error(f"Check failed for '{args.name}': {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ftp-publisher",
        description="Manage and check FTP hosts used to publish build artifacts"
    )
    parser.add_argument("--hosts-file", type=Path, default=None,
                        help="Host configurations JSON file")
    parser.add_argument("--log-file", type=Path, default=None,
                        help="Also write logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List configured hosts")
    list_parser.set_defaults(handler=cmd_list)

    test_parser = subparsers.add_parser("test-connection", help="Connect and log in to a host")
    test_parser.add_argument("name", help="Host configuration name")
    test_parser.set_defaults(handler=cmd_test_connection)

    root_parser = subparsers.add_parser("check-root", help="Show the resolved remote root")
    root_parser.add_argument("name", help="Host configuration name")
    root_parser.add_argument("--build-id", default="", help="Build identifier for log output")
    root_parser.set_defaults(handler=cmd_check_root)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line interface and return the exit code."""
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(level=level, log_file=args.log_file)

    store = HostConfigurationStore(hosts_path=args.hosts_file)
    return args.handler(args, store)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
