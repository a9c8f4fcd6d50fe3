"""Path discovery for FTP Publisher.

Defines where the hosts file lives on each platform.
"""

import os
import sys
from pathlib import Path


# Application name for config directories
APP_NAME = "ftp-publisher"

# Overrides the hosts file location, e.g. on a CI agent
HOSTS_FILE_ENV = "FTP_PUBLISHER_HOSTS_FILE"


def get_app_data_dir() -> Path:
    """
    Get the application data directory.

    Returns:
        Path to app data directory (created if not exists)

    Platform-specific locations:
        - Windows: %APPDATA%/ftp-publisher
        - Linux: ~/.config/ftp-publisher
        - macOS: ~/Library/Application Support/ftp-publisher
    """
    if sys.platform == "win32":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))

    app_dir = base / APP_NAME
    app_dir.mkdir(parents=True, exist_ok=True)
    return app_dir


def get_hosts_path() -> Path:
    """
    Get the path to the host configurations JSON file.

    Returns:
        Path from $FTP_PUBLISHER_HOSTS_FILE, or hosts.json in the app data dir
    """
    override = os.environ.get(HOSTS_FILE_ENV)
    if override:
        return Path(override)
    return get_app_data_dir() / "hosts.json"
