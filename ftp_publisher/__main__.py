"""Allow ``python -m ftp_publisher``."""

from .main import run


run()
