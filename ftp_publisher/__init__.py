"""FTP Publisher.

Configures FTP hosts and opens authenticated sessions, anchored at a
resolved remote root, for publishing build artifacts from CI jobs.
"""

__version__ = "1.0.0"
