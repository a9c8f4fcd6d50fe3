"""FTP operations module for FTP Publisher.

This module handles all FTP-related functionality:
- FTPClient / FTPLibClient: Client capability and its ftplib implementation
- FTPHostConfiguration: Host parameters, session creation, connection check
- FTPSession: Authenticated connection anchored at the absolute remote root
- Exceptions: FTP-specific error types
"""
