"""Utility module for FTP Publisher.

This module provides cross-cutting utilities:
- Logging: Configured logging with password redaction
- Validators: Host configuration field validation
"""
