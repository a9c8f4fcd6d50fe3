"""Configuration module for FTP Publisher.

This module handles host configurations and credentials:
- HostConfigurationRegistry: Caller-owned lookup of hosts by name
- HostConfigurationStore: JSON-based host persistence
- CredentialManager: Secure password storage via keyring
- Paths: Platform data directories
"""
