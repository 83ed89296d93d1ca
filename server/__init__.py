"""
Server package for the LAN Chat Relay.

This package contains all server-side functionality including:
- Client connection management
- Username registry and message broadcasting
- Configuration and utilities
"""
