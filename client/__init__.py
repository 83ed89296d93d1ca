"""
Client package for the LAN Chat Relay.

This package contains all client-side functionality including:
- Console send/receive relay threads
- Connection setup
- Configuration and utilities
"""
