"""
Common package for the LAN Chat Relay.

Shared constants and wire protocol helpers used by client and server.
"""
