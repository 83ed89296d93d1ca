"""
Chat module for server-side messaging functionality.

Handles:
- Username registry
- Message broadcasting
- Per-connection session lifecycle
"""
