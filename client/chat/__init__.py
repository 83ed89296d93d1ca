"""
Chat module for client-side messaging functionality.

Handles:
- Relaying console input to the server
- Printing lines received from the server
"""
