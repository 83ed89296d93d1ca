#!/usr/bin/env python3
"""
LAN Chat Relay Client - Main Entry Point

Usage:
    python main_client.py

Prompts for the port number and connects to the server on localhost.
Type messages to chat, "quit" to leave.
"""

from client.main_client import ChatClient
from common.console import prompt_port
from common.constants import CLIENT_PORT_PROMPT, DEFAULT_HOST


def main():
    """Main entry point."""
    port = prompt_port(CLIENT_PORT_PROMPT)
    client = ChatClient(DEFAULT_HOST, port)
    
    try:
        client.run()
    except KeyboardInterrupt:
        print("\n[INFO] Client terminated")


if __name__ == "__main__":
    main()
