#!/usr/bin/env python3
"""
LAN Chat Relay Server - Main Entry Point

Usage:
    python main_server.py

Prompts for the port number and serves on all interfaces until interrupted.
"""

import sys

from common.console import prompt_port
from common.constants import SERVER_PORT_PROMPT
from server.main_server import ChatServer
from server.utils.config import ServerConfig
from server.utils.errors import BindError
from server.utils.logger import logger


def main():
    """Main entry point."""
    port = prompt_port(SERVER_PORT_PROMPT)
    server = ChatServer(ServerConfig(port=port))
    
    try:
        server.serve()
    except BindError as e:
        logger.log_error("startup", e)
        sys.exit(1)
    except KeyboardInterrupt:
        server.shutdown()


if __name__ == "__main__":
    main()
