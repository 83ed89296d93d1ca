#!/usr/bin/env python3
"""
LAN Chat Relay Client

Connects to the chat server and wires the console to the connection with
one send thread and one receive thread.
"""

import socket
import sys
from typing import Optional, TextIO

from client.chat.chat_client import SendHandler, ReceiveHandler
from client.utils.config import ClientConfig
from client.utils.logger import logger
from common.constants import CONNECT_ERROR_TEXT


class ChatClient:
    """Console chat client."""

    def __init__(self, host: str, port: int,
                 stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.config = ClientConfig(host, port)
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.socket: Optional[socket.socket] = None
        self.send_thread: Optional[SendHandler] = None
        self.receive_thread: Optional[ReceiveHandler] = None

    def connect(self) -> bool:
        """Open the connection, printing a local error message on failure."""
        info = self.config.get_connection_info()
        try:
            self.socket = socket.create_connection((info['host'], info['port']))
        except OSError as e:
            logger.log_connection(info['host'], info['port'], e)
            print(CONNECT_ERROR_TEXT, file=self.stdout)
            return False

        logger.log_connection(info['host'], info['port'])
        return True

    def start(self):
        """Launch the send and receive threads."""
        if self.socket is None:
            raise RuntimeError("connect() must succeed before start()")

        self.send_thread = SendHandler(self.socket, self.stdin, self.stdout)
        self.receive_thread = ReceiveHandler(self.socket, self.stdout)
        self.send_thread.start()
        self.receive_thread.start()

    def wait(self, timeout: Optional[float] = None):
        """
        Block until the receive thread has finished.

        The receive side always ends with the connection (after quit the send
        thread closes the socket). The send thread may still be blocked on the
        console; it is a daemon and dies with the process.
        """
        if self.receive_thread is not None:
            self.receive_thread.join(timeout)

    def run(self) -> bool:
        """Connect, relay until the session ends, and report success."""
        if not self.connect():
            return False
        self.start()
        self.wait()
        return True
