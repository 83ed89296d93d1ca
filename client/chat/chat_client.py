"""
Chat client module.

The two relay loops of the console client: one thread forwards console
input to the server, the other prints whatever the server sends.
"""

import socket
import threading
from typing import TextIO

from common.constants import SEND_ERROR_TEXT, CONNECTION_CLOSED_TEXT, RECEIVE_ERROR_TEXT
from common.protocol_definitions import encode_line, decode_line, is_quit_command
from client.utils.logger import logger


class SendHandler(threading.Thread):
    """Reads console lines and sends each one to the server."""

    def __init__(self, sock: socket.socket, stdin: TextIO, stdout: TextIO):
        super().__init__(name='chat-send', daemon=True)
        self.sock = sock
        self.stdin = stdin
        self.stdout = stdout

    def run(self):
        """Relay until the user types quit or the console reaches EOF."""
        try:
            for raw in iter(self.stdin.readline, ''):
                line = raw.rstrip('\r\n')
                self.sock.sendall(encode_line(line))
                if is_quit_command(line):
                    break
        except OSError as e:
            logger.debug(f"Send loop stopped: {e}")
            print(SEND_ERROR_TEXT, file=self.stdout)
        finally:
            _close_quietly(self.sock)


class ReceiveHandler(threading.Thread):
    """Prints each line received from the server until the stream ends."""

    def __init__(self, sock: socket.socket, stdout: TextIO):
        super().__init__(name='chat-receive', daemon=True)
        self.sock = sock
        self.stdout = stdout

    def run(self):
        try:
            with self.sock.makefile('rb') as rfile:
                while True:
                    line = decode_line(rfile.readline())
                    if line is None:
                        break
                    print(line, file=self.stdout, flush=True)
        except (ConnectionResetError, ConnectionAbortedError):
            print(CONNECTION_CLOSED_TEXT, file=self.stdout)
        except ValueError:
            # Only a socket closed under us by the send thread is expected here
            if self.sock.fileno() != -1:
                raise
            print(CONNECTION_CLOSED_TEXT, file=self.stdout)
        except OSError as e:
            logger.debug(f"Receive loop stopped: {e}")
            print(RECEIVE_ERROR_TEXT, file=self.stdout)


def _close_quietly(sock: socket.socket):
    try:
        sock.shutdown(socket.SHUT_RDWR)
    except OSError:
        pass
    sock.close()
