"""
Client connection module.

Wraps one accepted socket as a line-oriented stream. The same object is the
session's reader and the sink that the registry hands to the broadcaster.
"""

import socket
import threading
from typing import Optional

from common.protocol_definitions import encode_line, decode_line


class ClientConnection:
    """Line-oriented, exclusively owned view of one client socket."""
    
    def __init__(self, sock: socket.socket, addr=None):
        self.sock = sock
        self.addr = addr if addr is not None else _peer_name(sock)
        self.rfile = sock.makefile('rb')
        self.write_lock = threading.Lock()  # one writer at a time per socket
        self.state_lock = threading.Lock()
        self.closed = False
    
    def read_line(self) -> Optional[str]:
        """
        Block until one full line arrives.

        Returns None when the peer has closed the stream. Raises OSError on
        socket failures, including a local close() from another thread.
        """
        if self.closed:
            raise ConnectionAbortedError("connection already closed")
        try:
            raw = self.rfile.readline()
        except ValueError as e:
            # makefile raises ValueError once the socket is closed under it
            raise ConnectionAbortedError(str(e)) from e
        return decode_line(raw)
    
    def write_line(self, text: str):
        """Send one line. Raises OSError if the peer is gone."""
        data = encode_line(text)
        with self.write_lock:
            if self.closed:
                raise BrokenPipeError("connection already closed")
            self.sock.sendall(data)
    
    def close(self):
        """Close the socket; safe to call more than once and from any thread."""
        with self.state_lock:
            if self.closed:
                return
            self.closed = True
        # Shut down before taking write_lock; a blocked sendall only returns after it
        try:
            self.sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass  # already disconnected
        with self.write_lock:
            try:
                self.rfile.close()
            finally:
                self.sock.close()
    
    def __repr__(self):
        return f"ClientConnection({self.addr})"


def _peer_name(sock: socket.socket):
    try:
        return sock.getpeername()
    except OSError:
        return None
