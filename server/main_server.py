#!/usr/bin/env python3
"""
LAN Chat Relay Server - Listener

Binds the listening socket, accepts connections and runs one
ConnectionSession thread per client.
"""

import socket
import threading
from typing import Optional, Set

from common.constants import SERVER_FULL_TEXT
from server.chat.broadcaster import Broadcaster
from server.chat.connection import ClientConnection
from server.chat.registry import Registry
from server.chat.session import ConnectionSession
from server.utils.config import ServerConfig
from server.utils.errors import BindError
from server.utils.logger import logger


class ChatServer:
    """Accept loop plus bookkeeping of the live session threads."""

    def __init__(self, config: Optional[ServerConfig] = None):
        self.config = config or ServerConfig()
        logger.configure(**self.config.get_log_settings())

        session_settings = self.config.get_session_settings()
        self.max_sessions = session_settings['max_sessions']
        self.registry = Registry(session_settings['duplicate_policy'])
        self.broadcaster = Broadcaster(self.registry)

        # Listening socket
        self.socket: Optional[socket.socket] = None
        self.running = False

        # Live sessions
        self.sessions: Set[ConnectionSession] = set()
        self.threads: Set[threading.Thread] = set()
        self.sessions_lock = threading.Lock()

    @property
    def address(self):
        """The (host, port) actually bound, once bind() has run."""
        if self.socket is None:
            return None
        try:
            return self.socket.getsockname()
        except OSError:
            return None

    @property
    def active_session_count(self) -> int:
        with self.sessions_lock:
            return len(self.sessions)

    def bind(self, port: Optional[int] = None):
        """Bind and listen. Raises BindError; the server must not serve after it."""
        if port is not None:
            self.config.port = port
        info = self.config.get_connection_info()
        host, port = info['host'], info['port']

        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((host, port))
            sock.listen(self.config.backlog)
        except OSError as e:
            sock.close()
            logger.error(f"Error starting server on port {port}: {e}")
            raise BindError(host, port, e) from e

        sock.settimeout(self.config.accept_poll_interval)
        self.socket = sock
        self.running = True
        logger.info(f"Server started on port {self.address[1]}")

    def serve_forever(self):
        """Accept connections until shutdown() is called."""
        if self.socket is None:
            raise RuntimeError("bind() must be called before serve_forever()")

        while self.running:
            try:
                client_sock, addr = self.socket.accept()
            except socket.timeout:
                continue
            except OSError as e:
                if self.running:
                    logger.log_error("accepting client connection", e)
                continue

            client_sock.settimeout(None)
            logger.log_connection(addr)
            self._spawn_session(client_sock, addr)

    def serve(self, port: Optional[int] = None):
        """Bind once, then serve. Does not return under normal operation."""
        self.bind(port)
        self.serve_forever()

    def _spawn_session(self, client_sock: socket.socket, addr):
        connection = ClientConnection(client_sock, addr)

        with self.sessions_lock:
            at_capacity = (self.max_sessions is not None
                           and len(self.sessions) >= self.max_sessions)
            if not at_capacity:
                session = ConnectionSession(connection, self.registry, self.broadcaster)
                thread = threading.Thread(
                    target=self._run_session,
                    args=(session,),
                    name=f"session-{addr}",
                    daemon=True
                )
                self.sessions.add(session)
                self.threads.add(thread)

        if at_capacity:
            logger.warning(f"Refusing {addr}: {self.max_sessions} sessions already active")
            try:
                connection.write_line(SERVER_FULL_TEXT)
            except OSError as e:
                logger.log_error(f"refusing {addr}", e)
            connection.close()
            return

        thread.start()

    def _run_session(self, session: ConnectionSession):
        try:
            session.run()
        except Exception as e:
            logger.log_error(f"session {session.label}", e)
        finally:
            with self.sessions_lock:
                self.sessions.discard(session)
                self.threads.discard(threading.current_thread())

    def shutdown(self):
        """Stop accepting, sever every live session and wait for the threads."""
        if not self.running:
            return
        logger.info("Server shutting down...")
        self.running = False

        if self.socket:
            try:
                self.socket.close()
            except OSError:
                pass

        with self.sessions_lock:
            sessions = list(self.sessions)
            threads = list(self.threads)

        for session in sessions:
            session.close()

        for thread in threads:
            thread.join(timeout=self.config.shutdown_join_timeout)

        logger.info("Server stopped")
