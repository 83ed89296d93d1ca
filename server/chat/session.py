"""
Connection session module.

One ConnectionSession drives one client through the handshake, the chat
relay loop and the cleanup. The lifecycle is an explicit state machine so
the termination paths can be exercised without sockets.
"""

from enum import Enum
from typing import Optional

from common.constants import (
    WELCOME_TEXT, USERNAME_PROMPT, USERNAME_TAKEN_TEXT
)
from common.protocol_definitions import (
    create_chat_message, create_user_joined_message, create_user_left_message,
    is_quit_command
)
from server.chat.broadcaster import Broadcaster
from server.chat.registry import Registry
from server.utils.errors import DuplicateUsernameError, InvalidTransitionError
from server.utils.logger import logger


class SessionState(Enum):
    CONNECTING = 'connecting'
    AWAITING_USERNAME = 'awaiting_username'
    ACTIVE = 'active'
    TERMINATING = 'terminating'
    CLOSED = 'closed'


class SessionEvent(Enum):
    WELCOME_SENT = 'welcome_sent'
    USERNAME_RECEIVED = 'username_received'
    USERNAME_REJECTED = 'username_rejected'
    LINE_RECEIVED = 'line_received'
    QUIT_RECEIVED = 'quit_received'
    CONNECTION_LOST = 'connection_lost'
    CLEANUP_DONE = 'cleanup_done'


_TRANSITIONS = {
    (SessionState.CONNECTING, SessionEvent.WELCOME_SENT): SessionState.AWAITING_USERNAME,
    (SessionState.CONNECTING, SessionEvent.CONNECTION_LOST): SessionState.CLOSED,
    (SessionState.AWAITING_USERNAME, SessionEvent.USERNAME_RECEIVED): SessionState.ACTIVE,
    (SessionState.AWAITING_USERNAME, SessionEvent.USERNAME_REJECTED): SessionState.CLOSED,
    (SessionState.AWAITING_USERNAME, SessionEvent.CONNECTION_LOST): SessionState.CLOSED,
    (SessionState.ACTIVE, SessionEvent.LINE_RECEIVED): SessionState.ACTIVE,
    (SessionState.ACTIVE, SessionEvent.QUIT_RECEIVED): SessionState.TERMINATING,
    (SessionState.ACTIVE, SessionEvent.CONNECTION_LOST): SessionState.TERMINATING,
    (SessionState.TERMINATING, SessionEvent.CLEANUP_DONE): SessionState.CLOSED,
}


def transition(state: SessionState, event: SessionEvent) -> SessionState:
    """Return the state reached from ``state`` on ``event``."""
    try:
        return _TRANSITIONS[(state, event)]
    except KeyError:
        raise InvalidTransitionError(state, event) from None


def _is_peer_closed(error: OSError) -> bool:
    return isinstance(error, (ConnectionResetError, ConnectionAbortedError, BrokenPipeError))


class ConnectionSession:
    """Server-side state and identity of one connected client."""

    def __init__(self, connection, registry: Registry, broadcaster: Broadcaster):
        self.connection = connection
        self.registry = registry
        self.broadcaster = broadcaster
        self.username: Optional[str] = None
        self.state = SessionState.CONNECTING
        self.registered = False

    def _fire(self, event: SessionEvent):
        self.state = transition(self.state, event)

    @property
    def label(self) -> str:
        """Name used in log lines."""
        return self.username if self.username is not None else str(self.connection.addr)

    def run(self):
        """
        Drive the session until it reaches CLOSED.

        Never raises for I/O problems; they are logged and end the session.
        """
        if self.state is not SessionState.CONNECTING:
            raise InvalidTransitionError(self.state, SessionEvent.WELCOME_SENT)

        try:
            self._send_welcome()
            if self.state is SessionState.AWAITING_USERNAME:
                self._await_username()
            if self.state is SessionState.ACTIVE:
                self._relay()
        finally:
            if self.state is SessionState.ACTIVE:
                # Unexpected exception inside the relay loop
                self._fire(SessionEvent.CONNECTION_LOST)
            if self.state is SessionState.TERMINATING:
                self._terminate()
            elif self.state is not SessionState.CLOSED:
                # Unexpected exception before registration
                self.state = SessionState.CLOSED
            self.connection.close()

    def close(self):
        """Sever the connection; the session then ends through its read path."""
        self.connection.close()

    def _send_welcome(self):
        try:
            self.connection.write_line(WELCOME_TEXT)
        except OSError as e:
            self._report_io_error("sending welcome", e)
            self._fire(SessionEvent.CONNECTION_LOST)
            return
        self._fire(SessionEvent.WELCOME_SENT)

    def _await_username(self):
        try:
            self.connection.write_line(USERNAME_PROMPT)
            username = self.connection.read_line()
        except OSError as e:
            self._report_io_error("handshake", e)
            self._fire(SessionEvent.CONNECTION_LOST)
            return

        if not username:
            logger.info(f"{self.label} disconnected before sending a username")
            self._fire(SessionEvent.CONNECTION_LOST)
            return

        try:
            self.registry.register(username, self.connection)
        except DuplicateUsernameError:
            logger.warning(f"Refusing duplicate username '{username}' from {self.connection.addr}")
            try:
                self.connection.write_line(USERNAME_TAKEN_TEXT.format(username=username))
            except OSError as e:
                self._report_io_error("refusing username", e)
            self._fire(SessionEvent.USERNAME_REJECTED)
            return

        self.username = username
        self.registered = True
        self._fire(SessionEvent.USERNAME_RECEIVED)
        logger.log_login(username)
        self.broadcaster.broadcast(create_user_joined_message(username))

    def _relay(self):
        while self.state is SessionState.ACTIVE:
            try:
                line = self.connection.read_line()
            except OSError as e:
                self._report_io_error("reading message", e)
                self._fire(SessionEvent.CONNECTION_LOST)
                return

            if line is None:
                logger.log_connection_closed(self.label)
                self._fire(SessionEvent.CONNECTION_LOST)
            elif is_quit_command(line):
                self._fire(SessionEvent.QUIT_RECEIVED)
            else:
                logger.log_chat(self.username, line)
                self.broadcaster.broadcast(create_chat_message(self.username, line))
                self._fire(SessionEvent.LINE_RECEIVED)

    def _terminate(self):
        if self.registered:
            self.registry.unregister(self.username, self.connection)
            self.registered = False
        self.connection.close()
        logger.log_disconnect(self.username)
        self.broadcaster.broadcast(create_user_left_message(self.username))
        self._fire(SessionEvent.CLEANUP_DONE)

    def _report_io_error(self, operation: str, error: OSError):
        if _is_peer_closed(error):
            logger.log_connection_closed(self.label)
        else:
            logger.log_error(f"{operation} for {self.label}", error)
