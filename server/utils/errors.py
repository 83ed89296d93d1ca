"""
Server error taxonomy.

Only BindError is fatal. Everything else is raised and caught inside a
single session.
"""


class ChatServerError(Exception):
    """Base class for chat server errors."""


class BindError(ChatServerError):
    """The listening socket could not be bound. Fatal at startup."""

    def __init__(self, host: str, port: int, cause: Exception):
        super().__init__(f"Error starting server on {host}:{port}: {cause}")
        self.host = host
        self.port = port
        self.cause = cause


class DuplicateUsernameError(ChatServerError):
    """A username is already registered and the policy refuses duplicates."""

    def __init__(self, username: str):
        super().__init__(f"Username '{username}' is already registered")
        self.username = username


class InvalidTransitionError(ChatServerError):
    """A session was driven along an edge its state machine does not have."""

    def __init__(self, state, event):
        super().__init__(f"No transition from {state.name} on {event.name}")
        self.state = state
        self.event = event
