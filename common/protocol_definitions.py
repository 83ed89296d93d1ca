"""
Protocol definitions for the LAN Chat Relay.

The wire format is newline-delimited UTF-8 text. This module defines the
message value object and the helpers that build the lines exchanged between
client and server.
"""

from dataclasses import dataclass
from typing import Optional

from common.constants import (
    ENCODING, LINE_TERMINATOR, QUIT_TOKEN, JOIN_SUFFIX, LEAVE_SUFFIX
)


@dataclass(frozen=True)
class Message:
    """
    A single broadcast unit.

    Chat lines carry the sender's username as ``sender_label``. Join and
    leave announcements have an empty label and the whole text as ``body``.
    """
    sender_label: str
    body: str

    def to_line(self) -> str:
        """Render the message as it appears on the wire (without newline)."""
        if self.sender_label:
            return f"{self.sender_label}: {self.body}"
        return self.body


def create_chat_message(username: str, text: str) -> Message:
    """Create a chat message from one inbound line."""
    return Message(sender_label=username, body=text)


def create_user_joined_message(username: str) -> Message:
    """Create the join announcement."""
    return Message(sender_label='', body=username + JOIN_SUFFIX)


def create_user_left_message(username: str) -> Message:
    """Create the departure announcement."""
    return Message(sender_label='', body=username + LEAVE_SUFFIX)


def is_quit_command(line: str) -> bool:
    """Check whether a line is the quit token (case-insensitive)."""
    return line.lower() == QUIT_TOKEN


def encode_line(text: str) -> bytes:
    """Encode one line of text for the wire."""
    return (text + LINE_TERMINATOR).encode(ENCODING)


def decode_line(raw: bytes) -> Optional[str]:
    """
    Decode one raw line read from the wire.

    Returns None for an empty read (peer closed). One line terminator
    (``\\n`` or ``\\r\\n``) is stripped; everything before it is kept.
    """
    if not raw:
        return None
    text = raw.decode(ENCODING, errors='replace')
    if text.endswith('\n'):
        text = text[:-1]
    if text.endswith('\r'):
        text = text[:-1]
    return text
