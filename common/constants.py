"""
Shared constants for the LAN Chat Relay.

This module contains all constants used across client and server components.
"""

# Network Configuration
DEFAULT_HOST = 'localhost'
DEFAULT_SERVER_HOST = '0.0.0.0'
DEFAULT_PORT = 9999
LISTEN_BACKLOG = 16
ACCEPT_POLL_INTERVAL = 0.5  # seconds, lets the accept loop notice shutdown

# Encoding
ENCODING = 'utf-8'
LINE_TERMINATOR = '\n'

# Sessions
MAX_SESSIONS = None  # None = unbounded
SHUTDOWN_JOIN_TIMEOUT = 2.0  # seconds per session thread

# Logging
LOG_DIR = 'logs'
CHAT_LOG_FILE = 'chat_history.log'

# Protocol text
WELCOME_TEXT = '\nWelcome to the chat !\n'
USERNAME_PROMPT = 'Enter your username :'
QUIT_TOKEN = 'quit'
JOIN_SUFFIX = ' joined the chat...'
LEAVE_SUFFIX = ' left the chat...'
USERNAME_TAKEN_TEXT = "Username '{username}' is already taken."
SERVER_FULL_TEXT = 'Server is full, try again later.'

# Console prompts
SERVER_PORT_PROMPT = 'Enter the Port Number (e.g 9999 ) where you want the Server to Run : '
CLIENT_PORT_PROMPT = 'Enter the Port Number (e.g 9999 ) to Connect with Server : '

# Client-side console messages
CONNECT_ERROR_TEXT = '\nError connecting to server on the given socket. Please input a valid socket.'
SEND_ERROR_TEXT = '\nError sending message to server...'
CONNECTION_CLOSED_TEXT = '\nChat Connection closed...'
RECEIVE_ERROR_TEXT = '\nError receiving message from server..'


# Duplicate username handling
class DuplicateUsernamePolicy:
    OVERWRITE = 'overwrite'  # replace the mapping, leave the old connection open
    REJECT = 'reject'        # refuse the newcomer
    KICK = 'kick'            # replace the mapping and close the old connection

    ALL = (OVERWRITE, REJECT, KICK)
