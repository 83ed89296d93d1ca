"""
Server configuration module.

This module handles server-side configuration settings.
"""

from typing import Optional

from common.constants import (
    DEFAULT_SERVER_HOST, DEFAULT_PORT, LOG_DIR, MAX_SESSIONS, LISTEN_BACKLOG,
    ACCEPT_POLL_INTERVAL, SHUTDOWN_JOIN_TIMEOUT, DuplicateUsernamePolicy
)


class ServerConfig:
    """Server configuration class."""
    
    def __init__(self, host: str = DEFAULT_SERVER_HOST, port: int = DEFAULT_PORT,
                 max_sessions: Optional[int] = MAX_SESSIONS,
                 duplicate_policy: str = DuplicateUsernamePolicy.OVERWRITE,
                 logs_dir: str = LOG_DIR, chat_log_enabled: bool = False):
        if duplicate_policy not in DuplicateUsernamePolicy.ALL:
            raise ValueError(f"Unknown duplicate username policy: {duplicate_policy!r}")
        if max_sessions is not None and max_sessions < 1:
            raise ValueError("max_sessions must be positive or None")
        
        self.host = host
        self.port = port
        
        # Session settings
        self.max_sessions = max_sessions
        self.duplicate_policy = duplicate_policy
        
        # Logging configuration
        self.logs_dir = logs_dir
        self.chat_log_enabled = chat_log_enabled
        
        # Socket settings
        self.backlog = LISTEN_BACKLOG
        self.accept_poll_interval = ACCEPT_POLL_INTERVAL
        self.shutdown_join_timeout = SHUTDOWN_JOIN_TIMEOUT
    
    def get_connection_info(self):
        """Get connection information."""
        return {
            'host': self.host,
            'port': self.port
        }
    
    def get_session_settings(self):
        """Get session limits and duplicate handling."""
        return {
            'max_sessions': self.max_sessions,
            'duplicate_policy': self.duplicate_policy
        }
    
    def get_log_settings(self):
        """Get logging settings."""
        return {
            'logs_dir': self.logs_dir,
            'chat_log_enabled': self.chat_log_enabled
        }
