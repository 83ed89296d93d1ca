"""
Server logging module.

This module handles server-side logging functionality.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from common.constants import LOG_DIR, CHAT_LOG_FILE


class ServerLogger:
    """Server logging class."""
    
    def __init__(self, logs_dir: str = LOG_DIR, log_level: int = logging.INFO):
        self.logs_dir = Path(logs_dir)
        self.chat_log_enabled = False
        
        # Set up main logger
        self.logger = logging.getLogger('chat_server')
        self.logger.setLevel(log_level)
        
        # Remove existing handlers
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)
        
        # Create console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        
        # Create formatter
        formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(formatter)
        
        # Add handler to logger
        self.logger.addHandler(console_handler)
        
        # Set up file paths
        self.chat_log_path = self.logs_dir / CHAT_LOG_FILE
    
    def configure(self, logs_dir: Optional[str] = None, chat_log_enabled: bool = False):
        """Apply the log settings from a ServerConfig."""
        if logs_dir is not None:
            self.logs_dir = Path(logs_dir)
            self.chat_log_path = self.logs_dir / CHAT_LOG_FILE
        self.chat_log_enabled = chat_log_enabled
        if chat_log_enabled:
            self.logs_dir.mkdir(parents=True, exist_ok=True)
    
    def info(self, message: str):
        """Log info message."""
        self.logger.info(message)
    
    def error(self, message: str):
        """Log error message."""
        self.logger.error(message)
    
    def warning(self, message: str):
        """Log warning message."""
        self.logger.warning(message)
    
    def debug(self, message: str):
        """Log debug message."""
        self.logger.debug(message)
    
    def log_connection(self, addr: tuple):
        """Log accepted connection."""
        self.info(f"New connection from {addr}")
    
    def log_login(self, username: str):
        """Log completed handshake."""
        self.info(f"\t{username} connected to Chat...")
    
    def log_disconnect(self, username: str):
        """Log user disconnect."""
        self.info(f"{username} got disconnected from Chat...")
    
    def log_connection_closed(self, who: str):
        """Log a peer that closed or reset its connection."""
        self.info(f"Client connection closed ({who})")
    
    def log_chat(self, username: str, message: str):
        """Log chat message."""
        self.debug(f"Chat from {username}: {message}")
        if self.chat_log_enabled:
            self._write_to_file(self.chat_log_path, f"{datetime.now().isoformat()} | {username} | {message}")
    
    def log_delivery_failure(self, username: str, error: Exception):
        """Log a failed write to one broadcast recipient."""
        self.warning(f"Error sending message to client '{username}': {error}")
    
    def log_error(self, operation: str, error: Exception):
        """Log error with operation context."""
        self.error(f"Error in {operation}: {error}")
    
    def _write_to_file(self, file_path: Path, content: str):
        """Write content to log file."""
        try:
            with open(file_path, 'a', encoding='utf-8') as f:
                f.write(content + '\n')
        except Exception as e:
            self.error(f"Failed to write to log file {file_path}: {e}")


# Global logger instance
logger = ServerLogger()
