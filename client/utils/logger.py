"""
Client logging module.

Diagnostics only. Chat traffic and the user-facing connection messages are
printed to the console by the relay threads.
"""

import logging
import sys


class ClientLogger:
    """Client logging class."""
    
    def __init__(self, log_level: int = logging.WARNING):
        self.logger = logging.getLogger('chat_client')
        self.logger.setLevel(log_level)
        
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)
        
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            '%(asctime)s [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        self.logger.addHandler(handler)
    
    def debug(self, message: str):
        """Log debug message."""
        self.logger.debug(message)
    
    def log_connection(self, host: str, port: int, error: Exception = None):
        """Log a connection attempt; ``error`` is set when it failed."""
        if error is None:
            self.logger.info(f"Connected to {host}:{port}")
        else:
            self.logger.info(f"Failed to connect to {host}:{port}: {error}")


# Global logger instance
logger = ClientLogger()
