#!/usr/bin/env python3
"""
Unit tests for server configuration and chat log file output.
"""

import tempfile
import unittest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from common.constants import DuplicateUsernamePolicy, DEFAULT_PORT
from server.utils.config import ServerConfig
from server.utils.errors import BindError
from server.utils.logger import ServerLogger


class TestServerConfig(unittest.TestCase):
    """Test cases for ServerConfig validation and accessors."""
    
    def test_defaults(self):
        config = ServerConfig()
        
        self.assertEqual(config.get_connection_info(), {'host': '0.0.0.0', 'port': DEFAULT_PORT})
        self.assertEqual(config.get_session_settings(), {
            'max_sessions': None,
            'duplicate_policy': DuplicateUsernamePolicy.OVERWRITE
        })
        self.assertFalse(config.get_log_settings()['chat_log_enabled'])
    
    def test_rejects_unknown_policy(self):
        with self.assertRaises(ValueError):
            ServerConfig(duplicate_policy='first-wins')
    
    def test_rejects_non_positive_session_limit(self):
        with self.assertRaises(ValueError):
            ServerConfig(max_sessions=0)


class TestServerLogger(unittest.TestCase):
    """Test cases for the optional chat history file."""
    
    def test_chat_lines_written_when_enabled(self):
        with tempfile.TemporaryDirectory() as tmp:
            server_logger = ServerLogger(logs_dir=tmp)
            server_logger.configure(logs_dir=tmp, chat_log_enabled=True)
            
            server_logger.log_chat("alice", "hello")
            
            content = (Path(tmp) / 'chat_history.log').read_text(encoding='utf-8')
            self.assertIn("| alice | hello", content)
    
    def test_no_file_when_disabled(self):
        with tempfile.TemporaryDirectory() as tmp:
            server_logger = ServerLogger(logs_dir=tmp)
            
            server_logger.log_chat("alice", "hello")
            
            self.assertFalse((Path(tmp) / 'chat_history.log').exists())


class TestErrors(unittest.TestCase):
    """Test cases for the error taxonomy."""
    
    def test_bind_error_keeps_cause(self):
        cause = OSError(98, "Address already in use")
        error = BindError('0.0.0.0', 9999, cause)
        
        self.assertIs(error.cause, cause)
        self.assertIn("9999", str(error))


if __name__ == '__main__':
    unittest.main()
