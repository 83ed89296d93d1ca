#!/usr/bin/env python3
"""
Unit tests for the wire protocol helpers and shared console helpers.
"""

import dataclasses
import io
import unittest
from contextlib import redirect_stdout, redirect_stderr

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from common.console import prompt_port
from common.protocol_definitions import (
    Message, create_chat_message, create_user_joined_message, create_user_left_message,
    is_quit_command, encode_line, decode_line
)


class TestMessage(unittest.TestCase):
    """Test cases for the Message value object."""
    
    def test_chat_message_line(self):
        self.assertEqual(create_chat_message("alice", "hello").to_line(), "alice: hello")
    
    def test_lifecycle_messages(self):
        self.assertEqual(create_user_joined_message("bob").to_line(), "bob joined the chat...")
        self.assertEqual(create_user_left_message("bob").to_line(), "bob left the chat...")
    
    def test_message_is_immutable(self):
        message = Message(sender_label="alice", body="hi")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            message.body = "changed"
    
    def test_empty_chat_body_keeps_label(self):
        self.assertEqual(create_chat_message("alice", "").to_line(), "alice: ")


class TestLineCodec(unittest.TestCase):
    """Test cases for line encoding and the quit token."""
    
    def test_quit_any_casing(self):
        for token in ("quit", "Quit", "QUIT", "qUiT"):
            self.assertTrue(is_quit_command(token), token)
    
    def test_quit_must_match_whole_line(self):
        for line in ("quit now", " quit", "quitter", ""):
            self.assertFalse(is_quit_command(line), line)
    
    def test_decode_strips_line_terminators_only(self):
        self.assertEqual(decode_line(b"  hi there \r\n"), "  hi there ")
        self.assertEqual(decode_line(b"hi\n"), "hi")
        self.assertEqual(decode_line(b"\n"), "")
    
    def test_decode_strips_one_terminator_only(self):
        self.assertEqual(decode_line(b"hi\r\r\n"), "hi\r")
        self.assertEqual(decode_line(b"hi\n\n"), "hi\n")
        self.assertEqual(decode_line(b"no newline"), "no newline")
    
    def test_decode_empty_read_is_eof(self):
        self.assertIsNone(decode_line(b""))
    
    def test_decode_replaces_invalid_bytes(self):
        self.assertEqual(decode_line(b"caf\xff\n"), "caf�")
    
    def test_encode_appends_newline(self):
        self.assertEqual(encode_line("héllo"), "héllo\n".encode("utf-8"))


class TestPromptPort(unittest.TestCase):
    """Test cases for the interactive port prompt."""
    
    def test_reprompts_until_valid(self):
        answers = iter(["abc", "70000", " 9999 "])
        out = io.StringIO()
        with redirect_stdout(out):
            port = prompt_port("Port: ", input_func=lambda prompt: next(answers))
        
        self.assertEqual(port, 9999)
        self.assertIn("not a port number", out.getvalue())
        self.assertIn("out of range", out.getvalue())
    
    def test_closed_console_exits_cleanly(self):
        def closed_console(prompt):
            raise EOFError
        
        err = io.StringIO()
        with redirect_stderr(err):
            with self.assertRaises(SystemExit) as ctx:
                prompt_port("Port: ", input_func=closed_console)
        
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("No port number entered", err.getvalue())


if __name__ == '__main__':
    unittest.main()
