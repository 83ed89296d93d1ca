"""Test suite for the LAN Chat Relay."""
