"""
Shared fakes and polling helpers for the test suite.
"""

import time


class FakeSink:
    """Records every line written to it."""
    
    def __init__(self, fail_with: Exception = None):
        self.lines = []
        self.closed = False
        self.fail_with = fail_with
    
    def write_line(self, text: str):
        if self.fail_with is not None:
            raise self.fail_with
        self.lines.append(text)
    
    def close(self):
        self.closed = True


class FakeConnection(FakeSink):
    """
    Scripted stand-in for ClientConnection.

    ``inbound`` items are returned by read_line() in order; an Exception
    item is raised instead. Once exhausted, read_line() returns None (EOF).
    """
    
    def __init__(self, inbound=(), fail_with: Exception = None, addr=('127.0.0.1', 50000)):
        super().__init__(fail_with)
        self.inbound = list(inbound)
        self.addr = addr
    
    def read_line(self):
        if not self.inbound:
            return None
        item = self.inbound.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def wait_for(predicate, timeout: float = 5.0, interval: float = 0.01) -> bool:
    """Poll ``predicate`` until it is true or ``timeout`` expires."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(interval)
    return predicate()
