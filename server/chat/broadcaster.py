"""
Broadcast module.

Fans a message out to every registered sink. Failures are isolated per
recipient: one dead connection never stops delivery to the others.
"""

from typing import List

from common.protocol_definitions import Message
from server.chat.registry import Registry
from server.utils.logger import logger


class Broadcaster:
    """Best-effort, at-most-once delivery to the registry's current members."""
    
    def __init__(self, registry: Registry):
        self.registry = registry
    
    def broadcast(self, message: Message) -> List[str]:
        """
        Write ``message`` to every sink in the registry snapshot.

        Returns the usernames whose delivery failed. Never raises for a
        delivery error.
        """
        line = message.to_line()
        failed = []
        
        for username, sink in self.registry.snapshot():
            try:
                sink.write_line(line)
            except Exception as e:
                logger.log_delivery_failure(username, e)
                failed.append(username)
        
        return failed
