"""
Client registry module.

Maps usernames to the sinks that broadcasts are written to. Every access is
serialized by a single lock that is never held across network I/O.
"""

import threading
from typing import Dict, List, Optional, Tuple, Any

from common.constants import DuplicateUsernamePolicy
from server.utils.errors import DuplicateUsernameError
from server.utils.logger import logger


class Registry:
    """Concurrency-safe mapping of username -> sink."""
    
    def __init__(self, duplicate_policy: str = DuplicateUsernamePolicy.OVERWRITE):
        if duplicate_policy not in DuplicateUsernamePolicy.ALL:
            raise ValueError(f"Unknown duplicate username policy: {duplicate_policy!r}")
        self.duplicate_policy = duplicate_policy
        self._sinks: Dict[str, Any] = {}
        self._lock = threading.Lock()
    
    def register(self, username: str, sink) -> Optional[Any]:
        """
        Add a mapping for ``username``.

        Returns the sink that was displaced, if any. With the REJECT policy a
        taken name raises DuplicateUsernameError and nothing changes. With
        KICK the displaced sink is closed after the lock is released.
        """
        with self._lock:
            previous = self._sinks.get(username)
            if previous is not None and previous is not sink:
                if self.duplicate_policy == DuplicateUsernamePolicy.REJECT:
                    raise DuplicateUsernameError(username)
            self._sinks[username] = sink
        
        if previous is None or previous is sink:
            return None
        
        logger.warning(f"Username '{username}' registered twice, policy={self.duplicate_policy}")
        if self.duplicate_policy == DuplicateUsernamePolicy.KICK:
            try:
                previous.close()
            except OSError as e:
                logger.log_error(f"closing displaced connection for '{username}'", e)
        return previous
    
    def unregister(self, username: str, sink=None) -> bool:
        """
        Remove the mapping for ``username`` if present.

        When ``sink`` is given the entry is only removed while it still points
        at that sink, so a session never drops a newer session's entry.
        """
        with self._lock:
            current = self._sinks.get(username)
            if current is None:
                return False
            if sink is not None and current is not sink:
                return False
            del self._sinks[username]
            return True
    
    def snapshot_sinks(self) -> List[Any]:
        """Point-in-time list of sinks, safe to iterate without the lock."""
        with self._lock:
            return list(self._sinks.values())
    
    def snapshot(self) -> List[Tuple[str, Any]]:
        """Point-in-time list of (username, sink) pairs."""
        with self._lock:
            return list(self._sinks.items())
    
    def usernames(self) -> List[str]:
        with self._lock:
            return sorted(self._sinks)
    
    def get(self, username: str):
        with self._lock:
            return self._sinks.get(username)
    
    def __contains__(self, username: str) -> bool:
        with self._lock:
            return username in self._sinks
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._sinks)
