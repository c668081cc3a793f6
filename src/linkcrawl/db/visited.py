"""
Visited Set - Seen Link Path Tracking

Single authority on whether a link path has already been queued.
"""

import threading
from typing import Iterator


class VisitedSet:
    """
    Insert-only record of link paths.

    Paths are compared by exact string equality and kept in insertion order.
    The stored flag marks membership only and is never read back.
    """

    def __init__(self):
        self._paths: dict[str, bool] = {}
        self._lock = threading.Lock()

    def insert_if_absent(self, path: str) -> bool:
        """
        Record `path` if it has not been seen.

        Returns:
            True if the path was new and is now recorded
            False if it was already present (nothing changes)
        """
        with self._lock:
            if path in self._paths:
                return False
            self._paths[path] = True
            return True

    def paths(self) -> list[str]:
        """Snapshot of all recorded paths in insertion order."""
        with self._lock:
            return list(self._paths)

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._paths

    def __len__(self) -> int:
        with self._lock:
            return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths())
