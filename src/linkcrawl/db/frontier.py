"""
Frontier - Pending Address Storage

Holds the addresses to fetch in the next level.
"""

import threading


class Frontier:
    """
    Ordered list of fully-qualified addresses.

    Pushes made while a level is being fetched land here for the following
    level; take_all() hands the whole batch over and empties the frontier.
    """

    def __init__(self, addresses: list[str] | None = None):
        self._addresses: list[str] = list(addresses or [])
        self._lock = threading.Lock()

    def push(self, address: str) -> None:
        with self._lock:
            self._addresses.append(address)

    def take_all(self) -> list[str]:
        """Return every queued address in push order and clear the frontier."""
        with self._lock:
            batch = self._addresses
            self._addresses = []
            return batch

    def __len__(self) -> int:
        with self._lock:
            return len(self._addresses)

    def __bool__(self) -> bool:
        return len(self) > 0
