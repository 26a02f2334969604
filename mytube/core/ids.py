"""Process-wide identifier minting for videos and comments."""

from __future__ import annotations

import threading


class IdGenerator:
    """Issue strictly increasing integer identifiers.

    A single instance is shared by every Video and Comment in the process so
    identifiers never collide across entity kinds and are never reused, even
    after a comment is removed.
    """

    def __init__(self, start: int = 0) -> None:
        self._last = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            self._last += 1
            return self._last


id_generator = IdGenerator()
