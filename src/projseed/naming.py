"""Collision-free project names for callers sharing a build cache."""

import itertools
import threading


class NameSequence:
    """Thread-safe generator of ``{prefix}_{n}`` names.

    Pass one instance to every caller that must not reuse a name, e.g. tests
    running concurrently against a shared build-tool target directory.
    """

    def __init__(self, prefix: str = "new_project", start: int = 0):
        self._prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next(self) -> str:
        with self._lock:
            n = next(self._counter)
        return f"{self._prefix}_{n}"

    def __iter__(self):
        return self

    def __next__(self) -> str:
        return self.next()
