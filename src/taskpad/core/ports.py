# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations,
so the file-backed storage can be swapped for an in-memory one in tests.
"""

from collections.abc import Callable
from typing import Protocol

Clock = Callable[[], float]
# Returns wall-clock seconds, like time.time().


class KeyValueStorage(Protocol):
    """
    String key -> string value slots (a localStorage analogue).

    get_item raises StorageReadError when the backing data is unreadable;
    set_item raises StorageWriteError when it cannot be written.
    """

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
