# src/taskpad/tasks/task_ids.py

from __future__ import annotations

import time

from ..core.ports import Clock


class TaskIdFactory:
    """
    Millisecond-timestamp ids that never repeat.

    A plain `int(time.time() * 1000)` collides when two tasks are created
    within the same millisecond (or the clock steps back), so each id is
    max(now_ms, last + 1).
    """

    def __init__(self, clock: Clock = time.time) -> None:
        self._clock = clock
        self._last = 0

    def observe(self, task_id: int) -> None:
        """Raise the floor so future ids are greater than an existing one."""
        if task_id > self._last:
            self._last = task_id

    def next_id(self) -> int:
        now_ms = int(self._clock() * 1000)
        self._last = max(now_ms, self._last + 1)
        return self._last
