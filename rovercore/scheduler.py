"""Cooperative periodic task scheduler driven by a fixed-rate tick."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass
class Heartbeat:
    """A task that runs every ``period`` ticks while enabled."""

    name: str
    period: int
    func: Callable[[], object]
    enabled: bool = True
    n: int = 0


class Scheduler:
    """Runs registered tasks in registration order, once per tick when due."""

    def __init__(self) -> None:
        self._tasks: dict[str, Heartbeat] = {}

    def add(
        self,
        name: str,
        period: int,
        func: Callable[[], object],
        enabled: bool = True,
    ) -> Heartbeat:
        """Register a task; names must be unique."""
        if name in self._tasks:
            raise ValueError(f"task {name!r} already registered")
        if period < 1:
            raise ValueError("period must be at least 1")
        task = Heartbeat(name, period, func, enabled)
        self._tasks[name] = task
        return task

    def set_enabled(self, name: str, enabled: bool) -> None:
        self._tasks[name].enabled = enabled

    def __getitem__(self, name: str) -> Heartbeat:
        return self._tasks[name]

    def tick(self) -> None:
        """Advance every task's counter and run those that are due."""
        for task in self._tasks.values():
            task.n += 1
            if task.enabled and task.n >= task.period:
                task.func()
                task.n = 0