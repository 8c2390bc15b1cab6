"""Daemons that run every turn and fuses that go off after a number of turns."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable

MAXDAEMONS = 20

_EMPTY = 0
_DAEMON = -1


class Phase(IntEnum):
    """When in a turn a daemon or fuse runs."""

    BEFORE = 1
    AFTER = 2


class SchedulerFull(Exception):
    """Raised when no free slot is left for a daemon or fuse."""


@dataclass
class _Slot:
    phase: int = _EMPTY
    func: Callable[[Any], Any] | None = None
    arg: Any = 0
    time: int = 0


class Scheduler:
    """A fixed number of slots, each holding a daemon or a fuse."""

    def __init__(self, capacity: int = MAXDAEMONS) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots = [_Slot() for _ in range(capacity)]

    def _free_slot(self) -> _Slot:
        for slot in self._slots:
            if slot.phase == _EMPTY:
                return slot
        raise SchedulerFull("ran out of fuse slots")

    def _find(self, func: Callable[[Any], Any]) -> _Slot | None:
        for slot in self._slots:
            if slot.phase != _EMPTY and slot.func == func:
                return slot
        return None

    def _occupy(self, func: Callable[[Any], Any], arg: Any, time: int, phase: int) -> None:
        phase = Phase(phase)
        slot = self._free_slot()
        slot.phase = phase
        slot.func = func
        slot.arg = arg
        slot.time = time

    def start_daemon(self, func: Callable[[Any], Any], arg: Any, phase: int) -> None:
        """Start a daemon that runs every time its phase comes round."""
        self._occupy(func, arg, _DAEMON, phase)

    def kill_daemon(self, func: Callable[[Any], Any]) -> None:
        """Remove the first daemon or fuse running `func`; do nothing if there is none."""
        slot = self._find(func)
        if slot is not None:
            slot.phase = _EMPTY

    def do_daemons(self, phase: int) -> None:
        """Run every daemon of the given phase, in slot order."""
        for slot in self._slots:
            if slot.phase == phase and slot.time == _DAEMON:
                slot.func(slot.arg)

    def fuse(self, func: Callable[[Any], Any], arg: Any, time: int, phase: int) -> None:
        """Start a fuse that goes off after `time` turns of its phase."""
        self._occupy(func, arg, time, phase)

    def lengthen(self, func: Callable[[Any], Any], xtime: int) -> None:
        """Add `xtime` turns to the fuse running `func`, if there is one."""
        slot = self._find(func)
        if slot is not None:
            slot.time += xtime

    def extinguish(self, func: Callable[[Any], Any]) -> None:
        """Put out the fuse running `func`, if there is one."""
        slot = self._find(func)
        if slot is not None:
            slot.phase = _EMPTY

    def do_fuses(self, phase: int) -> None:
        """Count down the fuses of the given phase and set off those that reach zero."""
        for slot in self._slots:
            if slot.phase == phase and slot.time > 0:
                slot.time -= 1
                if slot.time == 0:
                    slot.phase = _EMPTY
                    slot.func(slot.arg)