"""Single event-loop timer multiplexing many timeouts."""

from __future__ import annotations

import asyncio
import bisect
import itertools
import logging
from collections.abc import Callable
from datetime import timedelta

__all__ = ["Timer"]

_log = logging.getLogger(__name__)


class Timer:
    """Runs callbacks after timeouts using one scheduled loop handle.

    Callbacks sharing the same expiration time run together, in the order
    they were registered.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._timeouts: list[tuple[float, int, Callable[[], object]]] = []
        self._sequence = itertools.count()
        self._handle: asyncio.TimerHandle | None = None

    def expires_from_now(
        self, timeout: float | timedelta, on_timer_expired: Callable[[], object]
    ) -> None:
        """Call ``on_timer_expired`` once ``timeout`` (seconds) has elapsed."""
        if isinstance(timeout, timedelta):
            timeout = timeout.total_seconds()
        expiration = self._get_loop().time() + timeout

        # A sooner expiration replaces the pending wait.
        if not self._timeouts or expiration < self._timeouts[0][0]:
            self._schedule_next_tick(expiration)

        bisect.insort(self._timeouts, (expiration, next(self._sequence), on_timer_expired))

    def pending(self) -> int:
        """Number of callbacks still waiting to run."""
        return len(self._timeouts)

    def cancel(self) -> None:
        """Drop every pending callback."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._timeouts.clear()

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def _schedule_next_tick(self, expiration: float) -> None:
        if self._handle is not None:
            self._handle.cancel()
        _log.debug("schedule callback at %s", expiration)
        self._handle = self._get_loop().call_at(expiration, self._on_fire)

    def _on_fire(self) -> None:
        self._handle = None
        if not self._timeouts:
            return

        first = self._timeouts[0][0]
        count = sum(1 for _ in itertools.takewhile(lambda t: t[0] == first, self._timeouts))
        due = self._timeouts[:count]
        del self._timeouts[:count]
        _log.debug("run %d callback(s) scheduled at %s", count, first)

        for _, _, callback in due:
            callback()

        if self._timeouts:
            self._schedule_next_tick(self._timeouts[0][0])