"""
Scheduler adapter - Implements Scheduler protocol on the asyncio loop.

Timers are fire-and-forget: nothing in the client layer cancels them.
Callbacks that may run after newer state exists must check the identity
of what they target when they fire.
"""

import asyncio
from collections.abc import Callable
from typing import Any


class AsyncioScheduler:
    """Schedules callbacks with ``loop.call_later``."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[..., None], *args: Any) -> None:
        loop = self._loop or asyncio.get_running_loop()
        loop.call_later(delay, callback, *args)
