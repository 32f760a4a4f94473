from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Run a callback once input has been quiet for ``delay`` seconds.

    Each ``submit`` cancels the pending call and schedules a new one, so only
    the latest value is ever delivered. Must be used from inside a running
    event loop.
    """

    def __init__(self, delay: float, callback: Callable[[Any], None]) -> None:
        self.delay = delay
        self.callback = callback
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def submit(self, value: Any) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, value)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, value: Any) -> None:
        self._handle = None
        logger.debug("Debounced value delivered: %r", value)
        self.callback(value)
