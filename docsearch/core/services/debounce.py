import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Debouncer:
    """Runs only the last of a burst of calls, after a quiet period.

    Must be used from within a running event loop.
    """

    def __init__(self, delay: float = 0.3):
        """Initialize debouncer.

        Args:
            delay: Quiet period in seconds.
        """
        self._delay = delay
        self._handle: Optional[asyncio.TimerHandle] = None
        self._idle = asyncio.Event()
        self._idle.set()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def call(self, callback: Callable[[], None]) -> None:
        """Cancel the armed timer and arm a new one for callback."""
        loop = asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()
            logger.debug("Debounce: pending call replaced")
        self._idle.clear()
        self._handle = loop.call_later(self._delay, self._fire, callback)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._idle.set()

    def _fire(self, callback: Callable[[], None]) -> None:
        self._handle = None
        try:
            callback()
        finally:
            if self._handle is None:
                self._idle.set()

    async def wait(self) -> None:
        """Wait until no call is pending."""
        while self.pending:
            await self._idle.wait()
