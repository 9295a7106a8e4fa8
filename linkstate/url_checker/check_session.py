# -*- coding: utf-8 -*-
import asyncio
import threading
from typing import Optional

from .exceptions import CheckInProgressError


class CancellationSignal:
    """
    Cooperative cancellation flag shared by one batch.

    The batch waits on the signal inside its event loop while ``cancel`` may
    be called from any thread, e.g. a UI thread while ``URLStateChecker.run``
    blocks. Calls from a foreign thread are handed over to the loop.

    :param loop: Event loop the batch runs in, None when created outside a loop.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._event = asyncio.Event()
        self._loop = loop
        self._disposed = False

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        if self._disposed:
            return

        if self._loop is None or self._loop.is_closed() or self._in_loop_thread():
            self._event.set()
        else:
            self._loop.call_soon_threadsafe(self._event.set)

    async def wait(self) -> None:
        await self._event.wait()

    def dispose(self) -> None:
        self._disposed = True

    def _in_loop_thread(self) -> bool:
        try:
            return asyncio.get_running_loop() is self._loop
        except RuntimeError:
            return False


class CheckSession:
    """
    Single-flight guard of a batch check.

    Holds the "in progress" lock and the cancellation signal of the running
    batch. ``acquire`` fails fast when a batch is already active and
    ``release`` tears the session down so the next batch starts cleanly.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self.signal: Optional[CancellationSignal] = None

    @property
    def in_progress(self) -> bool:
        return self._lock.locked()

    def acquire(self) -> CancellationSignal:
        """
        Start a session bound to the running event loop.

        :return: Cancellation signal of the new batch.
        :raises CheckInProgressError: If a batch is already running.
        """
        loop = asyncio.get_running_loop()
        if not self._lock.acquire(blocking=False):
            raise CheckInProgressError("A URL check is already in progress")
        self.signal = CancellationSignal(loop)
        return self.signal

    def release(self) -> None:
        if self.signal is not None:
            self.signal.dispose()
            self.signal = None
        if self._lock.locked():
            self._lock.release()

    def cancel(self) -> bool:
        """
        Request cancellation of the running batch. Safe to call from any thread.

        :return: True if a running batch was signalled.
        """
        signal = self.signal
        if signal is None:
            return False
        signal.cancel()
        return True
