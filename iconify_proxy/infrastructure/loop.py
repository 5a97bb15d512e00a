"""A dedicated asyncio event loop thread for synchronous callers.

The in-flight map of :class:`FetchCoordinator` is only safe on a single
loop, so synchronous front ends (Flask views) submit their coroutines here
instead of calling :func:`asyncio.run` per request.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any, Coroutine, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _start_event_loop(loop: asyncio.AbstractEventLoop) -> None:
    asyncio.set_event_loop(loop)
    loop.run_forever()


class BackgroundLoop:
    def __init__(self, name: str = "iconify-aio") -> None:
        self._name = name
        self._lock = threading.Lock()
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._loop is not None

    def start(self) -> asyncio.AbstractEventLoop:
        with self._lock:
            if self._loop is not None:
                return self._loop

            self._loop = asyncio.new_event_loop()
            self._thread = threading.Thread(
                target=_start_event_loop, args=(self._loop,), daemon=True, name=self._name
            )
            self._thread.start()
            logger.debug("Started event loop thread %s", self._name)
            return self._loop

    def run(self, coro: Coroutine[Any, Any, T], timeout: Optional[float] = None) -> T:
        """Run ``coro`` on the background loop and block for its result.

        On timeout the coroutine is cancelled; shielded work it started keeps
        running on the loop.
        """

        loop = self.start()
        future = asyncio.run_coroutine_threadsafe(coro, loop)
        try:
            return future.result(timeout=timeout)
        except FutureTimeoutError:
            future.cancel()
            raise

    def stop(self) -> None:
        with self._lock:
            loop = self._loop
            thread = self._thread
            self._loop = None
            self._thread = None

        if loop is None:
            return
        loop.call_soon_threadsafe(loop.stop)
        if thread is not None:
            thread.join(timeout=5)
        loop.close()
        logger.debug("Stopped event loop thread %s", self._name)
