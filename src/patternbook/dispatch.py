# src/patternbook/dispatch.py
"""
A main-thread-like serial queue for the concurrency demos.
"""

import logging
import queue
import threading
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class MainDispatcher:
    """Runs submitted callbacks one at a time, in submission order, on a single worker."""

    def __init__(self, name: str = "main"):
        self.name = name
        self.work_queue = queue.Queue()
        self.worker_thread = None
        self.errors: List[BaseException] = []
        self._running = False
        self._pending = 0
        self._timers: List[threading.Timer] = []
        self._lock = threading.Lock()
        self._idle = threading.Condition(self._lock)

    def start(self):
        """Start the worker thread."""
        with self._lock:
            if self._running:
                return
            self._running = True
            self.worker_thread = threading.Thread(
                target=self._worker, name=f"{self.name}-dispatcher"
            )
            self.worker_thread.daemon = True
            self.worker_thread.start()

    def stop(self):
        """Cancel outstanding timers, stop the worker thread and drop unrun callbacks."""
        with self._lock:
            self._running = False
            timers, self._timers = self._timers, []
        for timer in timers:
            timer.cancel()
        if self.worker_thread and self.worker_thread is not threading.current_thread():
            self.worker_thread.join()
        self.worker_thread = None

        dropped = len(timers)
        while True:
            try:
                self.work_queue.get_nowait()
            except queue.Empty:
                break
            dropped += 1
        if dropped:
            logger.info("Dropped %d unrun callbacks on %s dispatcher", dropped, self.name)
            self._done(dropped)

    @property
    def is_running(self) -> bool:
        return self._running

    def _worker(self):
        """Worker loop draining the queue."""
        while self._running:
            try:
                fn = self.work_queue.get(timeout=0.1)
            except queue.Empty:
                continue
            try:
                fn()
            except Exception as e:
                logger.exception("Callback failed on %s dispatcher", self.name)
                with self._lock:
                    self.errors.append(e)
            finally:
                self._done()

    def _done(self, count: int = 1):
        with self._idle:
            self._pending -= count
            if self._pending == 0:
                self._idle.notify_all()

    def async_(self, fn: Callable[[], None]) -> None:
        """Queue ``fn`` to run on the dispatcher."""
        self.start()
        with self._lock:
            self._pending += 1
        self.work_queue.put(fn)

    def after(self, delay: float, fn: Callable[[], None]) -> None:
        """Run ``fn`` on the dispatcher once ``delay`` seconds have elapsed on a background timer."""
        self.start()
        with self._lock:
            self._pending += 1

        def fire():
            # Hand over to the queue; the timer's pending slot moves with it.
            # A timer stop() already took out of _timers hands over nothing.
            with self._lock:
                if timer not in self._timers:
                    return
                self._timers.remove(timer)
                self.work_queue.put(fn)

        timer = threading.Timer(max(0.0, delay), fire)
        timer.daemon = True
        with self._lock:
            self._timers.append(timer)
        timer.start()

    def drain(self, timeout: Optional[float] = None) -> bool:
        """
        Block until every queued and scheduled callback has run.

        Returns False if ``timeout`` elapsed first. Re-raises the first
        callback error, if any.
        """
        with self._idle:
            finished = self._idle.wait_for(lambda: self._pending == 0, timeout=timeout)
            error = self.errors[0] if self.errors else None
            self.errors.clear()
        if error is not None:
            raise error
        return finished

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False
