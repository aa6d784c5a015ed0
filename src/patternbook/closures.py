# src/patternbook/closures.py
"""
Closures and memory management.

A closure closes over the variables it refers to in the enclosing scope. When
an object stores a closure that refers back to the object, the two keep each
other alive: CPython's reference counting can no longer free them and only
the cyclic garbage collector will. Capturing a ``weakref`` instead breaks the
cycle.
"""

import gc
import logging
import weakref
from dataclasses import dataclass
from typing import Callable, List

import psutil

from .config import PlaygroundConfig
from .dispatch import MainDispatcher

logger = logging.getLogger(__name__)


@dataclass
class Book:
    title: str
    author: str
    price: float


def sell_book(book: Book) -> Callable[[], float]:
    """Return a closure that records one sale and returns the running total."""
    total_sales = 0.0

    def sell() -> float:
        nonlocal total_sales
        total_sales += book.price
        return total_sales

    return sell


def delay(seconds: float, fn: Callable[[], None], dispatcher: MainDispatcher) -> None:
    """Run ``fn`` on ``dispatcher`` after ``seconds`` on a background timer."""
    dispatcher.after(seconds, fn)


def memory_footprint() -> float:
    """Resident set size of this process, in MB."""
    return psutil.Process().memory_info().rss / 1024**2


def _report_deinit(name: str) -> None:
    print(f"Juggler named {name} DEINITIED")


class OperationJuggler:
    """Stores operations that refer back to the juggler only weakly."""

    def __init__(self, name: str, dispatcher: MainDispatcher, delay: float = 1.0):
        self.name = name
        self.delay = delay
        self.dispatcher = dispatcher
        self._operations: List[Callable[[], None]] = []
        weakref.finalize(self, _report_deinit, name)

    def add_operation(self, op: Callable[[], None]) -> None:
        juggler_ref = weakref.ref(self)

        def scheduled() -> None:
            juggler = juggler_ref()
            if juggler is None:
                logger.info("Juggler is gone, dropping operation")
                return
            juggler.dispatcher.after(juggler.delay, op)

        self._operations.append(scheduled)

    def run_last_operation(self) -> None:
        if not self._operations:
            raise IndexError("no operations to run")
        self._operations[-1]()

    @property
    def operation_count(self) -> int:
        return len(self._operations)


class LeakyJuggler:
    """Same as ``OperationJuggler`` but each stored closure holds ``self`` strongly."""

    def __init__(self, name: str, dispatcher: MainDispatcher, delay: float = 1.0):
        self.name = name
        self.delay = delay
        self.dispatcher = dispatcher
        self._operations: List[Callable[[], None]] = []

    def add_operation(self, op: Callable[[], None]) -> None:
        def scheduled() -> None:
            self.dispatcher.after(self.delay, op)

        self._operations.append(scheduled)

    def run_last_operation(self) -> None:
        self._operations[-1]()


class IncrementJuggler:
    """The cycle appears just the same when the closure only reads a value off ``self``."""

    def __init__(self, base_value: int = 100):
        self.base_value = base_value
        self._increment_values: List[Callable[[], int]] = []

    def add_value(self, increment: int) -> None:
        self._increment_values.append(lambda: self.base_value + increment)

    def run_operation(self, index: int) -> int:
        return self._increment_values[index]()


def survives_without_gc(factory: Callable[[], object]) -> bool:
    """True if the object built by ``factory`` outlives its last external reference."""
    was_enabled = gc.isenabled()
    gc.disable()
    try:
        obj = factory()
        ref = weakref.ref(obj)
        del obj
        alive = ref() is not None
    finally:
        if was_enabled:
            gc.enable()
    gc.collect()
    return alive


def demo(config: PlaygroundConfig) -> None:
    """Closures over local state, then a reference cycle and its weak-capture fix."""
    book_a = Book(title="BookA", author="AuthorA", price=10.0)
    book_b = Book(title="BookB", author="AuthorB", price=13.0)
    sell_book_a = sell_book(book_a)
    sell_book_b = sell_book(book_b)
    print(f"book sales for: {sell_book_a()}")
    print(f"book sales for: {sell_book_b()}")

    before = memory_footprint()
    with MainDispatcher() as dispatcher:
        juggler = OperationJuggler("first", dispatcher, delay=config.scaled(config.operation_delay))
        juggler.add_operation(lambda: print("Executing operation 1"))
        juggler.run_last_operation()
        # Releasing the juggler frees it right away, the scheduled work still runs
        juggler = OperationJuggler("replacement", dispatcher)
        dispatcher.drain(config.dispatch_timeout)

        leaky_alive = survives_without_gc(
            lambda: _leaky_with_operation(dispatcher, config))
        weak_alive = survives_without_gc(
            lambda: _weak_with_operation(dispatcher, config))
        dispatcher.drain(config.dispatch_timeout)
        del juggler

    print(f"strong capture outlives its owner: {leaky_alive}")
    print(f"weak capture outlives its owner: {weak_alive}")
    logger.info("Memory footprint %.1f MB -> %.1f MB", before, memory_footprint())


def _leaky_with_operation(dispatcher: MainDispatcher, config: PlaygroundConfig) -> LeakyJuggler:
    juggler = LeakyJuggler("leaky", dispatcher, delay=config.scaled(config.operation_delay))
    juggler.add_operation(lambda: None)
    return juggler


def _weak_with_operation(dispatcher: MainDispatcher, config: PlaygroundConfig) -> OperationJuggler:
    juggler = OperationJuggler("weak", dispatcher, delay=config.scaled(config.operation_delay))
    juggler.add_operation(lambda: None)
    return juggler
