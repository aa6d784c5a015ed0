# src/patternbook/futures.py
"""
Futures and promises under the hood.

A ``Future`` is the read-only side: it holds an optional ``Result`` and calls
back whoever registered with ``then`` once the result lands. A ``Promise`` is
the side responsible for resolving it with a success or a failure. ``chain``
attaches a continuation that itself returns a future, so a pipeline of
asynchronous steps reads top to bottom instead of nesting callbacks.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, List, Optional, TypeVar, Union

from .config import PlaygroundConfig
from .dispatch import MainDispatcher

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    error: BaseException

    @property
    def is_success(self) -> bool:
        return False

    def __eq__(self, other):
        # Exceptions compare by identity; compare by type and args instead
        if not isinstance(other, Failure):
            return NotImplemented
        return type(self.error) is type(other.error) and self.error.args == other.error.args

    def __hash__(self):
        return hash((type(self.error), self.error.args))


Result = Union[Success[T], Failure]
Callback = Callable[[Result], None]


class SimpleErrorCause(Enum):
    ERROR_CAUSE_1 = "errorCause1"
    ERROR_CAUSE_2 = "errorCause2"


class SimpleError(Exception):
    """Two-variant error used to show failures travelling down a chain."""

    ERROR_CAUSE_1 = SimpleErrorCause.ERROR_CAUSE_1
    ERROR_CAUSE_2 = SimpleErrorCause.ERROR_CAUSE_2

    def __init__(self, cause: SimpleErrorCause):
        super().__init__(cause)
        self.cause = cause

    def __str__(self):
        return f"SimpleError.{self.cause.value}"


class Future(Generic[T]):
    """Read-only holder of an eventual result."""

    def __init__(self, callback: Optional[Callback] = None):
        self._result: Optional[Result] = None
        self.callback = callback
        # Guards the result/callback pair; callbacks run outside it
        self._lock = threading.Lock()

    @property
    def result(self) -> Optional[Result]:
        return self._result

    @result.setter
    def result(self, result: Optional[Result]):
        with self._lock:
            self._result = result
            callback = self.callback
        if result is not None and callback is not None:
            callback(result)

    @property
    def is_resolved(self) -> bool:
        return self._result is not None

    def then(self, callback: Callback) -> None:
        """Register ``callback``, replacing any previous one. Fires at once if already resolved."""
        with self._lock:
            self.callback = callback
            result = self._result
        if result is not None:
            callback(result)

    def chain(self, continuation: Callable[[Any], "Future[U]"]) -> "Future[U]":
        """Return a future for ``continuation(value)``, or for this future's failure."""
        promise: Promise = Promise()

        def forward(result: Result) -> None:
            if isinstance(result, Success):
                next_future = continuation(result.value)

                def settle(next_result: Result) -> None:
                    promise.result = next_result

                next_future.then(settle)
            else:
                logger.info("Forwarding failure %s down the chain", result.error)
                promise.result = result

        self.then(forward)
        return promise


class Promise(Future[T]):
    """The writable side of a ``Future``."""

    def resolve(self, value: T) -> None:
        self.result = Success(value)

    def reject(self, error: BaseException) -> None:
        self.result = Failure(error)


def async_operation(label: str, delay: float, outcome: Result,
                    dispatcher: MainDispatcher, log: Optional[List[str]] = None) -> Promise:
    """
    Settle a promise with ``outcome`` after ``delay`` seconds.

    The timer fires in the background, then hops to ``dispatcher`` where the
    completion message is printed and the promise is settled.
    """
    promise: Promise = Promise()

    def complete() -> None:
        message = f"{label} completed"
        print(message)
        if log is not None:
            log.append(message)
        promise.result = outcome

    dispatcher.after(delay, complete)
    return promise


def async_operation_1(config: PlaygroundConfig, dispatcher: MainDispatcher, log=None) -> Promise:
    return async_operation("asyncOperation1", config.scaled(1.0),
                           Success("Test Result"), dispatcher, log)


def async_operation_2(config: PlaygroundConfig, dispatcher: MainDispatcher, log=None) -> Promise:
    return async_operation("asyncOperation2", config.scaled(1.5),
                           Success("Test Result"), dispatcher, log)


def async_operation_3(text: str, config: PlaygroundConfig,
                      dispatcher: MainDispatcher, log=None) -> Promise:
    return async_operation("asyncOperation3", config.scaled(1.5),
                           Success(1000), dispatcher, log)


def async_operation_4(value: int, config: PlaygroundConfig,
                      dispatcher: MainDispatcher, log=None) -> Promise:
    return async_operation("asyncOperation4", config.scaled(1.5),
                           Failure(SimpleError(SimpleError.ERROR_CAUSE_1)), dispatcher, log)


def describe(result: Result) -> str:
    if isinstance(result, Success):
        return f"success({result.value!r})"
    return f"failure({result.error})"


def demo(config: PlaygroundConfig) -> None:
    """Single future, then a three-step chain ending in a failure."""
    with MainDispatcher() as dispatcher:
        future = async_operation_1(config, dispatcher)

        def handle(result: Result) -> None:
            if isinstance(result, Success):
                print(f" Handling result: {result.value} ")
            else:
                print(f" Handling error: {result.error} ")

        future.then(handle)
        dispatcher.drain(config.dispatch_timeout)

        (async_operation_2(config, dispatcher)
            .chain(lambda text: async_operation_3(text, config, dispatcher))
            .chain(lambda value: async_operation_4(value, config, dispatcher))
            .then(lambda result: print(f"THEN: {describe(result)}")))
        dispatcher.drain(config.dispatch_timeout)
