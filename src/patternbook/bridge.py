# src/patternbook/bridge.py
"""
Bridge: swap at runtime which implementor performs the work behind an abstraction.
"""

from abc import ABC, abstractmethod

from .config import PlaygroundConfig


class Implementor(ABC):
    @abstractmethod
    def start(self):
        ...

    @abstractmethod
    def stop(self):
        ...


class Abstraction:
    def __init__(self, implementor: Implementor):
        self._implementor = implementor

    def start(self):
        print("starting")
        self._implementor.start()

    def stop(self):
        print("Stopping")
        self._implementor.stop()

    def restart(self):
        self.stop()
        self.start()


class Implementor1(Implementor):
    def start(self):
        print("Implementor1.start()")

    def stop(self):
        print("Implementor1.stop()")


class Implementor2(Implementor):
    def start(self):
        print("Implementor2.start()")

    def stop(self):
        print("Implementor2.stop()")


class RecordingImplementor(Implementor):
    """Records calls so tests can check that ``restart`` stops before it starts."""

    def __init__(self):
        self.stop_called = False
        self.start_called = False
        self.in_proper_order = False
        self.calls = []

    def start(self):
        self.in_proper_order = self.stop_called and not self.start_called
        self.start_called = True
        self.calls.append("start")
        print(f"RecordingImplementor.start() {self.start_called} {self.stop_called} {self.in_proper_order}")

    def stop(self):
        self.in_proper_order = not self.start_called and not self.stop_called
        self.stop_called = True
        self.calls.append("stop")
        print(f"RecordingImplementor.stop() {self.start_called} {self.stop_called} {self.in_proper_order}")


def demo(config: PlaygroundConfig) -> None:
    abstraction = Abstraction(Implementor1())
    abstraction.restart()
    abstraction = Abstraction(Implementor2())
    abstraction.restart()

    print("")
    recorder = RecordingImplementor()
    Abstraction(recorder).restart()
    assert recorder.in_proper_order
    assert recorder.start_called
    assert recorder.stop_called
