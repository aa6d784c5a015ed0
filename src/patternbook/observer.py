# src/patternbook/observer.py
"""
Observer: react to property changes with will-set and did-set hooks.
"""

from typing import Any, Callable, Optional

from .config import PlaygroundConfig

WillSet = Callable[[Any, Any, Any], None]  # (instance, old, new)
DidSet = Callable[[Any, Any, Any], None]  # (instance, old, new)


class ObservedProperty:
    """Data descriptor that calls ``will_set`` before and ``did_set`` after each assignment."""

    def __init__(self, default: Any = None,
                 will_set: Optional[WillSet] = None, did_set: Optional[DidSet] = None):
        self.default = default
        self._will_set = will_set
        self._did_set = did_set
        self.name = None

    def __set_name__(self, owner, name):
        self.name = "_" + name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance.__dict__.get(self.name, self.default)

    def __set__(self, instance, value):
        old = self.__get__(instance)
        if self._will_set is not None:
            self._will_set(instance, old, value)
        instance.__dict__[self.name] = value
        if self._did_set is not None:
            self._did_set(instance, old, value)

    def will_set(self, fn: WillSet) -> WillSet:
        """Register ``fn`` as the will-set hook; usable as a decorator."""
        self._will_set = fn
        return fn

    def did_set(self, fn: DidSet) -> DidSet:
        """Register ``fn`` as the did-set hook; usable as a decorator."""
        self._did_set = fn
        return fn


def _announce_will_set(article, old, new):
    if old != new:
        article.changes.append(("will", new))
        print(f"The title will change to {new}")


def _announce_did_set(article, old, new):
    if old != new:
        article.changes.append(("did", old))
        print(f"The title has changed from {old}")


class Article:
    title = ObservedProperty("", will_set=_announce_will_set, did_set=_announce_did_set)

    def __init__(self, title: str = ""):
        self.changes = []
        self.__dict__["_title"] = title


def demo(config: PlaygroundConfig) -> None:
    article = Article()
    article.title = "A Good Title"
    article.title = "A Good Title"
    article.title = "A Better Title"
