# src/patternbook/visitor.py
"""
Visitor: run several distinct operations over a structure without changing it.

- ``Visitable``: elements that can be visited.
- ``Visitor``: walks ``Visitable`` objects and holds the operation's logic.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional

from .config import PlaygroundConfig


class Visitor(ABC):
    @abstractmethod
    def visit(self, element: "Visitable") -> None:
        ...


class Visitable:
    """Default ``accept`` hands the element itself to the visitor."""

    def accept(self, visitor: Visitor) -> None:
        visitor.visit(self)


class VisitableList(list, Visitable):
    """A list is visited as a whole, then element by element."""

    def accept(self, visitor: Visitor) -> None:
        visitor.visit(self)
        for element in self:
            visitor.visit(element)


@dataclass(frozen=True)
class Contribution(Visitable):
    date: datetime
    author: str
    email: str
    details: str


class LoggerVisitor(Visitor):
    def __init__(self):
        self.lines: List[str] = []

    def visit(self, element) -> None:
        if not isinstance(element, Contribution):
            return
        line = f"{element.author} / {element.email}"
        self.lines.append(line)
        print(line)


class ThankYouVisitor(Visitor):
    """Collects contributions made between three and four days before ``now``."""

    def __init__(self, now: Optional[datetime] = None):
        self.now = now or datetime.now()
        self.three_days_ago = self.now - timedelta(days=3)
        self.four_days_ago = self.now - timedelta(days=4)
        self.contributions: List[Contribution] = []

    def visit(self, element) -> None:
        if not isinstance(element, Contribution):
            return
        if self.four_days_ago < element.date <= self.three_days_ago:
            self.contributions.append(element)


def demo(config: PlaygroundConfig) -> None:
    now = datetime.now()
    visitor = LoggerVisitor()
    VisitableList([Contribution(now, "Contributor", "my@email.com", "")]).accept(visitor)
    VisitableList([Contribution(now, "Contributor 2", "my-other@email.com", "")]).accept(visitor)

    thanks = ThankYouVisitor(now)
    Contribution(thanks.three_days_ago, "John Duff", "john@email.com", "...").accept(thanks)
    VisitableList().accept(thanks)
    for contribution in thanks.contributions:
        print(f"Thanks, {contribution.author}!")
