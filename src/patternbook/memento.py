# src/patternbook/memento.py
"""
Memento: preserve and restore earlier states of a model.

- Memento: an immutable snapshot of the originator's internal state.
- Originator: produces mementos of itself and restores itself from one.
- CareTaker: stores mementos and hands them back to the originator on undo.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Generic, List, Tuple, TypeVar

from .config import PlaygroundConfig

logger = logging.getLogger(__name__)

M = TypeVar("M")

STRIKE = "\u0336"


def strike_through(text: str) -> str:
    return "".join(char + STRIKE for char in text)


@dataclass(frozen=True)
class Item:
    name: str
    done: bool = False

    @property
    def debug_description(self) -> str:
        return strike_through(self.name) if self.done else self.name


class Originator(ABC, Generic[M]):
    """Creates mementos and restores its state from them."""

    @abstractmethod
    def create_memento(self) -> M:
        ...

    @abstractmethod
    def set_memento(self, memento: M) -> None:
        ...


class ItemList(Originator[Tuple[Item, ...]]):
    """A list of items whose mementos are tuples of frozen items."""

    def __init__(self):
        self.items: List[Item] = []

    def create_memento(self) -> Tuple[Item, ...]:
        return tuple(self.items)

    def set_memento(self, memento: Tuple[Item, ...]) -> None:
        self.items = list(memento)


class CareTaker(ABC, Generic[M]):
    """Saves and restores mementos of its ``originator``."""

    def __init__(self):
        self.mementos: List[M] = []

    @property
    @abstractmethod
    def originator(self) -> Originator[M]:
        ...

    def save(self) -> None:
        self.mementos.append(self.originator.create_memento())

    def restore(self) -> None:
        if not self.mementos:
            logger.info("Nothing to restore")
            return
        self.originator.set_memento(self.mementos.pop())


class ShoppingList(CareTaker[Tuple[Item, ...]]):
    def __init__(self):
        super().__init__()
        self._list = ItemList()

    @property
    def originator(self) -> ItemList:
        return self._list

    @property
    def items(self) -> List[Item]:
        return list(self._list.items)

    def add(self, name: str) -> None:
        self._list.items.append(Item(name=name, done=False))

    def toggle(self, index: int) -> None:
        item = self._list.items[index]
        self._list.items[index] = replace(item, done=not item.done)

    def __str__(self):
        return "\n".join(item.debug_description for item in self._list.items)


def demo(config: PlaygroundConfig) -> None:
    """Undo a misspelt entry, then undo a wrong pick-up."""
    shopping_list = ShoppingList()
    shopping_list.add("Fish")
    shopping_list.save()

    shopping_list.add("Karrots")  # wrong spelling
    shopping_list.restore()
    print(f"1--\n{shopping_list}\n\n")

    shopping_list.add("Carrots")
    print(f"2--\n{shopping_list}\n\n")
    shopping_list.save()

    shopping_list.toggle(1)  # picked up
    print(f"3--\n{shopping_list}\n\n")

    shopping_list.restore()  # picked up the wrong item
    print(f"4--\n{shopping_list}\n\n")
