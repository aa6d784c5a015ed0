# src/patternbook/strategy.py
"""
Strategy: pick the algorithm at runtime.

A context (the ``Bill``) holds a strategy member; strategies share one
interface and can be swapped while the context is in use.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from .config import PlaygroundConfig


class PartKind(Enum):
    WAFFER = "waffer"
    CUP = "cup"
    SCOOP = "scoop"
    CHOCOLATE_DIP = "chocolate dipping"
    CANDY_TOPPING = "candy topping"


@dataclass(frozen=True)
class IceCreamPart:
    kind: PartKind
    count: int = 1

    @classmethod
    def waffer(cls) -> "IceCreamPart":
        return cls(PartKind.WAFFER)

    @classmethod
    def cup(cls) -> "IceCreamPart":
        return cls(PartKind.CUP)

    @classmethod
    def scoop(cls, count: int) -> "IceCreamPart":
        return cls(PartKind.SCOOP, count)

    @classmethod
    def chocolate_dip(cls) -> "IceCreamPart":
        return cls(PartKind.CHOCOLATE_DIP)

    @classmethod
    def candy_topping(cls) -> "IceCreamPart":
        return cls(PartKind.CANDY_TOPPING)

    @property
    def price(self) -> float:
        """Unit price."""
        return 2.0 if self.kind is PartKind.SCOOP else 0.25

    def __str__(self):
        if self.kind is PartKind.SCOOP:
            return f"{self.count}x scoops"
        return f"1x {self.kind.value}"


class BillingStrategy(ABC):
    @abstractmethod
    def add(self, item: IceCreamPart) -> float:
        """Price ``item``."""


class FullPriceStrategy(BillingStrategy):
    def add(self, item: IceCreamPart) -> float:
        if item.kind is PartKind.SCOOP:
            return item.count * item.price
        return item.price


class HalfPriceToppings(FullPriceStrategy):
    def add(self, item: IceCreamPart) -> float:
        if item.kind is PartKind.CANDY_TOPPING:
            return item.price / 2.0
        return super().add(item)


class HalfPriceStrategy(FullPriceStrategy):
    """Loyalty program: everything at half price."""

    def add(self, item: IceCreamPart) -> float:
        return super().add(item) / 2.0


@dataclass
class Bill:
    strategy: BillingStrategy
    items: List[Tuple[IceCreamPart, float]] = field(default_factory=list)

    def add(self, item: IceCreamPart) -> None:
        self.items.append((item, self.strategy.add(item)))

    def total(self) -> float:
        return sum(price for _, price in self.items)

    def __str__(self):
        lines = "\n".join(f"{item} ${price}" for item, price in self.items)
        return lines + "\n-------" + f"\nTotal ${self.total()}\n"


def demo(config: PlaygroundConfig) -> None:
    bill = Bill(FullPriceStrategy())
    bill.add(IceCreamPart.waffer())
    bill.add(IceCreamPart.scoop(1))
    bill.add(IceCreamPart.candy_topping())
    print(bill)

    bill = Bill(FullPriceStrategy())
    bill.add(IceCreamPart.cup())
    bill.add(IceCreamPart.scoop(3))
    bill.strategy = HalfPriceToppings()
    bill.add(IceCreamPart.candy_topping())
    print(bill)

    bill = Bill(HalfPriceStrategy())
    bill.add(IceCreamPart.waffer())
    bill.add(IceCreamPart.scoop(1))
    bill.add(IceCreamPart.candy_topping())
    print(bill)
