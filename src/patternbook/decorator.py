# src/patternbook/decorator.py
"""
Decorator: add behaviour to an object by wrapping it instead of subclassing it.

Each decorator forwards what it leaves alone to the wrapped burger and
overrides only the properties it changes.
"""

from functools import reduce
from typing import Callable, Iterable, List, Optional, Protocol

from .config import PlaygroundConfig
from .enums import Topping


class Burger(Protocol):
    @property
    def price(self) -> float:
        ...

    @property
    def ingredients(self) -> List[str]:
        ...


class BaseBurger:
    def __init__(self, price: float = 1.0, ingredients: Optional[List[str]] = None):
        self._price = price
        self._ingredients = list(ingredients) if ingredients is not None else ["buns"]

    @property
    def price(self) -> float:
        return self._price

    @property
    def ingredients(self) -> List[str]:
        return list(self._ingredients)


class BurgerDecorator:
    """Forwards everything to ``burger``; subclasses override what they change."""

    def __init__(self, burger: Burger):
        self.burger = burger

    @property
    def price(self) -> float:
        return self.burger.price

    @property
    def ingredients(self) -> List[str]:
        return self.burger.ingredients


class WithCheese(BurgerDecorator):
    @property
    def price(self) -> float:
        return self.burger.price + 0.5

    @property
    def ingredients(self) -> List[str]:
        return self.burger.ingredients + ["cheese"]


class WithIncredibleBurgerPatty(BurgerDecorator):
    @property
    def price(self) -> float:
        return self.burger.price + 2.0

    @property
    def ingredients(self) -> List[str]:
        return self.burger.ingredients + ["incredible patty"]


class WithTopping(BurgerDecorator):
    def __init__(self, burger: Burger, topping: Topping):
        super().__init__(burger)
        self.topping = topping

    @property
    def ingredients(self) -> List[str]:
        return self.burger.ingredients + [self.topping.value]


BurgerTransform = Callable[[Burger], Burger]


def build_burger(decorators: Iterable[BurgerTransform], base: Optional[Burger] = None) -> Burger:
    """Fold ``decorators`` over ``base`` (a plain ``BaseBurger`` by default)."""
    return reduce(lambda burger, decorate: decorate(burger), decorators, base or BaseBurger())


def demo(config: PlaygroundConfig) -> None:
    burger: Burger = BaseBurger()
    burger = WithTopping(burger, Topping.KETCHUP)
    burger = WithCheese(burger)
    burger = WithIncredibleBurgerPatty(burger)
    burger = WithTopping(burger, Topping.SALAD)

    print(burger.ingredients)
    print(burger.price)
    assert burger.ingredients == ["buns", "ketchup", "cheese", "incredible patty", "salad"]
    assert burger.price == 3.5

    # Constructors and bound methods both work as decorators
    decorators = [Topping.KETCHUP.decorate, WithCheese, WithIncredibleBurgerPatty, Topping.SALAD.decorate]
    reduced = build_burger(decorators)
    print(reduced.price)
    print(reduced.ingredients)
    assert burger.ingredients == reduced.ingredients
    assert burger.price == reduced.price
