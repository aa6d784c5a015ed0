# src/patternbook/flyweight.py
"""
Flyweight: share one cached instance per distinct value.

Worth it when many instances of the same value get created, they never
mutate, and trading a little memory for a cache is acceptable.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .config import PlaygroundConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ingredient:
    name: str

    def __repr__(self):
        return self.name


class IngredientManager:
    """Registry handing out one shared ``Ingredient`` per name."""

    def __init__(self):
        self._known_ingredients: Dict[str, Ingredient] = {}

    def get(self, name: str) -> Ingredient:
        ingredient = self._known_ingredients.get(name)
        if ingredient is None:
            logger.info("Registering ingredient %r", name)
            ingredient = self._known_ingredients[name] = Ingredient(name)
        return ingredient

    @property
    def count(self) -> int:
        return len(self._known_ingredients)


class GroceryList:
    def __init__(self, manager: IngredientManager = None):
        self._list: List[Tuple[Ingredient, int]] = []
        self._manager = manager or IngredientManager()

    def add(self, item: str, amount: int = 1) -> None:
        self._list.append((self._manager.get(item), amount))

    @property
    def entries(self) -> List[Tuple[Ingredient, int]]:
        return list(self._list)

    @property
    def distinct_count(self) -> int:
        return self._manager.count

    def __str__(self):
        lines = "\n".join(f"{ingredient!r} (x{amount})" for ingredient, amount in self._list)
        return f"{self._manager.count}  Items: \n\n" + lines


ITEMS = ["kale", "carrots", "salad", "carrots", "cucumber",
         "celery", "pepper", "bell peppers", "carrots", "salad"]


def demo(config: PlaygroundConfig) -> None:
    shopping = GroceryList()
    for item in ITEMS:
        shopping.add(item)
    print(shopping)
