# src/patternbook/template.py
"""
Template method: fix the algorithm at a high level and defer some steps.

``RecommendationEngine.match`` is the fixed algorithm; engines provide the
``filter`` step, and the ``sort`` step shared by every restaurant engine comes
from a mixin instead of being duplicated in each engine.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, TypeVar

from .config import PlaygroundConfig

Model = TypeVar("Model")


class RecommendationEngine(ABC, Generic[Model]):
    def __init__(self, models: Sequence[Model]):
        self.models: List[Model] = list(models)

    @abstractmethod
    def filter(self, elements: List[Model]) -> List[Model]:
        ...

    @abstractmethod
    def sort(self, elements: List[Model]) -> List[Model]:
        ...

    def match(self) -> Optional[Model]:
        # With zero or one model there is nothing to rank
        if len(self.models) <= 1:
            return self.models[0] if self.models else None
        ranked = self.sort(self.filter(self.models))
        return ranked[0] if ranked else None


@dataclass(frozen=True)
class Restaurant:
    name: str
    visited: bool
    score: float


class RestaurantSorting:
    """Shared ``sort`` step for engines over restaurants: best score first."""

    def sort(self, elements: List[Restaurant]) -> List[Restaurant]:
        return sorted(elements, key=lambda restaurant: restaurant.score, reverse=True)


class FavoriteEngine(RestaurantSorting, RecommendationEngine[Restaurant]):
    """Best among the restaurants already visited."""

    def filter(self, elements: List[Restaurant]) -> List[Restaurant]:
        return [restaurant for restaurant in elements if restaurant.visited]


class BestEngine(RestaurantSorting, RecommendationEngine[Restaurant]):
    """Best among the restaurants never visited."""

    def filter(self, elements: List[Restaurant]) -> List[Restaurant]:
        return [restaurant for restaurant in elements if not restaurant.visited]


RESTAURANTS = [
    Restaurant(name="Tony's Pizza", visited=True, score=2.0),
    Restaurant(name="Krusty's", visited=True, score=3.0),
    Restaurant(name="Bob's Burger", visited=False, score=4.9),
]


def demo(config: PlaygroundConfig) -> None:
    print(FavoriteEngine(RESTAURANTS).match())
    print(BestEngine(RESTAURANTS).match())
