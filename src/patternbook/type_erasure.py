# src/patternbook/type_erasure.py
"""
Type erasure: hide a generic parameter behind a concrete wrapper.

Two ways to do it:

1. Closure-based. The wrapper captures the bound ``eat`` method of the
   animal it wraps and forwards calls to it.
2. Boxing-based. An abstract base class that fixes the food type, a private
   box that subclasses it and forwards every call to the concrete animal,
   and a public wrapper that only ever talks to the abstract base. This is
   how ``AnyAnimalBoxed[GrassV2]`` can hold cows and goats alike.
"""

import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Protocol, Sequence, TypeVar

from .config import PlaygroundConfig

logger = logging.getLogger(__name__)


class Food:
    def __repr__(self):
        return f"{type(self).__name__}()"


F = TypeVar("F", bound=Food)


class Grass(Food):
    pass


class Animal(ABC, Generic[F]):
    @abstractmethod
    def eat(self, food: F) -> str:
        ...


class Cow(Animal[Grass]):
    def eat(self, food: Grass) -> str:
        message = "Grass is yummy! moooooo!"
        print(message)
        return message


class Goat(Animal[Grass]):
    def eat(self, food: Grass) -> str:
        message = "Grass is good! meehhhh!"
        print(message)
        return message


class AnyAnimal(Animal[F]):
    """Closure-based erasure: forwards ``eat`` to the captured method."""

    def __init__(self, animal: Animal[F]):
        self._eat_block: Callable[[F], str] = animal.eat

    def eat(self, food: F) -> str:
        return self._eat_block(food)


# Boxing-based erasure

class NamedAnimal(Protocol[F]):
    name: str
    preferred_food: Optional[F]

    def eat(self, food: F) -> str:
        ...


class _AnyAnimalBase(Generic[F]):
    """Abstract base binding the food type; every member must be overridden by the box."""

    @property
    def name(self) -> str:
        raise NotImplementedError

    @property
    def preferred_food(self) -> Optional[F]:
        raise NotImplementedError

    @preferred_food.setter
    def preferred_food(self, food: Optional[F]) -> None:
        raise NotImplementedError

    def eat(self, food: F) -> str:
        raise NotImplementedError


class _AnyAnimalBox(_AnyAnimalBase[F]):
    """Private box: forwards every call to the concrete target."""

    def __init__(self, target: NamedAnimal[F]):
        self.target = target

    @property
    def name(self) -> str:
        return self.target.name

    @property
    def preferred_food(self) -> Optional[F]:
        return self.target.preferred_food

    @preferred_food.setter
    def preferred_food(self, food: Optional[F]) -> None:
        self.target.preferred_food = food

    def eat(self, food: F) -> str:
        return self.target.eat(food)


class AnyAnimalBoxed(Generic[F]):
    """Public wrapper; only sees the abstract base."""

    def __init__(self, animal: NamedAnimal[F]):
        self._box: _AnyAnimalBase[F] = _AnyAnimalBox(animal)

    @property
    def name(self) -> str:
        return self._box.name

    @property
    def preferred_food(self) -> Optional[F]:
        return self._box.preferred_food

    @preferred_food.setter
    def preferred_food(self, food: Optional[F]) -> None:
        self._box.preferred_food = food

    def eat(self, food: F) -> str:
        return self._box.eat(food)


class GrassV2(Food):
    pass


class Flower(GrassV2):
    pass


class Dandelion(GrassV2):
    pass


class Shamrock(GrassV2):
    pass


class Grazer:
    """Shared ``eat`` for animals that live on grass: yummy only for the exact preferred kind."""

    def eat(self, food: GrassV2) -> str:
        preferred = self.preferred_food
        if preferred is not None and type(food) is type(preferred):
            message = f"{self.name}: Yummy! {type(food).__name__}"
        else:
            message = f"{self.name}: I'm eating..."
        print(message)
        return message


@dataclass
class CowV2(Grazer):
    name: str
    preferred_food: Optional[GrassV2] = None


@dataclass
class GoatV2(Grazer):
    name: str
    preferred_food: Optional[GrassV2] = None


def graze(flock: Sequence[NamedAnimal], flowers: Sequence[Food], rounds: int,
          rng: Optional[random.Random] = None) -> List[str]:
    """Feed a random animal a random flower ``rounds`` times."""
    rng = rng or random.Random()
    messages = []
    if not flock or not flowers:
        logger.info("Nothing to graze")
        return messages
    for _ in range(rounds):
        messages.append(rng.choice(flock).eat(rng.choice(flowers)))
    return messages


def demo(config: PlaygroundConfig) -> None:
    grass_eaters = [AnyAnimal(Cow()), AnyAnimal(Goat())]
    for animal in grass_eaters:
        animal.eat(Grass())

    flock = [
        AnyAnimalBoxed(CowV2("Bessie", preferred_food=Dandelion())),
        AnyAnimalBoxed(CowV2("Henrietta")),
        AnyAnimalBoxed(GoatV2("Billy", preferred_food=Shamrock())),
        AnyAnimalBoxed(GoatV2("Nanny", preferred_food=Flower())),
    ]
    flowers = [GrassV2(), Dandelion(), Flower(), Shamrock()]
    graze(flock, flowers, config.graze_rounds, random.Random(config.random_seed))
