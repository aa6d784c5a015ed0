# src/patternbook/generics.py
"""
Language feature explorations: generics, protocols with type parameters,
conditional behaviour per element type, value versus reference semantics,
and lazily evaluated closures.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from functools import reduce, singledispatch
from typing import (Any, Callable, Generic, Iterable, List, Optional, Protocol,
                    Sequence, TypeVar, Union)

from .config import PlaygroundConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")
InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


def compare(a, b) -> int:
    """1 if ``a > b``, -1 if ``a < b``, else 0."""
    if a > b:
        return 1
    if a < b:
        return -1
    return 0


# Sums that keep the element type

_IDENTITIES = {int: 0, float: 0.0, complex: 0j, Decimal: Decimal(0),
               Fraction: Fraction(0), str: ""}


def total(values: Iterable[T], element_type: Optional[type] = None) -> T:
    """
    Sum ``values`` keeping their element type.

    Numbers add, strings concatenate. An empty input yields the identity of
    ``element_type`` (``0`` when not given). Mixing element types is a
    ``TypeError``.
    """
    values = list(values)
    if element_type is None:
        element_type = type(values[0]) if values else int
    for value in values:
        if type(value) is not element_type:
            raise TypeError(
                f"cannot total {type(value).__name__} with {element_type.__name__} elements")
    if element_type is str:
        return "".join(values)
    if element_type not in _IDENTITIES:
        raise TypeError(f"no additive identity for {element_type.__name__}")
    return reduce(lambda acc, value: acc + value, values, _IDENTITIES[element_type])


# Animals constrained to a food type

class Food:
    pass


class Grass(Food):
    pass


class Meat(Food):
    pass


F = TypeVar("F", bound=Food)


class Animal(Generic[F]):
    food_type: type = Food

    def eat(self, food: F) -> None:
        if not isinstance(food, self.food_type):
            raise TypeError(f"{type(self).__name__} does not eat {type(food).__name__}")

    def __repr__(self):
        return f"{type(self).__name__}()"


class Cow(Animal[Grass]):
    food_type = Grass


class Lion(Animal[Meat]):
    food_type = Meat


@singledispatch
def feed(animal) -> str:
    message = "I can't feed..."
    print(message)
    return message


@feed.register
def _(animal: Cow) -> str:
    animal.eat(Grass())
    message = f"The {animal!r} is eating grass"
    print(message)
    return message


@feed.register
def _(animal: Lion) -> str:
    animal.eat(Meat())
    message = f"The {animal!r} is eating meat"
    print(message)
    return message


class AnimalHolder(Generic[T]):
    def __init__(self):
        self.animals: List[T] = []


# Toggling

class Toggling(Protocol):
    def toggle(self) -> "Toggling":
        ...

    @property
    def is_active(self) -> bool:
        ...


class Switch(Enum):
    OFF = 0
    ON = 1

    def toggle(self) -> "Switch":
        # Enum members are immutable, toggling returns the other member
        return Switch.OFF if self is Switch.ON else Switch.ON

    @property
    def is_active(self) -> bool:
        return self is Switch.ON


@dataclass
class Flag:
    value: bool = False

    def toggle(self) -> "Flag":
        self.value = not self.value
        return self

    @property
    def is_active(self) -> bool:
        return self.value


@dataclass(frozen=True)
class Bit8Dimming:
    value: int

    def __post_init__(self):
        if not 0 < self.value < 256:
            raise ValueError(f"8-bit dimming must be within (0, 256), got {self.value}")


@dataclass(frozen=True)
class ZeroOneDimming:
    value: float

    def __post_init__(self):
        if not 0 < self.value < 1:
            raise ValueError(f"dimming must be within (0, 1), got {self.value}")


D = TypeVar("D")


@dataclass(frozen=True)
class DimmableState(Generic[D]):
    """``on``, ``off`` or ``dimmed`` at some level of type ``D``."""
    mode: str
    level: Optional[D] = None

    @classmethod
    def on(cls) -> "DimmableState[D]":
        return cls("on")

    @classmethod
    def off(cls) -> "DimmableState[D]":
        return cls("off")

    @classmethod
    def dimmed(cls, level: D) -> "DimmableState[D]":
        return cls("dimmed", level)

    def toggle(self) -> "DimmableState[D]":
        """Anything but ``off`` toggles to ``off``."""
        return DimmableState.on() if self.mode == "off" else DimmableState.off()

    @property
    def is_active(self) -> bool:
        return self.mode != "off"


# Value semantics

@dataclass
class Point:
    x: float
    y: float

    def translating(self, dx: float, dy: float) -> "Point":
        return translated(self, dx, dy)


def translate(point: Point, dx: float, dy: float) -> None:
    """Move ``point`` in place."""
    point.x += dx
    point.y += dy


def translated(point: Point, dx: float, dy: float) -> Point:
    """Return a moved copy, leaving ``point`` untouched."""
    moved = replace(point)
    translate(moved, dx, dy)
    return moved


@dataclass(frozen=True)
class MessageBoard:
    user_id: str
    contents: str
    date: datetime = field(default_factory=datetime.now)


# Lazily evaluated closures

@dataclass(frozen=True)
class Company:
    name: str

    def __str__(self):
        return f"Company name is {self.name}"


def debug_log(message: Callable[[], str], debug: bool = True) -> Optional[str]:
    """Evaluate ``message`` only when ``debug`` is on."""
    if not debug:
        return None
    line = f"debug: {message()}"
    print(line)
    return line


# Workers

class Worker(Protocol[InputT, OutputT]):
    def start(self, input: InputT) -> OutputT:
        ...


@dataclass(frozen=True)
class User:
    first_name: str
    last_name: str


class MailJob:
    def __init__(self):
        self.sent: List[str] = []

    def start(self, input: Union[str, User]) -> bool:
        address = input if isinstance(input, str) else f"{input.first_name}.{input.last_name}"
        self.sent.append(address)
        logger.info("Mail job queued for %s", address)
        return True


def run_worker(worker: Worker, inputs: Sequence[Any]) -> List[Any]:
    outputs = []
    for value in inputs:
        outputs.append(worker.start(value))
        if isinstance(value, User):
            print(f"Finished processing user {value.first_name} {value.last_name}")
    return outputs


def demo(config: PlaygroundConfig) -> None:
    print(compare(3, 2), compare("a", "b"), compare(1.0, 1.0))

    int_sum = total([1, 2, 3, 4, 5])
    float_sum = total([1.0, 2.0, 3.0, 4.0])
    assert isinstance(int_sum, int) and int_sum == 15
    assert isinstance(float_sum, float)
    assert total(["Hello", " ", "World", "!"]) == "Hello World!"
    print(int_sum, float_sum, total(["Hello", " ", "World", "!"]))

    feed(Cow())
    feed(Lion())

    holder: AnimalHolder[Cow] = AnimalHolder()
    print(holder.animals)
    holder.animals.append(Cow())
    print(holder.animals)

    state = DimmableState.dimmed(Bit8Dimming(10))
    print(state, "->", state.toggle())
    print(Switch.OFF.toggle(), Flag().toggle().is_active)

    point = Point(0.0, 0.0)
    moved = translated(point, 1.0, 1.0)
    print(point, moved, Point(0.0, 0.0).translating(5.0, 2.0).translating(2.0, 3.0))

    for message in (MessageBoard(f"USER{i}", f"content{i}") for i in range(3)):
        print(f"{message.user_id}: {message.contents}")

    apple = Company("Apple")
    debug_log(lambda: str(apple))

    run_worker(MailJob(), [User("orlan", "tompkins")])
