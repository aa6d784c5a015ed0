# src/patternbook/__init__.py
"""
Patternbook: a playground of classic design patterns
Each pattern lives in its own module with a runnable demo
"""

from .enums import PatternCategory, Topping, BooleanAnswer
from .config import Demo, PlaygroundConfig
from .dispatch import MainDispatcher
from .futures import Future, Promise, Success, Failure, SimpleError
from .memento import ShoppingList, Item
from .flyweight import IngredientManager, GroceryList
from .decorator import BaseBurger, WithCheese, WithIncredibleBurgerPatty, WithTopping, build_burger
from .bridge import Abstraction, RecordingImplementor
from .facade import Cache, CacheCleaner, CachedNetworking
from .demos import DEMOS, get_demo, run_demo, run_all

__version__ = "0.1.0"
__all__ = [
    "PatternCategory",
    "Topping",
    "BooleanAnswer",
    "Demo",
    "PlaygroundConfig",
    "MainDispatcher",
    "Future",
    "Promise",
    "Success",
    "Failure",
    "SimpleError",
    "ShoppingList",
    "Item",
    "IngredientManager",
    "GroceryList",
    "BaseBurger",
    "WithCheese",
    "WithIncredibleBurgerPatty",
    "WithTopping",
    "build_burger",
    "Abstraction",
    "RecordingImplementor",
    "Cache",
    "CacheCleaner",
    "CachedNetworking",
    "DEMOS",
    "get_demo",
    "run_demo",
    "run_all",
]
