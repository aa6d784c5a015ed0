# src/patternbook/demos.py
"""
Registry of every pattern walkthrough, in a stable order.
"""

import logging
from typing import Dict, List, Optional

from . import (bridge, builder, closures, decorator, facade, flyweight, futures,
               generics, injection, memento, mvc, mvvm, observer, strategy,
               template, type_erasure, visitor)
from .config import Demo, PlaygroundConfig
from .enums import PatternCategory

logger = logging.getLogger(__name__)

DEMOS: List[Demo] = [
    Demo("builder", PatternCategory.CREATIONAL,
         "Chain setters on a nested builder, then build an immutable article", builder.demo),
    Demo("flyweight", PatternCategory.STRUCTURAL,
         "Share one cached ingredient per name", flyweight.demo),
    Demo("bridge", PatternCategory.STRUCTURAL,
         "Swap the implementor behind an abstraction", bridge.demo),
    Demo("facade", PatternCategory.STRUCTURAL,
         "Fetch, cache and clean behind a single run() call", facade.demo),
    Demo("decorator", PatternCategory.STRUCTURAL,
         "Wrap a burger with toppings, cheese and a patty", decorator.demo),
    Demo("strategy", PatternCategory.BEHAVIORAL,
         "Swap billing strategies on an ice-cream bill", strategy.demo),
    Demo("visitor", PatternCategory.BEHAVIORAL,
         "Log and thank contributions without touching them", visitor.demo),
    Demo("memento", PatternCategory.BEHAVIORAL,
         "Undo shopping list edits from saved snapshots", memento.demo),
    Demo("observer", PatternCategory.BEHAVIORAL,
         "Announce title changes with will-set and did-set hooks", observer.demo),
    Demo("template", PatternCategory.BEHAVIORAL,
         "Recommend restaurants with a fixed match() algorithm", template.demo),
    Demo("mvc", PatternCategory.ARCHITECTURAL,
         "Quiz game with model, view and controller", mvc.demo),
    Demo("mvvm", PatternCategory.ARCHITECTURAL,
         "Quiz game with a view bound to a view model", mvvm.demo),
    Demo("injection", PatternCategory.ARCHITECTURAL,
         "Constructor injection of a basket store and service", injection.demo),
    Demo("type-erasure", PatternCategory.LANGUAGE,
         "Closure and boxing based erasure of the food type", type_erasure.demo),
    Demo("generics", PatternCategory.LANGUAGE,
         "Generic functions, type-preserving sums, toggles and value types", generics.demo),
    Demo("closures", PatternCategory.CONCURRENCY,
         "Closures, reference cycles and weak capture", closures.demo),
    Demo("futures", PatternCategory.CONCURRENCY,
         "Hand-rolled futures, promises and chaining", futures.demo),
]

_BY_NAME: Dict[str, Demo] = {demo.name: demo for demo in DEMOS}


def demo_names() -> List[str]:
    return [demo.name for demo in DEMOS]


def get_demo(name: str) -> Demo:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown demo {name!r}, known demos: {', '.join(demo_names())}") from None


def by_category(category: PatternCategory) -> List[Demo]:
    return [demo for demo in DEMOS if demo.category is category]


def configure_logging(config: PlaygroundConfig) -> None:
    """Switch the package logger between INFO and WARNING."""
    package_logger = logging.getLogger(__package__)
    package_logger.setLevel(logging.INFO if config.verbose else logging.WARNING)


def run_demo(name: str, config: Optional[PlaygroundConfig] = None) -> None:
    config = config or PlaygroundConfig()
    configure_logging(config)
    demo = get_demo(name)
    logger.info("Running %s (%s)", demo.name, demo.category.value)
    demo.run(config)


def run_all(config: Optional[PlaygroundConfig] = None,
            category: Optional[PatternCategory] = None) -> List[str]:
    """Run every demo (or one category's) in order; returns the names run."""
    config = config or PlaygroundConfig()
    selected = by_category(category) if category else DEMOS
    for demo in selected:
        print(f"== Running {demo.name} ==")
        run_demo(demo.name, config)
    return [demo.name for demo in selected]
