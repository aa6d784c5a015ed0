# src/patternbook/enums.py
"""
Enumeration types shared across the pattern demos.
"""

from enum import Enum


class PatternCategory(Enum):
    """Families the demos are grouped into."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"
    ARCHITECTURAL = "architectural"
    LANGUAGE = "language"
    CONCURRENCY = "concurrency"


class Topping(Enum):
    """Burger toppings, used by the decorator demo."""
    KETCHUP = "ketchup"
    MAYONNAISE = "mayonnaise"
    SALAD = "salad"
    TOMATO = "tomato"

    def decorate(self, burger):
        """Wrap ``burger`` with this topping."""
        # Imported here to keep enums free of module-level cycles
        from .decorator import WithTopping
        return WithTopping(burger, self)


class BooleanAnswer(Enum):
    """Answers accepted by the quiz games."""
    TRUE = "true"
    FALSE = "false"
