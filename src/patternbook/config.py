# src/patternbook/config.py
"""
Configuration and data structures for the pattern playground.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .enums import PatternCategory


@dataclass
class Demo:
    """A runnable pattern walkthrough."""
    name: str
    category: PatternCategory
    summary: str
    run: Callable[["PlaygroundConfig"], None]


@dataclass
class PlaygroundConfig:
    """Playground-wide settings."""
    verbose: bool = False  # Enable INFO logging for the package
    delay_scale: float = 1.0  # Multiplier for every demo delay, 0 = instant
    operation_delay: float = 1.0  # Seconds before a juggled operation runs
    dispatch_timeout: float = 10.0  # Max seconds to wait for the main queue to drain

    # Facade
    cache_cleaner_interval: float = 10.0  # Seconds between cache sweeps
    cache_max_age: float = 300.0  # Entries older than this are swept
    request_timeout: float = 30.0

    # Type erasure grazing
    graze_rounds: int = 5  # Number of random feedings
    random_seed: Optional[int] = None

    def scaled(self, seconds: float) -> float:
        """Apply ``delay_scale`` to a delay in seconds."""
        return max(0.0, seconds * self.delay_scale)
