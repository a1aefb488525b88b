"""Walkway strategy handlers."""

from src.builders.mcfunction.components.walkway_strategies.walkway_angled import (
    build_walkway_angled_removal_strategy,
    build_walkway_angled_strategy,
)
from src.builders.mcfunction.components.walkway_strategies.walkway_straight import (
    build_walkway_cap_strategy,
    build_walkway_straight_removal_strategy,
    build_walkway_straight_strategy,
)

__all__ = [
    "build_walkway_angled_removal_strategy",
    "build_walkway_angled_strategy",
    "build_walkway_cap_strategy",
    "build_walkway_straight_removal_strategy",
    "build_walkway_straight_strategy",
]
