"""mcfunction structure components."""

from src.builders.mcfunction.components.clear_volume import build_clear_volume
from src.builders.mcfunction.components.falls import (
    build_falls,
    build_falls_clearing,
    build_falls_removal,
    build_roller_coaster_falls,
)
from src.builders.mcfunction.components.mwall import build_mwall, build_mwall_removal
from src.builders.mcfunction.components.sign import build_sign, build_sign_removal
from src.builders.mcfunction.components.sphere import build_sphere
from src.builders.mcfunction.components.walkway import (
    build_walkway,
    build_walkway_cap,
    build_walkway_removal,
)

__all__ = [
    "build_clear_volume",
    "build_falls",
    "build_falls_clearing",
    "build_falls_removal",
    "build_mwall",
    "build_mwall_removal",
    "build_roller_coaster_falls",
    "build_sign",
    "build_sign_removal",
    "build_sphere",
    "build_walkway",
    "build_walkway_cap",
    "build_walkway_removal",
]
