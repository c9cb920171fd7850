"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodMacros:
    """Per-occurrence macro contribution of a known food keyword."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class MacroEstimate:
    """Rounded macro estimate for a single meal description."""

    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
