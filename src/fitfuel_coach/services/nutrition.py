"""Keyword-based meal nutrition estimator."""

import logging
import math
import random
from dataclasses import dataclass, field

from fitfuel_coach.domain.nutrition import FoodMacros, MacroEstimate

FOODS: dict[str, FoodMacros] = {
    "chicken": FoodMacros(calories=165, protein_g=31, carbs_g=0, fat_g=3.6),
    "rice": FoodMacros(calories=130, protein_g=2.7, carbs_g=28, fat_g=0.3),
    "broccoli": FoodMacros(calories=34, protein_g=2.8, carbs_g=7, fat_g=0.4),
    "salmon": FoodMacros(calories=208, protein_g=22, carbs_g=0, fat_g=12),
    "pasta": FoodMacros(calories=131, protein_g=5, carbs_g=25, fat_g=1.1),
    "egg": FoodMacros(calories=155, protein_g=13, carbs_g=1.1, fat_g=11),
    "bread": FoodMacros(calories=265, protein_g=9, carbs_g=49, fat_g=3.2),
    "banana": FoodMacros(calories=89, protein_g=1.1, carbs_g=23, fat_g=0.3),
    "apple": FoodMacros(calories=52, protein_g=0.3, carbs_g=14, fat_g=0.2),
    "cheese": FoodMacros(calories=113, protein_g=7, carbs_g=1, fat_g=9),
    "yogurt": FoodMacros(calories=59, protein_g=10, carbs_g=3.6, fat_g=0.4),
    "oatmeal": FoodMacros(calories=68, protein_g=2.4, carbs_g=12, fat_g=1.4),
}

# Uniform [low, low + span) ranges used when no keyword matches.
_FALLBACK_CALORIES = (300.0, 200.0)
_FALLBACK_PROTEIN = (15.0, 10.0)
_FALLBACK_CARBS = (30.0, 20.0)
_FALLBACK_FAT = (10.0, 8.0)

_logger = logging.getLogger(__name__)


@dataclass
class NutritionEstimator:
    """Estimate meal macros by matching known food keywords."""

    rng: random.Random = field(default_factory=random.Random)
    foods: dict[str, FoodMacros] = field(default_factory=lambda: dict(FOODS))

    def estimate(self, meal_text: str) -> MacroEstimate:
        """Return a rounded macro estimate for a free-text meal description.

        Every keyword found as a case-insensitive substring contributes once.
        When nothing matches, values are drawn from fixed default ranges.
        """
        matches = match_foods(meal_text, self.foods)
        if not matches:
            _logger.info("No known foods in meal, using default estimate")
            return self._fallback()

        total = FoodMacros(0.0, 0.0, 0.0, 0.0)
        for name in matches:
            food = self.foods[name]
            total = FoodMacros(
                calories=total.calories + food.calories,
                protein_g=total.protein_g + food.protein_g,
                carbs_g=total.carbs_g + food.carbs_g,
                fat_g=total.fat_g + food.fat_g,
            )
        return _round_macros(total)

    def _fallback(self) -> MacroEstimate:
        return MacroEstimate(
            calories=self._draw(_FALLBACK_CALORIES),
            protein_g=self._draw(_FALLBACK_PROTEIN),
            carbs_g=self._draw(_FALLBACK_CARBS),
            fat_g=self._draw(_FALLBACK_FAT),
        )

    def _draw(self, bounds: tuple[float, float]) -> int:
        low, span = bounds
        value = round_half_up(low + self.rng.random() * span)
        # Rounding must not reach the exclusive upper bound.
        return min(value, int(low + span) - 1)


def match_foods(meal_text: str, foods: dict[str, FoodMacros]) -> list[str]:
    """Return the known food keywords contained in the meal text."""
    lowered = meal_text.lower()
    return [name for name in foods if name in lowered]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounding up."""
    return math.floor(value + 0.5)


def _round_macros(total: FoodMacros) -> MacroEstimate:
    return MacroEstimate(
        calories=round_half_up(total.calories),
        protein_g=round_half_up(total.protein_g),
        carbs_g=round_half_up(total.carbs_g),
        fat_g=round_half_up(total.fat_g),
    )
