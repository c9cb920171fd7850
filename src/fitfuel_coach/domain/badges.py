"""Achievement badges."""

from enum import Enum


class Badge(str, Enum):
    """Badge identifiers that can be earned by logging meals."""

    HIGH_PROTEIN = "high-protein"
    HIGH_CARB = "high-carb"
    HIGH_FAT = "high-fat"
    HIGH_CALORIE = "high-calorie"
    MEAL_MILESTONE_10 = "meal-milestone-10"
    MEAL_MILESTONE_50 = "meal-milestone-50"

    @property
    def label(self) -> str:
        """Return the display name shown to the user."""
        return _LABELS[self]


_LABELS = {
    Badge.HIGH_PROTEIN: "Protein Champ",
    Badge.HIGH_CARB: "Carb Overlord",
    Badge.HIGH_FAT: "Fat Fighter",
    Badge.HIGH_CALORIE: "Calorie Crusher",
    Badge.MEAL_MILESTONE_10: "Meal Master",
    Badge.MEAL_MILESTONE_50: "Nutrition Ninja",
}
