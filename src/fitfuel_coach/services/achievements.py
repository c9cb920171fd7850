"""Badge evaluation rules."""

from fitfuel_coach.domain.badges import Badge
from fitfuel_coach.domain.nutrition import MacroEstimate

PROTEIN_THRESHOLD_G = 25
CARBS_THRESHOLD_G = 40
FAT_THRESHOLD_G = 15
CALORIES_THRESHOLD = 500
FIRST_MEAL_MILESTONE = 10
SECOND_MEAL_MILESTONE = 50


def evaluate_badges(
    estimate: MacroEstimate, total_meals_logged: int
) -> frozenset[Badge]:
    """Return the badges earned by a meal and the meal count after logging it."""
    earned: set[Badge] = set()
    if estimate.protein_g > PROTEIN_THRESHOLD_G:
        earned.add(Badge.HIGH_PROTEIN)
    if estimate.carbs_g > CARBS_THRESHOLD_G:
        earned.add(Badge.HIGH_CARB)
    if estimate.fat_g > FAT_THRESHOLD_G:
        earned.add(Badge.HIGH_FAT)
    if estimate.calories > CALORIES_THRESHOLD:
        earned.add(Badge.HIGH_CALORIE)
    if total_meals_logged >= FIRST_MEAL_MILESTONE:
        earned.add(Badge.MEAL_MILESTONE_10)
    if total_meals_logged >= SECOND_MEAL_MILESTONE:
        earned.add(Badge.MEAL_MILESTONE_50)
    return frozenset(earned)
