"""Profile progression: onboarding, meal logging and daily progress."""

from dataclasses import replace

from fitfuel_coach.domain.errors import ValidationError
from fitfuel_coach.domain.models import (
    DEFAULT_CALORIE_GOAL,
    MAX_FREQUENT_MEALS,
    DailyProgress,
    UserProfile,
)
from fitfuel_coach.domain.nutrition import MacroEstimate
from fitfuel_coach.services.achievements import evaluate_badges

MEALS_PER_STREAK = 3


def onboard(
    name: str, daily_calorie_goal: object = DEFAULT_CALORIE_GOAL
) -> UserProfile:
    """Create the initial profile for a user."""
    cleaned = name.strip() if isinstance(name, str) else ""
    if not cleaned:
        raise ValidationError("Name is required")
    return UserProfile(
        name=cleaned,
        daily_calorie_goal=_resolve_calorie_goal(daily_calorie_goal),
    )


def apply_meal_logged(
    profile: UserProfile,
    estimate: MacroEstimate,
    meal_text: str,
    daily_intake: int,
) -> tuple[UserProfile, int]:
    """Return the profile and daily intake after logging one meal."""
    total_meals = profile.total_meals_logged + 1
    achievements = profile.achievements | evaluate_badges(estimate, total_meals)
    frequent_meals = profile.frequent_meals
    if meal_text not in frequent_meals and len(frequent_meals) < MAX_FREQUENT_MEALS:
        frequent_meals = (*frequent_meals, meal_text)
    streak = profile.current_streak
    if total_meals % MEALS_PER_STREAK == 0:
        streak += 1
    updated = replace(
        profile,
        total_meals_logged=total_meals,
        achievements=achievements,
        frequent_meals=frequent_meals,
        current_streak=streak,
    )
    return updated, daily_intake + estimate.calories


def daily_progress(profile: UserProfile, daily_intake: int) -> DailyProgress:
    """Return today's calorie intake against the profile goal."""
    goal = profile.daily_calorie_goal
    if goal <= 0:
        goal = DEFAULT_CALORIE_GOAL
    return DailyProgress(
        consumed=daily_intake,
        goal=goal,
        remaining=max(goal - daily_intake, 0),
        percent=int(daily_intake * 100 / goal + 0.5),
    )


def _resolve_calorie_goal(value: object) -> int:
    if isinstance(value, bool):
        return DEFAULT_CALORIE_GOAL
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return DEFAULT_CALORIE_GOAL
    if isinstance(value, int) and value > 0:
        return value
    return DEFAULT_CALORIE_GOAL
