"""Domain models for the user profile and workout history."""

from dataclasses import dataclass, field
from datetime import datetime

from fitfuel_coach.domain.badges import Badge
from fitfuel_coach.domain.workouts import WorkoutPlan

DEFAULT_CALORIE_GOAL = 2000
MAX_FREQUENT_MEALS = 5


@dataclass(frozen=True)
class UserProfile:
    """Durable user profile updated after every logged meal."""

    name: str = ""
    daily_calorie_goal: int = DEFAULT_CALORIE_GOAL
    current_streak: int = 0
    total_meals_logged: int = 0
    achievements: frozenset[Badge] = field(default_factory=frozenset)
    frequent_meals: tuple[str, ...] = ()

    @property
    def is_onboarded(self) -> bool:
        """Return True once the user has entered a name."""
        return bool(self.name)


@dataclass(frozen=True)
class DailyProgress:
    """Calories consumed today relative to the daily goal."""

    consumed: int
    goal: int
    remaining: int
    percent: int


@dataclass(frozen=True)
class CompletedWorkout:
    """A workout started to burn off a meal."""

    meal_text: str
    workout_plan: WorkoutPlan
    timestamp: datetime
