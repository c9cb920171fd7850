"""Goal-based workout recommendations and coach messages."""

import random
from dataclasses import dataclass, field

from fitfuel_coach.domain.nutrition import MacroEstimate
from fitfuel_coach.domain.workouts import FitnessGoal, Intensity, WorkoutPlan

WORKOUT_PLANS: dict[FitnessGoal, WorkoutPlan] = {
    FitnessGoal.BALANCE: WorkoutPlan(
        category=FitnessGoal.BALANCE,
        label="Balanced Training",
        exercises=(
            "20 Push-ups",
            "30 Squats",
            "1-minute Plank",
            "15 Burpees",
            "20 Mountain Climbers",
        ),
        duration_minutes=25,
        intensity=Intensity.MODERATE,
    ),
    FitnessGoal.BURN_FAT: WorkoutPlan(
        category=FitnessGoal.BURN_FAT,
        label="Fat Burning HIIT",
        exercises=(
            "30 Jumping Jacks",
            "20 High Knees",
            "15 Burpees",
            "30 Mountain Climbers",
            "20 Jump Squats",
        ),
        duration_minutes=30,
        intensity=Intensity.HIGH,
    ),
    FitnessGoal.BUILD_MUSCLE: WorkoutPlan(
        category=FitnessGoal.BUILD_MUSCLE,
        label="Strength Training",
        exercises=(
            "25 Push-ups",
            "20 Pike Push-ups",
            "30 Squats",
            "15 Diamond Push-ups",
            "20 Lunges (each leg)",
        ),
        duration_minutes=35,
        intensity=Intensity.HIGH,
    ),
}

COACH_MESSAGES: dict[FitnessGoal, tuple[str, ...]] = {
    FitnessGoal.BALANCE: (
        "Perfect! Let's maintain that beautiful balance! 🌟",
        "Your body is a temple - let's keep it strong and balanced! 💪",
        "Balanced nutrition calls for balanced movement! Let's go! 🎯",
    ),
    FitnessGoal.BURN_FAT: (
        "Time to turn up the heat and melt those calories! 🔥",
        "Let's torch those calories with some high-intensity fun! ⚡",
        "Your fat-burning journey starts now - let's ignite it! 🚀",
    ),
    FitnessGoal.BUILD_MUSCLE: (
        "Time to build that strength and sculpt those muscles! 💪",
        "Let's turn that protein into pure power! 🏋️‍♂️",
        "Muscle-building mode activated - let's get swole! 💥",
    ),
}


def parse_goal(value: object) -> FitnessGoal:
    """Resolve a goal from user input, defaulting to Balance."""
    if isinstance(value, FitnessGoal):
        return value
    if not isinstance(value, str):
        return FitnessGoal.BALANCE
    key = _normalize(value)
    for goal in FitnessGoal:
        if _normalize(goal.value) == key or _normalize(goal.name) == key:
            return goal
    return FitnessGoal.BALANCE


def _normalize(value: str) -> str:
    return "".join(ch for ch in value.lower() if ch not in " -_")


@dataclass
class WorkoutRecommender:
    """Select workout plans and motivational messages for a goal."""

    rng: random.Random = field(default_factory=random.Random)

    def recommend(
        self, goal: object, estimate: MacroEstimate | None = None
    ) -> WorkoutPlan:
        """Return the workout plan for a goal.

        The estimate is accepted for interface symmetry; plan selection depends
        only on the goal.
        """
        return WORKOUT_PLANS[parse_goal(goal)]

    def coach_message(self, goal: object) -> str:
        """Return a random motivational message for a goal."""
        return self.rng.choice(COACH_MESSAGES[parse_goal(goal)])

    def random_goal(self) -> FitnessGoal:
        """Pick a goal uniformly at random."""
        return self.rng.choice(list(FitnessGoal))
