"""Workout domain models."""

from dataclasses import dataclass
from enum import Enum


class FitnessGoal(str, Enum):
    """Training objective that selects a workout template."""

    BALANCE = "Balance"
    BURN_FAT = "Burn Fat"
    BUILD_MUSCLE = "Build Muscle"


class Intensity(str, Enum):
    """Workout intensity level."""

    MODERATE = "Moderate"
    HIGH = "High"


@dataclass(frozen=True)
class WorkoutPlan:
    """Fixed workout template for a goal."""

    category: FitnessGoal
    label: str
    exercises: tuple[str, ...]
    duration_minutes: int
    intensity: Intensity
