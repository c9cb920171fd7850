"""Persisted application state on top of a key/value store."""

import json
import logging
from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from fitfuel_coach.domain.badges import Badge
from fitfuel_coach.domain.models import (
    DEFAULT_CALORIE_GOAL,
    MAX_FREQUENT_MEALS,
    CompletedWorkout,
    UserProfile,
)
from fitfuel_coach.domain.workouts import FitnessGoal, Intensity, WorkoutPlan
from fitfuel_coach.services.storage import KeyValueStore

PROFILE_KEY = "user_profile"
DAILY_INTAKE_KEY = "daily_intake"
DARK_MODE_KEY = "dark_mode"
COMPLETED_WORKOUTS_KEY = "completed_workouts"
PROFILE_SCHEMA_VERSION = 1

_logger = logging.getLogger(__name__)


class ProfileRecord(BaseModel):
    """Stored profile blob."""

    schema_version: int = PROFILE_SCHEMA_VERSION
    name: str = ""
    daily_calorie_goal: int = Field(default=DEFAULT_CALORIE_GOAL, gt=0)
    current_streak: int = Field(default=0, ge=0)
    total_meals_logged: int = Field(default=0, ge=0)
    achievements: list[str] = Field(default_factory=list)
    frequent_meals: list[str] = Field(default_factory=list)


class WorkoutPlanRecord(BaseModel):
    """Stored workout plan."""

    category: FitnessGoal
    label: str
    exercises: list[str]
    duration_minutes: int
    intensity: Intensity


class CompletedWorkoutRecord(BaseModel):
    """Stored completed-workout entry."""

    meal_text: str
    workout_plan: WorkoutPlanRecord
    timestamp: datetime


@dataclass
class StateService:
    """Load and save the user's persisted state.

    Unreadable blobs are discarded and replaced by defaults.
    """

    store: KeyValueStore

    def load_profile(self) -> UserProfile:
        """Return the stored profile or a fresh default one."""
        raw = self.store.get(PROFILE_KEY)
        if raw is None:
            return UserProfile()
        try:
            record = ProfileRecord.model_validate_json(raw)
        except PydanticValidationError:
            _logger.warning("Discarding malformed stored profile")
            return UserProfile()
        if record.schema_version != PROFILE_SCHEMA_VERSION:
            _logger.warning(
                "Discarding stored profile with schema version %s",
                record.schema_version,
            )
            return UserProfile()
        return _profile_from_record(record)

    def save_profile(self, profile: UserProfile) -> None:
        """Persist the profile."""
        record = ProfileRecord(
            name=profile.name,
            daily_calorie_goal=profile.daily_calorie_goal,
            current_streak=profile.current_streak,
            total_meals_logged=profile.total_meals_logged,
            achievements=sorted(badge.value for badge in profile.achievements),
            frequent_meals=list(profile.frequent_meals),
        )
        self.store.set(PROFILE_KEY, record.model_dump_json())

    def load_daily_intake(self) -> int:
        """Return the stored daily calorie intake."""
        raw = self.store.get(DAILY_INTAKE_KEY)
        if raw is None:
            return 0
        try:
            value = int(raw.strip())
        except ValueError:
            _logger.warning("Discarding malformed daily intake: %r", raw)
            return 0
        return max(value, 0)

    def save_daily_intake(self, value: int) -> None:
        """Persist the daily calorie intake."""
        self.store.set(DAILY_INTAKE_KEY, str(value))

    def reset_daily_intake(self) -> None:
        """Clear the daily calorie intake."""
        self.save_daily_intake(0)

    def load_dark_mode(self) -> bool:
        """Return the stored dark-mode flag."""
        raw = self.store.get(DARK_MODE_KEY)
        if raw is None:
            return False
        try:
            value = json.loads(raw)
        except json.JSONDecodeError:
            value = None
        if not isinstance(value, bool):
            _logger.warning("Discarding malformed dark mode flag: %r", raw)
            return False
        return value

    def save_dark_mode(self, enabled: bool) -> None:
        """Persist the dark-mode flag."""
        self.store.set(DARK_MODE_KEY, json.dumps(enabled))

    def load_completed_workouts(self) -> list[CompletedWorkout]:
        """Return the completed-workout log in insertion order."""
        return [
            _completed_from_record(record) for record in self._load_workout_records()
        ]

    def append_completed_workout(self, entry: CompletedWorkout) -> None:
        """Append an entry to the completed-workout log."""
        records = self._load_workout_records()
        records.append(
            CompletedWorkoutRecord(
                meal_text=entry.meal_text,
                workout_plan=WorkoutPlanRecord(
                    category=entry.workout_plan.category,
                    label=entry.workout_plan.label,
                    exercises=list(entry.workout_plan.exercises),
                    duration_minutes=entry.workout_plan.duration_minutes,
                    intensity=entry.workout_plan.intensity,
                ),
                timestamp=entry.timestamp,
            )
        )
        payload = [record.model_dump(mode="json") for record in records]
        self.store.set(COMPLETED_WORKOUTS_KEY, json.dumps(payload))

    def _load_workout_records(self) -> list[CompletedWorkoutRecord]:
        raw = self.store.get(COMPLETED_WORKOUTS_KEY)
        if raw is None:
            return []
        try:
            payload = json.loads(raw)
            if not isinstance(payload, list):
                raise TypeError("completed workouts must be a list")
            return [CompletedWorkoutRecord.model_validate(item) for item in payload]
        except (json.JSONDecodeError, TypeError, PydanticValidationError):
            _logger.warning("Discarding malformed completed workout log")
            return []


def _profile_from_record(record: ProfileRecord) -> UserProfile:
    known = {badge.value for badge in Badge}
    achievements = frozenset(
        Badge(value) for value in record.achievements if value in known
    )
    frequent_meals: list[str] = []
    for meal in record.frequent_meals:
        if meal not in frequent_meals and len(frequent_meals) < MAX_FREQUENT_MEALS:
            frequent_meals.append(meal)
    return UserProfile(
        name=record.name,
        daily_calorie_goal=record.daily_calorie_goal,
        current_streak=record.current_streak,
        total_meals_logged=record.total_meals_logged,
        achievements=achievements,
        frequent_meals=tuple(frequent_meals),
    )


def _completed_from_record(record: CompletedWorkoutRecord) -> CompletedWorkout:
    plan = record.workout_plan
    return CompletedWorkout(
        meal_text=record.meal_text,
        workout_plan=WorkoutPlan(
            category=plan.category,
            label=plan.label,
            exercises=tuple(plan.exercises),
            duration_minutes=plan.duration_minutes,
            intensity=plan.intensity,
        ),
        timestamp=record.timestamp,
    )
