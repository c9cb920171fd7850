"""Shared test fixtures."""

import random
from dataclasses import dataclass, field

import pytest

from fitfuel_coach.config import Settings
from fitfuel_coach.containers import AppContainer
from fitfuel_coach.services.coach import CoachService
from fitfuel_coach.services.nutrition import NutritionEstimator
from fitfuel_coach.services.state import StateService
from fitfuel_coach.services.storage import KeyValueStore
from fitfuel_coach.services.workouts import WorkoutRecommender


@dataclass
class RecordingKeyValueStore(KeyValueStore):
    """In-memory store that records every write."""

    values: dict[str, str] = field(default_factory=dict)
    writes: list[tuple[str, str]] = field(default_factory=list)

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value
        self.writes.append((key, value))


@pytest.fixture
def settings() -> Settings:
    return Settings(
        storage_backend="memory",
        analysis_delay_seconds=0,
        random_seed=7,
    )


@pytest.fixture
def store() -> RecordingKeyValueStore:
    return RecordingKeyValueStore()


@pytest.fixture
def state_service(store: RecordingKeyValueStore) -> StateService:
    return StateService(store)


@pytest.fixture
def coach_service(state_service: StateService) -> CoachService:
    rng = random.Random(42)
    return CoachService(
        estimator=NutritionEstimator(rng=rng),
        recommender=WorkoutRecommender(rng=rng),
        state=state_service,
    )


@pytest.fixture
def container(
    settings: Settings,
    state_service: StateService,
    coach_service: CoachService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        state_service=state_service,
        coach_service=coach_service,
    )
