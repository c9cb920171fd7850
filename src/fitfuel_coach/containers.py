"""Dependency container wiring for the application."""

import random
from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from fitfuel_coach.adapters.json_file_store import JsonFileKeyValueStore
from fitfuel_coach.adapters.supabase_kv_store import SupabaseKeyValueStore
from fitfuel_coach.config import Settings
from fitfuel_coach.services.coach import CoachService
from fitfuel_coach.services.nutrition import NutritionEstimator
from fitfuel_coach.services.state import StateService
from fitfuel_coach.services.storage import InMemoryKeyValueStore, KeyValueStore
from fitfuel_coach.services.workouts import WorkoutRecommender


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    state_service: StateService
    coach_service: CoachService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    state_service = StateService(build_store(resolved_settings))
    rng = random.Random(resolved_settings.random_seed)
    coach_service = CoachService(
        estimator=NutritionEstimator(rng=rng),
        recommender=WorkoutRecommender(rng=rng),
        state=state_service,
        analysis_delay_seconds=resolved_settings.analysis_delay_seconds,
    )
    return AppContainer(
        settings=resolved_settings,
        state_service=state_service,
        coach_service=coach_service,
    )


def build_store(settings: Settings) -> KeyValueStore:
    """Create the key/value store selected by the settings."""
    backend = settings.storage_backend.strip().lower()
    if backend == "file":
        return JsonFileKeyValueStore(Path(settings.storage_path))
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase storage requires url and service key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseKeyValueStore(client, profile_key=settings.profile_key)
    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")
