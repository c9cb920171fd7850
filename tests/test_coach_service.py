"""Tests for the coach session orchestration."""

import asyncio
from datetime import UTC, datetime

import pytest

from fitfuel_coach.domain.badges import Badge
from fitfuel_coach.domain.errors import ValidationError
from fitfuel_coach.domain.nutrition import MacroEstimate
from fitfuel_coach.domain.workouts import FitnessGoal
from fitfuel_coach.services.coach import CoachService
from fitfuel_coach.services.state import PROFILE_KEY
from fitfuel_coach.services.workouts import COACH_MESSAGES, WORKOUT_PLANS
from tests.conftest import RecordingKeyValueStore


def test_analyze_meal_logs_and_persists(
    coach_service: CoachService, store: RecordingKeyValueStore
) -> None:
    coach_service.onboard("Ada", 2000)

    analysis = asyncio.run(coach_service.analyze_meal("chicken and rice", "Burn Fat"))

    assert analysis.goal is FitnessGoal.BURN_FAT
    assert analysis.estimate.calories == 295
    assert analysis.workout == WORKOUT_PLANS[FitnessGoal.BURN_FAT]
    assert analysis.coach_message in COACH_MESSAGES[FitnessGoal.BURN_FAT]
    assert analysis.profile.total_meals_logged == 1
    assert analysis.profile.frequent_meals == ("chicken and rice",)
    assert analysis.new_badges == {Badge.HIGH_PROTEIN}
    assert analysis.daily_intake == 295

    dashboard = coach_service.dashboard()
    assert dashboard.profile == analysis.profile
    assert dashboard.daily_intake == 295
    assert dashboard.progress.percent == 15


def test_new_badges_only_reports_first_award(coach_service: CoachService) -> None:
    first = asyncio.run(coach_service.analyze_meal("chicken", "Balance"))
    second = asyncio.run(coach_service.analyze_meal("chicken", "Balance"))

    assert first.new_badges == {Badge.HIGH_PROTEIN}
    assert second.new_badges == frozenset()
    assert second.profile.achievements == {Badge.HIGH_PROTEIN}


@pytest.mark.parametrize("meal", ["", "   \n"])
def test_analyze_meal_rejects_blank_text(
    coach_service: CoachService, store: RecordingKeyValueStore, meal: str
) -> None:
    with pytest.raises(ValidationError):
        asyncio.run(coach_service.analyze_meal(meal, "Balance"))

    assert store.writes == []


def test_analyze_meal_waits_for_delay(
    coach_service: CoachService, monkeypatch: pytest.MonkeyPatch
) -> None:
    delays: list[float] = []

    async def fake_sleep(seconds: float) -> None:
        delays.append(seconds)

    monkeypatch.setattr(asyncio, "sleep", fake_sleep)
    coach_service.analysis_delay_seconds = 1.5

    asyncio.run(coach_service.analyze_meal("banana", "Balance"))

    assert delays == [1.5]


def test_onboard_keeps_existing_progress(coach_service: CoachService) -> None:
    asyncio.run(coach_service.analyze_meal("egg", "Balance"))

    profile = coach_service.onboard("Grace", -1)

    assert profile.name == "Grace"
    assert profile.daily_calorie_goal == 2000
    assert profile.total_meals_logged == 1


def test_onboard_rejects_blank_name(
    coach_service: CoachService, store: RecordingKeyValueStore
) -> None:
    with pytest.raises(ValidationError):
        coach_service.onboard(" ", 2000)

    assert PROFILE_KEY not in store.values


def test_roulette_without_meal_only_picks_goal(coach_service: CoachService) -> None:
    result = coach_service.spin_roulette()

    assert result.goal in set(FitnessGoal)
    assert result.workout is None
    assert result.coach_message is None


def test_roulette_with_meal_refreshes_plan(coach_service: CoachService) -> None:
    estimate = MacroEstimate(calories=300, protein_g=20, carbs_g=30, fat_g=10)

    result = coach_service.spin_roulette(estimate)

    assert result.workout == WORKOUT_PLANS[result.goal]
    assert result.coach_message in COACH_MESSAGES[result.goal]


def test_cheat_meal_uses_burn_fat_plan_without_logging(
    coach_service: CoachService, store: RecordingKeyValueStore
) -> None:
    result = coach_service.cheat_meal_workout("double cheese pasta")

    assert result.workout == WORKOUT_PLANS[FitnessGoal.BURN_FAT]
    assert result.estimate.calories == 113 + 131
    assert store.writes == []


def test_cheat_meal_rejects_blank_text(coach_service: CoachService) -> None:
    with pytest.raises(ValidationError):
        coach_service.cheat_meal_workout("")


def test_burn_meal_records_workout(coach_service: CoachService) -> None:
    plan = WORKOUT_PLANS[FitnessGoal.BUILD_MUSCLE]
    now = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)

    session = coach_service.burn_meal("salmon bowl", plan, now=now)

    assert session.countdown_seconds == 35 * 60
    assert coach_service.completed_workouts() == [session.entry]
    assert session.entry.timestamp == now


def test_dark_mode_and_intake_reset(coach_service: CoachService) -> None:
    asyncio.run(coach_service.analyze_meal("apple", "Balance"))
    coach_service.set_dark_mode(True)
    coach_service.reset_daily_intake()

    dashboard = coach_service.dashboard()

    assert dashboard.dark_mode is True
    assert dashboard.daily_intake == 0
    assert dashboard.profile.total_meals_logged == 1


@pytest.mark.parametrize("meal", ["", "  \t"])
def test_burn_meal_rejects_blank_text(
    coach_service: CoachService, store: RecordingKeyValueStore, meal: str
) -> None:
    plan = WORKOUT_PLANS[FitnessGoal.BALANCE]

    with pytest.raises(ValidationError):
        coach_service.burn_meal(meal, plan)

    assert coach_service.completed_workouts() == []
    assert store.writes == []
