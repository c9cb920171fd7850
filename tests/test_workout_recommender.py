"""Tests for workout recommendations."""

import random

import pytest

from fitfuel_coach.domain.nutrition import MacroEstimate
from fitfuel_coach.domain.workouts import FitnessGoal, Intensity
from fitfuel_coach.services.workouts import (
    COACH_MESSAGES,
    WorkoutRecommender,
    parse_goal,
)


def test_build_muscle_plan_is_fixed() -> None:
    recommender = WorkoutRecommender()
    light = MacroEstimate(calories=50, protein_g=1, carbs_g=10, fat_g=0)
    heavy = MacroEstimate(calories=1200, protein_g=90, carbs_g=100, fat_g=60)

    first = recommender.recommend("BuildMuscle", light)
    second = recommender.recommend("BuildMuscle", heavy)

    assert first == second
    assert first.category is FitnessGoal.BUILD_MUSCLE
    assert first.exercises == (
        "25 Push-ups",
        "20 Pike Push-ups",
        "30 Squats",
        "15 Diamond Push-ups",
        "20 Lunges (each leg)",
    )
    assert first.duration_minutes == 35
    assert first.intensity is Intensity.HIGH


def test_unknown_goal_falls_back_to_balance() -> None:
    recommender = WorkoutRecommender()

    assert recommender.recommend("unknown-goal") == recommender.recommend("Balance")
    assert recommender.recommend(None).category is FitnessGoal.BALANCE


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Burn Fat", FitnessGoal.BURN_FAT),
        ("BurnFat", FitnessGoal.BURN_FAT),
        ("burn_fat", FitnessGoal.BURN_FAT),
        ("build-muscle", FitnessGoal.BUILD_MUSCLE),
        (FitnessGoal.BALANCE, FitnessGoal.BALANCE),
        ("", FitnessGoal.BALANCE),
        (42, FitnessGoal.BALANCE),
    ],
)
def test_parse_goal(value: object, expected: FitnessGoal) -> None:
    assert parse_goal(value) is expected


def test_every_plan_has_five_exercises() -> None:
    recommender = WorkoutRecommender()

    for goal in FitnessGoal:
        assert len(recommender.recommend(goal).exercises) == 5


def test_coach_message_is_from_goal_set() -> None:
    recommender = WorkoutRecommender(rng=random.Random(5))

    seen = {recommender.coach_message("Burn Fat") for _ in range(100)}

    assert seen == set(COACH_MESSAGES[FitnessGoal.BURN_FAT])


def test_coach_message_unknown_goal_uses_balance_set() -> None:
    recommender = WorkoutRecommender()

    assert recommender.coach_message("yoga") in COACH_MESSAGES[FitnessGoal.BALANCE]


def test_random_goal_covers_all_goals() -> None:
    recommender = WorkoutRecommender(rng=random.Random(1))

    seen = {recommender.random_goal() for _ in range(100)}

    assert seen == set(FitnessGoal)
