"""Session orchestration for meal analysis and workouts."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from fitfuel_coach.domain.badges import Badge
from fitfuel_coach.domain.errors import ValidationError
from fitfuel_coach.domain.models import CompletedWorkout, DailyProgress, UserProfile
from fitfuel_coach.domain.nutrition import MacroEstimate
from fitfuel_coach.domain.workouts import FitnessGoal, WorkoutPlan
from fitfuel_coach.services import progression
from fitfuel_coach.services.nutrition import NutritionEstimator
from fitfuel_coach.services.state import StateService
from fitfuel_coach.services.workouts import WorkoutRecommender, parse_goal

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dashboard:
    """Current persisted state for display."""

    profile: UserProfile
    daily_intake: int
    progress: DailyProgress
    dark_mode: bool


@dataclass(frozen=True)
class MealAnalysis:
    """Outcome of analyzing and logging a meal."""

    meal_text: str
    goal: FitnessGoal
    estimate: MacroEstimate
    workout: WorkoutPlan
    coach_message: str
    profile: UserProfile
    daily_intake: int
    new_badges: frozenset[Badge]


@dataclass(frozen=True)
class RouletteResult:
    """Randomly selected goal with an optional refreshed plan."""

    goal: FitnessGoal
    workout: WorkoutPlan | None
    coach_message: str | None


@dataclass(frozen=True)
class CheatMealResult:
    """Workout suggested to burn off a cheat meal."""

    estimate: MacroEstimate
    workout: WorkoutPlan


@dataclass(frozen=True)
class BurnSession:
    """A started burn-this-meal workout."""

    entry: CompletedWorkout
    countdown_seconds: int


@dataclass
class CoachService:
    """Coordinate the estimator, recommender and persisted progression."""

    estimator: NutritionEstimator
    recommender: WorkoutRecommender
    state: StateService
    analysis_delay_seconds: float = 0.0

    def dashboard(self) -> Dashboard:
        """Return the persisted profile with today's progress."""
        profile = self.state.load_profile()
        daily_intake = self.state.load_daily_intake()
        return Dashboard(
            profile=profile,
            daily_intake=daily_intake,
            progress=progression.daily_progress(profile, daily_intake),
            dark_mode=self.state.load_dark_mode(),
        )

    def onboard(self, name: str, daily_calorie_goal: object) -> UserProfile:
        """Set up the profile name and calorie goal, keeping existing progress."""
        created = progression.onboard(name, daily_calorie_goal)
        current = self.state.load_profile()
        profile = UserProfile(
            name=created.name,
            daily_calorie_goal=created.daily_calorie_goal,
            current_streak=current.current_streak,
            total_meals_logged=current.total_meals_logged,
            achievements=current.achievements,
            frequent_meals=current.frequent_meals,
        )
        self.state.save_profile(profile)
        _logger.info("Profile onboarded: goal=%s", profile.daily_calorie_goal)
        return profile

    async def analyze_meal(self, meal_text: str, goal: object) -> MealAnalysis:
        """Estimate a meal, recommend a workout and log the meal."""
        _require_text(meal_text, "Please enter a meal first")
        if self.analysis_delay_seconds > 0:
            await asyncio.sleep(self.analysis_delay_seconds)

        resolved_goal = parse_goal(goal)
        estimate = self.estimator.estimate(meal_text)
        workout = self.recommender.recommend(resolved_goal, estimate)
        message = self.recommender.coach_message(resolved_goal)

        profile = self.state.load_profile()
        daily_intake = self.state.load_daily_intake()
        updated, updated_intake = progression.apply_meal_logged(
            profile, estimate, meal_text, daily_intake
        )
        self.state.save_profile(updated)
        self.state.save_daily_intake(updated_intake)

        new_badges = updated.achievements - profile.achievements
        _logger.info(
            "Meal logged: calories=%s total_meals=%s streak=%s",
            estimate.calories,
            updated.total_meals_logged,
            updated.current_streak,
        )
        if new_badges:
            _logger.info(
                "Badges earned: %s", ", ".join(sorted(b.value for b in new_badges))
            )
        return MealAnalysis(
            meal_text=meal_text,
            goal=resolved_goal,
            estimate=estimate,
            workout=workout,
            coach_message=message,
            profile=updated,
            daily_intake=updated_intake,
            new_badges=new_badges,
        )

    def spin_roulette(self, estimate: MacroEstimate | None = None) -> RouletteResult:
        """Pick a random goal, refreshing the plan when a meal was analyzed."""
        goal = self.recommender.random_goal()
        if estimate is None:
            return RouletteResult(goal=goal, workout=None, coach_message=None)
        return RouletteResult(
            goal=goal,
            workout=self.recommender.recommend(goal, estimate),
            coach_message=self.recommender.coach_message(goal),
        )

    def cheat_meal_workout(self, meal_text: str) -> CheatMealResult:
        """Return the fat-burning plan for a cheat meal without logging it."""
        _require_text(meal_text, "Please enter a cheat meal first")
        estimate = self.estimator.estimate(meal_text)
        return CheatMealResult(
            estimate=estimate,
            workout=self.recommender.recommend(FitnessGoal.BURN_FAT, estimate),
        )

    def burn_meal(
        self, meal_text: str, workout: WorkoutPlan, now: datetime | None = None
    ) -> BurnSession:
        """Record a started workout and return its countdown length."""
        _require_text(meal_text, "Please analyze a meal first")
        entry = CompletedWorkout(
            meal_text=meal_text,
            workout_plan=workout,
            timestamp=now or datetime.now(tz=UTC),
        )
        self.state.append_completed_workout(entry)
        return BurnSession(entry=entry, countdown_seconds=workout.duration_minutes * 60)

    def completed_workouts(self) -> list[CompletedWorkout]:
        """Return the completed-workout log."""
        return self.state.load_completed_workouts()

    def set_dark_mode(self, enabled: bool) -> None:
        """Persist the dark-mode preference."""
        self.state.save_dark_mode(enabled)

    def reset_daily_intake(self) -> None:
        """Clear today's calorie counter."""
        self.state.reset_daily_intake()
        _logger.info("Daily intake reset")


def _require_text(value: str, message: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
