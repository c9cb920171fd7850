"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fitfuel_coach.api.schemas import (
    AnalyzeMealRequest,
    AnalyzeMealResponse,
    BadgeModel,
    BurnMealRequest,
    BurnMealResponse,
    CheatMealRequest,
    CheatMealResponse,
    CompletedWorkoutModel,
    DailyProgressModel,
    DarkModeRequest,
    DashboardResponse,
    MacroEstimateModel,
    OnboardRequest,
    ProfileModel,
    RouletteRequest,
    RouletteResponse,
    WorkoutPlanModel,
)
from fitfuel_coach.app_logging import configure_logging
from fitfuel_coach.containers import AppContainer
from fitfuel_coach.domain.badges import Badge
from fitfuel_coach.domain.errors import ValidationError
from fitfuel_coach.domain.models import CompletedWorkout, UserProfile
from fitfuel_coach.domain.nutrition import MacroEstimate
from fitfuel_coach.domain.workouts import WorkoutPlan
from fitfuel_coach.services.workouts import parse_goal


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        logger.info("Rejected request to %s: %s", request.url.path, exc)
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/dashboard")
    async def dashboard(request: Request) -> DashboardResponse:
        """Return the profile, daily intake and preferences."""
        state_container: AppContainer = request.app.state.container
        current = state_container.coach_service.dashboard()
        return DashboardResponse(
            profile=_profile_model(current.profile),
            daily_intake=current.daily_intake,
            progress=DailyProgressModel(
                consumed=current.progress.consumed,
                goal=current.progress.goal,
                remaining=current.progress.remaining,
                percent=current.progress.percent,
            ),
            dark_mode=current.dark_mode,
        )

    @app.post("/onboard")
    async def onboard(payload: OnboardRequest, request: Request) -> ProfileModel:
        """Create the user profile."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.coach_service.onboard(
            payload.name, payload.daily_calorie_goal
        )
        return _profile_model(profile)

    @app.post("/meals/analyze")
    async def analyze_meal(
        payload: AnalyzeMealRequest, request: Request
    ) -> AnalyzeMealResponse:
        """Estimate a meal, suggest a workout and log progress."""
        state_container: AppContainer = request.app.state.container
        analysis = await state_container.coach_service.analyze_meal(
            payload.meal, payload.goal
        )
        return AnalyzeMealResponse(
            goal=analysis.goal.value,
            nutrition=_estimate_model(analysis.estimate),
            workout=_workout_model(analysis.workout),
            coach_message=analysis.coach_message,
            new_badges=_badge_models(analysis.new_badges),
            profile=_profile_model(analysis.profile),
            daily_intake=analysis.daily_intake,
        )

    @app.post("/workouts/roulette")
    async def workout_roulette(
        payload: RouletteRequest, request: Request
    ) -> RouletteResponse:
        """Pick a random goal and refresh the workout."""
        state_container: AppContainer = request.app.state.container
        estimate = (
            MacroEstimate(**payload.nutrition.model_dump())
            if payload.nutrition
            else None
        )
        result = state_container.coach_service.spin_roulette(estimate)
        return RouletteResponse(
            goal=result.goal.value,
            workout=_workout_model(result.workout) if result.workout else None,
            coach_message=result.coach_message,
        )

    @app.post("/workouts/cheat-meal")
    async def cheat_meal(
        payload: CheatMealRequest, request: Request
    ) -> CheatMealResponse:
        """Return a fat-burning workout for a cheat meal."""
        state_container: AppContainer = request.app.state.container
        result = state_container.coach_service.cheat_meal_workout(payload.meal)
        return CheatMealResponse(
            nutrition=_estimate_model(result.estimate),
            workout=_workout_model(result.workout),
        )

    @app.post("/workouts/burn")
    async def burn_meal(payload: BurnMealRequest, request: Request) -> BurnMealResponse:
        """Start a countdown for a meal and log it.

        The plan is derived from the goal; plans are fixed per goal.
        """
        state_container: AppContainer = request.app.state.container
        coach_service = state_container.coach_service
        workout = coach_service.recommender.recommend(parse_goal(payload.goal))
        session = coach_service.burn_meal(payload.meal, workout)
        return BurnMealResponse(
            countdown_seconds=session.countdown_seconds,
            entry=_completed_model(session.entry),
        )

    @app.get("/workouts/completed")
    async def completed_workouts(request: Request) -> dict[str, object]:
        """Return the completed-workout log."""
        state_container: AppContainer = request.app.state.container
        entries = state_container.coach_service.completed_workouts()
        return {
            "workouts": [
                _completed_model(entry).model_dump(mode="json") for entry in entries
            ]
        }

    @app.put("/settings/dark-mode")
    async def set_dark_mode(
        payload: DarkModeRequest, request: Request
    ) -> dict[str, bool]:
        """Persist the dark-mode preference."""
        state_container: AppContainer = request.app.state.container
        state_container.coach_service.set_dark_mode(payload.enabled)
        return {"enabled": payload.enabled}

    @app.post("/daily-intake/reset")
    async def reset_daily_intake(request: Request) -> dict[str, int]:
        """Clear today's calorie counter."""
        state_container: AppContainer = request.app.state.container
        state_container.coach_service.reset_daily_intake()
        return {"daily_intake": 0}

    return app


def _estimate_model(estimate: MacroEstimate) -> MacroEstimateModel:
    return MacroEstimateModel(
        calories=estimate.calories,
        protein_g=estimate.protein_g,
        carbs_g=estimate.carbs_g,
        fat_g=estimate.fat_g,
    )


def _workout_model(plan: WorkoutPlan) -> WorkoutPlanModel:
    return WorkoutPlanModel(
        category=plan.category.value,
        label=plan.label,
        exercises=list(plan.exercises),
        duration_minutes=plan.duration_minutes,
        intensity=plan.intensity.value,
    )


def _badge_models(badges: frozenset[Badge]) -> list[BadgeModel]:
    return [
        BadgeModel(id=badge.value, label=badge.label)
        for badge in sorted(badges, key=lambda badge: badge.value)
    ]


def _profile_model(profile: UserProfile) -> ProfileModel:
    return ProfileModel(
        name=profile.name,
        daily_calorie_goal=profile.daily_calorie_goal,
        current_streak=profile.current_streak,
        total_meals_logged=profile.total_meals_logged,
        achievements=_badge_models(profile.achievements),
        frequent_meals=list(profile.frequent_meals),
        is_onboarded=profile.is_onboarded,
    )


def _completed_model(entry: CompletedWorkout) -> CompletedWorkoutModel:
    return CompletedWorkoutModel(
        meal_text=entry.meal_text,
        workout_plan=_workout_model(entry.workout_plan),
        timestamp=entry.timestamp,
    )
