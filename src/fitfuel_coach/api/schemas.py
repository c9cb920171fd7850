"""Pydantic models for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, Field


class MacroEstimateModel(BaseModel):
    """Rounded macro estimate."""

    calories: int = Field(ge=0)
    protein_g: int = Field(ge=0)
    carbs_g: int = Field(ge=0)
    fat_g: int = Field(ge=0)


class WorkoutPlanModel(BaseModel):
    """Workout plan payload."""

    category: str
    label: str
    exercises: list[str]
    duration_minutes: int
    intensity: str


class BadgeModel(BaseModel):
    """Earned badge."""

    id: str
    label: str


class ProfileModel(BaseModel):
    """User profile payload."""

    name: str
    daily_calorie_goal: int
    current_streak: int
    total_meals_logged: int
    achievements: list[BadgeModel]
    frequent_meals: list[str]
    is_onboarded: bool


class DailyProgressModel(BaseModel):
    """Daily calorie progress."""

    consumed: int
    goal: int
    remaining: int
    percent: int


class DashboardResponse(BaseModel):
    """Dashboard state."""

    profile: ProfileModel
    daily_intake: int
    progress: DailyProgressModel
    dark_mode: bool


class OnboardRequest(BaseModel):
    """Onboarding form."""

    name: str
    daily_calorie_goal: object = None


class AnalyzeMealRequest(BaseModel):
    """Meal analysis request."""

    meal: str
    goal: str | None = None


class AnalyzeMealResponse(BaseModel):
    """Meal analysis result."""

    goal: str
    nutrition: MacroEstimateModel
    workout: WorkoutPlanModel
    coach_message: str
    new_badges: list[BadgeModel]
    profile: ProfileModel
    daily_intake: int


class RouletteRequest(BaseModel):
    """Roulette request with the last analyzed meal, if any."""

    nutrition: MacroEstimateModel | None = None


class RouletteResponse(BaseModel):
    """Roulette result."""

    goal: str
    workout: WorkoutPlanModel | None = None
    coach_message: str | None = None


class CheatMealRequest(BaseModel):
    """Cheat meal request."""

    meal: str


class CheatMealResponse(BaseModel):
    """Cheat meal burn plan."""

    nutrition: MacroEstimateModel
    workout: WorkoutPlanModel


class BurnMealRequest(BaseModel):
    """Burn-this-meal request."""

    meal: str
    goal: str | None = None


class CompletedWorkoutModel(BaseModel):
    """Completed workout log entry."""

    meal_text: str
    workout_plan: WorkoutPlanModel
    timestamp: datetime


class BurnMealResponse(BaseModel):
    """Started workout countdown."""

    countdown_seconds: int
    entry: CompletedWorkoutModel


class DarkModeRequest(BaseModel):
    """Dark-mode preference."""

    enabled: bool
