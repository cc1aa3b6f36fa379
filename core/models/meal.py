from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.models.profile import Goal


class Meal(BaseModel):
    name: str                  # breakfast / lunch / dinner / snack
    dish: str
    calories: float
    ingredients: list[str]

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MealPlan(BaseModel):
    """One-day plan as returned by the model; meal order is kept as sent."""

    total_calories: float
    meals: list[Meal]

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MealPlanRequest(BaseModel):
    target_calories: int = Field(..., gt=0)
    diet_label: str = Field(..., min_length=1)
    goal: Goal
    allergies: list[str] = []
