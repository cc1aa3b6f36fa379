from __future__ import annotations
from pydantic import BaseModel, Field

from core.models.profile import DietaryPreference, Gender, Goal


class AssessmentIn(BaseModel):
    gender: Gender = Field(..., description="male or female")
    # left optional so a blank form field reaches the calculator's own check
    age: int | None = None
    weight_kg: float | None = None
    height_cm: float | None = None
    target_weight_kg: float | None = None
    activity_level: float = Field(1.2, description="one of 1.2, 1.375, 1.55, 1.725, 1.9")
    goal: Goal = Goal.maintain
    dietary_preference: DietaryPreference = DietaryPreference.standard
    health_conditions: list[str] = []
    allergies: list[str] = []


class AssessmentOut(BaseModel):
    bmi: float
    bmi_category: str
    bmr: int
    tdee: int
    weight_difference: float
    diet_label: str
    target_calories: int
    notes: list[str]
    recommended_diet: str
