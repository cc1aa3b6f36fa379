# api/v1/meal_plans.py
from __future__ import annotations

from fastapi import APIRouter, Depends, status

from api.v1.deps import get_advisor, to_http
from core.advisor import NutritionAdvisor
from core.errors import NutritionError
from core.models.meal import MealPlan, MealPlanRequest

router = APIRouter()


@router.post(
    "",
    response_model=MealPlan,
    status_code=status.HTTP_200_OK,
    summary="Generate a one-day meal plan for a calorie target",
)
async def create_meal_plan(
    body: MealPlanRequest,
    advisor: NutritionAdvisor = Depends(get_advisor),
) -> MealPlan:
    try:
        return await advisor.generate_meal_plan(body)
    except NutritionError as exc:
        raise to_http(exc) from exc
