# api/v1/assessments.py
from __future__ import annotations

from fastapi import APIRouter, status

from api.v1.deps import to_http
from api.v1.schemas import AssessmentIn, AssessmentOut
from core.errors import ValidationError
from core.models.profile import UserProfile
from core.recommendation import assess

router = APIRouter()


@router.post(
    "",
    response_model=AssessmentOut,
    status_code=status.HTTP_200_OK,
    summary="Compute BMI / BMR / TDEE and a diet recommendation",
)
def create_assessment(body: AssessmentIn) -> AssessmentOut:
    profile = UserProfile(
        gender=body.gender,
        age=body.age,
        weight_kg=body.weight_kg,
        height_cm=body.height_cm,
        target_weight_kg=body.target_weight_kg,
        activity_level=body.activity_level,
        goal=body.goal,
        dietary_preference=body.dietary_preference,
        health_conditions=tuple(body.health_conditions),
        allergies=tuple(body.allergies),
    )
    try:
        result, rec = assess(profile)
    except ValidationError as exc:
        raise to_http(exc) from exc

    return AssessmentOut(
        bmi=result.bmi,
        bmi_category=result.bmi_category,
        bmr=result.bmr,
        tdee=result.tdee,
        weight_difference=result.weight_difference,
        diet_label=rec.diet_label,
        target_calories=rec.target_calories,
        notes=list(rec.notes),
        recommended_diet=result.recommended_diet,
    )
