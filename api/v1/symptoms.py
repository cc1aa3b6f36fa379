# api/v1/symptoms.py
from __future__ import annotations

from fastapi import APIRouter, Depends, status

from api.v1.deps import get_advisor, to_http
from api.v1.schemas import SymptomsIn
from core.advisor import NutritionAdvisor
from core.errors import NutritionError
from core.models.insight import DeficiencyAnalysis

router = APIRouter()


@router.post(
    "/analysis",
    response_model=DeficiencyAnalysis,
    status_code=status.HTTP_200_OK,
    summary="Suggest likely vitamin / mineral deficiencies for free-text symptoms",
)
async def analyze_symptoms(
    body: SymptomsIn,
    advisor: NutritionAdvisor = Depends(get_advisor),
) -> DeficiencyAnalysis:
    try:
        return await advisor.analyze_symptoms(body.symptoms)
    except NutritionError as exc:
        raise to_http(exc) from exc
