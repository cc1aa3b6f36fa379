# api/v1/diets.py
from __future__ import annotations

from fastapi import APIRouter, Depends, status

from api.v1.deps import get_advisor, to_http
from api.v1.schemas import QueryIn, RelatedTopicsOut
from core.advisor import NutritionAdvisor
from core.errors import NutritionError
from core.models.insight import DietSearchResult

router = APIRouter()


@router.post(
    "/search",
    response_model=DietSearchResult,
    status_code=status.HTTP_200_OK,
    summary="Grounded diet explanation plus related topics",
)
async def search_diets(
    body: QueryIn,
    advisor: NutritionAdvisor = Depends(get_advisor),
) -> DietSearchResult:
    try:
        return await advisor.search(body.query)
    except NutritionError as exc:
        raise to_http(exc) from exc


@router.post(
    "/related",
    response_model=RelatedTopicsOut,
    status_code=status.HTTP_200_OK,
    summary="Up to five follow-up questions for a diet topic",
)
async def related_topics(
    body: QueryIn,
    advisor: NutritionAdvisor = Depends(get_advisor),
) -> RelatedTopicsOut:
    try:
        topics = await advisor.related_topics(body.query)
    except NutritionError as exc:
        raise to_http(exc) from exc
    return RelatedTopicsOut(related_topics=topics)
