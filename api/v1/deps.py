# api/v1/deps.py
from __future__ import annotations

from fastapi import HTTPException, status

from core.advisor import NutritionAdvisor
from core.errors import ConfigurationError, NutritionError, ParseError, ServiceError, ValidationError
from services.gemini import get_generator

_STATUS: dict[type[NutritionError], int] = {
    ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ConfigurationError: status.HTTP_503_SERVICE_UNAVAILABLE,
    ServiceError: status.HTTP_502_BAD_GATEWAY,
    ParseError: status.HTTP_502_BAD_GATEWAY,
}


def get_advisor() -> NutritionAdvisor:
    return NutritionAdvisor(get_generator())


def to_http(exc: NutritionError) -> HTTPException:
    """Map a core error onto the HTTP status the API reports for it."""
    code = _STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(
        status_code=code,
        detail={"error": type(exc).__name__, "message": str(exc)},
    )
