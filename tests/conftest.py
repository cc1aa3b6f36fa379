"""
Shared fixtures: a scripted `ContentGenerator` stand-in.
"""
from __future__ import annotations

import json
from typing import Any, Callable

import pytest

from core.advisor import NutritionAdvisor
from core.errors import ServiceError
from core.ports import AIRequest, AIResponse, Citation


class FakeGenerator:
    """Answers each request with `handler(request)`; records every request."""

    def __init__(self, handler: Callable[[AIRequest], AIResponse]) -> None:
        self._handler = handler
        self.requests: list[AIRequest] = []

    async def generate(self, request: AIRequest) -> AIResponse:
        self.requests.append(request)
        return self._handler(request)


def json_response(payload: Any) -> AIResponse:
    return AIResponse(text=json.dumps(payload))


def failing(_: AIRequest) -> AIResponse:
    raise ServiceError("quota exceeded")


MEAL_PLAN = {
    "totalCalories": 1950,
    "meals": [
        {"name": "breakfast", "dish": "Oatmeal", "calories": 400, "ingredients": ["oats", "milk"]},
        {"name": "lunch", "dish": "Chicken salad", "calories": 600, "ingredients": ["chicken", "lettuce"]},
        {"name": "dinner", "dish": "Salmon", "calories": 700, "ingredients": ["salmon", "rice"]},
        {"name": "snack", "dish": "Apple", "calories": 250, "ingredients": ["apple"]},
    ],
}

DEFICIENCIES = {
    "potentialDeficiencies": [
        {
            "name": "Iron",
            "explanation": "Fatigue is a classic sign.",
            "foodSources": ["spinach", "lentils"],
            "recommendedDosage": "8 mg/day",
        },
        {
            "name": "Vitamin B12",
            "explanation": "Needed for red blood cells.",
            "foodSources": ["eggs"],
            "recommendedDosage": "2.4 mcg/day",
        },
    ],
    "disclaimer": "Consult a doctor before taking supplements.",
}

TOPICS = {"related_topics": ["Keto vs Atkins?", "Is keto safe?", "Keto and diabetes",
                             "Keto snacks", "Keto flu", "Extra topic"]}

CITATIONS = (
    Citation(uri="https://www.heart.org/keto", title="AHA"),
    Citation(uri="https://diabetes.org/keto", title="ADA"),
)


def scripted(request: AIRequest) -> AIResponse:
    """Route a request to a canned answer by the schema it asks for."""
    if request.search_grounding:
        return AIResponse(text="Keto is a low-carb diet.", citations=CITATIONS)
    props = (request.response_schema or {}).get("properties", {})
    if "related_topics" in props:
        return json_response(TOPICS)
    if "potentialDeficiencies" in props:
        return json_response(DEFICIENCIES)
    if "meals" in props:
        return json_response(MEAL_PLAN)
    raise AssertionError(f"unexpected request: {request}")


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator(scripted)


@pytest.fixture
def advisor(generator: FakeGenerator) -> NutritionAdvisor:
    return NutritionAdvisor(generator, model="test-model")
