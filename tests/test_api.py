"""
HTTP surface via FastAPI's TestClient; the advisor is overridden with a
scripted generator so nothing leaves the process.
"""
from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from api.v1.deps import get_advisor
from core.advisor import NutritionAdvisor
from core.ports import AIResponse
from main import app

from conftest import FakeGenerator, failing, scripted

PROFILE = {
    "gender": "male",
    "age": 30,
    "weight_kg": 80,
    "height_cm": 175,
    "target_weight_kg": 70,
    "activity_level": 1.375,
    "goal": "lose",
    "health_conditions": ["diabetes"],
    "allergies": ["gluten", "dairy"],
}


@pytest.fixture
def client():
    app.dependency_overrides[get_advisor] = lambda: NutritionAdvisor(FakeGenerator(scripted))
    yield TestClient(app)
    app.dependency_overrides.clear()


def _use(generator) -> None:
    app.dependency_overrides[get_advisor] = lambda: NutritionAdvisor(generator)


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


# ── assessments ─────────────────────────────────────────────────────
def test_assessment_roundtrip(client):
    r = client.post("/api/v1/assessments", json=PROFILE)
    assert r.status_code == 200
    data = r.json()
    assert data["bmr"] == 1749
    assert data["tdee"] == 2405
    assert data["bmi"] == 26.1
    assert data["bmi_category"] == "overweight"
    assert data["target_calories"] == 1905
    assert data["diet_label"] == "Mediterranean diet or low-carbohydrate diet"
    assert data["notes"][-1] == "avoid foods containing: gluten, dairy"
    assert data["recommended_diet"].startswith(data["diet_label"] + ". Important notes: ")
    assert data["weight_difference"] == 10


def test_assessment_missing_field_is_422(client):
    r = client.post("/api/v1/assessments", json={**PROFILE, "height_cm": None})
    assert r.status_code == 422
    assert r.json()["detail"]["error"] == "ValidationError"


@pytest.mark.parametrize("raw", ["NaN", "Infinity", "-Infinity"])
def test_assessment_non_finite_weight_is_422(client, raw):
    # json.dumps writes these as the bare NaN / Infinity tokens
    body = json.dumps({**PROFILE, "weight_kg": float(raw)})
    r = client.post(
        "/api/v1/assessments",
        content=body,
        headers={"content-type": "application/json"},
    )
    assert r.status_code == 422
    assert r.json()["detail"]["error"] == "ValidationError"


def test_assessment_rejects_unknown_activity_level(client):
    r = client.post("/api/v1/assessments", json={**PROFILE, "activity_level": 2.5})
    assert r.status_code == 422


# ── AI endpoints ────────────────────────────────────────────────────
def test_meal_plan(client):
    body = {"target_calories": 1948, "diet_label": "balanced diet", "goal": "lose", "allergies": []}
    r = client.post("/api/v1/meal-plans", json=body)
    assert r.status_code == 200
    data = r.json()
    assert data["totalCalories"] == 1950
    assert [m["name"] for m in data["meals"]] == ["breakfast", "lunch", "dinner", "snack"]


def test_symptoms(client):
    r = client.post("/api/v1/symptoms/analysis", json={"symptoms": "tired all the time"})
    assert r.status_code == 200
    assert r.json()["potentialDeficiencies"][0]["name"] == "Iron"


def test_blank_symptoms_rejected(client):
    r = client.post("/api/v1/symptoms/analysis", json={"symptoms": "   "})
    assert r.status_code == 422


def test_search(client):
    r = client.post("/api/v1/diets/search", json={"query": "keto"})
    assert r.status_code == 200
    data = r.json()
    assert data["text"]
    assert data["sources"][0]["uri"].startswith("https://")
    assert len(data["relatedTopics"]) == 5


def test_related_topics_degrade_to_empty(client):
    _use(FakeGenerator(failing))
    r = client.post("/api/v1/diets/related", json={"query": "keto"})
    assert r.status_code == 200
    assert r.json() == {"related_topics": []}


# ── error mapping ───────────────────────────────────────────────────
def test_unconfigured_client_is_503(client):
    app.dependency_overrides[get_advisor] = lambda: NutritionAdvisor(None)
    r = client.post("/api/v1/diets/search", json={"query": "keto"})
    assert r.status_code == 503
    assert r.json()["detail"]["error"] == "ConfigurationError"


def test_service_error_is_502(client):
    _use(FakeGenerator(failing))
    r = client.post("/api/v1/symptoms/analysis", json={"symptoms": "fatigue"})
    assert r.status_code == 502
    assert r.json()["detail"]["error"] == "ServiceError"


def test_parse_error_is_502_with_distinct_detail(client):
    _use(FakeGenerator(lambda req: AIResponse(text="no json here")))
    r = client.post(
        "/api/v1/meal-plans",
        json={"target_calories": 2000, "diet_label": "balanced diet", "goal": "maintain"},
    )
    assert r.status_code == 502
    assert r.json()["detail"]["error"] == "ParseError"
