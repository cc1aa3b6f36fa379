"""
core/advisor.py
────────────────────────────────────────────────────────────────────────
AI nutrition content on top of a `ContentGenerator`:

  • explain()           → grounded free-text explanation + sources
  • related_topics()    → ≤5 follow-up questions, never raises
  • analyze_symptoms()  → likely deficiencies (schema-constrained)
  • generate_meal_plan()→ one-day plan (schema-constrained)
  • search()            → explain ∥ related_topics, joined

Every schema-constrained answer is validated with the matching pydantic
model; a JSON or shape mismatch is a `ParseError`, a failed call is a
`ServiceError`. Only `related_topics` degrades (to an empty list).
"""
from __future__ import annotations

import asyncio
import logging
import re
from typing import TypeVar

import pydantic

from config import settings
from core import prompts
from core.errors import ConfigurationError, ParseError
from core.models.insight import (
    MAX_RELATED_TOPICS,
    DeficiencyAnalysis,
    DietSearchResult,
    RelatedTopics,
    Source,
)
from core.models.meal import MealPlan, MealPlanRequest
from core.ports import AIRequest, AIResponse, ContentGenerator, SchemaDescriptor

_LOG = logging.getLogger(__name__)

_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")

M = TypeVar("M", bound=pydantic.BaseModel)


def parse_structured(text: str, model: type[M]) -> M:
    """Strip code fences / whitespace and validate `text` against `model`."""
    cleaned = _FENCE.sub("", (text or "").strip()).strip()
    if not cleaned:
        raise ParseError(f"empty {model.__name__} response")
    try:
        return model.model_validate_json(cleaned, strict=True)
    except pydantic.ValidationError as exc:
        raise ParseError(f"invalid {model.__name__} response: {exc}") from exc


class NutritionAdvisor:
    def __init__(
        self,
        generator: ContentGenerator | None,
        model: str | None = None,
    ) -> None:
        self._generator = generator
        self.model = model or settings.gemini_model

    @property
    def configured(self) -> bool:
        return self._generator is not None

    # ─────────────────────────── internals ─────────────────────────── #
    def _require_generator(self) -> ContentGenerator:
        if self._generator is None:
            raise ConfigurationError("Gemini client is not initialized. Check GEMINI_API_KEY.")
        return self._generator

    async def _call(
        self,
        content: str,
        *,
        search_grounding: bool = False,
        schema: SchemaDescriptor | None = None,
    ) -> AIResponse:
        generator = self._require_generator()
        request = AIRequest(
            model=self.model,
            content=content,
            search_grounding=search_grounding,
            response_schema=schema,
        )
        _LOG.debug("Calling Gemini (grounding=%s, schema=%s)…", search_grounding, schema is not None)
        return await generator.generate(request)

    # ─────────────────────────── operations ────────────────────────── #
    async def explain(self, query: str) -> DietSearchResult:
        resp = await self._call(prompts.explain_prompt(query), search_grounding=True)
        sources = [Source(uri=c.uri, title=c.title) for c in resp.citations]
        return DietSearchResult(text=resp.text, sources=sources)

    async def related_topics(self, query: str) -> list[str]:
        self._require_generator()
        try:
            resp = await self._call(
                prompts.related_topics_prompt(query),
                schema=prompts.RELATED_TOPICS_SCHEMA,
            )
            topics = parse_structured(resp.text, RelatedTopics).related_topics
        except Exception as exc:
            _LOG.warning("Related topics failed: %s; returning none", exc)
            return []
        return topics[:MAX_RELATED_TOPICS]

    async def analyze_symptoms(self, symptoms: str) -> DeficiencyAnalysis:
        resp = await self._call(
            prompts.symptoms_prompt(symptoms),
            schema=prompts.DEFICIENCY_SCHEMA,
        )
        return parse_structured(resp.text, DeficiencyAnalysis)

    async def generate_meal_plan(self, req: MealPlanRequest) -> MealPlan:
        goal = getattr(req.goal, "value", req.goal)
        resp = await self._call(
            prompts.meal_plan_prompt(req.target_calories, req.diet_label, goal, req.allergies),
            schema=prompts.MEAL_PLAN_SCHEMA,
        )
        return parse_structured(resp.text, MealPlan)

    async def search(self, query: str) -> DietSearchResult:
        self._require_generator()
        # related_topics swallows its own failures, so only explain can raise here;
        # when it does, the in-flight topics call is cancelled rather than orphaned
        topics_task = asyncio.create_task(self.related_topics(query))
        try:
            result = await self.explain(query)
        except BaseException:
            topics_task.cancel()
            raise
        topics = await topics_task
        return result.model_copy(update={"related_topics": topics})
