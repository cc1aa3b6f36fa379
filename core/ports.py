"""
core/ports.py
────────────────────────────────────────────────────────────────────────
Request / response contract of the external generative service.

`NutritionAdvisor` only talks to a `ContentGenerator`; the Gemini adapter
in `services.gemini` is one implementation, tests plug in fakes.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

# JSON-schema-like dict in the shape Gemini's `response_schema` accepts:
# {"type": "OBJECT", "properties": {...}, "required": [...]}
SchemaDescriptor = dict[str, Any]


@dataclass(frozen=True)
class Citation:
    uri: str
    title: str


@dataclass(frozen=True)
class AIRequest:
    model: str
    content: str
    search_grounding: bool = False
    response_schema: SchemaDescriptor | None = None


@dataclass(frozen=True)
class AIResponse:
    text: str
    citations: tuple[Citation, ...] = field(default_factory=tuple)


@runtime_checkable
class ContentGenerator(Protocol):
    """Generate free text or schema-constrained JSON text."""

    async def generate(self, request: AIRequest) -> AIResponse:
        """
        Raises:
            ServiceError: transport / quota / server failure or timeout
            ParseError:   the raw response could not be decoded
        """
        ...
