from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

MAX_RELATED_TOPICS = 5


class Deficiency(BaseModel):
    name: str
    explanation: str = ""
    food_sources: list[str] = []
    recommended_dosage: str = ""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DeficiencyAnalysis(BaseModel):
    potential_deficiencies: list[Deficiency]
    disclaimer: str = ""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RelatedTopics(BaseModel):
    related_topics: list[str]


class Source(BaseModel):
    uri: str
    title: str


class DietSearchResult(BaseModel):
    text: str
    sources: list[Source] = []
    related_topics: list[str] = []

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
