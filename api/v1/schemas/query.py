from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class QueryIn(BaseModel):
    query: str = Field(..., min_length=1, examples=["What is the keto diet?"])

    model_config = ConfigDict(str_strip_whitespace=True)


class SymptomsIn(BaseModel):
    symptoms: str = Field(..., min_length=1, examples=["fatigue, brittle nails"])

    model_config = ConfigDict(str_strip_whitespace=True)


class RelatedTopicsOut(BaseModel):
    related_topics: list[str]
