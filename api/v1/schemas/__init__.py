"""Re-export individual schema modules for easy imports."""

from .assessment import AssessmentIn, AssessmentOut
from .query import QueryIn, SymptomsIn, RelatedTopicsOut

__all__ = [
    "AssessmentIn",
    "AssessmentOut",
    "QueryIn",
    "SymptomsIn",
    "RelatedTopicsOut",
]
