"""
core/errors.py
────────────────────────────────────────────────────────────────────────
Error taxonomy shared by the calculator, the recommender and the AI
advisor. Callers can catch ``NutritionError`` or a specific subclass.
"""

from __future__ import annotations


class NutritionError(Exception):
    """Base class for every error raised by the core."""


class ValidationError(NutritionError):
    """Profile input is missing a required value or holds an invalid one."""


class ConfigurationError(NutritionError):
    """The AI client was never configured (no credential at startup)."""


class ServiceError(NutritionError):
    """The call to the generative service failed or timed out."""


class ParseError(NutritionError):
    """The service answered, but not with the structure that was asked for."""
