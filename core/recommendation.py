"""
core/recommendation.py
────────────────────────────────────────────────────────────────────────
Rule-based diet label + calorie target, run in a fixed order:

  1. goal          → base label, target = TDEE ∓ 500 (or TDEE)
  2. preference    → "(vegetarian)" / "(vegan)" suffix
  3. diabetes      → label replaced outright, physician note
  4. hypertension  → DASH note;  thyroid → specialist note
  5. allergies     → one "avoid" note listing every allergen

The calorie target from step 1 is final: the diabetes override swaps the
label only and never recomputes the target.
"""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass

from core.models.profile import DietaryPreference, Goal, UserProfile
from core.nutrition_calc import AssessmentResult, NutritionalCalculator, round_half_up

_LOG = logging.getLogger(__name__)

CALORIE_SHIFT = 500

LABEL_DEFICIT = "caloric-deficit diet"
LABEL_SURPLUS = "caloric-surplus muscle-building diet"
LABEL_BALANCED = "balanced diet"
LABEL_DIABETES = "Mediterranean diet or low-carbohydrate diet"

NOTE_DIABETES = "consult your physician to choose what suits your condition"
NOTE_HYPERTENSION = "the DASH diet and reduced sodium (salt) intake are recommended"
NOTE_THYROID = "some foods can interfere with thyroid function, consult a specialist"
NOTE_ALLERGIES = "avoid foods containing: {}"

NOTES_MARKER = ". Important notes: "
SEPARATOR = ", "

_SUFFIX = {
    DietaryPreference.vegetarian: " (vegetarian)",
    DietaryPreference.vegan: " (vegan)",
}


@dataclass(frozen=True)
class DietRecommendation:
    diet_label: str
    target_calories: int
    notes: tuple[str, ...] = ()

    @property
    def recommended_diet(self) -> str:
        if not self.notes:
            return self.diet_label
        return self.diet_label + NOTES_MARKER + SEPARATOR.join(self.notes)


def _flag(conds: tuple[str, ...], keys: tuple[str, ...]) -> bool:
    clow = [c.lower() for c in conds]
    return any(any(k in c for k in keys) for c in clow)


class DietRecommender:
    _DIABETES = ("diabetes",)
    _HYPERTENSION = ("hypertension", "high blood pressure")
    _THYROID = ("thyroid",)

    def recommend(self, p: UserProfile, a: AssessmentResult) -> DietRecommendation:
        label, target = self._goal_step(p.goal, a.tdee_exact)

        label += _SUFFIX.get(p.dietary_preference, "")

        notes: list[str] = []
        conds = p.health_conditions
        if _flag(conds, self._DIABETES):
            label = LABEL_DIABETES
            notes.append(NOTE_DIABETES)
        if _flag(conds, self._HYPERTENSION):
            notes.append(NOTE_HYPERTENSION)
        if _flag(conds, self._THYROID):
            notes.append(NOTE_THYROID)

        if p.allergies:
            notes.append(NOTE_ALLERGIES.format(SEPARATOR.join(p.allergies)))

        _LOG.debug("diet=%r target=%d notes=%d", label, target, len(notes))
        return DietRecommendation(label, target, tuple(notes))

    @staticmethod
    def _goal_step(goal: Goal, tdee: float) -> tuple[str, int]:
        if goal == Goal.lose:
            label, kcal = LABEL_DEFICIT, tdee - CALORIE_SHIFT
        elif goal == Goal.gain:
            label, kcal = LABEL_SURPLUS, tdee + CALORIE_SHIFT
        else:
            label, kcal = LABEL_BALANCED, tdee
        return label, int(round_half_up(kcal))


def assess(
    profile: UserProfile,
    calc: NutritionalCalculator | None = None,
    recommender: DietRecommender | None = None,
) -> tuple[AssessmentResult, DietRecommendation]:
    """Metrics first, then the diet rules; returns a fully composed result."""
    calc = calc or NutritionalCalculator()
    recommender = recommender or DietRecommender()

    metrics = calc.assess(profile)
    rec = recommender.recommend(profile, metrics)
    result = dataclasses.replace(metrics, recommended_diet=rec.recommended_diet)
    return result, rec
