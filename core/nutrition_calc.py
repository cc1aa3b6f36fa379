"""
core/nutrition_calc.py
────────────────────────────────────────────────────────────────────────
Body metrics for the assessment screen:

1. BMR  (Mifflin–St Jeor, male / female constant)
2. TDEE (BMR × activity multiplier)
3. BMI  (kg / m²) and its four-way category

Values are rounded only when the `AssessmentResult` is built; the
unrounded TDEE travels along for the calorie-target arithmetic in
`core.recommendation`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from core.errors import ValidationError
from core.models.profile import ACTIVITY_LEVELS, Gender, UserProfile

Logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────
#  Result dataclass
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class AssessmentResult:
    bmi: float                 # 1 dp
    bmr: int
    tdee: int
    bmi_category: str
    weight_difference: float   # current - target, kg
    tdee_exact: float          # unrounded, feeds the calorie target
    recommended_diet: str = ""


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round like a calculator does (2447.5 → 2448), not banker's rounding."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def bmi_category(bmi: float) -> str:
    if bmi < 18.5:
        return "underweight"
    if bmi < 25:
        return "normal"
    if bmi < 30:
        return "overweight"
    return "obese"


# ──────────────────────────────────────────────────────────────────────
#  Calculator
# ──────────────────────────────────────────────────────────────────────
class NutritionalCalculator:
    """Source-of-truth for BMR / TDEE / BMI."""

    # --------------- public entrypoint --------------------------------
    def assess(self, p: UserProfile) -> AssessmentResult:
        self._validate(p)
        bmr = self.bmr(p)
        tdee = self.tdee(p)
        bmi = self.bmi(p)
        Logger.debug("bmr=%.2f tdee=%.2f bmi=%.3f", bmr, tdee, bmi)
        # category follows the displayed 1-dp value
        bmi_1dp = round_half_up(bmi, 1)
        return AssessmentResult(
            bmi=bmi_1dp,
            bmr=int(round_half_up(bmr)),
            tdee=int(round_half_up(tdee)),
            bmi_category=bmi_category(bmi_1dp),
            weight_difference=round_half_up(p.weight_kg - p.target_weight_kg, 1),
            tdee_exact=tdee,
        )

    # --------------- BMR / TDEE / BMI -------------------------------
    def bmr(self, p: UserProfile) -> float:
        base = 10 * p.weight_kg + 6.25 * p.height_cm - 5 * p.age
        if p.gender == Gender.male:
            return base + 5
        if p.gender == Gender.female:
            return base - 161
        raise ValidationError(f"unsupported gender: {p.gender!r}")

    def tdee(self, p: UserProfile) -> float:
        return self.bmr(p) * p.activity_level

    def bmi(self, p: UserProfile) -> float:
        height_m = p.height_cm / 100
        return p.weight_kg / (height_m * height_m)

    # --------------- input checks -----------------------------------
    def _validate(self, p: UserProfile) -> None:
        required = (p.age, p.weight_kg, p.height_cm, p.target_weight_kg)
        if any(v is None or not math.isfinite(v) or v <= 0 for v in required):
            raise ValidationError("missing required fields")
        if p.gender not in (Gender.male, Gender.female):
            raise ValidationError(f"unsupported gender: {p.gender!r}")
        if p.activity_level not in ACTIVITY_LEVELS:
            raise ValidationError(f"unsupported activity level: {p.activity_level!r}")


_calc = NutritionalCalculator()


def compute_assessment(profile: UserProfile) -> AssessmentResult:
    return _calc.assess(profile)
