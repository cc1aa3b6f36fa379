from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# PAL multipliers offered to the user, sedentary → extra active
ACTIVITY_LEVELS: tuple[float, ...] = (1.2, 1.375, 1.55, 1.725, 1.9)


class Gender(str, Enum):
    male = "male"
    female = "female"


class Goal(str, Enum):
    lose = "lose"
    gain = "gain"
    maintain = "maintain"


class DietaryPreference(str, Enum):
    standard = "standard"
    vegetarian = "vegetarian"
    vegan = "vegan"


def _coerce(enum: type[Enum], value):
    try:
        return enum(value)
    except ValueError:
        return value  # left for the calculator to reject


def _unique(items) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for item in items or ():
        item = str(item).strip()
        if item:
            seen.setdefault(item, None)
    return tuple(seen)


@dataclass(frozen=True)
class UserProfile:
    """
    Raw assessment input. Numeric fields may be ``None`` (an empty form
    field); the calculator rejects them instead of defaulting to zero.
    """

    gender: Gender = Gender.male
    age: int | None = None
    weight_kg: float | None = None
    height_cm: float | None = None
    target_weight_kg: float | None = None
    activity_level: float = 1.2
    goal: Goal = Goal.maintain
    dietary_preference: DietaryPreference = DietaryPreference.standard
    health_conditions: tuple[str, ...] = field(default_factory=tuple)
    allergies: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "gender", _coerce(Gender, self.gender))
        object.__setattr__(self, "goal", _coerce(Goal, self.goal))
        object.__setattr__(
            self, "dietary_preference", _coerce(DietaryPreference, self.dietary_preference)
        )
        object.__setattr__(self, "health_conditions", _unique(self.health_conditions))
        object.__setattr__(self, "allergies", _unique(self.allergies))
