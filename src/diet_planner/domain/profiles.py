"""User biometrics and diet profile models."""

from dataclasses import dataclass, field
from enum import Enum


class Gender(str, Enum):
    """Biological sex used by the BMR formula."""

    MALE = "M"
    FEMALE = "F"


class DietType(str, Enum):
    """Supported diet styles."""

    BALANCED = "BALANCED"
    LOW_CARB = "LOW_CARB"
    HIGH_PROTEIN = "HIGH_PROTEIN"
    VEGETARIAN = "VEGETARIAN"
    VEGAN = "VEGAN"


class WeightGoal(str, Enum):
    """Direction the user wants their weight to move."""

    LOSE = "LOSE"
    MAINTAIN = "MAINTAIN"
    GAIN = "GAIN"


_GENDER_ALIASES = {
    "m": Gender.MALE,
    "male": Gender.MALE,
    "f": Gender.FEMALE,
    "female": Gender.FEMALE,
}


def parse_gender(value: object) -> Gender | None:
    """Return the gender for an enum member or a M/F/male/female string."""
    if isinstance(value, Gender):
        return value
    if isinstance(value, str):
        return _GENDER_ALIASES.get(value.strip().lower())
    return None


@dataclass(frozen=True)
class BiometricInput:
    """Body measurements and activity level for calorie estimates."""

    gender: Gender | str
    age: int
    height_cm: float
    weight_kg: float
    activity_level: int


@dataclass(frozen=True)
class UserDietProfile:
    """Standing diet preferences used to personalize recommendations."""

    diet_type: DietType = DietType.BALANCED
    health_conditions: tuple[str, ...] = field(default_factory=tuple)
    weight_goal: WeightGoal = WeightGoal.MAINTAIN
    excluded_foods: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "health_conditions", tuple(self.health_conditions or ())
        )
        object.__setattr__(self, "excluded_foods", tuple(self.excluded_foods or ()))


DEFAULT_DIET_PROFILE = UserDietProfile()
