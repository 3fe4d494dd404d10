"""
Preference models collected by the meal planner form.
"""
from enum import Enum
from typing import Dict, Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.services.constants import DAYS_OF_WEEK, MEAL_TYPES, DEFAULT_SERVINGS


class TimeBudget(str, Enum):
    """
    Maximum prep or cook time a household is willing to spend.
    """
    FIFTEEN = "15"
    THIRTY = "30"
    FORTY_FIVE = "45"
    SIXTY_PLUS = "60+"


class HouseholdSize(BaseModel):
    """Number of people to cook for, by age group."""
    model_config = ConfigDict(frozen=True)

    adults: int = Field(default=0, ge=0, le=99)
    teenagers: int = Field(default=0, ge=0, le=99)
    children: int = Field(default=0, ge=0, le=99)

    @property
    def total(self) -> int:
        return self.adults + self.teenagers + self.children


class MealSlots(BaseModel):
    """Meal selection for a single day."""
    model_config = ConfigDict(frozen=True)

    breakfast: bool = False
    lunch: bool = False
    dinner: bool = False


class Preferences(BaseModel):
    """
    Household food preferences for one plan-generation run.

    Accepts both snake_case names and the camelCase keys sent by the form
    (``prepTime``, ``mealSelection``, ...).
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    cuisines: List[str] = []
    prep_time: TimeBudget = TimeBudget.THIRTY
    cook_time: TimeBudget = TimeBudget.THIRTY
    allergies: List[str] = []
    dietary_preferences: List[str] = []
    pantry_items: List[str] = []
    household_size: HouseholdSize = HouseholdSize()
    meal_selection: Dict[str, MealSlots] = {}

    @field_validator("prep_time", "cook_time", mode="before")
    @classmethod
    def coerce_time_budget(cls, value):
        """Allow plain integers such as 30 for the time budgets."""
        if isinstance(value, int):
            return "60+" if value >= 60 else str(value)
        return value

    @field_validator("cuisines", "allergies", "dietary_preferences", "pantry_items")
    @classmethod
    def dedupe_strings(cls, values: List[str]) -> List[str]:
        """Trim entries and drop blanks and repeats, keeping first-seen order."""
        seen = []
        for value in values:
            value = value.strip()
            if value and value not in seen:
                seen.append(value)
        return seen

    @field_validator("meal_selection")
    @classmethod
    def complete_week(cls, selection: Dict[str, MealSlots]) -> Dict[str, MealSlots]:
        """Key the selection by the seven canonical days."""
        normalized = {day.strip().lower(): slots for day, slots in selection.items()}
        unknown = set(normalized) - set(DAYS_OF_WEEK)
        if unknown:
            raise ValueError(f"Unknown day(s) in meal selection: {', '.join(sorted(unknown))}")
        return {day: normalized.get(day, MealSlots()) for day in DAYS_OF_WEEK}

    def selected_slots(self) -> Iterator[Tuple[str, str]]:
        """Yield (day, meal_type) for every selected slot in canonical order."""
        for day in DAYS_OF_WEEK:
            slots = self.meal_selection.get(day)
            if slots is None:
                continue
            for meal_type in MEAL_TYPES:
                if getattr(slots, meal_type):
                    yield day, meal_type

    @property
    def total_meals_selected(self) -> int:
        return sum(1 for _ in self.selected_slots())

    @property
    def servings(self) -> int:
        """Servings to request, derived from the household size."""
        return self.household_size.total or DEFAULT_SERVINGS
