"""
Tests for the preference models.
"""
import pytest
from pydantic import ValidationError

from src.models.preferences import Preferences, TimeBudget, HouseholdSize


class TestPreferences:
    """Test suite for Preferences."""

    def test_camel_case_input(self, preferences):
        assert preferences.prep_time == TimeBudget.THIRTY
        assert preferences.cook_time == TimeBudget.FORTY_FIVE
        assert preferences.pantry_items == ["salt", "olive oil"]
        assert preferences.household_size.total == 3

    def test_snake_case_input(self):
        prefs = Preferences(pantry_items=["rice"], meal_selection={"friday": {"lunch": True}})
        assert list(prefs.selected_slots()) == [("friday", "lunch")]

    def test_meal_selection_covers_all_days(self, preferences):
        assert list(preferences.meal_selection) == [
            "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
        ]
        assert not preferences.meal_selection["sunday"].dinner

    def test_selected_slots_canonical_order(self):
        prefs = Preferences.model_validate({"mealSelection": {
            "Sunday": {"breakfast": True},
            "monday": {"dinner": True, "breakfast": True}
        }})
        assert list(prefs.selected_slots()) == [
            ("monday", "breakfast"),
            ("monday", "dinner"),
            ("sunday", "breakfast")
        ]
        assert prefs.total_meals_selected == 3

    def test_unknown_day_rejected(self):
        with pytest.raises(ValidationError):
            Preferences.model_validate({"mealSelection": {"funday": {"lunch": True}}})

    def test_lists_deduplicated_and_trimmed(self):
        prefs = Preferences(cuisines=["Thai", " Thai ", "", "Greek"])
        assert prefs.cuisines == ["Thai", "Greek"]

    @pytest.mark.parametrize("value,expected", [
        (15, TimeBudget.FIFTEEN),
        (60, TimeBudget.SIXTY_PLUS),
        (90, TimeBudget.SIXTY_PLUS),
        ("60+", TimeBudget.SIXTY_PLUS),
    ])
    def test_time_budget_coercion(self, value, expected):
        assert Preferences(prep_time=value).prep_time == expected

    def test_invalid_time_budget(self):
        with pytest.raises(ValidationError):
            Preferences(cook_time="20")

    def test_servings_default_when_household_empty(self):
        assert Preferences().servings == 4
        assert Preferences(household_size=HouseholdSize(adults=1)).servings == 1

    def test_household_bounds(self):
        with pytest.raises(ValidationError):
            HouseholdSize(adults=100)
        with pytest.raises(ValidationError):
            HouseholdSize(children=-1)

    def test_frozen(self, preferences):
        with pytest.raises(ValidationError):
            preferences.cuisines = ["French"]
