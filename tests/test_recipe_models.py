"""
Tests for recipe and weekly plan models.
"""
from src.models.recipe import Recipe, GroceryItem, WeeklyMealPlan


def test_recipe_dict_round_trip(grocery_recipe):
    assert Recipe.from_dict(grocery_recipe.to_dict()) == grocery_recipe


def test_recipe_without_grocery_list(sample_recipe):
    data = sample_recipe.to_dict()
    assert data["grocery_list"] is None
    assert Recipe.from_dict(data).grocery_list is None


def test_grocery_item_display_amount():
    assert GroceryItem(amount="2", unit="cups", item="rice").display_amount == "2 cups"
    assert GroceryItem(amount="3", unit="", item="onion").display_amount == "3"


class TestWeeklyMealPlan:
    """Test suite for WeeklyMealPlan."""

    def test_all_days_present(self):
        plan = WeeklyMealPlan()
        assert [day for day, _ in plan.items()] == [
            "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
        ]
        assert plan.recipes() == []

    def test_plans_do_not_share_days(self, sample_recipe):
        first = WeeklyMealPlan()
        first["monday"].lunch = sample_recipe
        assert WeeklyMealPlan()["monday"].lunch is None

    def test_recipes_in_day_and_meal_order(self, sample_recipe, grocery_recipe):
        plan = WeeklyMealPlan()
        plan["sunday"].breakfast = grocery_recipe
        plan["monday"].dinner = sample_recipe
        plan["monday"].breakfast = grocery_recipe

        assert [r.name for r in plan.recipes()] == ["Onion Omelette", "Lemon Chicken Rice", "Onion Omelette"]
        assert [meal for meal, _ in plan["monday"].meals()] == ["breakfast", "dinner"]
