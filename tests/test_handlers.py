"""
Tests for the meal plan Lambda handlers.
"""
import json
from unittest.mock import patch

import pytest

from src.handlers.meal_plan import handler, grocery_list_handler
from src.services.exceptions import GenerationError, SlotGenerationError
from src.services.fallback import fallback_recipe
from src.models.recipe import WeeklyMealPlan

PREFERENCES_BODY = {
    "cuisines": ["Italian"],
    "prepTime": "30",
    "cookTime": "30",
    "pantryItems": ["salt"],
    "householdSize": {"adults": 2},
    "mealSelection": {"monday": {"dinner": True}}
}


def api_event(body) -> dict:
    return {"body": body if isinstance(body, str) else json.dumps(body)}


@pytest.fixture
def generated_plan() -> WeeklyMealPlan:
    plan = WeeklyMealPlan()
    plan["monday"].dinner = fallback_recipe("dinner", "Italian")
    return plan


class TestMealPlanHandler:
    """Test suite for the meal plan handler."""

    def test_success(self, lambda_context, generated_plan):
        with patch("src.handlers.meal_plan.generate_meal_plan", return_value=generated_plan) as mock_generate:
            response = handler(api_event(PREFERENCES_BODY), lambda_context)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["meal_plan"]["monday"]["dinner"]["name"] == "Italian Rice Bowl"
        assert body["meal_plan"]["tuesday"] == {}
        assert "Pantry" in body["grocery_list"]
        assert body["grocery_list_text"].startswith("🛒 Grocery List:")

        preferences = mock_generate.call_args.args[0]
        assert preferences.cuisines == ["Italian"]

    def test_no_meals_selected(self, lambda_context):
        with patch("src.handlers.meal_plan.generate_meal_plan") as mock_generate:
            response = handler(api_event({"cuisines": ["Thai"]}), lambda_context)

        assert response["statusCode"] == 400
        assert "at least one meal" in json.loads(response["body"])["error"]
        mock_generate.assert_not_called()

    @pytest.mark.parametrize("body", [
        "not json",
        "[1, 2]",
        {"prepTime": "20", "mealSelection": {"monday": {"dinner": True}}},
        {"mealSelection": {"someday": {"dinner": True}}},
    ])
    def test_invalid_request(self, lambda_context, body):
        response = handler(api_event(body), lambda_context)
        assert response["statusCode"] == 400

    def test_generation_failure(self, lambda_context):
        error = SlotGenerationError("monday", "dinner", GenerationError("HTTP error! status: 503"))
        with patch("src.handlers.meal_plan.generate_meal_plan", side_effect=error):
            response = handler(api_event(PREFERENCES_BODY), lambda_context)

        assert response["statusCode"] == 502
        message = json.loads(response["body"])["error"]
        assert "The dinner for Monday could not be created." in message

    def test_unexpected_failure(self, lambda_context):
        with patch("src.handlers.meal_plan.generate_meal_plan", side_effect=RuntimeError("boom")):
            response = handler(api_event(PREFERENCES_BODY), lambda_context)

        assert response["statusCode"] == 500
        assert json.loads(response["body"]) == {"error": "Internal server error"}


class TestGroceryListHandler:
    """Test suite for the grocery list handler."""

    def test_markdown_export(self, lambda_context, grocery_recipe, sample_recipe):
        body = {
            "recipes": [grocery_recipe.to_dict(), sample_recipe.to_dict()],
            "pantryItems": ["garlic"],
            "format": "markdown"
        }

        response = grocery_list_handler(api_event(body), lambda_context)

        assert response["statusCode"] == 200
        result = json.loads(response["body"])
        assert result["format"] == "markdown"
        produce = [item["item"] for item in result["grocery_list"]["Produce"]]
        assert produce == ["lemon", "onion"]
        assert result["formatted"].startswith("# Grocery List")

    def test_camel_case_recipes(self, lambda_context):
        recipe = {
            "name": "Toast",
            "prepTime": 5,
            "cookTime": 5,
            "servings": 1,
            "ingredients": [{"amount": "2 slices", "item": "bread"}],
            "steps": ["Toast", "Serve"],
            "groceryList": {"Pantry": [{"amount": "2.00", "unit": "", "item": "bread"}]}
        }

        response = grocery_list_handler(api_event({"recipes": [recipe]}), lambda_context)

        result = json.loads(response["body"])
        assert result["grocery_list"] == {"Pantry": [{"amount": "2", "unit": "", "item": "bread"}]}
        assert result["format"] == "text"

    def test_unsupported_format(self, lambda_context):
        response = grocery_list_handler(api_event({"recipes": [], "format": "pdf"}), lambda_context)
        assert response["statusCode"] == 400

    @pytest.mark.parametrize("pantry_items", ["salt", ["salt", None], {"salt": True}])
    def test_pantry_items_must_be_string_list(self, lambda_context, grocery_recipe, pantry_items):
        body = {"recipes": [grocery_recipe.to_dict()], "pantryItems": pantry_items}

        response = grocery_list_handler(api_event(body), lambda_context)

        assert response["statusCode"] == 400
        assert "pantryItems" in json.loads(response["body"])["error"]

    def test_pantry_items_exclude_by_name(self, lambda_context, grocery_recipe):
        body = {"recipes": [grocery_recipe.to_dict()], "pantryItems": ["salt"]}

        response = grocery_list_handler(api_event(body), lambda_context)

        dairy = [item["item"] for item in json.loads(response["body"])["grocery_list"]["Dairy"]]
        assert dairy == ["butter", "egg"]

    def test_invalid_recipe(self, lambda_context):
        response = grocery_list_handler(api_event({"recipes": [{"steps": []}]}), lambda_context)
        assert response["statusCode"] == 400
