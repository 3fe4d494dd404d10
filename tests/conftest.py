"""
Pytest configuration and shared fixtures.
"""
import os
from dataclasses import dataclass

import pytest

os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "meal_planner")

import src.utils.clients as clients
import src.utils.config as config
from src.models.preferences import Preferences
from src.models.recipe import Recipe, Ingredient, GroceryItem

SAMPLE_RECIPE_TEXT = """Name: Simple Tomato Pasta
Prep Time: 10
Cook Time: 20
Servings: 4
Ingredients:
- 2 cups pasta
- 1 can tomatoes
- 2 cloves garlic
Steps:
1. Boil pasta
2. Sauté garlic
3. Add tomatoes and combine
Grocery List:
Produce:
- 2 cloves garlic
Pantry:
- 2 cups pasta
- 1 can tomatoes
"""


@dataclass
class FakeLambdaContext:
    function_name: str = "meal-planner"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:eu-west-1:123456789012:function:meal-planner"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    """Give every test fresh settings and clients, with an API key set."""
    monkeypatch.setenv("GOOGLE_API_KEY", "test-key")
    monkeypatch.setattr(config, "_settings", None)
    monkeypatch.setattr(clients, "_gemini", None)


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    return FakeLambdaContext()


@pytest.fixture
def sample_recipe_text() -> str:
    return SAMPLE_RECIPE_TEXT


@pytest.fixture
def sample_recipe() -> Recipe:
    """A valid recipe without its own grocery list."""
    return Recipe(
        name="Lemon Chicken Rice",
        prep_time="10",
        cook_time="25",
        servings=4,
        ingredients=[
            Ingredient(amount="1 cup", item="jasmine rice"),
            Ingredient(amount="1 pound", item="chicken breast"),
            Ingredient(amount="2 cloves", item="garlic"),
            Ingredient(amount="1", item="lemon")
        ],
        steps=[
            "Cook the rice",
            "Sear the chicken with garlic",
            "Squeeze lemon over and serve with rice"
        ]
    )


@pytest.fixture
def grocery_recipe() -> Recipe:
    """A valid recipe carrying a categorized grocery list."""
    return Recipe(
        name="Onion Omelette",
        prep_time="5",
        cook_time="10",
        servings=2,
        ingredients=[
            Ingredient(amount="1", item="onion"),
            Ingredient(amount="3", item="eggs"),
            Ingredient(amount="1 tbsp", item="butter")
        ],
        steps=["Whisk the eggs", "Cook onion and eggs in butter"],
        grocery_list={
            "Produce": [GroceryItem(amount="1.00", unit="", item="onion")],
            "Dairy": [
                GroceryItem(amount="3.00", unit="", item="egg"),
                GroceryItem(amount="1.00", unit="tablespoons", item="butter")
            ]
        }
    )


@pytest.fixture
def preferences() -> Preferences:
    """Two cuisines, dinner on Monday and Tuesday."""
    return Preferences.model_validate({
        "cuisines": ["Italian", "Thai"],
        "prepTime": "30",
        "cookTime": "45",
        "allergies": ["peanuts"],
        "dietaryPreferences": [],
        "pantryItems": ["salt", "olive oil"],
        "householdSize": {"adults": 2, "teenagers": 0, "children": 1},
        "mealSelection": {
            "monday": {"dinner": True},
            "tuesday": {"dinner": True}
        }
    })
