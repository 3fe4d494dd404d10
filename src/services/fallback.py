"""
Hard-coded fallback recipes for slots that could not be generated.
"""
from typing import Callable, Dict

from src.models.recipe import Recipe, Ingredient


def _breakfast(cuisine: str) -> Recipe:
    return Recipe(
        name=f"{cuisine} Breakfast Bowl",
        prep_time="10",
        cook_time="15",
        servings=2,
        ingredients=[
            Ingredient(amount="1 cup", item="rolled oats"),
            Ingredient(amount="1 medium", item="banana"),
            Ingredient(amount="1 tbsp", item="honey"),
            Ingredient(amount="1/4 cup", item="mixed nuts"),
            Ingredient(amount="1 cup", item="milk of choice"),
            Ingredient(amount="1/2 tsp", item="cinnamon"),
            Ingredient(amount="1 pinch", item="salt")
        ],
        steps=[
            "Combine oats and milk in a microwave-safe bowl",
            "Microwave for 2 minutes, stirring halfway through",
            "Slice banana and add on top",
            "Add cinnamon and a pinch of salt",
            "Drizzle with honey and sprinkle with nuts"
        ]
    )


def _lunch(cuisine: str) -> Recipe:
    return Recipe(
        name=f"{cuisine} Garden Bowl",
        prep_time="15",
        cook_time="0",
        servings=2,
        ingredients=[
            Ingredient(amount="3 cups", item="mixed greens"),
            Ingredient(amount="1 medium", item="tomato"),
            Ingredient(amount="1", item="cucumber"),
            Ingredient(amount="1/4 cup", item="olive oil"),
            Ingredient(amount="2 tbsp", item="lemon juice"),
            Ingredient(amount="1/2 cup", item="quinoa, cooked"),
            Ingredient(amount="1/4 cup", item="mixed seeds")
        ],
        steps=[
            "Wash and chop all vegetables",
            "Cook quinoa according to package instructions",
            "Combine greens, tomato, and cucumber in a bowl",
            "Whisk together olive oil and lemon juice",
            "Top with quinoa and seeds, then drizzle with dressing"
        ]
    )


def _dinner(cuisine: str) -> Recipe:
    return Recipe(
        name=f"{cuisine} Rice Bowl",
        prep_time="15",
        cook_time="25",
        servings=2,
        ingredients=[
            Ingredient(amount="1 cup", item="jasmine rice"),
            Ingredient(amount="2 cups", item="vegetable broth"),
            Ingredient(amount="2 tbsp", item="olive oil"),
            Ingredient(amount="2 cloves", item="garlic"),
            Ingredient(amount="1 cup", item="mixed vegetables"),
            Ingredient(amount="1 tbsp", item="soy sauce"),
            Ingredient(amount="2", item="eggs")
        ],
        steps=[
            "Cook rice in vegetable broth according to package instructions",
            "Mince garlic and sauté in olive oil until fragrant",
            "Add mixed vegetables and stir-fry until tender",
            "Fry eggs to desired doneness",
            "Combine rice and vegetables, top with fried egg and soy sauce"
        ]
    )


FALLBACK_RECIPES: Dict[str, Callable[[str], Recipe]] = {
    "breakfast": _breakfast,
    "lunch": _lunch,
    "dinner": _dinner
}


def fallback_recipe(meal_type: str, cuisine: str = "International") -> Recipe:
    """
    Get a fully valid stand-in recipe for a meal slot.

    Args:
        meal_type: breakfast, lunch or dinner; anything else gets dinner
        cuisine: Cuisine used in the recipe name

    Returns:
        New Recipe instance
    """
    return FALLBACK_RECIPES.get(meal_type, _dinner)(cuisine)
