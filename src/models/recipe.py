"""
Recipe data models for weekly meal plan generation.

This module provides data structures for representing generated recipes,
their ingredients and grocery items, and the weekly plan assembled from them.
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterator, List, Optional, Tuple

from pydantic import BaseModel

from src.services.constants import DAYS_OF_WEEK, MEAL_TYPES


@dataclass
class Ingredient:
    """
    Single recipe ingredient as returned by the generation service.

    Attributes:
        amount: Free-text quantity and unit phrase (e.g. "2 cups")
        item: Ingredient name (e.g. "jasmine rice")
    """
    amount: str
    item: str


@dataclass
class GroceryItem:
    """
    Grocery list entry with a numeric amount and canonical unit.

    Attributes:
        amount: Numeric amount as text (e.g. "2.00" or "1.5")
        unit: Canonical unit name, empty for plain counts
        item: Normalized base item name
    """
    amount: str
    unit: str
    item: str

    @property
    def display_amount(self) -> str:
        """Amount with the unit folded in, e.g. "2 cups"."""
        return f"{self.amount} {self.unit}".strip()


@dataclass
class Recipe:
    """
    Individual recipe model.

    Represents one recipe parsed from a generation service response with all
    its components and, when the model provided one, its categorized grocery
    list.

    Attributes:
        name: Recipe name
        prep_time: Preparation time in minutes, as text
        cook_time: Cooking time in minutes, as text
        servings: Number of servings
        ingredients: Ordered list of ingredients
        steps: Ordered list of cooking steps
        grocery_list: Optional mapping of category to grocery items
    """
    name: str
    prep_time: str
    cook_time: str
    servings: int
    ingredients: List[Ingredient]
    steps: List[str]
    grocery_list: Optional[Dict[str, List[GroceryItem]]] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Recipe":
        """Build a recipe from its dictionary form (snake_case or camelCase keys)."""
        grocery_list = data.get("grocery_list", data.get("groceryList"))
        return cls(
            name=data["name"],
            prep_time=str(data.get("prep_time", data.get("prepTime", ""))),
            cook_time=str(data.get("cook_time", data.get("cookTime", ""))),
            servings=int(data["servings"]),
            ingredients=[Ingredient(amount=str(i["amount"]), item=i["item"]) for i in data.get("ingredients", [])],
            steps=list(data.get("steps", [])),
            grocery_list={
                category: [
                    GroceryItem(amount=str(g["amount"]), unit=g.get("unit", ""), item=g["item"])
                    for g in items
                ]
                for category, items in grocery_list.items()
            } if grocery_list else None
        )


class DailyMeals(BaseModel):
    """Recipes for the selected slots of one day."""
    breakfast: Optional[Recipe] = None
    lunch: Optional[Recipe] = None
    dinner: Optional[Recipe] = None

    def meals(self) -> Iterator[Tuple[str, Recipe]]:
        """Yield (meal_type, recipe) for populated slots in canonical order."""
        for meal_type in MEAL_TYPES:
            recipe = getattr(self, meal_type)
            if recipe is not None:
                yield meal_type, recipe


class WeeklyMealPlan(BaseModel):
    """
    Weekly meal plan keyed by the seven canonical day names.
    """
    days: Dict[str, DailyMeals] = {}

    def model_post_init(self, __context: Any) -> None:
        for day in DAYS_OF_WEEK:
            self.days.setdefault(day, DailyMeals())

    def __getitem__(self, day: str) -> DailyMeals:
        return self.days[day]

    def items(self) -> Iterator[Tuple[str, DailyMeals]]:
        """Yield (day, meals) in canonical day order."""
        for day in DAYS_OF_WEEK:
            yield day, self.days[day]

    def recipes(self) -> List[Recipe]:
        """All recipes of the plan, day by day and meal by meal."""
        return [recipe for _, meals in self.items() for _, recipe in meals.meals()]
