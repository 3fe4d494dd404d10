"""
Grocery list aggregation service.

This module consolidates the grocery needs of a set of recipes into one
categorized list, combining duplicate items and leaving out what the
household already keeps in the pantry.

Typical usage:
    service = GroceryListService()
    groceries = service.aggregate_meal_plan(plan, preferences.pantry_items)
"""
import math
import re
from collections import Counter, OrderedDict
from typing import Dict, Iterable, List, Tuple

from aws_lambda_powertools import Logger

from src.models.recipe import GroceryItem, Recipe, WeeklyMealPlan
from src.services.constants import (
    CATEGORY_KEYWORDS,
    GROCERY_CATEGORIES,
    PANTRY
)
from src.utils.amounts import format_amount, parse_amount, parse_number
from src.utils.units import normalize_item_name, normalize_unit

logger = Logger()

GroceryList = Dict[str, List[GroceryItem]]

_KEYWORD_PATTERNS = {
    category: re.compile(r'\b(?:' + '|'.join(sorted(map(re.escape, keywords), key=len, reverse=True)) + r')')
    for category, keywords in CATEGORY_KEYWORDS.items()
}


def categorize_item(name: str) -> str:
    """
    File a normalized item name under a grocery category.

    Categories are tried in taxonomy order; names matching no keyword land in
    the Pantry catch-all.
    """
    for category in GROCERY_CATEGORIES:
        pattern = _KEYWORD_PATTERNS.get(category)
        if pattern and pattern.search(name):
            return category
    return PANTRY


class GroceryListService:
    """Service for building consolidated grocery lists from recipes."""

    def aggregate(self, recipes: Iterable[Recipe], pantry_items: Iterable[str] = ()) -> GroceryList:
        """
        Combine the grocery needs of several recipes.

        Recipes carrying their own grocery list contribute it as is; the
        others contribute their ingredient lines, filed by keyword. Within a
        category, entries sharing a normalized name are summed when their
        unit is the most frequent one for that name; entries in other units
        are dropped.

        Args:
            recipes: Recipes to shop for
            pantry_items: Items already on hand, excluded by substring match

        Returns:
            Mapping of category to items sorted by name, categories in
            taxonomy order, empty categories omitted
        """
        pantry = [p for p in (normalize_item_name(item) for item in pantry_items) if p]

        # category -> item name -> [(value, unit), ...] in first-seen order
        collected: Dict[str, Dict[str, List[Tuple[float, str]]]] = {
            category: OrderedDict() for category in GROCERY_CATEGORIES
        }

        for recipe in recipes:
            for category, name, value, unit in self._recipe_entries(recipe):
                if not name or value <= 0:
                    continue
                if any(p in name for p in pantry):
                    logger.debug("Skipping pantry item", extra={"item": name})
                    continue
                collected[category].setdefault(name, []).append((value, unit))

        groceries: GroceryList = OrderedDict()
        for category in GROCERY_CATEGORIES:
            items = [
                self._combine(name, entries)
                for name, entries in sorted(collected[category].items())
            ]
            if items:
                groceries[category] = items

        logger.info("Aggregated grocery list", extra={
            "categories": list(groceries.keys()),
            "item_count": sum(len(items) for items in groceries.values())
        })
        return groceries

    def aggregate_meal_plan(self, plan: WeeklyMealPlan, pantry_items: Iterable[str] = ()) -> GroceryList:
        """Aggregate every recipe of a weekly plan."""
        return self.aggregate(plan.recipes(), pantry_items)

    def _recipe_entries(self, recipe: Recipe) -> Iterable[Tuple[str, str, float, str]]:
        if recipe.grocery_list:
            for category, items in recipe.grocery_list.items():
                known = category if category in GROCERY_CATEGORIES else None
                for grocery_item in items:
                    name = normalize_item_name(grocery_item.item)
                    value = parse_number(str(grocery_item.amount).strip())
                    if math.isnan(value):
                        value = parse_amount(str(grocery_item.amount)).value
                    yield known or categorize_item(name), name, value, normalize_unit(grocery_item.unit or '')
            return

        for ingredient in recipe.ingredients:
            name = normalize_item_name(ingredient.item)
            amount = parse_amount(ingredient.amount)
            yield categorize_item(name), name, amount.value, amount.unit

    @staticmethod
    def _combine(name: str, entries: List[Tuple[float, str]]) -> GroceryItem:
        unit_counts = Counter(unit for _, unit in entries)
        units_in_order = list(OrderedDict.fromkeys(unit for _, unit in entries))
        unit = max(units_in_order, key=lambda u: unit_counts[u])

        dropped = [entry for entry in entries if entry[1] != unit]
        if dropped:
            logger.warning("Dropping grocery entries with mismatched units", extra={
                "item": name,
                "kept_unit": unit,
                "dropped_units": sorted({u for _, u in dropped})
            })

        total = sum(value for value, entry_unit in entries if entry_unit == unit)
        return GroceryItem(amount=format_amount(round(total, 2)), unit=unit, item=name)
