"""
Display and export formatting for meal plans and grocery lists.
"""
from html import escape
from typing import Dict, List, Optional

from src.models.recipe import GroceryItem, Recipe, WeeklyMealPlan
from src.services.constants import CATEGORY_ICONS, MEAL_ICONS, ERROR_REMEDIATION_HINTS
from src.services.exceptions import SlotGenerationError

EXPORT_FORMATS = ("text", "markdown", "html")


def _check_format(fmt: str, allowed=EXPORT_FORMATS) -> None:
    if fmt not in allowed:
        raise ValueError(f"Unsupported format '{fmt}', expected one of: {', '.join(allowed)}")


def format_grocery_list(groceries: Dict[str, List[GroceryItem]], fmt: str = "text") -> str:
    """
    Render a categorized grocery list for sharing or export.

    Args:
        groceries: Mapping of category to items, already in display order
        fmt: "text", "markdown" or "html"

    Returns:
        Rendered list

    Raises:
        ValueError: If the format is not supported
    """
    _check_format(fmt)

    if fmt == "html":
        parts = ["<h2>Grocery List</h2>"]
        for category, items in groceries.items():
            parts.append(f"<h3>{CATEGORY_ICONS.get(category, '•')} {escape(category)}</h3>")
            parts.append("<ul>")
            parts.extend(f"<li>{escape(item.display_amount)} {escape(item.item)}</li>" for item in items)
            parts.append("</ul>")
        return "".join(parts)

    if fmt == "markdown":
        lines = ["# Grocery List"]
        for category, items in groceries.items():
            lines.extend(["", f"## {CATEGORY_ICONS.get(category, '•')} {category}", ""])
            lines.extend(f"- [ ] {item.display_amount} {item.item}" for item in items)
        return "\n".join(lines) + "\n"

    lines = ["🛒 Grocery List:"]
    for category, items in groceries.items():
        lines.extend(["", f"{CATEGORY_ICONS.get(category, '•')} {category}:"])
        lines.extend(f"  • {item.display_amount} {item.item}" for item in items)
    return "\n".join(lines) + "\n"


def _minutes(value: str) -> str:
    return f"{value} min"


def format_meal_plan(plan: WeeklyMealPlan, fmt: str = "text") -> str:
    """
    Render a weekly plan, one block per day that has at least one meal.

    Args:
        plan: Weekly meal plan
        fmt: "text" or "markdown"
    """
    _check_format(fmt, ("text", "markdown"))

    lines = ["# Weekly Meal Plan" if fmt == "markdown" else "📅 Weekly Meal Plan"]
    for day, meals in plan.items():
        day_meals = list(meals.meals())
        if not day_meals:
            continue
        lines.append("")
        lines.append(f"## {day.title()}" if fmt == "markdown" else f"{day.title()}\n------------------------")
        for meal_type, recipe in day_meals:
            details = (
                f"prep {_minutes(recipe.prep_time)}, cook {_minutes(recipe.cook_time)}, "
                f"serves {recipe.servings}"
            )
            if fmt == "markdown":
                lines.append(f"- **{meal_type.title()}**: {recipe.name} ({details})")
            else:
                lines.append(f"{MEAL_ICONS.get(meal_type, '•')} {meal_type.title()}: {recipe.name} ({details})")
    return "\n".join(lines) + "\n"


def format_recipe(recipe: Recipe) -> str:
    """Format a full recipe with ingredients and numbered steps."""
    lines = [
        recipe.name,
        f"Prep Time: {_minutes(recipe.prep_time)} | Cook Time: {_minutes(recipe.cook_time)} | Servings: {recipe.servings}",
        "",
        "Ingredients:",
        *[f"• {ingredient.amount} {ingredient.item}".replace("  ", " ") for ingredient in recipe.ingredients],
        "",
        "Steps:",
        *[f"{number}. {step}" for number, step in enumerate(recipe.steps, start=1)]
    ]
    return "\n".join(lines)


def format_error_message(error: Optional[Exception] = None) -> str:
    """Friendly failure message with hints on how to get a plan through."""
    lines = ["❌ Sorry, we couldn't generate your meal plan."]
    if isinstance(error, SlotGenerationError):
        lines.append(f"The {error.meal_type} for {error.day.title()} could not be created.")
    lines.extend([
        "",
        "You could try:",
        *[f"• {hint}" for hint in ERROR_REMEDIATION_HINTS]
    ])
    return "\n".join(lines)
