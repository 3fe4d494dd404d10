"""
Prompt construction for recipe generation requests.

The output template in the base prompt is a contract with RecipeTextParser:
both sides use the section labels defined in src.services.constants.
"""
from typing import List

from src.models.preferences import Preferences, TimeBudget
from src.services.constants import (
    NAME_LABEL,
    PREP_TIME_LABEL,
    COOK_TIME_LABEL,
    SERVINGS_LABEL,
    INGREDIENTS_MARKER,
    STEPS_MARKER,
    GROCERY_LIST_MARKER,
    GROCERY_CATEGORIES
)

HEALTHY_MEAL_RULES = """Important requirements for healthy, balanced meals:
- Nutritional balance requirements:
  * Include vegetables or fruits in each meal if possible
  * Limit added sugars and processed ingredients
  * Include healthy fats (olive oil, avocado, nuts, etc.)
- Cooking methods:
  * Prioritize healthy cooking methods:
    - Steaming
    - Baking
    - Grilling
    - Light sautéing
  * Minimize use of added fats/oils (1-2 tbsp max)
  * No deep frying
- Seasoning guidelines:
  * Use herbs and spices for flavor instead of excess salt
  * Limit sodium content
  * Use natural flavor enhancers (citrus, herbs, garlic, ginger)"""

BEGINNER_RULES = """Important requirements for beginner-friendly cooking:
- Use only these basic cooking techniques:
  * Boiling/simmering (pasta, rice, vegetables)
  * Basic sautéing/stir-frying in a pan
  * Simple baking (one pan/dish in oven)
  * Basic chopping and mixing
- Avoid these complex techniques:
  * Deep frying
  * Multiple cooking methods per recipe
  * Precise temperature control
  * Complex sauce-making
  * Multi-step preparations
- Equipment requirements:
  * Only use basic kitchen tools: pot, pan, baking dish
  * No food processor, blender, or special equipment
  * Minimal number of pots/pans (ideally just 1-2)
- Recipe structure:
  * Maximum 6-8 ingredients total
  * 3-5 simple, clear steps
  * Each step should be a single action
  * No concurrent tasks or timing-sensitive steps
  * Ingredients should be common supermarket items"""

CUISINE_DIVERSITY_RULES = """Important requirements for cuisine diversity:
- Create an authentic but simplified version of the cuisine
- Focus on the most basic, popular dishes from the cuisine
- Use readily available ingredients as substitutes when needed
- Ensure the recipe name reflects its cultural origin
- Make each recipe distinct from others in the meal plan"""

GROCERY_LIST_RULES = """Strict requirements for the grocery list:
- Units: use only grams, kilograms, ounces, pounds, milliliters, liters, cups, tablespoons or teaspoons
- Whole items (onions, eggs, garlic cloves, cans, lemons) are listed as a count with no unit, never by weight
- Amounts are decimal numbers (0.5, not 1/2), greater than zero
- Item names are the plain base ingredient: lower case, no descriptors (fresh, chopped, diced, minced), no notes in parentheses, nothing after a comma
- Group every item under exactly one of these categories: {categories}
- Never list the same item twice in a category; combine duplicates into one line with the total amount
- Do not list pantry items the household already has

Example grocery list:
{grocery_marker}
{produce}:
- 2 onions
- 3 garlic
{meat}:
- 1.5 pounds chicken breast
{dairy}:
- 1 cups milk
{pantry}:
- 2 cups rice
- 1 tomatoes"""


def _format_time(budget: TimeBudget) -> str:
    if budget == TimeBudget.SIXTY_PLUS:
        return "60 or more"
    return budget.value


class PromptBuilder:
    """Builds the instruction text sent to the generation service."""

    def __init__(self, include_grocery_list: bool = True):
        """
        Initialize builder.

        Args:
            include_grocery_list: Ask the model for a categorized grocery list
                after the steps
        """
        self.include_grocery_list = include_grocery_list

    def build_base_prompt(self, preferences: Preferences) -> str:
        """
        Build the instruction block shared by every slot of a plan.

        Args:
            preferences: Household preferences for this run

        Returns:
            Prompt text ending with the literal output template
        """
        requirements = self._requirement_lines(preferences)
        sections = [
            "As a professional chef and nutritionist, create a healthy, well-balanced, "
            "beginner-friendly recipe following these requirements:\n" + "\n".join(requirements),
            HEALTHY_MEAL_RULES,
            BEGINNER_RULES,
            CUISINE_DIVERSITY_RULES
        ]
        if self.include_grocery_list:
            sections.append(GROCERY_LIST_RULES.format(
                categories=", ".join(GROCERY_CATEGORIES),
                grocery_marker=GROCERY_LIST_MARKER,
                produce=GROCERY_CATEGORIES[0],
                meat=GROCERY_CATEGORIES[1],
                dairy=GROCERY_CATEGORIES[2],
                pantry=GROCERY_CATEGORIES[3]
            ))
        sections.append(self._output_template(preferences.servings))
        sections.append("Make it suitable for busy weeknight cooking with minimal kitchen experience.")
        return "\n\n".join(sections)

    def build_meal_context(self, meal_type: str, cuisine: str, unique: bool = False) -> str:
        """
        Build the per-request addendum naming the meal type and cuisine.

        Args:
            meal_type: breakfast, lunch or dinner
            cuisine: Target cuisine for this request
            unique: Demand a completely different recipe (duplicate retry)
        """
        lines = [
            f"Create a {meal_type} recipe specifically from {cuisine} cuisine.",
            f"Important: This should be an authentic {cuisine} dish commonly eaten for {meal_type}.",
            f"Make sure the recipe name, ingredients, and cooking methods are authentic to {cuisine} cuisine."
        ]
        if unique:
            lines.append("Create a completely different recipe with a unique name and ingredients.")
        return "\n".join(lines)

    def build_prompt(self, base_prompt: str, meal_type: str, cuisine: str, unique: bool = False) -> str:
        """Join the shared base prompt and the per-request addendum."""
        return f"{base_prompt}\n\n{self.build_meal_context(meal_type, cuisine, unique)}"

    def _requirement_lines(self, preferences: Preferences) -> List[str]:
        lines = []
        if preferences.cuisines:
            lines.append(f"- Choose from these cuisines: {', '.join(preferences.cuisines)}")
        else:
            lines.append("- Create a recipe from any cuisine type")
        lines.append(f"- Maximum prep time: {_format_time(preferences.prep_time)} minutes")
        lines.append(f"- Maximum cook time: {_format_time(preferences.cook_time)} minutes")
        if preferences.allergies:
            lines.append(f"- Avoid these ingredients: {', '.join(preferences.allergies)}")
        if preferences.dietary_preferences:
            lines.append(f"- Follow these dietary preferences: {', '.join(preferences.dietary_preferences)}")
        if preferences.pantry_items:
            lines.extend([
                f"- Use these pantry items when possible: {', '.join(preferences.pantry_items)}",
                "- Minimize additional spices and sauces beyond what's in the pantry",
                "- If using additional spices/sauces, limit to 1-2 new items maximum",
                "- Prioritize using the provided pantry items for seasoning and flavoring"
            ])

        household = preferences.household_size
        if household.total:
            lines.append(
                f"- Cook for a household of {household.total} "
                f"({household.adults} adults, {household.teenagers} teenagers, {household.children} children)"
            )
        return lines

    def _output_template(self, servings: int) -> str:
        template = [
            "Generate a complete recipe in this format (do not use placeholders, generate actual values):",
            "",
            f"{NAME_LABEL}: (generate a specific recipe name that reflects the cuisine)",
            f"{PREP_TIME_LABEL}: (number of minutes)",
            f"{COOK_TIME_LABEL}: (number of minutes)",
            f"{SERVINGS_LABEL}: {servings}",
            "",
            INGREDIENTS_MARKER,
            "- 2 cups rice",
            "- 1 pound chicken",
            "- 3 cloves garlic",
            "(list 6-8 common ingredients with amounts)",
            "",
            STEPS_MARKER,
            "1. Preheat the oven to 350°F",
            "2. Season the chicken with salt and pepper",
            "(list 3-5 simple, single-action steps)"
        ]
        if self.include_grocery_list:
            template.extend([
                "",
                GROCERY_LIST_MARKER,
                "(group every ingredient under its category as in the example grocery list above)"
            ])
        return "\n".join(template)
