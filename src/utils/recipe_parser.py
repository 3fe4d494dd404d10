"""
Recipe text parser utility.

This module turns the loosely structured text returned by the generation
service into Recipe objects. Parsing runs in stages: the raw text is split
into labeled sections, each section's lines are classified, and ingredient
lines are split token by token into an amount and an item.
"""
import re
from typing import Dict, List, Optional, Tuple

from aws_lambda_powertools import Logger

from src.models.recipe import Recipe, Ingredient, GroceryItem
from src.services.constants import (
    NAME_LABEL,
    PREP_TIME_LABEL,
    COOK_TIME_LABEL,
    SERVINGS_LABEL,
    INGREDIENTS_MARKER,
    STEPS_MARKER,
    GROCERY_LIST_MARKER,
    PLACEHOLDER_RECIPE_NAME,
    DEFAULT_PREP_TIME,
    DEFAULT_COOK_TIME,
    DEFAULT_SERVINGS,
    MIN_INGREDIENTS,
    MIN_STEPS,
    GROCERY_CATEGORIES,
    UNIT_SYNONYMS,
    SPELLED_NUMBERS,
    AMOUNT_FILLER_WORDS
)
from src.services.exceptions import RecipeParseError, RecipeValidationError
from src.utils.amounts import parse_number, format_decimal
from src.utils.units import normalize_unit, normalize_item_name, is_unit_word

logger = Logger()

_BULLET_PATTERN = re.compile(r"^(?:[-•]|\d+\.(?!\d))\s*")
_STEP_PATTERN = re.compile(r'^\d+\.')
_NUMERIC_TOKEN = re.compile(r'^[\d¼½¾⅓⅔⅛]')

_UNIT_ALTERNATION = '|'.join(
    re.escape(word) for word in sorted(UNIT_SYNONYMS, key=len, reverse=True)
)
_GROCERY_LINE_PATTERN = re.compile(
    r'^([\d./]+)\s*(?:(' + _UNIT_ALTERNATION + r')\b\.?)?\s*(.*)$',
    re.IGNORECASE
)
_CATEGORY_LOOKUP = {category.lower(): category for category in GROCERY_CATEGORIES}


def _marker_pattern(marker: str) -> "re.Pattern[str]":
    words = marker.rstrip(':').split()
    return re.compile(r'\s+'.join(re.escape(word) for word in words) + r'\s*:', re.IGNORECASE)


_INGREDIENTS_RE = _marker_pattern(INGREDIENTS_MARKER)
_STEPS_RE = _marker_pattern(STEPS_MARKER)
_GROCERY_RE = _marker_pattern(GROCERY_LIST_MARKER)


def clean_response_text(raw_text: str) -> str:
    """Normalize line endings, drop markdown code fences and trim."""
    text = raw_text.replace('\r\n', '\n').replace('\r', '\n')
    text = re.sub(r'^\s*```[\w-]*\s*$', '', text, flags=re.MULTILINE)
    return text.strip()


def _is_amount_token(token: str) -> bool:
    lowered = token.lower().rstrip('.,')
    return bool(
        _NUMERIC_TOKEN.match(token)
        or is_unit_word(lowered)
        or lowered in SPELLED_NUMBERS
        or lowered in AMOUNT_FILLER_WORDS
    )


def split_ingredient_line(line: str) -> Ingredient:
    """
    Split a cleaned ingredient line into amount and item.

    Tokens are read left to right and count toward the amount while they are
    numbers, unit or quantity words, spelled-out small numbers, or filler
    words ("a", "an", "to", "taste"). The first other token starts the item.

    Args:
        line: Ingredient line without its bullet (e.g. "2 cloves garlic")

    Returns:
        Ingredient with amount and item text

    Example:
        >>> split_ingredient_line("1/2 cup rolled oats")
        Ingredient(amount='1/2 cup', item='rolled oats')
    """
    tokens = line.split()
    amount_tokens: List[str] = []
    for token in tokens:
        if not _is_amount_token(token):
            break
        amount_tokens.append(token)
    item_tokens = tokens[len(amount_tokens):]
    if amount_tokens and len(item_tokens) > 1 and item_tokens[0].lower() == 'of':
        item_tokens = item_tokens[1:]

    if amount_tokens and item_tokens:
        return Ingredient(amount=' '.join(amount_tokens), item=' '.join(item_tokens))

    if not amount_tokens and len(tokens) > 1:
        # "Salt to taste": trailing filler words are the amount
        trailing: List[str] = []
        for token in reversed(tokens[1:]):
            if token.lower().rstrip('.,') not in AMOUNT_FILLER_WORDS:
                break
            trailing.insert(0, token)
        if trailing:
            return Ingredient(amount=' '.join(trailing), item=' '.join(tokens[:-len(trailing)]))
        return Ingredient(amount=tokens[0], item=' '.join(tokens[1:]))

    return Ingredient(amount=' '.join(amount_tokens) or '1', item=line)


def parse_grocery_section(section: str) -> Dict[str, List[GroceryItem]]:
    """
    Parse a categorized grocery list section.

    Only the fixed categories are recognized; items listed under any other
    header are dropped. Duplicate items within a category are merged by
    normalized name, summing their amounts and keeping the first unit seen.

    Args:
        section: Text following the "Grocery List:" marker

    Returns:
        Mapping of category name to grocery items, without empty categories
    """
    collected: Dict[str, List[GroceryItem]] = {}
    current_category: Optional[str] = None

    for line in section.split('\n'):
        line = line.strip()
        if not line:
            continue

        if line.rstrip('*').endswith(':') and not line.startswith('-'):
            header = line.strip('*#').strip().rstrip(':').strip('*').strip()
            current_category = _CATEGORY_LOOKUP.get(header.lower())
            if current_category is None:
                logger.debug("Skipping unrecognized grocery category", extra={"category": header})
            else:
                collected.setdefault(current_category, [])
            continue

        if current_category is None or not line.startswith('-'):
            continue

        match = _GROCERY_LINE_PATTERN.match(line.lstrip('-').strip())
        if not match:
            continue
        value = parse_number(match.group(1))
        item = normalize_item_name(match.group(3))
        if not value > 0 or not item:
            continue

        collected[current_category].append(
            GroceryItem(
                amount=format_decimal(value),
                unit=normalize_unit(match.group(2) or ''),
                item=item
            )
        )

    return {
        category: merged
        for category, merged in ((c, _merge_category(items)) for c, items in collected.items())
        if merged
    }


def _merge_category(items: List[GroceryItem]) -> List[GroceryItem]:
    merged: Dict[str, Tuple[float, str]] = {}
    for entry in items:
        if entry.item in merged:
            total, unit = merged[entry.item]
            merged[entry.item] = (round(total + float(entry.amount), 2), unit)
        else:
            merged[entry.item] = (float(entry.amount), entry.unit)
    return [
        GroceryItem(amount=format_decimal(total), unit=unit, item=item)
        for item, (total, unit) in merged.items()
    ]


def is_valid_recipe(recipe: Recipe) -> bool:
    """
    Check a recipe is complete and free of template placeholders.

    Args:
        recipe: Parsed recipe

    Returns:
        True if the recipe can be shown to the user
    """
    return _validation_problem(recipe) is None


def validate_recipe(recipe: Recipe) -> Recipe:
    """
    Return the recipe unchanged, or raise when it fails validation.

    Raises:
        RecipeValidationError: Naming the first problem found
    """
    problem = _validation_problem(recipe)
    if problem:
        raise RecipeValidationError(problem)
    return recipe


def _validation_problem(recipe: Recipe) -> Optional[str]:
    if not recipe.name or recipe.name == PLACEHOLDER_RECIPE_NAME:
        return "Recipe name is missing"
    if '[' in recipe.name:
        return "Recipe name contains placeholder text"
    if len(recipe.ingredients) < MIN_INGREDIENTS:
        return f"Recipe has fewer than {MIN_INGREDIENTS} ingredients"
    if len(recipe.steps) < MIN_STEPS:
        return f"Recipe has fewer than {MIN_STEPS} steps"
    if recipe.servings <= 0:
        return "Recipe servings must be positive"
    if any('[' in ing.item or '[' in ing.amount for ing in recipe.ingredients):
        return "Recipe ingredients contain placeholder text"
    return None


class RecipeTextParser:
    """Parse generation service responses into Recipe objects."""

    def __init__(self, strict: bool = False):
        """
        Initialize parser.

        Args:
            strict: Treat a missing Servings line as a parse failure instead
                of defaulting it
        """
        self.strict = strict

    def parse(self, raw_text: str) -> Recipe:
        """
        Parse one raw response into a Recipe.

        Args:
            raw_text: Text block returned by the generation service

        Returns:
            Parsed recipe (not yet validated)

        Raises:
            RecipeParseError: If the Ingredients or Steps section is missing,
                or, in strict mode, the Servings line is missing
        """
        text = clean_response_text(raw_text)

        name = self._extract_label(text, NAME_LABEL)
        prep_time = self._extract_number(text, PREP_TIME_LABEL)
        cook_time = self._extract_number(text, COOK_TIME_LABEL)
        servings = self._extract_number(text, SERVINGS_LABEL)

        if servings is None and self.strict:
            raise RecipeParseError("Recipe is missing serving size information")

        ingredients_section, steps_section, grocery_section = self.split_sections(text)

        recipe = Recipe(
            name=name or PLACEHOLDER_RECIPE_NAME,
            prep_time=prep_time or DEFAULT_PREP_TIME,
            cook_time=cook_time or DEFAULT_COOK_TIME,
            servings=int(servings) if servings is not None else DEFAULT_SERVINGS,
            ingredients=self.extract_ingredients(ingredients_section),
            steps=self.extract_steps(steps_section),
            grocery_list=parse_grocery_section(grocery_section) if grocery_section is not None else None
        )

        logger.debug("Parsed recipe", extra={
            "recipe_name": recipe.name,
            "ingredient_count": len(recipe.ingredients),
            "step_count": len(recipe.steps),
            "has_grocery_list": recipe.grocery_list is not None
        })
        return recipe

    def split_sections(self, text: str) -> Tuple[str, str, Optional[str]]:
        """
        Split text into ingredients, steps and optional grocery list sections.

        Raises:
            RecipeParseError: If the Ingredients or Steps marker is missing
        """
        ingredients_match = _INGREDIENTS_RE.search(text)
        if not ingredients_match:
            raise RecipeParseError("Recipe is missing the Ingredients section")

        steps_match = _STEPS_RE.search(text, ingredients_match.end())
        if not steps_match:
            raise RecipeParseError("Recipe is missing the Steps section")

        grocery_match = _GROCERY_RE.search(text, steps_match.end())

        ingredients_section = text[ingredients_match.end():steps_match.start()]
        if grocery_match:
            return (
                ingredients_section,
                text[steps_match.end():grocery_match.start()],
                text[grocery_match.end():]
            )
        return ingredients_section, text[steps_match.end():], None

    def extract_ingredients(self, section: str) -> List[Ingredient]:
        """
        Extract ingredient lines from the ingredients section.

        Args:
            section: Text between the Ingredients and Steps markers

        Returns:
            List of ingredients in listed order
        """
        ingredients = []
        for line in section.split('\n'):
            line = line.strip()
            if not _BULLET_PATTERN.match(line):
                continue

            clean_line = _BULLET_PATTERN.sub('', line, count=1).strip()
            if clean_line:
                ingredients.append(split_ingredient_line(clean_line))

        return ingredients

    def extract_steps(self, section: str) -> List[str]:
        """Extract numbered steps, without their numbers."""
        steps = []
        for line in section.split('\n'):
            line = line.strip()
            if not _STEP_PATTERN.match(line):
                continue

            clean_line = re.sub(r'^\d+\.\s*', '', line).strip()
            if clean_line:
                steps.append(clean_line)

        return steps

    def _extract_label(self, text: str, label: str) -> Optional[str]:
        """
        Find the value of a "Label: value" line, case-insensitively.

        One qualifying word may precede the label ("Recipe Name: ...").
        """
        label_pattern = r'\s+'.join(re.escape(word) for word in label.split())
        match = re.search(
            r"^[ \t*#]*(?:[A-Za-z]+[ \t]+)?" + label_pattern + r"[ \t]*:[ \t*]*(.+?)[ \t*]*$",
            text,
            re.IGNORECASE | re.MULTILINE
        )
        if not match:
            return None
        return match.group(1).strip().strip('"')

    def _extract_number(self, text: str, label: str) -> Optional[str]:
        """Find the first integer on a labeled line."""
        value = self._extract_label(text, label)
        if value is None:
            return None
        number = re.search(r'\d+', value)
        return number.group(0) if number else None
