"""
Constants and shared data for meal plan generation and grocery services.
"""
from typing import Dict, List, Set

DAYS_OF_WEEK: List[str] = [
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday"
]

MEAL_TYPES: List[str] = ["breakfast", "lunch", "dinner"]

# Section labels shared by the prompt template and the recipe parser
NAME_LABEL = "Name"
PREP_TIME_LABEL = "Prep Time"
COOK_TIME_LABEL = "Cook Time"
SERVINGS_LABEL = "Servings"
INGREDIENTS_MARKER = "Ingredients:"
STEPS_MARKER = "Steps:"
GROCERY_LIST_MARKER = "Grocery List:"

PLACEHOLDER_RECIPE_NAME = "Recipe Name"
DEFAULT_PREP_TIME = "15"
DEFAULT_COOK_TIME = "15"
DEFAULT_SERVINGS = 4

MIN_INGREDIENTS = 3
MIN_STEPS = 2

# Grocery category taxonomy, in display order. Pantry is the catch-all.
PRODUCE = "Produce"
MEAT_POULTRY_SEAFOOD = "Meat/Poultry/Seafood"
DAIRY = "Dairy"
PANTRY = "Pantry"
GROCERY_CATEGORIES: List[str] = [PRODUCE, MEAT_POULTRY_SEAFOOD, DAIRY, PANTRY]

CATEGORY_ICONS = {
    PRODUCE: "🥬",
    MEAT_POULTRY_SEAFOOD: "🥩",
    DAIRY: "🥛",
    PANTRY: "🏠"
}

MEAL_ICONS = {
    "breakfast": "🍳",
    "lunch": "🥗",
    "dinner": "🍽️"
}

# Keyword membership used to file ingredients of recipes that came back
# without their own grocery list
CATEGORY_KEYWORDS: Dict[str, Set[str]] = {
    PRODUCE: {
        'tomato', 'cucumber', 'spinach', 'onion', 'basil', 'garlic', 'lemon',
        'lime', 'ginger', 'mushroom', 'bell pepper', 'carrot', 'celery',
        'lettuce', 'avocado', 'kale', 'zucchini', 'potato', 'apple', 'banana',
        'berry', 'cilantro', 'parsley', 'scallion', 'greens', 'broccoli',
        'cabbage', 'orange', 'mango', 'herb', 'eggplant', 'squash'
    },
    MEAT_POULTRY_SEAFOOD: {
        'chicken', 'beef', 'pork', 'turkey', 'lamb', 'fish', 'salmon',
        'tuna', 'cod', 'shrimp', 'prawn', 'bacon', 'ham', 'sausage', 'steak'
    },
    DAIRY: {
        'cheese', 'yogurt', 'mozzarella', 'feta', 'milk', 'cream', 'butter',
        'parmesan', 'ricotta', 'egg'
    }
}

# Unit synonym table; count words map to the empty (count) unit
UNIT_SYNONYMS: Dict[str, str] = {
    'g': 'grams', 'gram': 'grams', 'grams': 'grams',
    'kg': 'kilograms', 'kgs': 'kilograms', 'kilogram': 'kilograms', 'kilograms': 'kilograms',
    'oz': 'ounces', 'ozs': 'ounces', 'ounce': 'ounces', 'ounces': 'ounces',
    'fl oz': 'fluid ounces', 'fluid ounce': 'fluid ounces', 'fluid ounces': 'fluid ounces',
    'lb': 'pounds', 'lbs': 'pounds', 'pound': 'pounds', 'pounds': 'pounds',
    'ml': 'milliliters', 'milliliter': 'milliliters', 'milliliters': 'milliliters',
    'l': 'liters', 'liter': 'liters', 'liters': 'liters',
    'cup': 'cups', 'cups': 'cups',
    'tbsp': 'tablespoons', 'tbs': 'tablespoons', 'tablespoon': 'tablespoons',
    'tablespoons': 'tablespoons',
    'tsp': 'teaspoons', 'teaspoon': 'teaspoons', 'teaspoons': 'teaspoons',
    'piece': '', 'pieces': '', 'whole': '', 'unit': '', 'units': '',
    'clove': '', 'cloves': '', 'can': '', 'cans': ''
}

# Words that describe a quantity without being a convertible unit
MEASURE_WORDS: Set[str] = {
    'pinch', 'pinches', 'handful', 'handfuls', 'splash', 'dash', 'dashes',
    'large', 'medium', 'small', 'slice', 'slices', 'bunch', 'bunches',
    'sprig', 'sprigs', 'stalk', 'stalks', 'head', 'heads', 'package',
    'packages', 'jar', 'jars', 'bottle', 'fillet', 'fillets'
}

SPELLED_NUMBERS: Set[str] = {'one', 'two', 'three', 'four', 'five'}

AMOUNT_FILLER_WORDS: Set[str] = {'a', 'an', 'to', 'taste'}

ITEM_DESCRIPTORS: List[str] = [
    'fresh', 'dried', 'ground', 'chopped', 'diced', 'minced', 'sliced',
    'whole', 'organic', 'raw'
]

# Rotation pool used when no cuisine was selected
MASTER_CUISINES: List[str] = [
    "Italian",
    "Mexican",
    "Chinese",
    "Japanese",
    "Indian",
    "Thai",
    "French",
    "Greek",
    "Spanish",
    "Korean",
    "Vietnamese",
    "Mediterranean",
    "American",
    "Lebanese",
    "Moroccan"
]

SAFETY_CATEGORIES: List[str] = [
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT"
]

ERROR_REMEDIATION_HINTS: List[str] = [
    "Try selecting fewer meals for the week",
    "Add more items to your pantry",
    "Loosen some of your dietary preferences",
    "Wait a moment and try again"
]
