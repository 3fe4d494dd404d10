"""
Lambda handlers for meal plan and grocery list generation.
"""
import json
from dataclasses import asdict
from typing import Any, Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from src.models.preferences import Preferences
from src.models.recipe import Recipe, WeeklyMealPlan
from src.services.exceptions import MealPlanError
from src.services.grocery_list import GroceryListService, GroceryList
from src.services.meal_plan import generate_meal_plan
from src.utils.formatters import EXPORT_FORMATS, format_error_message, format_grocery_list
from src.utils.logging import logger, log_exception

tracer = Tracer(service="meal_planner")


class BadRequestError(ValueError):
    """Raised when a request body cannot be turned into a valid request."""
    pass


def _response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body)
    }


def _load_body(event: Dict) -> Dict[str, Any]:
    body = event.get("body") or "{}"
    if isinstance(body, dict):
        return body
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise BadRequestError(f"Request body is not valid JSON: {e}")
    if not isinstance(data, dict):
        raise BadRequestError("Request body must be a JSON object")
    return data


def serialize_meal_plan(plan: WeeklyMealPlan) -> Dict[str, Dict[str, Any]]:
    """Day -> meal type -> recipe dictionary, selected slots only."""
    return {
        day: {meal_type: recipe.to_dict() for meal_type, recipe in meals.meals()}
        for day, meals in plan.items()
    }


def serialize_grocery_list(groceries: GroceryList) -> Dict[str, Any]:
    return {category: [asdict(item) for item in items] for category, items in groceries.items()}


@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: Dict, context: LambdaContext) -> Dict:
    """
    Generate a weekly meal plan and its grocery list.

    Args:
        event: API Gateway proxy event whose body is a preferences object
        context: Lambda context

    Returns:
        API Gateway proxy response
    """
    try:
        preferences = Preferences.model_validate(_load_body(event))
        if preferences.total_meals_selected == 0:
            raise BadRequestError("Select at least one meal to generate a plan")

        logger.info("Generating meal plan", extra={
            "meals_selected": preferences.total_meals_selected,
            "cuisines": preferences.cuisines
        })
        plan = generate_meal_plan(preferences)
        groceries = GroceryListService().aggregate_meal_plan(plan, preferences.pantry_items)

        return _response(200, {
            "meal_plan": serialize_meal_plan(plan),
            "grocery_list": serialize_grocery_list(groceries),
            "grocery_list_text": format_grocery_list(groceries, "text")
        })

    except (ValidationError, BadRequestError) as e:
        logger.warning("Invalid meal plan request", extra={"error": str(e)})
        return _response(400, {"error": str(e)})

    except MealPlanError as e:
        log_exception(logger, "Meal plan generation failed", extra={
            "error_type": type(e).__name__,
            "error_details": str(e)
        })
        return _response(502, {"error": format_error_message(e)})

    except Exception:
        logger.exception("Unexpected error generating meal plan")
        return _response(500, {"error": "Internal server error"})


@logger.inject_lambda_context
@tracer.capture_lambda_handler
def grocery_list_handler(event: Dict, context: LambdaContext) -> Dict:
    """
    Build a consolidated grocery list for a set of recipes.

    The body carries ``recipes``, optional ``pantryItems`` and an optional
    export ``format`` ("text", "markdown" or "html").
    """
    try:
        body = _load_body(event)
        fmt = body.get("format", "text")
        if fmt not in EXPORT_FORMATS:
            raise BadRequestError(f"Unsupported format '{fmt}'")
        try:
            recipes = [Recipe.from_dict(recipe) for recipe in body.get("recipes", [])]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise BadRequestError(f"Invalid recipe in request: {e}")
        pantry_items = body.get("pantryItems", body.get("pantry_items")) or []
        if not isinstance(pantry_items, list) or not all(isinstance(item, str) for item in pantry_items):
            raise BadRequestError("pantryItems must be a list of strings")

        groceries = GroceryListService().aggregate(recipes, pantry_items)
        return _response(200, {
            "grocery_list": serialize_grocery_list(groceries),
            "formatted": format_grocery_list(groceries, fmt),
            "format": fmt
        })

    except BadRequestError as e:
        logger.warning("Invalid grocery list request", extra={"error": str(e)})
        return _response(400, {"error": str(e)})

    except Exception:
        logger.exception("Unexpected error building grocery list")
        return _response(500, {"error": "Internal server error"})
