"""
Service-level exceptions.

This module contains exceptions that can be raised while generating a meal
plan and parsing the generation service's responses.
"""
from typing import Optional


class MealPlanError(Exception):
    """Base exception for meal plan generation errors."""
    pass


class GenerationError(MealPlanError):
    """Raised when the text-generation service call fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class EmptyResponseError(GenerationError):
    """Raised when a response carries no candidate text."""
    pass


class RecipeParseError(MealPlanError):
    """Raised when a required recipe section is missing from the raw text."""
    pass


class RecipeValidationError(MealPlanError):
    """Raised when a parsed recipe fails validation."""
    pass


class SlotGenerationError(MealPlanError):
    """Raised in strict mode when a single day/meal slot cannot be generated."""

    def __init__(self, day: str, meal_type: str, cause: Exception):
        super().__init__(f"Failed to generate {meal_type} for {day}: {cause}")
        self.day = day
        self.meal_type = meal_type
        self.cause = cause


class MealPlanGenerationError(MealPlanError):
    """Raised when no slot of a plan could reach the generation service."""
    pass
