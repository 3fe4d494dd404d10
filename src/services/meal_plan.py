"""
Service module for generating weekly meal plans.

Each selected day/meal slot is generated one after the other: a cuisine is
picked, the generation service is asked for a recipe, the response is parsed
and checked, and the result is placed in the plan. Slots are never generated
in parallel because duplicate detection and cuisine rotation depend on the
recipes produced earlier in the same run.
"""
import asyncio
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Set

from aws_lambda_powertools import Logger

from src.models.preferences import Preferences
from src.models.recipe import Recipe, WeeklyMealPlan
from src.services.cuisine import CuisineRotationPolicy
from src.services.exceptions import (
    GenerationError,
    MealPlanError,
    MealPlanGenerationError,
    SlotGenerationError
)
from src.services.fallback import fallback_recipe
from src.services.prompt import PromptBuilder
from src.utils.clients import get_gemini
from src.utils.config import get_settings
from src.utils.recipe_parser import RecipeTextParser, validate_recipe

logger = Logger()

SlotCallback = Callable[[str, str, Recipe], None]


@dataclass
class GenerationRun:
    """
    State owned by a single plan-generation run.

    Attributes:
        cuisine_counts: Recipes generated so far per cuisine
        generated_names: Lower-cased names of recipes already in the plan
        network_failures: Slots lost to generation service failures
    """
    cuisine_counts: Dict[str, int]
    generated_names: Set[str] = field(default_factory=set)
    network_failures: int = 0

    def is_duplicate(self, recipe: Recipe) -> bool:
        return recipe.name.strip().lower() in self.generated_names

    def record(self, recipe: Recipe, cuisine: str) -> None:
        self.generated_names.add(recipe.name.strip().lower())
        self.cuisine_counts[cuisine] = self.cuisine_counts.get(cuisine, 0) + 1


class MealPlanGenerator:
    """Generates a weekly meal plan slot by slot."""

    def __init__(
        self,
        client=None,
        parser: Optional[RecipeTextParser] = None,
        prompt_builder: Optional[PromptBuilder] = None,
        rotation: Optional[CuisineRotationPolicy] = None,
        strict: Optional[bool] = None,
        request_delay: Optional[float] = None,
        temperature: Optional[float] = None,
        retry_temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the generator.

        Unset options fall back to the environment settings. The client only
        needs a ``generate_content(prompt, temperature, max_output_tokens)``
        method; the shared Gemini client is used when none is given.
        """
        settings = get_settings()
        self.client = client if client is not None else get_gemini()
        self.strict = settings.strict if strict is None else strict
        self.parser = parser or RecipeTextParser(strict=self.strict)
        self.prompt_builder = prompt_builder or PromptBuilder(include_grocery_list=settings.include_grocery_list)
        self.rotation = rotation or CuisineRotationPolicy()
        self.request_delay = settings.request_delay if request_delay is None else request_delay
        self.temperature = settings.temperature if temperature is None else temperature
        self.retry_temperature = settings.retry_temperature if retry_temperature is None else retry_temperature
        self.max_output_tokens = max_output_tokens or settings.max_output_tokens
        self.rng = rng or random.Random()

    async def generate(
        self,
        preferences: Preferences,
        on_slot_complete: Optional[SlotCallback] = None
    ) -> WeeklyMealPlan:
        """
        Generate recipes for every selected slot of the week.

        Args:
            preferences: User preferences and meal selection
            on_slot_complete: Called with (day, meal_type, recipe) after each slot

        Returns:
            WeeklyMealPlan with a recipe in every selected slot

        Raises:
            SlotGenerationError: In strict mode, for the first slot that fails
            MealPlanGenerationError: In lenient mode, when every slot failed
                to reach the generation service
        """
        slots = list(preferences.selected_slots())
        plan = WeeklyMealPlan()
        run = GenerationRun(cuisine_counts=self.rotation.initial_counts(preferences.cuisines))
        base_prompt = self.prompt_builder.build_base_prompt(preferences)

        logger.info("Starting meal plan generation", extra={
            "slot_count": len(slots),
            "cuisines": preferences.cuisines,
            "strict": self.strict
        })

        for day, meal_type in slots:
            recipe = await self._generate_slot(preferences, base_prompt, run, day, meal_type)
            setattr(plan[day], meal_type, recipe)
            if on_slot_complete is not None:
                on_slot_complete(day, meal_type, recipe)

        if slots and run.network_failures == len(slots):
            raise MealPlanGenerationError(
                f"Could not reach the recipe generation service for any of the {len(slots)} meals"
            )

        logger.info("Meal plan generation complete", extra={
            "slot_count": len(slots),
            "cuisine_counts": run.cuisine_counts
        })
        return plan

    async def _generate_slot(
        self,
        preferences: Preferences,
        base_prompt: str,
        run: GenerationRun,
        day: str,
        meal_type: str
    ) -> Recipe:
        cuisine = self.rotation.pick_cuisine(preferences.cuisines, run.cuisine_counts)
        try:
            recipe, cuisine = await self._request_recipe(preferences, base_prompt, run, meal_type, cuisine)
            validate_recipe(recipe)
        except MealPlanError as e:
            if isinstance(e, GenerationError):
                run.network_failures += 1
            if self.strict:
                logger.error("Slot generation failed", extra={
                    "day": day,
                    "meal_type": meal_type,
                    "error": str(e)
                })
                raise SlotGenerationError(day, meal_type, e) from e
            logger.warning("Using fallback recipe", extra={
                "day": day,
                "meal_type": meal_type,
                "cuisine": cuisine,
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            recipe = fallback_recipe(meal_type, cuisine)

        run.record(recipe, cuisine)
        logger.debug("Slot complete", extra={
            "day": day,
            "meal_type": meal_type,
            "recipe": recipe.name,
            "cuisine": cuisine
        })
        return recipe

    async def _request_recipe(self, preferences, base_prompt, run, meal_type, cuisine):
        prompt = self.prompt_builder.build_prompt(base_prompt, meal_type, cuisine)
        recipe = self.parser.parse(await self._call(prompt, self.temperature))
        if not run.is_duplicate(recipe):
            return recipe, cuisine

        alternate = self.rotation.pick_alternate(preferences.cuisines, cuisine, self.rng)
        logger.info("Duplicate recipe, retrying once", extra={
            "recipe": recipe.name,
            "cuisine": cuisine,
            "alternate_cuisine": alternate
        })
        retry_prompt = self.prompt_builder.build_prompt(base_prompt, meal_type, alternate, unique=True)
        try:
            retry = self.parser.parse(await self._call(retry_prompt, self.retry_temperature))
        except MealPlanError as e:
            logger.warning("Duplicate retry failed, keeping original", extra={"error": str(e)})
            return recipe, cuisine

        if run.is_duplicate(retry):
            return recipe, cuisine
        return retry, alternate

    async def _call(self, prompt: str, temperature: float) -> str:
        try:
            text = await asyncio.to_thread(
                self.client.generate_content,
                prompt,
                temperature=temperature,
                max_output_tokens=self.max_output_tokens
            )
        except asyncio.CancelledError:
            # The worker thread keeps running; closing the client aborts its request
            close = getattr(self.client, "close", None)
            if close is not None:
                logger.info("Generation cancelled, closing client")
                close()
            raise
        except MealPlanError:
            await asyncio.sleep(self.request_delay)
            raise
        await asyncio.sleep(self.request_delay)
        return text


def generate_meal_plan(
    preferences: Preferences,
    on_slot_complete: Optional[SlotCallback] = None,
    **options
) -> WeeklyMealPlan:
    """
    Generate a weekly meal plan from synchronous code.

    Args:
        preferences: User preferences and meal selection
        on_slot_complete: Optional per-slot progress callback
        **options: Passed to MealPlanGenerator

    Returns:
        Generated WeeklyMealPlan
    """
    generator = MealPlanGenerator(**options)
    return asyncio.run(generator.generate(preferences, on_slot_complete))
