"""
Runtime settings read from environment variables.
"""
import os
from typing import Optional

from pydantic import BaseModel

DEFAULT_GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta/models"


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class MealPlannerSettings(BaseModel):
    """
    Generation and orchestration settings.

    Attributes:
        api_url: Base URL of the Gemini models endpoint
        model: Gemini model name
        temperature: Sampling temperature for regular requests
        retry_temperature: Sampling temperature for duplicate retries
        max_output_tokens: Upper bound on response length
        timeout: HTTP timeout in seconds
        request_delay: Courtesy delay in seconds after each request
        strict: Abort the whole plan on the first failed slot
        include_grocery_list: Ask for a categorized grocery list per recipe
    """
    api_url: str = DEFAULT_GEMINI_API_URL
    model: str = "gemini-2.0-flash"
    temperature: float = 0.9
    retry_temperature: float = 0.95
    max_output_tokens: int = 1000
    timeout: float = 30.0
    request_delay: float = 1.0
    strict: bool = False
    include_grocery_list: bool = True


_settings: Optional[MealPlannerSettings] = None


def load_settings() -> MealPlannerSettings:
    """Build settings from the environment, falling back to defaults."""
    defaults = MealPlannerSettings()
    return MealPlannerSettings(
        api_url=os.environ.get("GEMINI_API_URL", defaults.api_url),
        model=os.environ.get("GEMINI_MODEL", defaults.model),
        temperature=float(os.environ.get("GEMINI_TEMPERATURE", defaults.temperature)),
        retry_temperature=float(os.environ.get("GEMINI_RETRY_TEMPERATURE", defaults.retry_temperature)),
        max_output_tokens=int(os.environ.get("GEMINI_MAX_OUTPUT_TOKENS", defaults.max_output_tokens)),
        timeout=float(os.environ.get("GEMINI_TIMEOUT", defaults.timeout)),
        request_delay=float(os.environ.get("MEAL_PLAN_REQUEST_DELAY", defaults.request_delay)),
        strict=_env_bool("MEAL_PLAN_STRICT", defaults.strict),
        include_grocery_list=_env_bool("MEAL_PLAN_INCLUDE_GROCERY_LIST", defaults.include_grocery_list)
    )


def get_settings() -> MealPlannerSettings:
    """Get or create the settings singleton."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings
