"""
Gemini generateContent API client implementation.
"""
import os
from typing import Any, Dict, List, Optional

import requests
from aws_lambda_powertools import Logger

from src.services.constants import SAFETY_CATEGORIES
from src.services.exceptions import GenerationError, EmptyResponseError
from src.utils.config import MealPlannerSettings, get_settings

logger = Logger()


def build_safety_settings(threshold: str = "BLOCK_NONE") -> List[Dict[str, str]]:
    """
    Build relaxed content-safety thresholds.

    Food content trips the default filters often enough that every category
    is relaxed.
    """
    return [{"category": category, "threshold": threshold} for category in SAFETY_CATEGORIES]


def extract_text(payload: Dict[str, Any]) -> str:
    """
    Pull the first candidate's text out of a generateContent response.

    Raises:
        EmptyResponseError: If the candidate/content/parts/text path is missing
    """
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        raise EmptyResponseError("Invalid API response format: no candidate text")
    if not isinstance(text, str) or not text.strip():
        raise EmptyResponseError("Invalid API response format: empty candidate text")
    return text


class GeminiClient:
    """Client for the Gemini text-generation REST API."""

    def __init__(self, settings: Optional[MealPlannerSettings] = None):
        try:
            self.api_key = os.environ["GOOGLE_API_KEY"]
        except KeyError:
            raise EnvironmentError(
                "GOOGLE_API_KEY environment variable not set. "
                "This variable must be set to a Gemini API key."
            )
        self.settings = settings or get_settings()
        self.url = f"{self.settings.api_url}/{self.settings.model}:generateContent"
        self.session = requests.Session()

    def generate_content(
        self,
        prompt: str,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None
    ) -> str:
        """
        Send one prompt and return the completion text.

        Args:
            prompt: Full instruction text
            temperature: Sampling temperature, defaults to the configured one
            max_output_tokens: Response length bound, defaults to the configured one

        Returns:
            Text of the first candidate

        Raises:
            GenerationError: On transport failures and non-2xx responses
            EmptyResponseError: If the response carries no candidate text
        """
        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.settings.temperature if temperature is None else temperature,
                "maxOutputTokens": max_output_tokens or self.settings.max_output_tokens
            },
            "safetySettings": build_safety_settings()
        }

        try:
            response = self.session.post(
                self.url,
                params={"key": self.api_key},
                json=body,
                timeout=self.settings.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.error("Generation request failed", extra={
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            raise GenerationError(f"Generation request failed: {e}") from e

        if not response.ok:
            logger.error("Generation API error", extra={
                "status_code": response.status_code,
                "reason": response.reason
            })
            raise GenerationError(
                f"HTTP error! status: {response.status_code} {response.reason}",
                status_code=response.status_code
            )

        try:
            payload = response.json()
        except ValueError:
            raise EmptyResponseError("Invalid API response format: body is not JSON")
        return extract_text(payload)

    def close(self) -> None:
        """
        Close the underlying HTTP session, aborting pooled connections.

        The session opens new connections on the next request, so a closed
        client can still be reused.
        """
        self.session.close()
