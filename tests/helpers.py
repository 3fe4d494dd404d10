"""
Test doubles and canned generation responses.
"""
import threading
from typing import Dict, List, Optional


def recipe_text(name: str, servings: int = 4) -> str:
    """Build a well-formed generation response for the given recipe name."""
    return f"""Name: {name}
Prep Time: 10
Cook Time: 20
Servings: {servings}

Ingredients:
- 1 cup rice
- 2 tbsp olive oil
- 1 onion

Steps:
1. Cook the rice
2. Fry the onion in olive oil
3. Combine and serve
"""


class FakeGenerationClient:
    """
    Stand-in for GeminiClient returning scripted responses in order.

    Entries that are exceptions are raised instead of returned.
    """

    def __init__(self, responses: List):
        self.responses = list(responses)
        self.calls: List[Dict] = []

    def generate_content(self, prompt: str, temperature: Optional[float] = None,
                         max_output_tokens: Optional[int] = None) -> str:
        self.calls.append({
            "prompt": prompt,
            "temperature": temperature,
            "max_output_tokens": max_output_tokens
        })
        if not self.responses:
            raise AssertionError("Unexpected generation request")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class SlowGenerationClient:
    """Client whose request blocks until it finishes or the client is closed."""

    def __init__(self, duration: float = 0.5):
        self.duration = duration
        self.started = threading.Event()
        self.aborted = threading.Event()
        self.completed = False
        self.closed = False

    def generate_content(self, prompt: str, temperature: Optional[float] = None,
                         max_output_tokens: Optional[int] = None) -> str:
        self.started.set()
        if self.aborted.wait(self.duration):
            raise ConnectionError("Connection aborted")
        self.completed = True
        return recipe_text("Slow Soup")

    def close(self) -> None:
        self.closed = True
        self.aborted.set()
