"""
Gemini utilities package.
"""
from .client import GeminiClient, build_safety_settings, extract_text

__all__ = [
    "GeminiClient",
    "build_safety_settings",
    "extract_text"
]
