"""
Centralized client initialization module.

This module provides lazy-loaded shared clients for the application.
"""
from src.utils.gemini import GeminiClient

# Initialize shared clients (lazy loading)
_gemini = None


def get_gemini() -> GeminiClient:
    """Get or create Gemini client."""
    global _gemini
    if _gemini is None:
        _gemini = GeminiClient()
    return _gemini
