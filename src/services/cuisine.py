"""
Cuisine rotation for spreading variety across a weekly plan.
"""
import random
from typing import Dict, List, Optional

from src.services.constants import MASTER_CUISINES


class CuisineRotationPolicy:
    """Chooses the cuisine to target for the next recipe request."""

    def __init__(self, master_cuisines: Optional[List[str]] = None):
        self.master_cuisines = list(master_cuisines or MASTER_CUISINES)

    def rotation_pool(self, selected: List[str]) -> List[str]:
        """Cuisines eligible for rotation: the selection, or the master list."""
        return list(selected) if selected else self.master_cuisines

    def initial_counts(self, selected: List[str]) -> Dict[str, int]:
        """Zeroed usage counts for every cuisine in the rotation pool."""
        return {cuisine: 0 for cuisine in self.rotation_pool(selected)}

    def pick_cuisine(self, selected: List[str], usage_counts: Dict[str, int]) -> str:
        """
        Pick the least-used cuisine, ties going to the earliest in list order.

        Args:
            selected: Cuisines chosen by the user, possibly empty
            usage_counts: Recipes generated so far per cuisine in this run

        Returns:
            Cuisine to request next

        Example:
            >>> policy = CuisineRotationPolicy()
            >>> policy.pick_cuisine(["Thai", "Greek"], {"Thai": 1, "Greek": 0})
            'Greek'
        """
        if len(selected) == 1:
            return selected[0]
        pool = self.rotation_pool(selected)
        return min(pool, key=lambda cuisine: usage_counts.get(cuisine, 0))

    def pick_alternate(self, selected: List[str], current: str, rng: Optional[random.Random] = None) -> str:
        """
        Pick a random cuisine other than ``current`` for a duplicate retry.

        Returns ``current`` when no other cuisine is available.
        """
        remaining = [cuisine for cuisine in self.rotation_pool(selected) if cuisine != current]
        if not remaining:
            return current
        return (rng or random).choice(remaining)
