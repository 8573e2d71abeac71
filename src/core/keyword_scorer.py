import logging
from typing import Optional

from src.core.categories import CategoryRegistry

logger = logging.getLogger(__name__)


def score_by_keywords(text: str, registry: CategoryRegistry) -> Optional[str]:
    """
    Deterministic, offline categorization by substring match.

    Each keyword of a category found anywhere in the lowercased text adds one
    point to that category, regardless of how often it occurs. The category
    with the highest count wins; ties go to the category listed first in the
    registry.

    Args:
        text (str): The combined issue text.
        registry (CategoryRegistry): Categories and keyword tables to score against.

    Returns:
        Optional[str]: The winning category, or None when no keyword matched.
    """
    lowered = text.lower()

    best_category: Optional[str] = None
    best_count = 0

    for category in registry.list_categories():
        count = sum(1 for keyword in registry.keywords_for(category) if keyword in lowered)
        # Strict '>' keeps the earliest category on ties
        if count > best_count:
            best_category = category
            best_count = count

    if best_category is not None:
        logger.debug(f"Keyword match: '{best_category}' with {best_count} hit(s).")
    return best_category
