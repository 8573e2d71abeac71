import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from src.core.exceptions import UnknownCategory

logger = logging.getLogger(__name__)


def _normalize_keywords(category: str, keywords: Iterable[str]) -> Tuple[str, ...]:
    # Lowercase, drop blanks and duplicates, keep the configured order
    normalized: List[str] = []
    for keyword in keywords:
        if not isinstance(keyword, str):
            raise ValueError(f"Keyword {keyword!r} for '{category}' is not a string.")
        value = keyword.strip().lower()
        if value and value not in normalized:
            normalized.append(value)

    if not normalized:
        raise ValueError(f"Category '{category}' must define at least one keyword.")
    return tuple(normalized)


class CategoryRegistry:
    """
    The fixed, ordered set of issue categories and their keyword tables.

    Instances are read-only after construction and can be shared by any
    number of concurrent classifications. Registry order is significant:
    it drives the keyword tie-break and the order of the manual-override
    dropdown.
    """

    def __init__(
        self,
        categories: Iterable[str],
        keywords: Mapping[str, Iterable[str]],
        default_category: Optional[str] = None,
    ) -> None:
        ordered = tuple(categories)
        if not ordered:
            raise ValueError("Category registry cannot be empty.")
        if len(set(ordered)) != len(ordered):
            raise ValueError(f"Duplicate categories in registry: {list(ordered)}")

        unknown = [name for name in keywords if name not in ordered]
        if unknown:
            raise ValueError(f"Keywords defined for unknown categories: {unknown}")

        table: Dict[str, Tuple[str, ...]] = {}
        for category in ordered:
            if category not in keywords:
                raise ValueError(f"Category '{category}' has no keyword list.")
            table[category] = _normalize_keywords(category, keywords[category])

        # The last category is the catch-all unless told otherwise
        default = default_category if default_category is not None else ordered[-1]
        if default not in table:
            raise ValueError(f"Default category '{default}' is not a registered category.")

        self._categories = ordered
        self._keywords = MappingProxyType(table)
        self._default_category = default

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "CategoryRegistry":
        """
        Builds the registry from the 'triage' section of config.yaml.

        Args:
            config (Dict[str, Any]): The full configuration dictionary.

        Returns:
            CategoryRegistry: The immutable registry.

        Raises:
            ValueError: If the section is missing or inconsistent.
        """
        try:
            section = config["triage"]
            categories = section["categories"]
            keywords = section["keywords"]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid Config: missing 'triage' key {e}") from e

        registry = cls(categories, keywords, section.get("default_category"))
        logger.info(
            f"Category registry built with {len(registry)} categories "
            f"(default: '{registry.default_category}')."
        )
        return registry

    @property
    def default_category(self) -> str:
        return self._default_category

    def list_categories(self) -> Tuple[str, ...]:
        """
        Returns every category in registry order.
        """
        return self._categories

    def keywords_for(self, category: str) -> Tuple[str, ...]:
        """
        Returns the keyword set of a known category, in configured order.

        Raises:
            UnknownCategory: If the category is not in the registry.
        """
        try:
            return self._keywords[category]
        except KeyError:
            raise UnknownCategory(category) from None

    def __contains__(self, category: object) -> bool:
        return category in self._keywords

    def __len__(self) -> int:
        return len(self._categories)

    def __repr__(self) -> str:
        return f"<CategoryRegistry(categories={len(self._categories)}, default='{self._default_category}')>"
