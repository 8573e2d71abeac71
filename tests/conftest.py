"""Pytest configuration and fixtures."""

from typing import List, Optional, Tuple

import pytest

from src.core.categories import CategoryRegistry
from src.core.config import load_config
from src.core.exceptions import ClassifierUnavailable
from src.interfaces.zero_shot_provider import ZeroShotProvider


class FakeProvider(ZeroShotProvider):
    """Zero-shot provider returning canned scores, or failing on demand."""

    name = "fake"

    def __init__(
        self,
        scores: Optional[List[Tuple[str, float]]] = None,
        error: Optional[ClassifierUnavailable] = None,
    ) -> None:
        self.scores = scores or []
        self.error = error
        self.calls: List[Tuple[str, List[str]]] = []

    def _request_scores(self, text: str, candidate_labels: List[str]) -> List[Tuple[str, float]]:
        self.calls.append((text, candidate_labels))
        if self.error is not None:
            raise self.error
        return list(self.scores)


def spread_scores(categories, top: str, top_score: float) -> List[Tuple[str, float]]:
    """Scores for every category: `top` gets `top_score`, the rest share the remainder."""
    rest = [c for c in categories if c != top]
    share = (1.0 - top_score) / len(rest)
    # Keep the others strictly below the top score
    share = min(share, top_score / 2)
    return [(top, top_score)] + [(c, share) for c in rest]


@pytest.fixture(scope="session")
def app_config():
    """Provide the project configuration."""
    return load_config("config.yaml")


@pytest.fixture(scope="session")
def registry(app_config):
    """Provide the category registry built from config.yaml."""
    return CategoryRegistry.from_config(app_config)


@pytest.fixture
def unavailable_provider():
    return FakeProvider(error=ClassifierUnavailable("connection refused", "fake"))
