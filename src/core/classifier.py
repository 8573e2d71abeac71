import logging
from typing import Tuple

from src.core.categories import CategoryRegistry
from src.core.exceptions import EmptyInput
from src.core.keyword_scorer import score_by_keywords
from src.core.models import ClassificationMethod, ClassificationResult, ZeroShotOutcome
from src.core.utils import build_full_text
from src.interfaces.zero_shot_provider import ZeroShotProvider

logger = logging.getLogger(__name__)

DEFAULT_CONFIDENCE_THRESHOLD = 0.3

# Fixed confidences for the non-AI tiers; they are not measured
KEYWORD_BASED_CONFIDENCE = 0.6
KEYWORD_FALLBACK_CONFIDENCE = 0.5
DEFAULT_CONFIDENCE = 0.1


class IssueClassifier:
    """
    Tiered issue-category classifier.

    The zero-shot provider is the primary signal. Keyword matching covers the
    cases where the provider is unavailable or unconfident, and the registry's
    default category is the floor, so `classify` always returns a result for
    non-empty input:

    - provider ok, top score >= threshold      -> ai-classification
    - provider ok, low score, keyword match    -> keyword-based (0.6)
    - provider ok, low score, no keyword match -> ai-classification (low score kept)
    - provider unavailable, keyword match      -> keyword-fallback (0.5)
    - provider unavailable, no keyword match   -> default (0.1)
    """

    def __init__(
        self,
        registry: CategoryRegistry,
        provider: ZeroShotProvider,
        confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD,
    ) -> None:
        if not 0.0 <= confidence_threshold <= 1.0:
            raise ValueError(f"Confidence threshold must be within [0, 1], got {confidence_threshold}.")

        self.registry = registry
        self.provider = provider
        self.confidence_threshold = confidence_threshold

    def list_categories(self) -> Tuple[str, ...]:
        """
        Categories for the manual-override control, in the same order used
        for keyword tie-breaking.
        """
        return self.registry.list_categories()

    def classify(self, title: str, description: str) -> ClassificationResult:
        """
        Assigns one registry category to an issue.

        Args:
            title (str): The issue title.
            description (str): The issue description.

        Returns:
            ClassificationResult: The category, its confidence and the tier that produced it.

        Raises:
            EmptyInput: If title and description are both blank.
        """
        full_text = build_full_text(title, description)
        if not full_text:
            raise EmptyInput("No text provided for classification.")

        outcome = self.provider.classify_zero_shot(full_text, self.registry.list_categories())

        if outcome.succeeded:
            result = self._from_ai_outcome(full_text, outcome)
        else:
            result = self._from_keywords_only(full_text)

        logger.info(
            f"Issue classified as '{result.category}' via {result.method.value} "
            f"(confidence {result.confidence:.2f})",
            extra={
                "category": result.category,
                "method": result.method.value,
                "confidence": result.confidence,
            },
        )
        return result

    def _from_ai_outcome(self, full_text: str, outcome: ZeroShotOutcome) -> ClassificationResult:
        top = outcome.top

        if top.score < self.confidence_threshold:
            keyword_category = score_by_keywords(full_text, self.registry)
            if keyword_category is not None:
                return ClassificationResult(
                    category=keyword_category,
                    confidence=KEYWORD_BASED_CONFIDENCE,
                    method=ClassificationMethod.KEYWORD_BASED,
                )
            # No keyword evidence either: the low-confidence AI label is kept
            logger.warning(
                f"Low AI confidence ({top.score:.2f}) and no keyword match; keeping '{top.category}'.",
                extra={"category": top.category, "confidence": top.score},
            )

        return ClassificationResult(
            category=top.category,
            confidence=top.score,
            method=ClassificationMethod.AI_CLASSIFICATION,
            scores=outcome.scores,
        )

    def _from_keywords_only(self, full_text: str) -> ClassificationResult:
        keyword_category = score_by_keywords(full_text, self.registry)
        if keyword_category is not None:
            return ClassificationResult(
                category=keyword_category,
                confidence=KEYWORD_FALLBACK_CONFIDENCE,
                method=ClassificationMethod.KEYWORD_FALLBACK,
            )

        return ClassificationResult(
            category=self.registry.default_category,
            confidence=DEFAULT_CONFIDENCE,
            method=ClassificationMethod.DEFAULT,
        )
