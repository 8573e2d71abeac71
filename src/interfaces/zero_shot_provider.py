import logging
import math
from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

from src.core.exceptions import ClassifierUnavailable
from src.core.models import LabelScore, ZeroShotOutcome

logger = logging.getLogger(__name__)


class ZeroShotProvider(ABC):
    """
    Abstract base class for zero-shot text-classification oracles.

    This enforces a Strategy Pattern, allowing the application to swap
    the underlying model or vendor without changing the decision logic
    in IssueClassifier.

    Subclasses only implement `_request_scores`; normalization and the
    conversion of failures into a ZeroShotOutcome happen here, so every
    provider reports its boundary errors the same way.
    """

    name: str = "zero-shot"

    def classify_zero_shot(self, text: str, candidate_labels: Sequence[str]) -> ZeroShotOutcome:
        """
        Scores the text against every candidate label with a single call.

        Args:
            text (str): The combined issue text.
            candidate_labels (Sequence[str]): The full category list, in registry order.

        Returns:
            ZeroShotOutcome: Ranked scores (highest first) on success, or the
                ClassifierUnavailable error on any failure. Never raises.
        """
        try:
            raw_scores = self._request_scores(text, list(candidate_labels))
            scores = self._normalize(raw_scores, candidate_labels)
        except ClassifierUnavailable as e:
            logger.warning(
                f"Zero-shot provider '{self.name}' unavailable: {e}",
                extra={"provider": self.name, "error": str(e)},
            )
            return ZeroShotOutcome.failure(e)

        logger.debug(f"Zero-shot provider '{self.name}' top label: {scores[0].category} ({scores[0].score:.3f})")
        return ZeroShotOutcome.success(scores)

    @abstractmethod
    def _request_scores(self, text: str, candidate_labels: List[str]) -> List[Tuple[str, float]]:
        """
        Performs the actual call to the oracle.

        Args:
            text (str): The combined issue text.
            candidate_labels (List[str]): Labels the oracle must score.

        Returns:
            List[Tuple[str, float]]: Raw (label, score) pairs in any order.

        Raises:
            ClassifierUnavailable: On network, auth, timeout or payload errors.
        """

    def _normalize(
        self, raw_scores: List[Tuple[str, float]], candidate_labels: Sequence[str]
    ) -> Tuple[LabelScore, ...]:
        if not raw_scores:
            raise ClassifierUnavailable("Malformed response: no scores returned.", self.name)

        allowed = set(candidate_labels)
        seen = set()
        pairs: List[LabelScore] = []
        for label, score in raw_scores:
            if not isinstance(label, str) or label not in allowed:
                raise ClassifierUnavailable(f"Malformed response: unexpected label '{label}'.", self.name)
            if label in seen:
                raise ClassifierUnavailable(f"Malformed response: label '{label}' scored twice.", self.name)
            seen.add(label)

            if isinstance(score, bool) or not isinstance(score, (int, float)):
                raise ClassifierUnavailable(f"Malformed response: non-numeric score for '{label}'.", self.name)
            try:
                value = float(score)
            except (OverflowError, ValueError) as e:
                raise ClassifierUnavailable(f"Malformed response: unusable score for '{label}' ({e}).", self.name) from e
            if not math.isfinite(value) or not 0.0 <= value <= 1.0:
                raise ClassifierUnavailable(f"Malformed response: score {value} for '{label}' outside [0, 1].", self.name)
            pairs.append(LabelScore(category=label, score=value))

        # sorted() is stable, so equal scores keep the oracle's order
        return tuple(sorted(pairs, key=lambda pair: pair.score, reverse=True))
