from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.core.exceptions import ClassifierUnavailable


class ClassificationMethod(str, Enum):
    """
    Which tier of the decision tree produced a classification.
    """

    AI_CLASSIFICATION = "ai-classification"
    KEYWORD_BASED = "keyword-based"
    KEYWORD_FALLBACK = "keyword-fallback"
    DEFAULT = "default"


class LabelScore(BaseModel):
    """
    One (category, score) pair returned by the zero-shot oracle.
    """

    model_config = ConfigDict(frozen=True)

    category: str
    score: float = Field(..., ge=0.0, le=1.0)


class ClassificationResult(BaseModel):
    """
    Final, immutable outcome of classifying one issue.

    The issue-submission workflow persists category, confidence and method;
    the score breakdown is only present for AI classifications.
    """

    model_config = ConfigDict(frozen=True)

    category: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    method: ClassificationMethod
    scores: Optional[Tuple[LabelScore, ...]] = None

    @model_validator(mode="after")
    def check_scores_match_method(self) -> "ClassificationResult":
        is_ai = self.method == ClassificationMethod.AI_CLASSIFICATION
        if is_ai and not self.scores:
            raise ValueError("AI classifications must carry the full score breakdown.")
        if not is_ai and self.scores is not None:
            raise ValueError(f"Scores are only allowed for AI classifications, not '{self.method.value}'.")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializes the result into the shape stored on the issue record.
        """
        return {
            "category": self.category,
            "confidence": self.confidence,
            "method": self.method.value,
            "scores": (
                [{"category": s.category, "score": s.score} for s in self.scores]
                if self.scores is not None
                else None
            ),
        }


@dataclass(frozen=True)
class ZeroShotOutcome:
    """
    Result of a single zero-shot oracle call: either the ranked scores
    (highest first) or the failure that prevented them.
    """

    scores: Tuple[LabelScore, ...] = ()
    error: Optional[ClassifierUnavailable] = None

    @classmethod
    def success(cls, scores: Tuple[LabelScore, ...]) -> "ZeroShotOutcome":
        if not scores:
            raise ValueError("A successful outcome needs at least one score.")
        return cls(scores=scores)

    @classmethod
    def failure(cls, error: ClassifierUnavailable) -> "ZeroShotOutcome":
        return cls(error=error)

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def top(self) -> LabelScore:
        """
        The model's best guess. Only valid on a successful outcome.
        """
        if not self.succeeded:
            raise ValueError("Failed outcome has no top score.")
        return self.scores[0]
