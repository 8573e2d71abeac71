from typing import List, Optional

from pydantic import BaseModel, Field


class ClassificationRequest(BaseModel):
    """
    DTO for incoming classification requests.
    Emptiness is checked by the classifier, after trimming both fields together.
    """
    title: str = Field("", max_length=200, description="The issue title")
    description: str = Field("", max_length=5000, description="The citizen's description of the issue")


class ScoreEntry(BaseModel):
    category: str
    score: float


class ClassificationResponse(BaseModel):
    """
    DTO for the classification result.
    """
    category: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    method: str = Field(..., description="'ai-classification', 'keyword-based', 'keyword-fallback' or 'default'")
    scores: Optional[List[ScoreEntry]] = Field(None, description="Full AI score breakdown, AI classifications only")


class CategoriesResponse(BaseModel):
    categories: List[str]
    default_category: str


class KeywordsResponse(BaseModel):
    category: str
    keywords: List[str]
