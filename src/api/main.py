import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException

from src.adapters.factory import build_provider
from src.api.schemas import (
    CategoriesResponse,
    ClassificationRequest,
    ClassificationResponse,
    KeywordsResponse,
)
from src.core.categories import CategoryRegistry
from src.core.classifier import IssueClassifier
from src.core.config import get_classifier_settings, load_config
from src.core.exceptions import EmptyInput, UnknownCategory

# Configure logger
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("API")

app_state = {}


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Starting Issue Classification API...")
    load_dotenv()

    config = load_config("config.yaml")
    settings = get_classifier_settings(config)
    registry = CategoryRegistry.from_config(config)

    app_state["classifier"] = IssueClassifier(
        registry=registry,
        provider=build_provider(settings),
        confidence_threshold=settings.confidence_threshold,
    )
    logger.info(f"🧠 Zero-shot provider '{settings.provider}' connected (model: {settings.model}).")

    yield
    app_state.clear()
    logger.info("🛑 Shutting down Issue Classification API...")


app = FastAPI(title="Civic Issue Classification API", lifespan=lifespan)


def get_classifier() -> IssueClassifier:
    # Dependency injection for the shared, read-only classifier
    return app_state["classifier"]


@app.post("/classify", response_model=ClassificationResponse)
def classify_issue(request: ClassificationRequest, classifier: IssueClassifier = Depends(get_classifier)):
    """
    Classifies an issue synchronously. Always succeeds for non-empty input;
    'method' and 'confidence' tell the caller how much to trust the category.
    """
    try:
        result = classifier.classify(request.title, request.description)
    except EmptyInput as e:
        raise HTTPException(status_code=422, detail=str(e))

    return result.to_dict()


@app.get("/categories", response_model=CategoriesResponse)
def list_categories(classifier: IssueClassifier = Depends(get_classifier)):
    """
    Categories for the manual-override dropdown, in registry order.
    """
    return {
        "categories": list(classifier.list_categories()),
        "default_category": classifier.registry.default_category,
    }


@app.get("/categories/{category}/keywords", response_model=KeywordsResponse)
def get_category_keywords(category: str, classifier: IssueClassifier = Depends(get_classifier)):
    try:
        keywords = classifier.registry.keywords_for(category)
    except UnknownCategory:
        raise HTTPException(status_code=404, detail="Category not found.")

    return {"category": category, "keywords": list(keywords)}
