import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from src.adapters.factory import build_provider
from src.core.categories import CategoryRegistry
from src.core.classifier import IssueClassifier
from src.core.config import get_classifier_settings, load_config
from src.core.exceptions import EmptyInput

# --- Configuration & Setup ---

# Configure logging structure
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger("IssueClassifier")

# Load environment variables
load_dotenv()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classify a civic issue report into a category.")
    parser.add_argument("--title", default="", help="Issue title")
    parser.add_argument("--description", default="", help="Issue description")
    parser.add_argument("--config", default="config.yaml", help="Path to config.yaml")
    parser.add_argument("--list-categories", action="store_true", help="Print the categories and exit")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    # 1. Load Configuration (Fail fast if config is bad)
    try:
        app_config = load_config(args.config)
        registry = CategoryRegistry.from_config(app_config)
        settings = get_classifier_settings(app_config)
    except Exception as e:
        logger.critical(f"Failed to load configuration: {e}")
        return 1

    if args.list_categories:
        for index, category in enumerate(registry.list_categories(), start=1):
            logger.info(f"{index}. {category}")
        return 0

    # 2. Initialize Zero-Shot Provider
    try:
        provider = build_provider(settings)
    except ValueError as e:
        logger.critical(f"Failed to initialize zero-shot provider: {e}")
        return 1

    classifier = IssueClassifier(registry, provider, settings.confidence_threshold)

    # 3. Classify
    try:
        result = classifier.classify(args.title, args.description)
    except EmptyInput as e:
        logger.error(f"Nothing to classify: {e}")
        return 1

    logger.info(f"Predicted Category: {result.category}")
    logger.info(f"Confidence: {round(result.confidence * 100)}%")
    logger.info(f"Method: {result.method.value}")

    if result.scores:
        logger.info("All Scores:")
        for entry in result.scores:
            logger.info(f"   {entry.category}: {round(entry.score * 100)}%")

    return 0


if __name__ == "__main__":
    sys.exit(main())
