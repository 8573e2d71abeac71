import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from src.core.classifier import DEFAULT_CONFIDENCE_THRESHOLD

# Initialize logger
logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("huggingface", "gemini")

DEFAULT_MODELS = {
    "huggingface": "facebook/bart-large-mnli",
    "gemini": "gemini-flash-latest",
}

# Wait bound for the oracle call; expiry is treated as ClassifierUnavailable.
# Both SDKs apply it to the connection and to each read, not to the whole call,
# so a server trickling bytes can keep a call open longer.
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class ClassifierSettings:
    """
    Zero-shot provider settings from the 'classifier' section of config.yaml,
    plus the provider secret from the environment.
    """

    provider: str = "huggingface"
    model: str = DEFAULT_MODELS["huggingface"]
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD
    api_key: Optional[str] = None
    base_url: Optional[str] = None


def load_config(config_path: str = "config.yaml") -> Dict[str, Any]:
    """
    Loads the YAML configuration file from the project root.

    Args:
        config_path (str): Relative path to the config file.

    Returns:
        Dict[str, Any]: The configuration dictionary.

    Raises:
        FileNotFoundError: If the config file does not exist.
        yaml.YAMLError: If the file contains invalid YAML.
    """
    # Strategy: Look in the current working directory first (Best for Docker/Root run)
    path = Path(config_path)

    if not path.exists():
        # Fallback: Try to find it relative to this file (useful during dev/testing)
        base_dir = Path(__file__).resolve().parent.parent.parent
        path = base_dir / config_path

    if not path.exists():
        logger.critical(f"Configuration file not found at: {path.absolute()}")
        raise FileNotFoundError(f"Config file '{config_path}' is missing.")

    try:
        with open(path, "r") as file:
            config = yaml.safe_load(file) or {}
    except yaml.YAMLError as e:
        logger.critical(f"Error parsing YAML configuration: {e}")
        raise

    logger.info(f"Configuration loaded successfully from {path}")
    return config


def get_classifier_settings(config: Dict[str, Any]) -> ClassifierSettings:
    """
    Helper to extract and validate the classifier settings.

    The API key is read from the environment (HUGGINGFACE_API_KEY or
    GEMINI_API_KEY), never from config.yaml.

    Raises:
        ValueError: If the provider is unknown or a numeric setting is out of range.
    """
    section = config.get("classifier") or {}

    provider = str(section.get("provider", "huggingface")).lower()
    if provider not in SUPPORTED_PROVIDERS:
        raise ValueError(f"Invalid Config: unsupported classifier provider '{provider}'.")

    timeout = float(section.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS))
    if timeout <= 0:
        raise ValueError(f"Invalid Config: 'classifier.timeout_seconds' must be positive, got {timeout}.")

    threshold = float(section.get("confidence_threshold", DEFAULT_CONFIDENCE_THRESHOLD))
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"Invalid Config: 'classifier.confidence_threshold' must be within [0, 1], got {threshold}.")

    env_var = "GEMINI_API_KEY" if provider == "gemini" else "HUGGINGFACE_API_KEY"

    return ClassifierSettings(
        provider=provider,
        model=section.get("model") or DEFAULT_MODELS[provider],
        timeout_seconds=timeout,
        confidence_threshold=threshold,
        api_key=os.getenv(env_var) or None,
        base_url=section.get("base_url"),
    )
