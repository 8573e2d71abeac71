import logging

from src.adapters.huggingface_adapter import HuggingFaceAdapter
from src.core.config import ClassifierSettings
from src.interfaces.zero_shot_provider import ZeroShotProvider

logger = logging.getLogger(__name__)


def build_provider(settings: ClassifierSettings) -> ZeroShotProvider:
    """
    Instantiates the zero-shot provider selected in config.yaml.

    Raises:
        ValueError: If the provider is unknown or its API key is required but missing.
    """
    if settings.provider == "huggingface":
        return HuggingFaceAdapter(
            api_key=settings.api_key,
            model_name=settings.model,
            timeout=settings.timeout_seconds,
            base_url=settings.base_url,
        )

    if settings.provider == "gemini":
        # Imported lazily so the SDK is only loaded when selected
        from src.adapters.gemini_adapter import GeminiAdapter

        adapter = GeminiAdapter(
            api_key=settings.api_key,
            model_name=settings.model,
            timeout=settings.timeout_seconds,
        )
        logger.info(f"Gemini Adapter initialized using model: {adapter.model_name}")
        return adapter

    raise ValueError(f"Unsupported classifier provider '{settings.provider}'.")
