import logging
from typing import List, Optional, Tuple

import requests
from huggingface_hub import InferenceClient, InferenceTimeoutError
from huggingface_hub.utils import HfHubHTTPError

from src.core.exceptions import ClassifierUnavailable
from src.interfaces.zero_shot_provider import ZeroShotProvider

# Initialize logger for the Hugging Face adapter
logger = logging.getLogger(__name__)


class HuggingFaceAdapter(ZeroShotProvider):
    """
    Adapter for Hugging Face zero-shot classification through
    huggingface_hub's InferenceClient (facebook/bart-large-mnli by default).
    One call per classification, no retries.
    """

    name = "huggingface"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: str = "facebook/bart-large-mnli",
        timeout: float = 10.0,
        base_url: Optional[str] = None,
        client: Optional[InferenceClient] = None,
    ) -> None:
        self.model_name = model_name
        self.timeout = timeout

        if not api_key:
            logger.warning("No Hugging Face API key configured; using anonymous (rate-limited) access.")

        # base_url points the client at a self-hosted endpoint instead of the hosted model
        self.client = client or InferenceClient(
            model=base_url or model_name,
            token=api_key,
            timeout=timeout,
        )
        logger.info(f"Hugging Face Adapter initialized. Targeting model: {self.model_name}")

    def _request_scores(self, text: str, candidate_labels: List[str]) -> List[Tuple[str, float]]:
        try:
            result = self.client.zero_shot_classification(text, candidate_labels, multi_label=False)

        except InferenceTimeoutError as e:
            raise ClassifierUnavailable(f"Request timed out after {self.timeout}s: {e}", self.name) from e
        except HfHubHTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            raise ClassifierUnavailable(f"HTTP {status} from inference API: {e}", self.name) from e
        except requests.exceptions.RequestException as e:
            raise ClassifierUnavailable(f"Failed to communicate with inference API: {e}", self.name) from e
        except ValueError as e:
            # Undecodable or unexpected payload
            raise ClassifierUnavailable(f"Malformed response: {e}", self.name) from e

        try:
            return [(item.label, item.score) for item in result]
        except (AttributeError, TypeError) as e:
            raise ClassifierUnavailable(f"Malformed response: {e}", self.name) from e
