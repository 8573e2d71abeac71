import json
import logging
from typing import List, Optional, Tuple

from google import genai
from google.genai import types

from src.core.exceptions import ClassifierUnavailable
from src.interfaces.zero_shot_provider import ZeroShotProvider

# Initialize logger for this module
logger = logging.getLogger(__name__)


class GeminiAdapter(ZeroShotProvider):
    """
    Zero-shot scoring through Google Gemini using the 'google-genai' SDK.
    The model is asked for one score per candidate label, returned as JSON.
    """

    name = "gemini"

    def __init__(
        self,
        api_key: str,
        model_name: str = "gemini-flash-latest",
        timeout: float = 10.0,
        client: Optional[genai.Client] = None,
    ) -> None:
        if not api_key and client is None:
            raise ValueError("Gemini API Key is missing.")

        self.model_name = model_name
        self.timeout = timeout
        # HttpOptions.timeout is expressed in milliseconds
        self.client = client or genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=int(timeout * 1000)),
        )

    def _build_prompt(self, text: str, candidate_labels: List[str]) -> str:
        return f"""
        Role: Municipal issue triage assistant.
        Task: Score how well the citizen report below fits EACH of these categories: {candidate_labels}.

        Report: "{text.replace('"', "'")}"

        Constraint: Return ONLY a JSON object mapping every category name, spelled exactly
        as given, to a score between 0 and 1. The scores must sum to 1.
        """

    def _request_scores(self, text: str, candidate_labels: List[str]) -> List[Tuple[str, float]]:
        try:
            response = self.client.models.generate_content(
                model=self.model_name,
                contents=self._build_prompt(text, candidate_labels),
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    temperature=0.0,  # Zero temperature for deterministic classification
                ),
            )
        except Exception as e:
            # The SDK surfaces auth, quota, transport and timeout failures through several exception types
            logger.error("Gemini API Error", extra={"error": str(e), "ticket_snippet": text[:30]})
            raise ClassifierUnavailable(f"Gemini API error: {e}", self.name) from e

        try:
            data = json.loads(response.text or "")
        except (ValueError, TypeError) as e:
            # JSONDecodeError is a ValueError; so is an integer literal past the digit limit
            raise ClassifierUnavailable(f"Malformed response: invalid JSON ({e})", self.name) from e

        if not isinstance(data, dict):
            raise ClassifierUnavailable("Malformed response: expected a JSON object of scores.", self.name)

        return list(data.items())
