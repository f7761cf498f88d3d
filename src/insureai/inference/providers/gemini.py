"""Google Gemini inference client.

Uses the official Google GenAI SDK for async content generation.
Reference: https://github.com/googleapis/python-genai

Note: Gemini can return empty candidates when safety filtering blocks a
reply. Those come back as an empty response, which the orchestrator treats
as an invalid reply.
"""

from typing import Any

from google import genai
from google.genai import errors, types

from ..base import InferenceClient
from ..errors import InferenceError
from ..models import InferenceRequest, InferenceResponse

# Relaxed enough that ordinary insurance questions (accidents, injuries) are not blocked
DEFAULT_SAFETY_SETTINGS = [
    types.SafetySetting(category="HARM_CATEGORY_HARASSMENT", threshold="BLOCK_ONLY_HIGH"),
    types.SafetySetting(category="HARM_CATEGORY_HATE_SPEECH", threshold="BLOCK_ONLY_HIGH"),
    types.SafetySetting(category="HARM_CATEGORY_SEXUALLY_EXPLICIT", threshold="BLOCK_ONLY_HIGH"),
    types.SafetySetting(category="HARM_CATEGORY_DANGEROUS_CONTENT", threshold="BLOCK_ONLY_HIGH"),
]


def _extract_text(response: types.GenerateContentResponse) -> str:
    """Join the text parts of the first candidate, or return an empty string."""
    if response.candidates:
        candidate = response.candidates[0]
        if candidate.content and candidate.content.parts:
            return "".join(part.text for part in candidate.content.parts if part.text)
    return ""


class GeminiInferenceClient(InferenceClient):
    """Google Gemini inference client.

    Hidden design decisions:
    - Google GenAI client initialization
    - Context passed as the system instruction
    - Relaxed safety settings
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **client_kwargs: Any
    ):
        """Initialize Gemini client.

        Args:
            api_key: Google AI API key
            model: Model to use
            temperature: Sampling temperature
            max_tokens: Maximum output tokens (None for the API default)
            **client_kwargs: Additional kwargs for genai.Client
        """
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._client = genai.Client(api_key=api_key, **client_kwargs)

    @property
    def model(self) -> str:
        """Get the model name."""
        return self._model

    @property
    def name(self) -> str:
        return f"gemini:{self._model}"

    async def invoke(self, request: InferenceRequest) -> InferenceResponse:
        """Generate a reply using Gemini.

        Args:
            request: Message and context to send

        Returns:
            InferenceResponse with the generated text (possibly empty)

        Raises:
            InferenceError: If the API call fails
        """
        config = types.GenerateContentConfig(
            temperature=self._temperature,
            system_instruction=request.context,
            safety_settings=DEFAULT_SAFETY_SETTINGS,
        )
        if self._max_tokens is not None:
            config.max_output_tokens = self._max_tokens

        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=request.message,
                config=config,
            )
        except errors.APIError as exc:
            status = exc.code
            retryable = status == 429 or isinstance(exc, errors.ServerError)
            raise InferenceError.from_payload(
                {"retryable": retryable, "status": status},
                message=str(exc),
                status_code=status,
            ) from exc

        return InferenceResponse(response=_extract_text(response), model=self._model)

    async def close(self) -> None:
        """Close the Gemini client.

        Note: The Google GenAI client doesn't require explicit closing,
        but we implement this for interface consistency.
        """
        pass
