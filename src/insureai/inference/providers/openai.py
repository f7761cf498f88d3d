from typing import Any

import openai
from openai import AsyncOpenAI

from ..base import InferenceClient
from ..errors import InferenceError
from ..models import InferenceRequest, InferenceResponse


def _error_from_openai(exc: openai.APIError) -> InferenceError:
    """Map an OpenAI SDK error to an InferenceError.

    Rate limits, timeouts and server-side errors are transient; connection
    failures and other client errors are not.
    """
    if isinstance(exc, openai.APITimeoutError):
        return InferenceError.from_payload({"retryable": True}, message=str(exc))
    if isinstance(exc, openai.APIConnectionError):
        return InferenceError.from_payload({"retryable": False}, message=str(exc))
    if isinstance(exc, openai.APIStatusError):
        status = exc.status_code
        retryable = isinstance(exc, openai.RateLimitError) or status >= 500
        return InferenceError.from_payload(
            {"retryable": retryable, "status": status},
            message=exc.message,
            status_code=status,
        )
    return InferenceError.from_payload({"retryable": False}, message=str(exc))


class OpenAIInferenceClient(InferenceClient):
    """OpenAI-backed inference client.

    Hidden design decisions:
    - OpenAI API client initialization
    - Context sent as the system message, input as the single user turn
    - Error mapping to InferenceError
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        base_url: str | None = None,
        organization: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **client_kwargs: Any
    ):
        """Initialize OpenAI client.

        Args:
            api_key: OpenAI API key
            model: Chat model to use
            base_url: Optional custom API base URL
            organization: Optional organization ID
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate (None for the API default)
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            organization=organization,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        """Get the model name."""
        return self._model

    @property
    def name(self) -> str:
        return f"openai:{self._model}"

    async def invoke(self, request: InferenceRequest) -> InferenceResponse:
        """Generate a reply with the Chat Completions API.

        Args:
            request: Message and context to send

        Returns:
            InferenceResponse with the generated text

        Raises:
            InferenceError: If the API call fails
        """
        request_params: dict[str, Any] = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": request.context},
                {"role": "user", "content": request.message},
            ],
            "temperature": self._temperature,
        }
        if self._max_tokens is not None:
            request_params["max_tokens"] = self._max_tokens

        try:
            completion = await self._client.chat.completions.create(**request_params)
        except openai.APIError as exc:
            raise _error_from_openai(exc) from exc

        content = completion.choices[0].message.content if completion.choices else None
        return InferenceResponse(response=content, model=completion.model)

    async def close(self) -> None:
        """Close the OpenAI client."""
        await self._client.close()
