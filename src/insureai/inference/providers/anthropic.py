"""Anthropic Claude inference client.

Uses the official Anthropic Python SDK for async message creation.
Reference: https://github.com/anthropics/anthropic-sdk-python
"""

from typing import Any

import anthropic
from anthropic import AsyncAnthropic

from ..base import InferenceClient
from ..errors import InferenceError
from ..models import InferenceRequest, InferenceResponse


class AnthropicInferenceClient(InferenceClient):
    """Anthropic Claude inference client.

    Hidden design decisions:
    - Anthropic API client initialization
    - Context passed as the ``system`` parameter
    - Error mapping (overloaded 529 counts as a server error)
    """

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-20250514",
        base_url: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 1024,
        **client_kwargs: Any
    ):
        """Initialize Anthropic client.

        Args:
            api_key: Anthropic API key
            model: Model to use
            base_url: Optional custom API base URL
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate (required by the API)
            **client_kwargs: Additional kwargs for AsyncAnthropic client
        """
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._client = AsyncAnthropic(
            api_key=api_key,
            base_url=base_url,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        """Get the model name."""
        return self._model

    @property
    def name(self) -> str:
        return f"anthropic:{self._model}"

    async def invoke(self, request: InferenceRequest) -> InferenceResponse:
        """Generate a reply using Claude.

        Args:
            request: Message and context to send

        Returns:
            InferenceResponse with the concatenated text blocks

        Raises:
            InferenceError: If the API call fails
        """
        try:
            response = await self._client.messages.create(
                model=self._model,
                system=request.context,
                messages=[{"role": "user", "content": request.message}],
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except anthropic.APITimeoutError as exc:
            raise InferenceError.from_payload({"retryable": True}, message=str(exc)) from exc
        except anthropic.APIConnectionError as exc:
            raise InferenceError.from_payload({"retryable": False}, message=str(exc)) from exc
        except anthropic.APIStatusError as exc:
            status = exc.status_code
            retryable = isinstance(exc, anthropic.RateLimitError) or status >= 500
            raise InferenceError.from_payload(
                {"retryable": retryable, "status": status},
                message=exc.message,
                status_code=status,
            ) from exc
        except anthropic.APIError as exc:
            raise InferenceError.from_payload({"retryable": False}, message=str(exc)) from exc

        content = ""
        for block in response.content:
            if hasattr(block, "text"):
                content += block.text

        return InferenceResponse(response=content, model=response.model)

    async def close(self) -> None:
        """Close the Anthropic client."""
        await self._client.close()
