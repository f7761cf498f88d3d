from typing import Any

from .openai import OpenAIInferenceClient


class DeepSeekInferenceClient(OpenAIInferenceClient):
    """DeepSeek inference client using the OpenAI-compatible API."""

    def __init__(
        self,
        api_key: str,
        model: str = "deepseek-chat",
        base_url: str = "https://api.deepseek.com",
        **kwargs: Any
    ):
        """Initialize DeepSeek client.

        Args:
            api_key: DeepSeek API key
            model: Model to use ('deepseek-chat' or 'deepseek-reasoner')
            base_url: DeepSeek API base URL
            **kwargs: Passed through to OpenAIInferenceClient
        """
        super().__init__(api_key=api_key, model=model, base_url=base_url, **kwargs)

    @property
    def name(self) -> str:
        return f"deepseek:{self.model}"
