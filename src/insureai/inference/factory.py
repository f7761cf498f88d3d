from typing import Any

from .base import InferenceClient
from .providers import (
    AnthropicInferenceClient,
    DeepSeekInferenceClient,
    EdgeFunctionClient,
    GeminiInferenceClient,
    OpenAIInferenceClient,
)


def create_inference_client(provider: str, **config: Any) -> InferenceClient:
    """Create an inference client instance.

    This factory function hides the instantiation logic for different backends.

    Args:
        provider: Backend type ('edge', 'openai', 'deepseek', 'anthropic', 'gemini')
        **config: Backend-specific configuration
            For edge (Supabase Edge Function):
                - url: str (required)
                - anon_key: str (required)
                - function_name: str (default: 'insurance-ai')
                - timeout: float (default: 60.0)
            For OpenAI:
                - api_key: str (required)
                - model: str (default: 'gpt-4o-mini')
            For DeepSeek:
                - api_key: str (required)
                - model: str (default: 'deepseek-chat')
            For Anthropic (Claude):
                - api_key: str (required)
                - model: str (default: 'claude-sonnet-4-20250514')
            For Gemini:
                - api_key: str (required)
                - model: str (default: 'gemini-2.5-flash')

    Returns:
        Initialized inference client

    Raises:
        ValueError: If provider type is not supported
        TypeError: If required configuration is missing

    Examples:
        >>> client = create_inference_client(
        ...     "edge",
        ...     url="https://xyz.supabase.co",
        ...     anon_key="eyJ..."
        ... )

        >>> client = create_inference_client(
        ...     "anthropic",
        ...     api_key="sk-ant-...",
        ...     model="claude-sonnet-4-20250514"
        ... )
    """
    provider_lower = provider.lower()

    if provider_lower in ("edge", "supabase"):
        missing = [key for key in ("url", "anon_key") if not config.get(key)]
        if missing:
            raise TypeError(f"Edge function client requires {missing} in config")
        return EdgeFunctionClient(**config)

    if provider_lower == "openai":
        if "api_key" not in config:
            raise TypeError("OpenAI client requires 'api_key' in config")
        return OpenAIInferenceClient(**config)

    if provider_lower == "deepseek":
        if "api_key" not in config:
            raise TypeError("DeepSeek client requires 'api_key' in config")
        return DeepSeekInferenceClient(**config)

    if provider_lower in ("anthropic", "claude"):
        if "api_key" not in config:
            raise TypeError("Anthropic client requires 'api_key' in config")
        return AnthropicInferenceClient(**config)

    if provider_lower == "gemini":
        if "api_key" not in config:
            raise TypeError("Gemini client requires 'api_key' in config")
        return GeminiInferenceClient(**config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'edge', 'openai', 'deepseek', 'anthropic', 'gemini'"
    )
