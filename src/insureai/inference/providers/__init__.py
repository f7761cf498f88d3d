from .anthropic import AnthropicInferenceClient
from .deepseek import DeepSeekInferenceClient
from .edge_function import EdgeFunctionClient
from .gemini import GeminiInferenceClient
from .openai import OpenAIInferenceClient

__all__ = [
    "AnthropicInferenceClient",
    "DeepSeekInferenceClient",
    "EdgeFunctionClient",
    "GeminiInferenceClient",
    "OpenAIInferenceClient",
]
