from .base import InferenceClient
from .errors import InferenceError, InvalidResponseError
from .factory import create_inference_client
from .models import InferenceRequest, InferenceResponse
from .providers import (
    AnthropicInferenceClient,
    DeepSeekInferenceClient,
    EdgeFunctionClient,
    GeminiInferenceClient,
    OpenAIInferenceClient,
)

__all__ = [
    "InferenceClient",
    "InferenceError",
    "InvalidResponseError",
    "InferenceRequest",
    "InferenceResponse",
    "create_inference_client",
    "AnthropicInferenceClient",
    "DeepSeekInferenceClient",
    "EdgeFunctionClient",
    "GeminiInferenceClient",
    "OpenAIInferenceClient",
]
