"""Supabase Edge Function inference client.

Calls a deployed edge function (``insurance-ai`` by default) over HTTPS.
The function receives ``{"message", "context"}`` and answers with
``{"response"}``; on failure it answers with a non-2xx status and a JSON
body that may carry ``retryable``.
"""

import json
from typing import Any

import httpx
from pydantic import ValidationError

from ..base import InferenceClient
from ..errors import InferenceError, InvalidResponseError
from ..models import InferenceRequest, InferenceResponse

DEFAULT_FUNCTION_NAME = "insurance-ai"
DEFAULT_TIMEOUT = 60.0

# Statuses treated as transient when the body does not say otherwise
RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})


class EdgeFunctionClient(InferenceClient):
    """Inference client for a Supabase Edge Function.

    Hidden design decisions:
    - Function URL layout (``/functions/v1/<name>``)
    - Supabase authentication headers
    - Mapping HTTP and transport failures to InferenceError
    """

    def __init__(
        self,
        url: str,
        anon_key: str,
        function_name: str = DEFAULT_FUNCTION_NAME,
        timeout: float = DEFAULT_TIMEOUT,
        **client_kwargs: Any
    ):
        """Initialize the edge function client.

        Args:
            url: Supabase project URL (e.g. https://xyz.supabase.co)
            anon_key: Supabase anon key, sent as bearer token and apikey
            function_name: Name of the deployed edge function
            timeout: Request timeout in seconds
            **client_kwargs: Additional kwargs for httpx.AsyncClient
        """
        self._function_name = function_name
        self._endpoint = f"{url.rstrip('/')}/functions/v1/{function_name}"
        self._client = httpx.AsyncClient(
            timeout=timeout,
            headers={
                "Authorization": f"Bearer {anon_key}",
                "apikey": anon_key,
            },
            **client_kwargs
        )

    @property
    def endpoint(self) -> str:
        """Full URL of the edge function."""
        return self._endpoint

    @property
    def name(self) -> str:
        return f"edge:{self._function_name}"

    async def invoke(self, request: InferenceRequest) -> InferenceResponse:
        """Invoke the edge function.

        Args:
            request: Message and context to send

        Returns:
            InferenceResponse parsed from the JSON body

        Raises:
            InferenceError: On transport errors or non-2xx statuses
            InvalidResponseError: If a 2xx body is not a JSON object with
                a string ``response``
        """
        try:
            http_response = await self._client.post(
                self._endpoint,
                json=request.model_dump(),
            )
        except httpx.TimeoutException as exc:
            raise InferenceError.from_payload(
                {"retryable": True},
                message=f"Edge function timed out: {exc}",
            ) from exc
        except httpx.TransportError as exc:
            raise InferenceError.from_payload(
                {"retryable": False},
                message=f"Edge function request failed: {exc}",
            ) from exc

        if http_response.is_error:
            raise self._error_from_response(http_response)

        try:
            data = http_response.json()
        except json.JSONDecodeError as exc:
            raise InvalidResponseError("Edge function returned a non-JSON body") from exc

        if not isinstance(data, dict):
            raise InvalidResponseError("Edge function returned an unexpected body")

        try:
            return InferenceResponse.model_validate(data)
        except ValidationError as exc:
            raise InvalidResponseError(f"Invalid response from AI service: {exc}") from exc

    def _error_from_response(self, http_response: httpx.Response) -> InferenceError:
        """Convert a non-2xx response into an InferenceError."""
        status = http_response.status_code
        try:
            body = http_response.json()
        except json.JSONDecodeError:
            body = None

        if isinstance(body, dict):
            payload = dict(body)
        else:
            payload = {"error": http_response.text or http_response.reason_phrase}

        payload.setdefault("retryable", status in RETRYABLE_STATUS_CODES)
        payload.setdefault("status", status)
        return InferenceError.from_payload(payload, status_code=status)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
