from abc import ABC, abstractmethod
from typing import Any

from .models import InferenceRequest, InferenceResponse


class InferenceClient(ABC):
    """Abstract base class for remote inference clients.

    This module hides the design decision of which service answers the
    user's questions. Implementations must handle:
    - Client setup and authentication
    - Request/response format conversion
    - Mapping service failures to InferenceError (with ``retryable`` set)
    - Their own timeouts

    Supports async context manager protocol for proper resource cleanup:
        async with client:
            response = await client.invoke(request)
        # Automatically cleaned up
    """

    @abstractmethod
    async def invoke(self, request: InferenceRequest) -> InferenceResponse:
        """Send a message with its context and return the generated reply.

        Args:
            request: Message and context to send

        Returns:
            InferenceResponse; its ``response`` may be empty if the service
            produced nothing

        Raises:
            InferenceError: If the remote call fails
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    @property
    def name(self) -> str:
        """Short description of the backend, shown in the UI subtitle."""
        return type(self).__name__

    async def __aenter__(self) -> "InferenceClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
