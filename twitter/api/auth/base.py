"""Authentication provider interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class AuthProvider(ABC):
    """Supplies the credential header attached to every outgoing request.

    Implementations must be safe to share across concurrent requests.
    """

    @abstractmethod
    async def get_auth_header(self) -> dict[str, str]:
        """Return the headers carrying the credential.

        Raises:
            AuthError: If no usable credential is available
        """
        pass

    async def close(self) -> None:
        """Release resources held by the provider. Override if needed."""
        pass
