"""
Backend and identity-provider client contracts.

The resolver only ever calls ``initialize``. The registries below are the
in-process implementations: each accepts exactly one registration for the
lifetime of the process, as the platform SDKs do.
"""

from __future__ import annotations

import threading
from typing import Protocol, runtime_checkable

from fitfam.config.options import BackendOptions
from fitfam.exceptions import BackendInitError
from fitfam.utils.logging import get_logger

logger = get_logger("fitfam.clients")


@runtime_checkable
class BackendClient(Protocol):
    """Core backend client."""

    def initialize(self, options: BackendOptions) -> None: ...


@runtime_checkable
class IdentityProviderClient(Protocol):
    """Sign-in provider client."""

    def initialize(self, client_id: str) -> None: ...


class BackendRegistry:
    """Holds the process-wide backend app registration."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._options: BackendOptions | None = None

    def initialize(self, options: BackendOptions) -> None:
        """
        Register the default backend app.

        Raises:
            BackendInitError: If the default app has already been configured
        """
        with self._lock:
            if self._options is not None:
                raise BackendInitError(
                    "Default backend app has already been configured",
                    details={"project_id": self._options.project_id},
                )
            self._options = options
        logger.debug(f"Backend app registered for project {options.project_id or '<unknown>'}")

    @property
    def is_configured(self) -> bool:
        return self._options is not None

    @property
    def options(self) -> BackendOptions | None:
        return self._options


class IdentityProviderRegistry:
    """Holds the sign-in provider configuration."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._client_id: str | None = None

    def initialize(self, client_id: str) -> None:
        if not client_id:
            raise ValueError("client_id must be a non-empty string")
        with self._lock:
            self._client_id = client_id
        logger.debug("Identity provider configuration set")

    @property
    def is_configured(self) -> bool:
        return self._client_id is not None

    @property
    def client_id(self) -> str | None:
        return self._client_id
