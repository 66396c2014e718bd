"""
Startup configuration resolution.

Resolves which backend configuration file to use, parses it, registers the
backend client, and then independently configures the identity provider.

Every exit path produces an InitializationResult; nothing raises out of
``configure()``. The identity-provider step is optional: its outcome is kept
as auxiliary status and never changes a successful top-level result.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from fitfam.config.options import BackendOptions
from fitfam.config.parsing import load_mapping
from fitfam.config.sources import (
    DEFAULT_SOURCES,
    IDENTITY_PROVIDER_SOURCE,
    ConfigurationSource,
    ResourceBundle,
    locate_first,
)
from fitfam.exceptions import (
    MissingConfigurationError,
    ParseFailureError,
    SecondaryFieldMissingError,
)
from fitfam.utils.logging import get_logger

if TYPE_CHECKING:
    from fitfam.clients import BackendClient, IdentityProviderClient

logger = get_logger("fitfam.config.resolver")

CLIENT_ID_KEY = "CLIENT_ID"
URL_TYPES_KEY = "CFBundleURLTypes"

STAGE_PARSE = "parse"
STAGE_BACKEND_INIT = "backend-init"


@dataclass(frozen=True)
class Configured:
    """The backend client was registered from ``source_name``."""

    source_name: str
    path: str | None = None


@dataclass(frozen=True)
class DemoMode:
    """No configuration was found; the app runs with backend features disabled."""

    reason: str


@dataclass(frozen=True)
class PartialFailure:
    """A configuration file was found but a step failed."""

    stage: str
    reason: str


InitializationResult = Configured | DemoMode | PartialFailure


class IdentityProviderStatus(str, Enum):
    """Outcome of the secondary identity-provider step."""

    NOT_ATTEMPTED = "not_attempted"
    SKIPPED = "skipped"
    UNREADABLE = "unreadable"
    FIELD_MISSING = "field_missing"
    INIT_FAILED = "init_failed"
    CONFIGURED = "configured"

    @property
    def failed(self) -> bool:
        return self in (
            IdentityProviderStatus.UNREADABLE,
            IdentityProviderStatus.FIELD_MISSING,
            IdentityProviderStatus.INIT_FAILED,
        )


class ConfigurationResolver:
    """
    Resolves startup configuration at most once per instance.

    Construct one at startup and hand it (or its result) to collaborators.
    Repeated or concurrent ``configure()`` calls return the cached result.
    """

    def __init__(
        self,
        bundle: ResourceBundle,
        backend: BackendClient,
        identity_provider: IdentityProviderClient,
        sources: Sequence[ConfigurationSource] = DEFAULT_SOURCES,
        identity_source: ConfigurationSource = IDENTITY_PROVIDER_SOURCE,
    ):
        self.bundle = bundle
        self.backend = backend
        self.identity_provider = identity_provider
        self.sources = tuple(sources)
        self.identity_source = identity_source

        self._lock = threading.Lock()
        self._result: InitializationResult | None = None
        self._identity_status = IdentityProviderStatus.NOT_ATTEMPTED
        self._identity_error: str | None = None
        self._options: BackendOptions | None = None

    @property
    def result(self) -> InitializationResult | None:
        """Cached result, or None before ``configure()`` has run."""
        return self._result

    @property
    def identity_status(self) -> IdentityProviderStatus:
        return self._identity_status

    @property
    def identity_error(self) -> str | None:
        return self._identity_error

    @property
    def options(self) -> BackendOptions | None:
        return self._options

    @property
    def is_resolved(self) -> bool:
        return self._result is not None

    def configure(self) -> InitializationResult:
        """Resolve and apply configuration; later calls return the first result."""
        if self._result is not None:
            return self._result

        with self._lock:
            if self._result is None:
                self._result = self._resolve()
        return self._result

    def _resolve(self) -> InitializationResult:
        try:
            source, path = self._locate_primary()
        except MissingConfigurationError as e:
            logger.warning("No backend configuration file found. Running in demo mode.")
            logger.warning("UI will work, but authentication will be disabled.")
            logger.info(f"Add one of {', '.join(e.candidates)} to the bundle to enable auth.")
            return DemoMode("no configuration file found")

        logger.info(f"Using {path.name} ({source.name})")

        try:
            options = BackendOptions.from_file(path)
        except ParseFailureError as e:
            logger.warning(f"Failed to load backend configuration from {path}: {e.message}")
            return PartialFailure(STAGE_PARSE, str(path))

        try:
            self.backend.initialize(options)
        except Exception as e:
            logger.error(f"Backend initialization failed: {e}")
            return PartialFailure(STAGE_BACKEND_INIT, str(e) or type(e).__name__)

        self._options = options
        logger.info(f"Backend configured successfully with {path.name}")

        self._configure_identity_provider()
        return Configured(source.name, str(path))

    def _locate_primary(self) -> tuple[ConfigurationSource, Path]:
        found = locate_first(self.sources, self.bundle)
        if found is None:
            candidates = [name for source in self.sources for name in source.filenames]
            raise MissingConfigurationError(candidates)
        return found

    def _configure_identity_provider(self) -> None:
        filenames = " or ".join(self.identity_source.filenames)
        logger.debug(f"Looking for {filenames}")

        path = self.bundle.locate(self.identity_source)
        if path is None:
            logger.info(f"{filenames} not found in bundle; sign-in unavailable")
            self._identity_status = IdentityProviderStatus.SKIPPED
            return

        logger.debug(f"Found identity provider configuration at {path}")

        try:
            client_id = self._extract_client_id(path)
        except SecondaryFieldMissingError as e:
            logger.warning(f"{CLIENT_ID_KEY} not found in {path.name}. Available keys: {e.available_keys}")
            self._identity_status = IdentityProviderStatus.FIELD_MISSING
            self._identity_error = e.message
            return
        except ParseFailureError as e:
            logger.warning(f"Could not read {path.name}: {e.message}")
            self._identity_status = IdentityProviderStatus.UNREADABLE
            self._identity_error = e.message
            return

        try:
            self.identity_provider.initialize(client_id)
        except Exception as e:
            logger.error(f"Identity provider initialization failed: {e}")
            self._identity_status = IdentityProviderStatus.INIT_FAILED
            self._identity_error = str(e) or type(e).__name__
            return

        self._identity_status = IdentityProviderStatus.CONFIGURED
        logger.info("Identity provider sign-in configured successfully")
        self._check_url_types()

    def _extract_client_id(self, path: Path) -> str:
        plist = load_mapping(path)
        logger.debug(f"Identity provider configuration loaded with keys: {sorted(str(k) for k in plist)}")

        client_id = plist.get(CLIENT_ID_KEY)
        if not isinstance(client_id, str) or not client_id:
            raise SecondaryFieldMissingError(CLIENT_ID_KEY, sorted(str(k) for k in plist))
        return client_id

    def _check_url_types(self) -> None:
        # Sign-in redirects come back through a registered URL scheme
        url_types = self.bundle.object_for_info_key(URL_TYPES_KEY)
        if url_types:
            logger.debug(f"URL types found: {url_types}")
        else:
            logger.warning("No URL types found in Info.plist; sign-in redirects may fail")
