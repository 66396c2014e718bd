"""
FitFam startup initialization.

Orchestrates startup in order:
1. Settings (with validation)
2. Logging
3. Backend configuration resolution (never fatal)
4. App context assembly

The resulting AppContext is the explicit process-wide state handed to collaborators.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from fitfam.auth import AuthCapability
from fitfam.clients import BackendClient, BackendRegistry, IdentityProviderClient, IdentityProviderRegistry
from fitfam.config.environment import AppEnvironment
from fitfam.config.loader import Settings, load_settings
from fitfam.config.resolver import ConfigurationResolver, IdentityProviderStatus, InitializationResult
from fitfam.config.sources import (
    DEFAULT_SOURCES,
    IDENTITY_PROVIDER_SOURCE,
    IDENTITY_PROVIDER_SOURCE_NAME,
    ResourceBundle,
    sources_from_settings,
)
from fitfam.exceptions import ConfigurationError, FitFamError, InitializationError
from fitfam.utils.logging import get_logger, setup_logging_from_config


@dataclass
class AppContext:
    """Startup state shared with the rest of the app."""

    settings: Settings
    bundle: ResourceBundle
    environment: AppEnvironment
    resolver: ConfigurationResolver
    result: InitializationResult
    auth: AuthCapability
    backend: BackendClient = field(repr=False)
    identity_provider: IdentityProviderClient = field(repr=False)

    @property
    def identity_status(self) -> IdentityProviderStatus:
        return self.resolver.identity_status


class FitFamInitializer:
    """Handles complete startup initialization."""

    def __init__(
        self,
        project_dir: Path,
        env: str | None = None,
        backend: BackendClient | None = None,
        identity_provider: IdentityProviderClient | None = None,
        configure_logging: bool = True,
    ):
        self.project_dir = Path(project_dir)
        self.env = env or os.environ.get("FITFAM_ENV", "dev")
        self.backend = backend if backend is not None else BackendRegistry()
        self.identity_provider = identity_provider if identity_provider is not None else IdentityProviderRegistry()
        self.configure_logging = configure_logging

        self.settings: Settings | None = None
        self.resolver: ConfigurationResolver | None = None

    def initialize_all(self) -> AppContext:
        """
        Initialize all components in the correct order.

        Returns:
            AppContext for the process

        Raises:
            InitializationError: If settings cannot be loaded; backend configuration
                problems never raise and surface through ``AppContext.result``
        """
        self.settings = self._initialize_settings()

        if self.configure_logging:
            self._initialize_logging()

        bundle = ResourceBundle(self.settings.bundle_path(self.project_dir))
        self.resolver = self._build_resolver(bundle)
        result = self.resolver.configure()

        return AppContext(
            settings=self.settings,
            bundle=bundle,
            environment=AppEnvironment(bundle_identifier=bundle.bundle_identifier),
            resolver=self.resolver,
            result=result,
            auth=AuthCapability.from_result(result, self.resolver.identity_status),
            backend=self.backend,
            identity_provider=self.identity_provider,
        )

    def _initialize_settings(self) -> Settings:
        try:
            settings = load_settings(self.project_dir, env=self.env)
            settings.validate()
            return settings
        except FitFamError as e:
            raise InitializationError(e.message) from None
        except Exception as e:
            raise InitializationError(f"Unexpected error loading settings: {e}") from None

    def _initialize_logging(self) -> None:
        try:
            setup_logging_from_config(self.settings.data, project_dir=self.project_dir)
        except (OSError, TypeError, ValueError) as e:
            raise InitializationError(f"Failed to initialize logging: {e}") from None

    def _build_resolver(self, bundle: ResourceBundle) -> ConfigurationResolver:
        sources = DEFAULT_SOURCES
        identity_source = IDENTITY_PROVIDER_SOURCE

        entries = self.settings.data.get("sources")
        if entries:
            try:
                sources = sources_from_settings(entries)
            except ConfigurationError as e:
                raise InitializationError(e.message) from None
            for source in sources:
                if source.name == IDENTITY_PROVIDER_SOURCE_NAME:
                    identity_source = source

        get_logger("fitfam.initialization").debug(
            f"Resolving configuration from {bundle.root} with sources {[s.name for s in sources]}"
        )
        return ConfigurationResolver(
            bundle=bundle,
            backend=self.backend,
            identity_provider=self.identity_provider,
            sources=sources,
            identity_source=identity_source,
        )


def initialize(
    project_dir: Path,
    env: str | None = None,
    backend: BackendClient | None = None,
    identity_provider: IdentityProviderClient | None = None,
    configure_logging: bool = True,
) -> AppContext:
    """
    Initialize FitFam startup state.

    Convenience wrapper around FitFamInitializer.

    Args:
        project_dir: Project root containing fitfam.yaml and the resource bundle
        env: Environment name (default: FITFAM_ENV or "dev")
        backend: Backend client (default: a fresh BackendRegistry)
        identity_provider: Identity-provider client (default: a fresh IdentityProviderRegistry)
        configure_logging: Whether to apply the settings' logging section

    Returns:
        AppContext
    """
    initializer = FitFamInitializer(
        project_dir,
        env=env,
        backend=backend,
        identity_provider=identity_provider,
        configure_logging=configure_logging,
    )
    return initializer.initialize_all()
