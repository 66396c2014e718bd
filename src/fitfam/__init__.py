"""
FitFam - startup configuration for the FitFam fitness social app.

Resolves backend and sign-in configuration from the app bundle and exposes the
resulting state to the rest of the app.
"""

__version__ = "0.1.0"

from fitfam.auth import AuthCapability
from fitfam.clients import BackendClient, BackendRegistry, IdentityProviderClient, IdentityProviderRegistry
from fitfam.config import (
    AppEnvironment,
    BackendOptions,
    ConfigurationResolver,
    ConfigurationSource,
    Configured,
    DemoMode,
    IdentityProviderStatus,
    InitializationResult,
    PartialFailure,
    ResourceBundle,
)
from fitfam.core.initialization import AppContext, initialize

# Exceptions
from fitfam.exceptions import (
    AuthUnavailableError,
    BackendInitError,
    ConfigurationError,
    FitFamError,
    InitializationError,
    MissingConfigurationError,
    ParseFailureError,
    SecondaryFieldMissingError,
)

# Logging utilities
from fitfam.utils.logging import get_logger, setup_logging

__all__ = [
    # Startup
    "initialize",
    "AppContext",
    "ConfigurationResolver",
    "ResourceBundle",
    "ConfigurationSource",
    "BackendOptions",
    "AppEnvironment",
    "AuthCapability",
    # Results
    "InitializationResult",
    "Configured",
    "DemoMode",
    "PartialFailure",
    "IdentityProviderStatus",
    # Clients
    "BackendClient",
    "BackendRegistry",
    "IdentityProviderClient",
    "IdentityProviderRegistry",
    # Exceptions
    "FitFamError",
    "ConfigurationError",
    "MissingConfigurationError",
    "ParseFailureError",
    "SecondaryFieldMissingError",
    "BackendInitError",
    "InitializationError",
    "AuthUnavailableError",
    # Logging
    "get_logger",
    "setup_logging",
]
