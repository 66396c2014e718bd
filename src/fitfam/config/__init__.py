"""
Configuration management.

App settings loading, backend configuration resolution and environment constants.
"""

from fitfam.config.environment import AppEnvironment
from fitfam.config.loader import Settings, load_settings
from fitfam.config.options import BackendOptions
from fitfam.config.resolver import (
    ConfigurationResolver,
    Configured,
    DemoMode,
    IdentityProviderStatus,
    InitializationResult,
    PartialFailure,
)
from fitfam.config.sources import DEFAULT_SOURCES, ConfigurationSource, ResourceBundle

__all__ = [
    "AppEnvironment",
    "BackendOptions",
    "ConfigurationResolver",
    "ConfigurationSource",
    "Configured",
    "DEFAULT_SOURCES",
    "DemoMode",
    "IdentityProviderStatus",
    "InitializationResult",
    "PartialFailure",
    "ResourceBundle",
    "Settings",
    "load_settings",
]
