"""
FitFam exception hierarchy.

All startup errors inherit from FitFamError. The configuration resolver
catches them and turns them into result values, so none of them ever
terminate process startup.

Hierarchy::

    FitFamError
    ├── ConfigurationError             - settings/config file loading and parsing
    │   ├── MissingConfigurationError  - no configuration source could be located
    │   ├── ParseFailureError          - located file is malformed or incomplete
    │   └── SecondaryFieldMissingError - identity-provider file lacks a required key
    ├── BackendInitError               - backend client registration failed
    ├── InitializationError            - startup orchestration failures
    └── AuthUnavailableError           - sign-in requested while running in demo mode
"""

from __future__ import annotations

from pathlib import Path


class FitFamError(Exception):
    """Base exception for all FitFam errors."""

    def __init__(self, message: str, *, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


# --- Configuration -----------------------------------------------------------


class ConfigurationError(FitFamError):
    """Raised when configuration loading, parsing, or validation fails."""


class MissingConfigurationError(ConfigurationError):
    """Raised when none of the candidate configuration sources exist."""

    def __init__(self, candidates: list[str]) -> None:
        super().__init__(
            "No configuration file found",
            details={"candidates": candidates},
        )
        self.candidates = candidates


class ParseFailureError(ConfigurationError):
    """Raised when a located configuration file cannot be parsed."""

    def __init__(self, path: Path | str, message: str) -> None:
        super().__init__(f"Failed to parse {path}: {message}", details={"path": str(path)})
        self.path = str(path)


class SecondaryFieldMissingError(ConfigurationError):
    """Raised when the identity-provider file lacks a required field."""

    def __init__(self, field: str, available_keys: list[str]) -> None:
        super().__init__(
            f"{field} not found. Available keys: {available_keys}",
            details={"field": field, "available_keys": available_keys},
        )
        self.field = field
        self.available_keys = available_keys


# --- Backend -----------------------------------------------------------------


class BackendInitError(FitFamError):
    """Raised when the backend client refuses or fails a registration."""


# --- Initialization ----------------------------------------------------------


class InitializationError(FitFamError):
    """Raised during startup when a required component fails to initialize.

    Exception chaining is suppressed (``from None``) to keep CLI output clean.
    """


# --- Auth --------------------------------------------------------------------


class AuthUnavailableError(FitFamError):
    """Raised when an auth-dependent action is attempted without a configured backend."""
