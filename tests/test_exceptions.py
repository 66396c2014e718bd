"""
Tests for the exception hierarchy.
"""

import pytest

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


class TestHierarchy:
    """Verify all exceptions inherit from FitFamError."""

    @pytest.mark.parametrize(
        "exc_class",
        [
            ConfigurationError,
            MissingConfigurationError,
            ParseFailureError,
            SecondaryFieldMissingError,
            BackendInitError,
            InitializationError,
            AuthUnavailableError,
        ],
    )
    def test_inherits_from_fitfam_error(self, exc_class):
        assert issubclass(exc_class, FitFamError)

    @pytest.mark.parametrize(
        "exc_class", [MissingConfigurationError, ParseFailureError, SecondaryFieldMissingError]
    )
    def test_configuration_family(self, exc_class):
        assert issubclass(exc_class, ConfigurationError)


class TestDetails:
    """Verify structured details on exceptions."""

    def test_base_details_default(self):
        err = FitFamError("boom")
        assert err.message == "boom"
        assert err.details == {}

    def test_missing_configuration(self):
        err = MissingConfigurationError(["GoogleService-Info.plist"])
        assert err.candidates == ["GoogleService-Info.plist"]
        assert err.details["candidates"] == ["GoogleService-Info.plist"]

    def test_parse_failure(self):
        err = ParseFailureError("/bundle/a.plist", "bad xml")
        assert err.path == "/bundle/a.plist"
        assert "bad xml" in str(err)

    def test_secondary_field_missing(self):
        err = SecondaryFieldMissingError("CLIENT_ID", ["API_KEY"])
        assert err.field == "CLIENT_ID"
        assert err.available_keys == ["API_KEY"]
        assert "CLIENT_ID" in err.message
