"""
Auth capability derived from the startup configuration result.

UI collaborators check this before offering sign-in actions.
"""

from dataclasses import dataclass

from fitfam.config.resolver import (
    Configured,
    ConfigurationResolver,
    DemoMode,
    IdentityProviderStatus,
    InitializationResult,
)
from fitfam.exceptions import AuthUnavailableError


@dataclass(frozen=True)
class AuthCapability:
    """What the configured backend allows the app to offer."""

    backend_available: bool
    sign_in_available: bool
    reason: str | None = None

    @classmethod
    def from_result(
        cls,
        result: InitializationResult,
        identity_status: IdentityProviderStatus = IdentityProviderStatus.NOT_ATTEMPTED,
    ) -> "AuthCapability":
        if isinstance(result, Configured):
            if identity_status is IdentityProviderStatus.CONFIGURED:
                return cls(backend_available=True, sign_in_available=True)
            return cls(
                backend_available=True,
                sign_in_available=False,
                reason=f"Identity provider sign-in unavailable ({identity_status.value})",
            )
        if isinstance(result, DemoMode):
            reason = "Firebase not configured. Add GoogleService-Info.plist to enable authentication."
        else:
            reason = f"Firebase configuration failed at {result.stage}: {result.reason}"
        return cls(backend_available=False, sign_in_available=False, reason=reason)

    @classmethod
    def from_resolver(cls, resolver: ConfigurationResolver) -> "AuthCapability":
        return cls.from_result(resolver.configure(), resolver.identity_status)

    def require_backend(self) -> None:
        """Raise AuthUnavailableError unless the backend is configured."""
        if not self.backend_available:
            raise AuthUnavailableError(self.reason or "Backend not configured")

    def require_sign_in(self) -> None:
        """Raise AuthUnavailableError unless identity-provider sign-in can be offered."""
        self.require_backend()
        if not self.sign_in_available:
            raise AuthUnavailableError(self.reason or "Sign-in not configured")
