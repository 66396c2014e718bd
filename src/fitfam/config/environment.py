"""
Read-only environment constants consulted by UI collaborators.
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class AppEnvironment:
    """Immutable app constants; ``is_production`` derives from the bundle identifier."""

    bundle_identifier: str | None = None

    max_image_size: tuple[int, int] = (1080, 1920)
    max_video_length: float = 30.0
    compression_quality: float = 0.8

    feed_refresh_interval: float = 30.0
    streak_reset_hour: int = 4  # 4 AM local reset

    privacy_policy_url: str = "https://fitfam.app/privacy"
    terms_of_service_url: str = "https://fitfam.app/terms"
    support_email: str = "support@fitfam.app"

    @property
    def is_production(self) -> bool:
        return "release" in (self.bundle_identifier or "")

    @property
    def is_debug(self) -> bool:
        return not self.is_production

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["is_production"] = self.is_production
        data["is_debug"] = self.is_debug
        return data
