"""
Typed backend options built from a parsed configuration mapping.
"""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from fitfam.config.parsing import load_mapping
from fitfam.exceptions import ParseFailureError

REQUIRED_KEYS = ("GOOGLE_APP_ID", "GCM_SENDER_ID")

# plist key -> BackendOptions field
OPTIONAL_KEYS = {
    "API_KEY": "api_key",
    "PROJECT_ID": "project_id",
    "BUNDLE_ID": "bundle_id",
    "CLIENT_ID": "client_id",
    "STORAGE_BUCKET": "storage_bucket",
    "DATABASE_URL": "database_url",
}


@dataclass(frozen=True)
class BackendOptions:
    """Options consumed by the backend client's ``initialize``."""

    google_app_id: str
    gcm_sender_id: str
    api_key: str | None = None
    project_id: str | None = None
    bundle_id: str | None = None
    client_id: str | None = None
    storage_bucket: str | None = None
    database_url: str | None = None

    @classmethod
    def from_mapping(cls, data: dict[str, Any], path: Path | str = "<memory>") -> "BackendOptions":
        """
        Build options from a parsed mapping.

        Raises:
            ParseFailureError: If a required key is missing or a value is not a string
        """
        missing = [key for key in REQUIRED_KEYS if not isinstance(data.get(key), str) or not data.get(key)]
        if missing:
            raise ParseFailureError(path, f"missing required keys: {', '.join(missing)}")

        optional: dict[str, str | None] = {}
        for key, field_name in OPTIONAL_KEYS.items():
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ParseFailureError(path, f"'{key}' must be a string, got {type(value).__name__}")
            optional[field_name] = value

        return cls(
            google_app_id=data["GOOGLE_APP_ID"],
            gcm_sender_id=data["GCM_SENDER_ID"],
            **optional,
        )

    @classmethod
    def from_file(cls, path: Path | str) -> "BackendOptions":
        return cls.from_mapping(load_mapping(path), path)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
