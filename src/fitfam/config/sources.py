"""
Configuration source descriptors and bundle resource lookup.

A ConfigurationSource names a candidate backend configuration file. Candidates are
kept in an ordered tuple; earlier entries win when more than one file exists.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fitfam.config.parsing import load_mapping
from fitfam.exceptions import ConfigurationError, ParseFailureError

IDENTITY_PROVIDER_SOURCE_NAME = "identity-provider-specific"
GENERIC_SOURCE_NAME = "generic"

INFO_DICTIONARY_NAME = "Info"


@dataclass(frozen=True)
class ConfigurationSource:
    """A named configuration file candidate."""

    name: str
    resource_names: tuple[str, ...]
    extension: str = "plist"

    def __post_init__(self) -> None:
        if not self.name:
            raise ConfigurationError("Configuration source requires a name")
        if not self.resource_names:
            raise ConfigurationError(f"Configuration source '{self.name}' has no resource names")

    @property
    def filenames(self) -> list[str]:
        return [f"{resource}.{self.extension}" for resource in self.resource_names]


# The shipped app bundle used the "Goggle" spelling; both are accepted.
IDENTITY_PROVIDER_SOURCE = ConfigurationSource(
    name=IDENTITY_PROVIDER_SOURCE_NAME,
    resource_names=("GoogleService-Info-Google-Sign-In", "GoogleService-Info-Goggle-Sign-In"),
)
GENERIC_SOURCE = ConfigurationSource(
    name=GENERIC_SOURCE_NAME,
    resource_names=("GoogleService-Info",),
)

DEFAULT_SOURCES: tuple[ConfigurationSource, ...] = (IDENTITY_PROVIDER_SOURCE, GENERIC_SOURCE)


class ResourceBundle:
    """Resource lookup rooted at a directory: name + extension -> path or absence."""

    def __init__(self, root: Path | str):
        self.root = Path(root)
        self._info: dict[str, Any] | None = None

    def __repr__(self) -> str:
        return f"ResourceBundle({str(self.root)!r})"

    def path_for_resource(self, name: str, extension: str) -> Path | None:
        """Return the path of ``name.extension`` inside the bundle, or None."""
        candidate = self.root / f"{name}.{extension}"
        if candidate.is_file():
            return candidate
        return None

    def locate(self, source: ConfigurationSource) -> Path | None:
        """Return the first existing file for a source, trying its resource names in order."""
        for resource in source.resource_names:
            path = self.path_for_resource(resource, source.extension)
            if path is not None:
                return path
        return None

    def info_dictionary(self) -> dict[str, Any]:
        """Read ``Info.plist``; an absent or unreadable file yields an empty mapping."""
        if self._info is None:
            path = self.path_for_resource(INFO_DICTIONARY_NAME, "plist")
            info: dict[str, Any] = {}
            if path is not None:
                try:
                    info = load_mapping(path)
                except ParseFailureError:
                    info = {}
            self._info = info
        return self._info

    def object_for_info_key(self, key: str) -> Any:
        return self.info_dictionary().get(key)

    @property
    def bundle_identifier(self) -> str | None:
        return self.object_for_info_key("CFBundleIdentifier")


def locate_first(
    sources: Sequence[ConfigurationSource], bundle: ResourceBundle
) -> tuple[ConfigurationSource, Path] | None:
    """Return the highest-priority source that exists in the bundle, with its path."""
    for source in sources:
        path = bundle.locate(source)
        if path is not None:
            return source, path
    return None


def sources_from_settings(entries: Iterable[dict[str, Any]]) -> tuple[ConfigurationSource, ...]:
    """
    Build an ordered source tuple from the ``sources`` settings section.

    Each entry needs ``name`` and ``resources`` (a string or list); ``extension``
    defaults to ``plist``.
    """
    sources = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ConfigurationError(f"Source entry {index} must be a mapping, got {type(entry).__name__}")
        resources = entry.get("resources")
        if isinstance(resources, str):
            resources = [resources]
        if not isinstance(resources, list) or not all(isinstance(r, str) for r in resources):
            raise ConfigurationError(f"Source entry {index} needs 'resources' as a string or list of strings")
        sources.append(
            ConfigurationSource(
                name=str(entry.get("name") or ""),
                resource_names=tuple(resources),
                extension=str(entry.get("extension", "plist")),
            )
        )
    names = [s.name for s in sources]
    if len(set(names)) != len(names):
        raise ConfigurationError(f"Duplicate configuration source names: {names}")
    return tuple(sources)
