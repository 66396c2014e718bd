"""
App settings loading.

Loads fitfam.yaml and fitfam.{env}.yaml from the project directory, then resolves
${VAR} and {env} placeholders. The base file is optional; defaults apply without it.
"""

import os
import re
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import yaml

from fitfam.exceptions import ConfigurationError

SETTINGS_FILENAME = "fitfam.yaml"
DEFAULT_BUNDLE_PATH = "Resources"

# Path-valued settings that must be fully resolved before use
PATH_KEYS = ("bundle.path", "logging.file")

_PLACEHOLDER = re.compile(r"\${([^}]+)}")


class Settings:
    """FitFam settings container with dict-like access."""

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.bundle = data.get("bundle") or {}
        self.logging = data.get("logging") or {}

    def get(self, key: str, default: Any = None) -> Any:
        """Get a settings value using dot notation."""
        value: Any = self.data
        for k in key.split("."):
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default
        return value

    def __getitem__(self, key: str) -> Any:
        """Dict-like access: settings['key'] or settings['nested.key']."""
        if isinstance(key, str) and "." in key:
            return self.get(key)
        if key in self.data:
            value = self.data[key]
            if isinstance(value, dict):
                return Settings(value)
            return value
        raise KeyError(f"Settings key '{key}' not found")

    def __contains__(self, key: str) -> bool:
        if isinstance(key, str) and "." in key:
            value: Any = self.data
            for k in key.split("."):
                if not isinstance(value, dict) or k not in value:
                    return False
                value = value[k]
            return True
        return key in self.data

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def bundle_path(self, project_dir: Path) -> Path:
        """Resource directory, resolved against the project directory when relative."""
        path = Path(self.bundle.get("path") or DEFAULT_BUNDLE_PATH)
        if not path.is_absolute():
            path = project_dir / path
        return path

    def validate(self) -> None:
        """Validate settings structure."""
        errors = []

        if not isinstance(self.data, dict):
            raise ConfigurationError(f"Settings must be a dictionary/mapping, got {type(self.data).__name__}")

        for section in ("bundle", "logging"):
            value = self.data.get(section)
            if value is not None and not isinstance(value, dict):
                errors.append(f"Settings '{section}' must be a dictionary, got {type(value).__name__}")

        sources = self.data.get("sources")
        if sources is not None and not isinstance(sources, list):
            errors.append(f"Settings 'sources' must be a list, got {type(sources).__name__}")

        for key in PATH_KEYS:
            value = self.get(key)
            if isinstance(value, str):
                unset = _PLACEHOLDER.findall(value)
                if unset:
                    errors.append(f"Settings '{key}' references unset environment variables: {', '.join(unset)}")

        if errors:
            raise ConfigurationError("\n".join(errors))


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        location = f" at line {mark.line + 1}, column {mark.column + 1}" if mark is not None else ""
        raise ConfigurationError(
            f"Error parsing {path.name}{location}:\n"
            f"  {e}\n"
            f"  Suggestion: Check YAML syntax, ensure proper indentation and quotes",
            details={"path": str(path)},
        ) from e
    except OSError as e:
        raise ConfigurationError(f"Could not read {path}: {e}", details={"path": str(path)}) from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"{path.name} must contain a mapping, got {type(data).__name__}")
    return data


def load_settings(project_path: Path | None = None, env: str | None = None) -> Settings:
    """
    Load FitFam settings.

    Args:
        project_path: Path to project root (default: current directory)
        env: Environment name (dev, staging, prod)

    Returns:
        Settings instance with merged values

    Raises:
        ConfigurationError: If a settings file exists but cannot be parsed
    """
    if project_path is None:
        project_path = Path.cwd()

    settings_data: dict[str, Any] = {}
    base_path = project_path / SETTINGS_FILENAME
    if base_path.is_file():
        settings_data = _read_yaml(base_path)

    if env:
        env_path = project_path / f"fitfam.{env}.yaml"
        if env_path.is_file():
            _merge_dict(settings_data, _read_yaml(env_path))

    return Settings(_substitute(settings_data, env or "dev"))


def _merge_dict(base: dict, override: dict):
    """Recursively merge override into base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _merge_dict(base[key], value)
        else:
            base[key] = value


def _substitute(value: Any, env: str) -> Any:
    """
    Resolve ${VAR_NAME} from the process environment and {env} with the environment name.

    Unset variables are left as written; ``Settings.validate`` rejects them in path settings.
    """
    if isinstance(value, dict):
        return {k: _substitute(v, env) for k, v in value.items()}
    elif isinstance(value, list):
        return [_substitute(item, env) for item in value]
    elif isinstance(value, str):
        result = _PLACEHOLDER.sub(lambda m: os.getenv(m.group(1), m.group(0)), value)
        return result.replace("{env}", env)
    else:
        return value
