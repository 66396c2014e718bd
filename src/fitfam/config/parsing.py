"""
Parsing of configuration files into generic key/value mappings.

Property lists are the native format; YAML and JSON are accepted for the same
content so development bundles can be written by hand.
"""

import json
import plistlib
from pathlib import Path
from typing import Any
from xml.parsers.expat import ExpatError

import yaml

from fitfam.exceptions import ParseFailureError

PLIST_EXTENSIONS = {".plist"}
YAML_EXTENSIONS = {".yaml", ".yml"}
JSON_EXTENSIONS = {".json"}


def load_mapping(path: Path | str) -> dict[str, Any]:
    """
    Load a configuration file as a top-level mapping.

    Args:
        path: File to read; the format is chosen by suffix

    Returns:
        Parsed mapping

    Raises:
        ParseFailureError: If the file is unreadable, malformed, or not a mapping
    """
    path = Path(path)
    suffix = path.suffix.lower()

    try:
        if suffix in PLIST_EXTENSIONS:
            with open(path, "rb") as f:
                data = plistlib.load(f)
        elif suffix in YAML_EXTENSIONS:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        elif suffix in JSON_EXTENSIONS:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise ParseFailureError(path, f"unsupported file type '{suffix or '<none>'}'")
    except ParseFailureError:
        raise
    except OSError as e:
        raise ParseFailureError(path, f"could not read file: {e}") from e
    except (plistlib.InvalidFileException, ExpatError, yaml.YAMLError, ValueError) as e:
        # json.JSONDecodeError is a ValueError subclass
        raise ParseFailureError(path, str(e) or type(e).__name__) from e
    except Exception as e:
        # plistlib surfaces some malformed XML as AttributeError or IndexError
        raise ParseFailureError(path, f"{type(e).__name__}: {e}") from e

    if not isinstance(data, dict):
        raise ParseFailureError(path, f"expected a dictionary at the top level, got {type(data).__name__}")
    return data
