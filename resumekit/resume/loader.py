"""Reading resume data files from disk."""

import json
from collections.abc import Mapping
from pathlib import Path

import yaml

from resumekit.shared import LoadError

SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml")


def load_resume(input_path: Path | str) -> dict:
    """Parse a JSON or YAML resume file into a plain mapping.

    Raises LoadError when the file is missing, unreadable, not parseable,
    or does not hold a mapping at its root.
    """
    input_path = Path(input_path)

    if not input_path.is_file():
        raise LoadError(input_path, "Resume file not found")

    suffix = input_path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise LoadError(input_path, "Unsupported file format. Use .json or .yaml")

    try:
        with open(input_path, encoding="utf-8") as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except json.JSONDecodeError as e:
        raise LoadError(input_path, f"Invalid JSON ({e})") from e
    except yaml.YAMLError as e:
        raise LoadError(input_path, f"Invalid YAML ({e})") from e
    except UnicodeDecodeError as e:
        raise LoadError(input_path, "File is not valid UTF-8") from e
    except OSError as e:
        raise LoadError(input_path, f"Failed to read resume ({e.strerror})") from e

    if not isinstance(data, Mapping):
        raise LoadError(input_path, "Resume root must be an object")

    return dict(data)
