from __future__ import annotations

from pathlib import Path
from typing import Any

from .errors import ConfigurationError

SCHEMA_VERSION = 1

# Reference data shipped with the package
BUNDLED_DATA_PATH = Path(__file__).parent / "data" / "zmanim.toml"


def load_reference_data(path: Path | None = None) -> dict[str, Any]:
    """
    Load authored zmanim reference data from TOML.

    The file holds two things: ``groups``, an array of arrays of tokens, and
    ``zmanim``, one table of names and explanation per calculation method.
    Only the outer shape is checked here; the tables check their own contents.
    """
    import tomllib

    path = path or BUNDLED_DATA_PATH
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"cannot read reference data: {e}", path) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"reference data is not valid TOML: {e}", path) from e

    version = data.get("schema_version")
    if version != SCHEMA_VERSION:
        raise ConfigurationError(
            f"unsupported schema_version {version!r} (expected {SCHEMA_VERSION})", path
        )

    problems = []
    if "groups" not in data:
        problems.append("'groups' is required")
    if "zmanim" not in data:
        problems.append("'zmanim' is required")
    unknown = sorted(set(data) - {"schema_version", "description", "groups", "zmanim"})
    if unknown:
        problems.append(f"unknown top-level key(s): {', '.join(unknown)}")
    if problems:
        raise ConfigurationError(problems, path)

    return data
