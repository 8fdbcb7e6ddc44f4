"""
Process-wide zmanim registry.

The registry pairs the metadata table with the grouping table. It is built
once, either explicitly through ``initialize()`` during startup or lazily
from the bundled data on first use, and is read-only afterwards. A failed
initialization is remembered: the registry stays unusable until
``reset_registry()`` is called.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import ConfigurationError
from .grouping import GroupingTable
from .load import load_reference_data
from .metadata import MetadataTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZmanRegistry:
    """Both reference tables, built together from one data source."""

    metadata: MetadataTable
    grouping: GroupingTable
    source: Path | None = None


def build_registry(data: dict[str, Any], source: Path | None = None) -> ZmanRegistry:
    """
    Build a registry from parsed reference data.

    Both tables are validated before anything is returned, and problems from
    both are reported together.

    Raises:
        ConfigurationError: if either table is invalid
    """
    problems: list[str] = []

    metadata = grouping = None
    try:
        metadata = MetadataTable.from_data(data.get("zmanim"), source)
    except ConfigurationError as e:
        problems.extend(e.problems)
    try:
        grouping = GroupingTable.from_data(data.get("groups"), source)
    except ConfigurationError as e:
        problems.extend(e.problems)

    if problems or metadata is None or grouping is None:
        raise ConfigurationError(problems, source)

    return ZmanRegistry(metadata=metadata, grouping=grouping, source=source)


def load_registry(path: Path | None = None) -> ZmanRegistry:
    """Load and build a registry from a data file (bundled data by default)."""
    data = load_reference_data(path)
    return build_registry(data, source=path)


# Global registry, set once by initialize()
_REGISTRY: ZmanRegistry | None = None
_INIT_FAILURE: ConfigurationError | None = None


def initialize(path: Path | None = None) -> ZmanRegistry:
    """
    Build the process-wide registry.

    Must complete before any concurrent reads. Calling it again after a
    successful initialization returns the existing registry unchanged.

    Args:
        path: Reference data file, or None for the bundled data

    Raises:
        ConfigurationError: if the data is invalid; the registry then stays unusable
    """
    global _REGISTRY, _INIT_FAILURE

    if _REGISTRY is not None:
        return _REGISTRY
    if _INIT_FAILURE is not None:
        raise ConfigurationError(
            ["registry initialization previously failed", *_INIT_FAILURE.problems],
            _INIT_FAILURE.source,
        ) from _INIT_FAILURE

    try:
        registry = load_registry(path)
    except ConfigurationError as e:
        _INIT_FAILURE = e
        logger.error(f"Zmanim registry failed to initialize: {e}")
        raise

    _REGISTRY = registry
    logger.debug(
        f"Zmanim registry initialized: {len(registry.metadata)} methods, "
        f"{len(registry.grouping.groups())} groups"
    )
    return registry


def get_registry() -> ZmanRegistry:
    """
    Return the process-wide registry, initializing from bundled data if needed.

    Raises:
        ConfigurationError: if initialization failed earlier
    """
    if _REGISTRY is not None:
        return _REGISTRY
    return initialize()


def reset_registry() -> None:
    """Clear the registry and any remembered failure (for testing)."""
    global _REGISTRY, _INIT_FAILURE
    _REGISTRY = None
    _INIT_FAILURE = None


# ============================================================================
# RAW DATA ACCESSORS
# ============================================================================


def related_zmanim_mapping() -> tuple[tuple[str, ...], ...]:
    """The authored groups of related calculation tokens."""
    return get_registry().grouping.as_tokens()


def metadata() -> dict[str, dict[str, str]]:
    """Names and explanation for every calculation token (a fresh copy)."""
    return get_registry().metadata.as_dict()
