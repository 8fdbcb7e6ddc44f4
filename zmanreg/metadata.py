"""
Metadata table: calculation method -> names and explanation.

The table is built once from authored data and never changes afterwards.
Every method in the closed set must have a complete record, so lookups for
a valid method cannot fail.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .errors import ConfigurationError, UnknownCalculationMethod
from .methods import CalculationMethod
from .models import METADATA_FIELDS, ZmanMetadata

logger = logging.getLogger(__name__)


class MetadataTable:
    """Immutable mapping of every calculation method to its metadata record."""

    def __init__(self, records: Mapping[CalculationMethod, ZmanMetadata]):
        missing = [m.token for m in CalculationMethod if m not in records]
        if missing:
            raise ConfigurationError([f"no metadata for '{token}'" for token in missing])
        # Catalog order, independent of the order the records were authored in
        self._records = MappingProxyType({m: records[m] for m in CalculationMethod})

    @classmethod
    def from_data(cls, data: Any, source: Path | None = None) -> MetadataTable:
        """
        Build the table from authored data of the form ``{token: {field: text}}``.

        Args:
            data: Parsed reference data (the ``zmanim`` table of the data file)
            source: File the data came from, for error messages

        Raises:
            ConfigurationError: listing every structural problem found
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError("'zmanim' must be a table of calculation methods", source)

        problems: list[str] = []
        records: dict[CalculationMethod, ZmanMetadata] = {}

        for token, raw in data.items():
            try:
                method = CalculationMethod.from_token(token)
            except UnknownCalculationMethod:
                problems.append(f"metadata for unknown calculation method '{token}'")
                continue
            if method in records:
                problems.append(f"duplicate metadata for '{method.token}'")
                continue

            if not isinstance(raw, Mapping):
                problems.append(f"metadata for '{token}' must be a table")
                continue

            record_problems = _check_record(token, raw)
            if record_problems:
                problems.extend(record_problems)
                continue

            records[method] = ZmanMetadata(**{name: raw[name].strip() for name in METADATA_FIELDS})

        for method in CalculationMethod:
            if method not in records and method.token not in data:
                problems.append(f"no metadata for '{method.token}'")

        if problems:
            logger.warning(f"Rejected zmanim metadata with {len(problems)} problem(s)")
            raise ConfigurationError(problems, source)

        logger.debug(f"Built metadata table for {len(records)} calculation methods")
        return cls(records)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def record(self, method: CalculationMethod) -> ZmanMetadata:
        return self._records[method]

    def hebrew_name(self, method: CalculationMethod) -> str:
        return self._records[method].hebrew

    def ashkenazic_name(self, method: CalculationMethod) -> str:
        return self._records[method].ashkenazic

    def sephardic_name(self, method: CalculationMethod) -> str:
        return self._records[method].sephardic

    def english_name(self, method: CalculationMethod) -> str:
        return self._records[method].english

    def explanation(self, method: CalculationMethod) -> str:
        return self._records[method].explanation

    def as_dict(self) -> dict[str, dict[str, str]]:
        """Fresh ``{token: {field: text}}`` snapshot in catalog order."""
        return {method.token: record.to_dict() for method, record in self._records.items()}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, method: object) -> bool:
        return method in self._records


def _check_record(token: str, raw: Mapping[str, Any]) -> list[str]:
    problems = []
    for name in METADATA_FIELDS:
        value = raw.get(name)
        if value is None:
            problems.append(f"'{token}' is missing '{name}'")
        elif not isinstance(value, str):
            problems.append(f"'{token}'.{name} must be a string")
        elif not value.strip():
            problems.append(f"'{token}'.{name} must not be empty")

    extra = sorted(set(raw) - set(METADATA_FIELDS))
    if extra:
        problems.append(f"'{token}' has unknown field(s): {', '.join(extra)}")
    return problems
