"""
Grouping table: which calculation methods compute the same zman.

Groups are authored as complete clusters. A method's related set is exactly
the group it appears in (in authored order), or just the method itself when
it is not part of any group. The relation is reflexive and symmetric, and is
checked to be so when the table is built.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .errors import ConfigurationError, UnknownCalculationMethod
from .methods import CalculationMethod

logger = logging.getLogger(__name__)


class GroupingTable:
    """Immutable related-method relation over the closed set of methods."""

    def __init__(self, groups: Sequence[Sequence[CalculationMethod]]):
        self._groups: tuple[tuple[CalculationMethod, ...], ...] = tuple(tuple(g) for g in groups)

        related: dict[CalculationMethod, tuple[CalculationMethod, ...]] = {}
        for group in self._groups:
            for method in group:
                related[method] = group
        self._related = MappingProxyType(related)

        problems = self._check_relation()
        if problems:
            raise ConfigurationError(problems)

    @classmethod
    def from_data(cls, data: Any, source: Path | None = None) -> GroupingTable:
        """
        Build the table from authored groups of tokens.

        Args:
            data: Parsed reference data (the ``groups`` array of the data file)
            source: File the data came from, for error messages

        Raises:
            ConfigurationError: listing every structural problem found
        """
        if not isinstance(data, list):
            raise ConfigurationError("'groups' must be an array of arrays of tokens", source)

        problems: list[str] = []
        groups: list[list[CalculationMethod]] = []
        seen: dict[CalculationMethod, int] = {}  # method -> index of the group it was first seen in

        for index, raw in enumerate(data):
            label = f"group {index + 1}"
            if not isinstance(raw, list):
                problems.append(f"{label} must be an array of tokens")
                continue
            if not raw:
                problems.append(f"{label} is empty")
                continue

            group: list[CalculationMethod] = []
            for token in raw:
                try:
                    method = CalculationMethod.from_token(token)
                except UnknownCalculationMethod:
                    problems.append(f"{label} references unknown calculation method {token!r}")
                    continue

                if method in group:
                    problems.append(f"{label} lists '{method.token}' more than once")
                    continue
                if method in seen:
                    problems.append(
                        f"'{method.token}' appears in both group {seen[method] + 1} and {label}"
                    )
                    continue

                seen[method] = index
                group.append(method)
            groups.append(group)

        if problems:
            logger.warning(f"Rejected zmanim groups with {len(problems)} problem(s)")
            raise ConfigurationError(problems, source)

        table = cls(groups)
        logger.debug(f"Built grouping table with {len(table.groups())} groups")
        return table

    def _check_relation(self) -> list[str]:
        """Verify reflexivity and symmetry over every method in the closed set."""
        problems = []
        for method in CalculationMethod:
            related = self.related_to(method)
            if method not in related:
                problems.append(f"'{method.token}' is not related to itself")
            for other in related:
                if method not in self.related_to(other):
                    problems.append(
                        f"'{method.token}' is related to '{other.token}' but not the reverse"
                    )
        return problems

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def related_to(self, method: CalculationMethod) -> tuple[CalculationMethod, ...]:
        """
        Methods computing the same zman as ``method``, in authored order.

        Never empty: always contains ``method`` itself.
        """
        return self._related.get(method, (method,))

    def is_grouped(self, method: CalculationMethod) -> bool:
        return method in self._related

    def groups(self) -> tuple[tuple[CalculationMethod, ...], ...]:
        return self._groups

    def as_tokens(self) -> tuple[tuple[str, ...], ...]:
        """The authored groups as token tuples."""
        return tuple(tuple(m.token for m in group) for group in self._groups)
