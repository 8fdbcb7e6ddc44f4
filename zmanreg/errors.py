"""Error types raised by the zmanim registry."""

from __future__ import annotations

from pathlib import Path


class ZmanRegistryError(Exception):
    """Base class for registry errors."""


class UnknownCalculationMethod(ZmanRegistryError, ValueError):
    """A token does not name any calculation method in the closed set."""

    def __init__(self, token: object):
        self.token = token
        super().__init__(f"Unknown calculation method: {token!r}")


class ConfigurationError(ZmanRegistryError):
    """
    Authored reference data is structurally invalid.

    Raised only while building the registry. Carries every problem found so
    a broken data file can be fixed in one pass.
    """

    def __init__(self, problems: list[str] | str, source: Path | None = None):
        if isinstance(problems, str):
            problems = [problems]
        self.problems = list(problems)
        self.source = source

        where = f" ({source})" if source is not None else ""
        if len(self.problems) == 1:
            message = f"Invalid zmanim reference data{where}: {self.problems[0]}"
        else:
            lines = "\n".join(f"  - {p}" for p in self.problems)
            message = f"Invalid zmanim reference data{where}:\n{lines}"
        super().__init__(message)
