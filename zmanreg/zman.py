"""
Zman entity: the caller-facing handle on one calculation method.

A Zman wraps nothing but its CalculationMethod. Names, explanation and
related zmanim are looked up in the process-wide registry on every call.
Two Zman values are equal when they wrap the same method.

The Zman (or its ``method``) is what calling code hands to an astronomical
calculator together with a date and location; this package never does
that calculation itself.
"""

from __future__ import annotations

from .methods import CalculationMethod
from .registry import get_registry


class Zman:
    """A named halachic time, identified by its calculation method."""

    __slots__ = ("_method",)

    def __init__(self, method: CalculationMethod | str):
        self._method = CalculationMethod.from_token(method)

    @classmethod
    def for_method(cls, method: CalculationMethod | str) -> Zman:
        """
        Return the zman for a calculation method or its token.

        Raises:
            UnknownCalculationMethod: if the token names no calculation method
        """
        return cls(method)

    @classmethod
    def all(cls) -> list[Zman]:
        """Every zman, in catalog order."""
        return [cls(method) for method in CalculationMethod]

    @property
    def method(self) -> CalculationMethod:
        return self._method

    @property
    def token(self) -> str:
        return self._method.token

    # ------------------------------------------------------------------
    # Display names
    # ------------------------------------------------------------------

    def hebrew_name(self) -> str:
        return get_registry().metadata.hebrew_name(self._method)

    def transliterated_name_ashkenazic(self) -> str:
        """Name using the Ashkenazic pronunciation (e.g. "Alos")."""
        return get_registry().metadata.ashkenazic_name(self._method)

    def transliterated_name_sephardic(self) -> str:
        """Name using the Sephardic pronunciation (e.g. "Alot")."""
        return get_registry().metadata.sephardic_name(self._method)

    def english_name(self) -> str:
        return get_registry().metadata.english_name(self._method)

    def explanation(self) -> str:
        """The halachic background behind this zman."""
        return get_registry().metadata.explanation(self._method)

    # ------------------------------------------------------------------
    # Related zmanim
    # ------------------------------------------------------------------

    def related_zmanim(self) -> list[Zman]:
        """
        Other versions of the same zman, in authored order.

        Always includes a zman equal to self. Fresh objects on every call.
        """
        return [Zman(method) for method in get_registry().grouping.related_to(self._method)]

    def describe(self) -> str:
        """Markdown summary of names, explanation and related zmanim."""
        lines = [f"## {self.english_name()} (`{self.token}`)", ""]
        lines.append(f"**Hebrew:** {self.hebrew_name()}")
        lines.append(f"**Ashkenazic:** {self.transliterated_name_ashkenazic()}")
        lines.append(f"**Sephardic:** {self.transliterated_name_sephardic()}")
        lines.append("")
        lines.append(self.explanation())

        others = [z for z in self.related_zmanim() if z != self]
        if others:
            lines.append("")
            lines.append("**Related:**")
            for other in others:
                lines.append(f"- `{other.token}`: {other.english_name()}")
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Comparisons
    # ------------------------------------------------------------------

    def is_equal_to_zman(self, other: object) -> bool:
        return isinstance(other, Zman) and self._method is other._method

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Zman):
            return NotImplemented
        return self.is_equal_to_zman(other)

    def __hash__(self) -> int:
        return hash(self._method)

    def __repr__(self) -> str:
        return f"Zman({self._method.token!r})"
