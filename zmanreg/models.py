"""Data models for zmanim metadata."""

from __future__ import annotations

from dataclasses import asdict, dataclass

# Field names as they appear in the reference data, in display order
METADATA_FIELDS = ("hebrew", "ashkenazic", "sephardic", "english", "explanation")


@dataclass(frozen=True)
class ZmanMetadata:
    """Names and explanation for one calculation method."""

    hebrew: str
    ashkenazic: str  # Ashkenazic transliteration, e.g. "Alos Hashachar"
    sephardic: str  # Sephardic transliteration, e.g. "Alot Hashachar"
    english: str
    explanation: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
