"""Word and pronunciation entities built by the dictionary loader."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from pronlex.acoustic.units import Unit


class WordClassification(str, Enum):
    """Placeholder; the full dictionary never classifies words."""
    UNKNOWN = "unknown"


class Pronunciation:
    """An immutable sequence of units plus a one-time link to its owning word."""

    __slots__ = ("units", "probability", "_word")

    def __init__(self, units: Sequence[Unit], probability: float = 1.0) -> None:
        self.units: tuple[Unit, ...] = tuple(units)
        self.probability = probability
        self._word: Word | None = None

    @property
    def word(self) -> Word | None:
        return self._word

    def set_word(self, word: Word) -> None:
        if self._word is not None:
            raise RuntimeError(f"Pronunciation already belongs to {self._word.spelling!r}")
        self._word = word

    def __len__(self) -> int:
        return len(self.units)

    def __str__(self) -> str:
        spelling = self._word.spelling if self._word is not None else "?"
        return f"{spelling}({' '.join(u.name for u in self.units)})"

    def __repr__(self) -> str:
        return f"Pronunciation({str(self)!r}, probability={self.probability})"


class Word:
    __slots__ = ("spelling", "pronunciations", "is_filler")

    def __init__(self, spelling: str, pronunciations: Sequence[Pronunciation] | None, is_filler: bool) -> None:
        self.spelling = spelling
        # Missing-word placeholders carry no pronunciations at all
        self.pronunciations: tuple[Pronunciation, ...] = tuple(pronunciations or ())
        self.is_filler = is_filler

    def get_pronunciations(self) -> tuple[Pronunciation, ...]:
        return self.pronunciations

    def __str__(self) -> str:
        return self.spelling

    def __repr__(self) -> str:
        return f"Word({self.spelling!r}, pronunciations={len(self.pronunciations)}, filler={self.is_filler})"
