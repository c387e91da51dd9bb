"""Pydantic models for API responses."""

from __future__ import annotations

from pydantic import BaseModel

from pronlex.dictionary.models import Word


class PronunciationObject(BaseModel):
    units: list[str] = []
    probability: float = 1.0


class WordObject(BaseModel):
    """A dictionary word with its pronunciations."""
    spelling: str
    is_filler: bool = False
    pronunciations: list[PronunciationObject] = []

    @classmethod
    def from_word(cls, word: Word) -> WordObject:
        return cls(
            spelling=word.spelling,
            is_filler=word.is_filler,
            pronunciations=[
                PronunciationObject(units=[u.name for u in p.units], probability=p.probability)
                for p in word.get_pronunciations()
            ],
        )


class WordListResponse(BaseModel):
    words: list[WordObject] = []


class MarkersResponse(BaseModel):
    sentence_start: WordObject | None = None
    sentence_end: WordObject | None = None
    silence: WordObject | None = None


class DictionaryStatusResponse(BaseModel):
    state: str
    word_dictionary: str
    filler_dictionary: str
    addenda: list[str] = []
    words: int = 0
    fillers: int = 0
    load_seconds: float | None = None


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    state: str = "unloaded"
    words_loaded: int = 0
