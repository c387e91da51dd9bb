"""Full pronunciation dictionary loaded from Sphinx-3 style ASCII files.

Each line of a dictionary file holds a spelling followed by whitespace and the
phones of one pronunciation. Repeated spellings, usually marked with a
``(n)`` suffix, add further pronunciations to the same word::

    ONE      HH W AH N
    ONE(2)   W AH N
    TWO      T UW

Both the word and the filler dictionary are read completely by ``allocate()``.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from contextlib import closing
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import IO, Any

from pronlex.acoustic.units import Unit, UnitManager
from pronlex.dictionary.models import Pronunciation, Word, WordClassification
from pronlex.dictionary.tokenizer import DictionaryTokenizer
from pronlex.resources import open_resource

logger = logging.getLogger(__name__)

SENTENCE_START_SPELLING = "<s>"
SENTENCE_END_SPELLING = "</s>"
SILENCE_SPELLING = "<sil>"


class DictionaryState(str, Enum):
    UNLOADED = "unloaded"
    LOADED = "loaded"


@dataclass
class DictionaryError(Exception):
    message: str
    code: str
    location: str | None = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        payload = {"message": self.message, "code": self.code}
        if self.location:
            payload["location"] = self.location
        return payload


@dataclass
class DictionaryStateError(DictionaryError):
    code: str = "not_allocated"


def remove_parens_from_word(word: str) -> str:
    """Strip a trailing disambiguation suffix.

    ``"LEAD(2)"`` becomes ``"LEAD"``; a ``(`` at index 0 is left alone.
    """
    if word.endswith(")"):
        index = word.rfind("(")
        if index > 0:
            return word[:index]
    return word


class FullDictionary:
    """Loads a word and a filler dictionary and answers word lookups.

    The addenda list is accepted for configuration compatibility and is not
    read while loading.
    """

    def __init__(
        self,
        word_dictionary_file: str | Path,
        filler_dictionary_file: str | Path,
        addenda_url_list: Sequence[str] | None = None,
        add_sil_ending_pronunciation: bool = False,
        word_replacement: str | None = None,
        allow_missing_words: bool = False,
        create_missing_words: bool = False,
        unit_manager: UnitManager | None = None,
    ) -> None:
        self.word_dictionary_file = word_dictionary_file
        self.filler_dictionary_file = filler_dictionary_file
        self.addenda_url_list = list(addenda_url_list or [])
        self.add_sil_ending_pronunciation = add_sil_ending_pronunciation
        self.word_replacement = word_replacement or None
        self.allow_missing_words = allow_missing_words
        self.create_missing_words = create_missing_words
        self.unit_manager = unit_manager if unit_manager is not None else UnitManager()

        self._state = DictionaryState.UNLOADED
        self._word_dictionary: dict[str, Word] | None = None
        self._filler_dictionary: dict[str, Word] | None = None
        self.load_seconds: float | None = None

    @classmethod
    def from_settings(cls, settings: Any, unit_manager: UnitManager | None = None) -> FullDictionary:
        return cls(
            word_dictionary_file=settings.dict_word_path,
            filler_dictionary_file=settings.dict_filler_path,
            addenda_url_list=settings.dict_addenda_list,
            add_sil_ending_pronunciation=settings.dict_add_sil_ending_pronunciation,
            word_replacement=settings.dict_word_replacement or None,
            allow_missing_words=settings.dict_allow_missing_words,
            create_missing_words=settings.dict_create_missing_words,
            unit_manager=unit_manager,
        )

    # ── Lifecycle ────────────────────────────────────────────────────────────

    @property
    def state(self) -> DictionaryState:
        return self._state

    @property
    def is_allocated(self) -> bool:
        return self._state is DictionaryState.LOADED

    def allocate(self) -> None:
        if self.is_allocated:
            return

        start = time.perf_counter()
        logger.info("Loading dictionary from: %s", self.word_dictionary_file)
        word_dictionary = self.load_dictionary(open_resource(self.word_dictionary_file), False)
        logger.info("Loading filler dictionary from: %s", self.filler_dictionary_file)
        filler_dictionary = self.load_dictionary(open_resource(self.filler_dictionary_file), True)

        self._word_dictionary = word_dictionary
        self._filler_dictionary = filler_dictionary
        self.load_seconds = time.perf_counter() - start
        self._state = DictionaryState.LOADED
        logger.info(
            "Dictionary loaded: %d words, %d fillers in %.3fs",
            len(word_dictionary),
            len(filler_dictionary),
            self.load_seconds,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Dictionary contents:\n%s", self.dump_to_string())

    def deallocate(self) -> None:
        if self.is_allocated:
            self._word_dictionary = None
            self._filler_dictionary = None
            self.load_seconds = None
            self._state = DictionaryState.UNLOADED

    def _require_allocated(self, operation: str) -> None:
        if not self.is_allocated:
            raise DictionaryStateError(
                message=f"Dictionary is not allocated; call allocate() before {operation}",
                location=str(self.word_dictionary_file),
            )

    # ── Loading ──────────────────────────────────────────────────────────────

    def load_dictionary(self, stream: IO, is_filler_dict: bool) -> dict[str, Word]:
        """Parse one dictionary stream into a spelling -> Word map.

        The stream is closed when parsing ends, including on read errors.
        """
        pronunciation_lists: dict[str, list[Pronunciation]] = {}
        with closing(stream), DictionaryTokenizer(stream) as tokenizer:
            while tokenizer.next_line():
                spelling = remove_parens_from_word(tokenizer.get_string()).lower()
                units: list[Unit] = []
                unit_text = tokenizer.get_string()
                while unit_text is not None:
                    units.append(self.get_ci_unit(unit_text, is_filler_dict))
                    unit_text = tokenizer.get_string()

                pronunciations = pronunciation_lists.setdefault(spelling, [])
                pronunciations.append(Pronunciation(units, 1.0))
                if not is_filler_dict and self.add_sil_ending_pronunciation:
                    pronunciations.append(Pronunciation(units + [self.unit_manager.silence], 1.0))
        return self.create_words(pronunciation_lists, is_filler_dict)

    @staticmethod
    def create_words(pronunciation_lists: dict[str, list[Pronunciation]], is_filler_dict: bool) -> dict[str, Word]:
        result: dict[str, Word] = {}
        for spelling, pronunciations in pronunciation_lists.items():
            word = Word(spelling, tuple(pronunciations), is_filler_dict)
            for pronunciation in word.pronunciations:
                pronunciation.set_word(word)
            result[spelling] = word
        return result

    def get_ci_unit(self, name: str, is_filler: bool) -> Unit:
        return self.unit_manager.get_unit(name, is_filler)

    # ── Lookup ───────────────────────────────────────────────────────────────

    def _lookup(self, spelling: str) -> Word | None:
        spelling = spelling.lower()
        word = self._word_dictionary.get(spelling)
        if word is None:
            word = self._filler_dictionary.get(spelling)
        return word

    def get_word(self, text: str) -> Word | None:
        """Return the word for ``text``, applying the missing-word policy.

        With missing words allowed and creation enabled, an unknown spelling
        is added as an empty word but this call still returns None; only
        later lookups see the new entry.
        """
        self._require_allocated("get_word")
        text = text.lower()
        word = self._lookup(text)
        if word is None:
            logger.warning("Missing word: %s", text)
            if self.word_replacement is not None:
                logger.warning("Replacing %s with %s", text, self.word_replacement)
                word = self._lookup(self.word_replacement)
                if word is None:
                    logger.error("Replacement word %s not found!", self.word_replacement)
            elif self.allow_missing_words:
                if self.create_missing_words:
                    self._word_dictionary[text] = Word(text, None, False)
                return None
        return word

    def get_sentence_start_word(self) -> Word | None:
        return self.get_word(SENTENCE_START_SPELLING)

    def get_sentence_end_word(self) -> Word | None:
        return self.get_word(SENTENCE_END_SPELLING)

    def get_silence_word(self) -> Word | None:
        return self.get_word(SILENCE_SPELLING)

    def get_filler_words(self) -> list[Word]:
        self._require_allocated("get_filler_words")
        return list(self._filler_dictionary.values())

    def get_possible_word_classifications(self) -> list[WordClassification] | None:
        # Word classification is not supported by this dictionary
        self._require_allocated("get_possible_word_classifications")
        return None

    # ── Diagnostics ──────────────────────────────────────────────────────────

    @property
    def word_count(self) -> int:
        return len(self._word_dictionary) if self.is_allocated else 0

    @property
    def filler_count(self) -> int:
        return len(self._filler_dictionary) if self.is_allocated else 0

    def dump_to_string(self) -> str:
        """List every word and its pronunciations in alphabetical order."""
        self._require_allocated("dump_to_string")
        lines: list[str] = []
        for spelling in sorted({*self._word_dictionary, *self._filler_dictionary}):
            word = self._lookup(spelling)
            lines.append(str(word))
            for pronunciation in word.get_pronunciations():
                lines.append(f"   {pronunciation}")
        return "".join(f"{line}\n" for line in lines)

    def __str__(self) -> str:
        return f"FullDictionary numWords={self.word_count} dictLocation={self.word_dictionary_file}"
