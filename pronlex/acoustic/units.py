"""Context-independent phonetic units and the interner that hands them out."""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)

SILENCE_NAME = "SIL"


class Context(str, Enum):
    EMPTY = "empty"


class Unit:
    """A phonetic unit symbol.

    Units are only ever created by a ``UnitManager`` and compare by identity.
    """

    __slots__ = ("name", "filler", "context", "id")

    def __init__(self, name: str, filler: bool, unit_id: int, context: Context = Context.EMPTY) -> None:
        self.name = name
        self.filler = filler
        self.context = context
        self.id = unit_id

    @property
    def is_silence(self) -> bool:
        return self.name == SILENCE_NAME

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Unit({self.name!r}, filler={self.filler}, id={self.id})"


class UnitManager:
    """Interns context-independent units by (name, filler)."""

    def __init__(self) -> None:
        self._units: dict[tuple[str, bool], Unit] = {}
        self._next_id = 0
        self.silence = self.get_unit(SILENCE_NAME, True)

    def get_unit(self, name: str, filler: bool = False, context: Context = Context.EMPTY) -> Unit:
        if context is not Context.EMPTY:
            raise ValueError(f"Only context-independent units are supported, got context {context!r}")
        key = (name, filler)
        unit = self._units.get(key)
        if unit is None:
            unit = Unit(name, filler, self._next_id)
            self._next_id += 1
            self._units[key] = unit
            logger.debug("Created unit %r", unit)
        return unit

    def __len__(self) -> int:
        return len(self._units)
