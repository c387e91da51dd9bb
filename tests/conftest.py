from __future__ import annotations

import pytest

from pronlex.acoustic.units import UnitManager
from pronlex.dictionary.full import FullDictionary

WORDS = """ONE                  HH W AH N
ONE(2)               W AH N
TWO                  T UW

LEAD                 L IY D
LEAD(2)              L EH D
<UNK>                AH
"""

FILLERS = """<s>      SIL
</s>     SIL
<sil>    SIL
++NOISE++   +NSN+
++UH++   AH
"""


@pytest.fixture
def dict_files(tmp_path):
    words = tmp_path / "words.dict"
    fillers = tmp_path / "fillers.dict"
    words.write_text(WORDS)
    fillers.write_text(FILLERS)
    return words, fillers


@pytest.fixture
def make_dictionary(dict_files):
    """Factory for allocated dictionaries over the sample files."""
    words, fillers = dict_files

    def _make(**kwargs) -> FullDictionary:
        kwargs.setdefault("unit_manager", UnitManager())
        d = FullDictionary(words, fillers, **kwargs)
        d.allocate()
        return d

    return _make
