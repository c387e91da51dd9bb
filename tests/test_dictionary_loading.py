"""Tests for parsing dictionary streams into words."""

from __future__ import annotations

import io

import pytest

from pronlex.acoustic.units import UnitManager
from pronlex.dictionary.full import FullDictionary, remove_parens_from_word
from pronlex.dictionary.models import Pronunciation, Word


def _loader(**kwargs) -> FullDictionary:
    return FullDictionary("unused.dict", "unused.filler", unit_manager=UnitManager(), **kwargs)


def _names(pronunciation: Pronunciation) -> list[str]:
    return [u.name for u in pronunciation.units]


def test_alternate_pronunciations_in_file_order():
    words = _loader().load_dictionary(io.BytesIO(b"ONE HH W AH N\nONE(2) W AH N\n"), False)
    assert list(words) == ["one"]
    prons = words["one"].get_pronunciations()
    assert [_names(p) for p in prons] == [["HH", "W", "AH", "N"], ["W", "AH", "N"]]


def test_duplicates_anywhere_in_file_merge():
    data = b"LEAD L IY D\nTWO T UW\nLEAD(2) L EH D\nlead L EH D IH\n"
    words = _loader().load_dictionary(io.BytesIO(data), False)
    assert [_names(p) for p in words["lead"].pronunciations] == [
        ["L", "IY", "D"],
        ["L", "EH", "D"],
        ["L", "EH", "D", "IH"],
    ]


def test_sil_ending_variant_added():
    loader = _loader(add_sil_ending_pronunciation=True)
    words = loader.load_dictionary(io.BytesIO(b"ONE HH W AH N\nTWO T UW\n"), False)
    one, one_sil = words["one"].pronunciations
    assert _names(one) == ["HH", "W", "AH", "N"]
    assert one_sil.units == one.units + (loader.unit_manager.silence,)
    assert len(words["two"].pronunciations) == 2


def test_sil_ending_variant_never_added_to_fillers():
    loader = _loader(add_sil_ending_pronunciation=True)
    fillers = loader.load_dictionary(io.BytesIO(b"<sil> SIL\n++UM++ +UM+\n"), True)
    assert all(len(w.pronunciations) == 1 for w in fillers.values())


def test_spelling_lowercased():
    words = _loader().load_dictionary(io.StringIO("HeLLo HH AH L OW\n"), False)
    assert "hello" in words


def test_entry_without_phones_accepted():
    words = _loader().load_dictionary(io.StringIO("ORPHAN\nTWO T UW\n"), False)
    (pron,) = words["orphan"].pronunciations
    assert pron.units == ()


def test_blank_lines_produce_no_entries():
    words = _loader().load_dictionary(io.StringIO("\nTWO T UW\n\n\n"), False)
    assert list(words) == ["two"]


def test_words_marked_with_stream_kind():
    loader = _loader()
    words = loader.load_dictionary(io.StringIO("TWO T UW\n"), False)
    fillers = loader.load_dictionary(io.StringIO("<sil> SIL\n"), True)
    assert not words["two"].is_filler
    assert fillers["<sil>"].is_filler


def test_units_interned_per_filler_flag():
    loader = _loader()
    words = loader.load_dictionary(io.StringIO("A AH\nB AH B\n"), False)
    fillers = loader.load_dictionary(io.StringIO("++UH++ AH\n<sil> SIL\n"), True)
    assert words["a"].pronunciations[0].units[0] is words["b"].pronunciations[0].units[0]
    assert words["a"].pronunciations[0].units[0] is not fillers["++uh++"].pronunciations[0].units[0]
    assert fillers["<sil>"].pronunciations[0].units[0] is loader.unit_manager.silence


def test_back_reference_and_probability():
    words = _loader().load_dictionary(io.StringIO("ONE HH W AH N\nONE(2) W AH N\n"), False)
    word = words["one"]
    for pron in word.pronunciations:
        assert pron.word is word
        assert pron.probability == 1.0
    assert str(word.pronunciations[1]) == "one(W AH N)"


def test_back_reference_set_once():
    word = Word("x", (), False)
    pron = Pronunciation([])
    pron.set_word(word)
    with pytest.raises(RuntimeError):
        pron.set_word(Word("y", (), False))


def test_create_words_keeps_every_key():
    p1, p2, p3 = Pronunciation([]), Pronunciation([]), Pronunciation([])
    words = FullDictionary.create_words({"a": [p1, p2], "b": [p3]}, True)
    assert words["a"].pronunciations == (p1, p2)
    assert words["b"].pronunciations == (p3,)
    assert p3.word is words["b"]
    assert words["a"].is_filler


class _FailingRaw(io.RawIOBase):
    def readable(self):
        return True

    def readinto(self, b):
        raise OSError("disk gone")


def test_read_error_propagates_and_closes_stream():
    stream = io.BufferedReader(_FailingRaw())
    with pytest.raises(OSError, match="disk gone"):
        _loader().load_dictionary(stream, False)
    assert stream.closed


def test_stream_closed_after_parse():
    stream = io.BytesIO(b"TWO T UW\n")
    _loader().load_dictionary(stream, False)
    assert stream.closed


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("LEAD(2)", "LEAD"),
        ("LEAD", "LEAD"),
        ("LEAD(12)", "LEAD"),
        ("A(B)", "A"),
        ("(2)", "(2)"),
        ("X)", "X)"),
        ("A(1)(2)", "A(1)"),
    ],
)
def test_remove_parens_from_word(raw, expected):
    assert remove_parens_from_word(raw) == expected
