import pickle

import pytest
from wordle_solver.engine import Word, WordError, InvalidLength, NonAscii, InvalidCharacters


@pytest.mark.parametrize("text", ["crane", "CRANE", "CrAnE", "zzzzz", "Abide"])
def test_word_accepts_any_case(text):
    w = Word(text)
    assert w.text == text.lower()
    assert str(w) == text.lower()


@pytest.mark.parametrize("text,length", [
    ("", 0),
    ("cran", 4),
    ("cranes", 6),
    ("???", 3),
])
def test_word_invalid_length(text, length):
    with pytest.raises(InvalidLength) as exc:
        Word(text)
    assert exc.value.length == length


def test_word_length_counts_bytes():
    # 'é' is two bytes in UTF-8: four characters, five bytes
    with pytest.raises(NonAscii):
        Word("café")
    # five characters, six bytes
    with pytest.raises(InvalidLength):
        Word("cafés")


@pytest.mark.parametrize("text", ["cr4ne", "cr ne", "cra-e", "hello"[:4] + "!"])
def test_word_invalid_characters(text):
    with pytest.raises(InvalidCharacters):
        Word(text)


def test_word_errors_are_value_errors():
    for bad in ("cranes", "café", "cr4ne"):
        with pytest.raises(WordError):
            Word(bad)
        with pytest.raises(ValueError):
            Word(bad)


def test_word_views():
    w = Word("speed")
    assert w.chars == b"speed"
    assert w.codes == (18, 15, 4, 4, 3)
    assert w.char_at(0) == "s" and w.char_at(4) == "d"
    assert w.has_letter("E") and not w.has_letter("z")
    assert w.positions_of("e") == [2, 3]
    assert w.positions_of("z") == []

    counts = w.char_counts()
    assert len(counts) == 26
    assert counts[ord("e") - ord("a")] == 2
    assert sum(counts) == 5


def test_word_char_at_out_of_range():
    with pytest.raises(IndexError):
        Word("crane").char_at(5)


def test_word_value_semantics():
    assert Word("CRANE") == Word("crane")
    assert len({Word("crane"), Word("Crane"), Word("slate")}) == 2
    assert sorted([Word("slate"), Word("crane")]) == [Word("crane"), Word("slate")]
    assert repr(Word("crane")) == "Word('crane')"


def test_word_is_immutable_and_picklable():
    w = Word("crane")
    with pytest.raises(AttributeError):
        w._chars = b"slate"
    assert pickle.loads(pickle.dumps(w)) == w


def test_parse_many_is_strict():
    assert Word.parse_many(["crane", "SLATE"]) == [Word("crane"), Word("slate")]
    with pytest.raises(InvalidLength):
        Word.parse_many(["crane", "cranes"])


@pytest.mark.parametrize("bad", ["", "ra", "1", "-", "é", "İ"])
def test_letter_queries_need_a_single_letter(bad):
    w = Word("raise")
    with pytest.raises(ValueError):
        w.has_letter(bad)
    with pytest.raises(ValueError):
        w.positions_of(bad)


def test_letter_queries_ignore_case():
    w = Word("speed")
    assert w.has_letter("S") and w.positions_of("E") == [2, 3]
