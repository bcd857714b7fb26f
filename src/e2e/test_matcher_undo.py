import logging
import pytest

from path_match import Matcher

PATTERNS = ["a", "ao", "eu", "xq", "aoeu", "uuu"]


@pytest.mark.e2e
@pytest.mark.parametrize("prefix", PATTERNS)
@pytest.mark.parametrize("ch", ["a", "o", "u", "z", "/"])
def test_append_then_remove_restores_score(prefix, ch):
    m = Matcher("src/aoeu-utils/ao_eu.py")
    m.extend(prefix)
    before = m.score()
    m.append_pchar(ch)
    m.remove_pchar()
    assert m.score() == before
    assert m.pattern_length == len(prefix)


@pytest.mark.e2e
def test_remove_on_empty_pattern_is_a_noop(caplog):
    m = Matcher("aoeu")
    with caplog.at_level(logging.DEBUG, logger="path_match.matcher"):
        m.remove_pchar()
        m.remove_pchar()
    assert m.pattern_length == 0
    assert m.score() == 0
    assert "nothing to undo" in caplog.text
    # still usable afterwards
    m.append_pchar("a")
    assert m.score() == 4


@pytest.mark.e2e
def test_backspacing_to_empty_returns_zero():
    m = Matcher("aoeu")
    m.extend("aoe")
    for _ in range(3):
        m.remove_pchar()
    assert m.score() == 0
    assert len(m._grid) == len("aoeu") + 1


@pytest.mark.e2e
def test_reset_drops_pattern_but_keeps_text():
    m = Matcher("aoeu")
    m.extend("xoe")
    m.reset()
    assert m.pattern_length == 0 and m.score() == 0
    assert m.text == b"aoeu"
    m.extend("a")
    assert m.score() == 4


@pytest.mark.e2e
def test_grid_holds_one_row_per_pattern_char():
    text = "ht ao"
    m = Matcher(text)
    for i, ch in enumerate("hao", 1):
        m.append_pchar(ch)
        assert m._grid.rows == i
        assert len(m._grid) == len(text) + 1 + i * len(text)
