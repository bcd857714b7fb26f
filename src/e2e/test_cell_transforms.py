import dataclasses
import pytest

from path_match.models import Cell, Weights, ZERO


def test_match_counts_char_and_extends_streak():
    c = ZERO.match(False)
    assert c == Cell(match_count=1, streak=1)
    c = c.match(True)
    assert c == Cell(match_count=2, streak=2, word_boundary=1)


def test_skip_pattern_only_touches_pattern_skip():
    c = Cell(match_count=2, streak=2, gaps=1, word_boundary=1)
    assert c.skip_pattern() == dataclasses.replace(c, pattern_skip=1)


def test_skip_text_charges_gap_once_per_broken_streak():
    c = Cell(match_count=3, streak=3)
    once = c.skip_text()
    assert once.streak == 0 and once.gaps == 1
    # further unmatched chars are free
    assert once.skip_text() == once
    assert once.skip_text().skip_text().gaps == 1


def test_skip_text_on_unmatched_prefix_is_free():
    assert ZERO.skip_text() == ZERO


def test_transforms_never_mutate_source():
    c = Cell(match_count=1, streak=1)
    c.match(True); c.skip_pattern(); c.skip_text()
    assert c == Cell(match_count=1, streak=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.streak = 5  # type: ignore[misc]


def test_weighted_score_is_linear_in_counters():
    w = Weights.default()
    c = Cell(match_count=4, streak=0, gaps=2, pattern_skip=1, word_boundary=3)
    assert c.score(w) == -5 * 2 + -10 * 1 + 1 * 4 + 3 * 3
    # streak carries no weight of its own
    assert dataclasses.replace(c, streak=7).score(w) == c.score(w)


def test_default_weights():
    w = Weights.default()
    assert (w.gap_penalty, w.pattern_skip_penalty, w.match_bonus, w.first_letter_bonus) == (-5, -10, 1, 3)
    assert Weights() == w


@pytest.mark.parametrize("bad", [1.5, "1", None, True])
def test_weights_reject_non_int(bad):
    with pytest.raises(TypeError):
        Weights(match_bonus=bad)


def test_zero_weights_score_everything_zero():
    w = Weights(0, 0, 0, 0)
    assert Cell(5, 2, 3, 4, 1).score(w) == 0
