import pytest

from reading_time_estimator.scoring import flesch_kincaid_index


def test_flesch_returns_zero_for_empty_counts():
    assert flesch_kincaid_index(0, 5, 0) == 0
    assert flesch_kincaid_index(5, 0, 7) == 0


def test_flesch_short_text_guard_returns_100():
    assert flesch_kincaid_index(2, 2, 2) == 100
    assert flesch_kincaid_index(10, 1, 30) == 100


def test_flesch_formula_branch():
    assert flesch_kincaid_index(6, 2, 6) == pytest.approx(119.19)
    assert flesch_kincaid_index(6, 2, 13) == pytest.approx(20.49)


def test_flesch_is_not_clamped():
    assert flesch_kincaid_index(100, 2, 400) == pytest.approx(-182.315)
