"""Tests for statistic classification."""
import pytest

from chisquare.schema import FitLabel
from chisquare.stats.classify import classify, confidence_bounds, format_message
from chisquare.stats.table import CHI_LEVELS, CHI_TABLE


def test_zero_statistic_highest_confidence():
    """Statistic below the first threshold -> (99, 100)."""
    assert confidence_bounds(0.0, CHI_TABLE[1]) == (99, 100)


def test_between_thresholds():
    """dof=2, statistic 4 lies between 2.41 and 4.60 -> (10, 30)."""
    assert confidence_bounds(4.0, CHI_TABLE[2]) == (10, 30)


def test_equal_to_threshold_moves_to_next_interval():
    """Comparison is strict: a statistic equal to a threshold is not below it."""
    assert confidence_bounds(4.60, CHI_TABLE[2]) == (5, 10)


def test_beyond_last_threshold():
    assert confidence_bounds(100.0, CHI_TABLE[1]) == (None, 1)


def test_classify_interval_message():
    msg = classify(4.0, CHI_TABLE[2], CHI_LEVELS, "random")
    assert msg == "There's a >10% chance, and a <30% chance, that this data is random."


def test_classify_tail_message():
    msg = classify(50.0, CHI_TABLE[5], CHI_LEVELS, "distributed as you expect")
    assert msg == "There's a <1% chance that this data is distributed as you expect."


def test_format_message_shapes():
    assert format_message(99, 100, "x") == (
        "There's a >99% chance, and a <100% chance, that this data is x."
    )
    assert format_message(None, 1, "x") == "There's a <1% chance that this data is x."


def test_levels_must_be_one_longer():
    with pytest.raises(ValueError):
        confidence_bounds(1.0, CHI_TABLE[1], CHI_LEVELS[:-1])


def test_classify_with_fit_label():
    """Enum labels render as their text, not their member name."""
    msg = classify(0.0, CHI_TABLE[1], label=FitLabel.RANDOM)
    assert msg == "There's a >99% chance, and a <100% chance, that this data is random."
    assert format_message(None, 1, FitLabel.AS_EXPECTED) == (
        "There's a <1% chance that this data is distributed as you expect."
    )


def test_classify_default_label():
    assert classify(100.0, CHI_TABLE[1]).endswith("that this data is random.")
