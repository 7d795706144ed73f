"""Tests for the critical-value table."""
import numpy as np
import pytest
from scipy import stats

from chisquare.stats.table import (
    CHI_LEVELS,
    CHI_TABLE,
    MAX_CATEGORIES,
    MAX_DEGREES_OF_FREEDOM,
    lookup,
)


def test_table_covers_1_to_20():
    """One row per degree of freedom, nine thresholds each."""
    assert sorted(CHI_TABLE) == list(range(1, 21))
    assert MAX_DEGREES_OF_FREEDOM == 20
    assert MAX_CATEGORIES == 21
    for row in CHI_TABLE.values():
        assert len(row) == len(CHI_LEVELS) - 1


def test_rows_ascending():
    for dof, row in CHI_TABLE.items():
        assert list(row) == sorted(row), dof


def test_levels_descending():
    assert list(CHI_LEVELS) == sorted(CHI_LEVELS, reverse=True)
    assert CHI_LEVELS[0] == 100
    assert CHI_LEVELS[-1] == 1


@pytest.mark.parametrize("dof", range(1, 21))
def test_thresholds_match_chi2_upper_tail(dof):
    """Threshold i is the chi-square quantile at upper-tail CHI_LEVELS[i+1]%."""
    tail = np.array(CHI_LEVELS[1:]) / 100.0
    exact = stats.chi2.isf(tail, dof)
    np.testing.assert_allclose(CHI_TABLE[dof], exact, rtol=0.05, atol=0.02)


def test_lookup_out_of_range():
    assert lookup(0) is None
    assert lookup(21) is None
    assert lookup(-1) is None
    assert lookup(1) == CHI_TABLE[1]


def test_table_is_read_only():
    with pytest.raises(TypeError):
        CHI_TABLE[21] = (1.0,)


@pytest.mark.parametrize("dof", [1.0, 2.5, True, "1", [1], None])
def test_lookup_non_integer(dof):
    assert lookup(dof) is None


def test_lookup_int_vs_float():
    """Plain ints index the table; float equivalents do not."""
    assert lookup(20) == CHI_TABLE[20]
    assert lookup(20.0) is None
