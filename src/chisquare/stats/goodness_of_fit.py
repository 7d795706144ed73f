"""
Pearson chi-square goodness-of-fit tests.

Uniform: observed counts vs. an equiprobable distribution.
Nonuniform: observed counts vs. caller-supplied expected counts.
Both classify the statistic against the critical-value table.
"""

import logging
import math
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from ..errors import (
    DegenerateInput,
    InvalidCounts,
    LengthMismatch,
    TotalMismatch,
    UnsupportedDegreesOfFreedom,
)
from ..schema import (
    DEFAULT_CONFIG,
    ChiSquareConfig,
    FitLabel,
    GoodnessOfFitResult,
    label_text,
)
from .classify import confidence_bounds
from .table import CHI_LEVELS, lookup

logger = logging.getLogger(__name__)

Counts = Union[Sequence[float], np.ndarray]


def _as_counts(values: Counts, name: str) -> np.ndarray:
    """Validate counts and return them as a 1-D float array."""
    try:
        raw = np.asarray(values)
    except (TypeError, ValueError) as exc:
        raise InvalidCounts(f"{name} must be numeric: {exc}") from exc
    # bool, int, unsigned or float only; strings and objects are rejected
    if raw.dtype.kind not in "biuf":
        raise InvalidCounts(f"{name} must be numeric, got dtype {raw.dtype}")
    try:
        arr = raw.astype(float)
    except OverflowError as exc:
        raise InvalidCounts(f"{name} out of range: {exc}") from exc
    if arr.ndim != 1:
        raise InvalidCounts(f"{name} must be one-dimensional, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidCounts(f"{name} must be finite")
    if np.any(arr < 0):
        raise InvalidCounts(f"{name} must be non-negative")
    return arr


def _thresholds_for(n_categories: int) -> Tuple[float, ...]:
    thresholds = lookup(n_categories - 1)
    if thresholds is None:
        logger.warning(f"No critical values for {n_categories} categories")
        raise UnsupportedDegreesOfFreedom(n_categories)
    return thresholds


def chisquare_statistic(observed: Counts, expected: Counts) -> float:
    """
    Pearson chi-square statistic: sum of (O - E)^2 / E.

    Categories where both observed and expected are zero contribute nothing.

    Args:
        observed: Observed counts
        expected: Expected counts, same length

    Returns:
        Chi-square statistic
    """
    observed = np.asarray(observed, dtype=float)
    expected = np.asarray(expected, dtype=float)

    zero_expected = expected == 0
    if np.any(zero_expected & (observed != 0)):
        raise DegenerateInput("Expected count is zero where observed count is not")

    terms = np.divide(
        (observed - expected) ** 2,
        expected,
        out=np.zeros_like(expected),
        where=~zero_expected,
    )
    return float(np.sum(terms))


def _build_result(
    statistic: float,
    degrees_of_freedom: int,
    thresholds: Sequence[float],
    label: Union[FitLabel, str],
) -> GoodnessOfFitResult:
    lower, upper = confidence_bounds(statistic, thresholds, CHI_LEVELS)
    logger.debug(
        f"chi2={statistic:.4f} dof={degrees_of_freedom} bounds=({lower}, {upper})"
    )
    return GoodnessOfFitResult(
        statistic=statistic,
        degrees_of_freedom=degrees_of_freedom,
        lower=lower,
        upper=upper,
        label=label_text(label),
    )


def uniform_goodness_of_fit(
    counts: Counts,
    label: Optional[Union[FitLabel, str]] = None,
    config: Optional[ChiSquareConfig] = None,
) -> GoodnessOfFitResult:
    """
    Chi-square test of counts against a uniform distribution.

    Args:
        counts: Observed count per category (2 to 21 categories)
        label: What the data is tested for (default from config, "random")
        config: Fit configuration

    Returns:
        GoodnessOfFitResult
    """
    config = config or DEFAULT_CONFIG
    observed = _as_counts(counts, "counts")
    n = len(observed)
    thresholds = _thresholds_for(n)

    expected = observed.sum() / n
    if expected == 0:
        logger.warning("All counts are zero")
        raise DegenerateInput("There's no data!")

    statistic = chisquare_statistic(observed, np.full(n, expected))
    return _build_result(
        statistic, n - 1, thresholds, label or config.uniform_label
    )


def nonuniform_goodness_of_fit(
    counts: Counts,
    expected: Counts,
    label: Optional[Union[FitLabel, str]] = None,
    config: Optional[ChiSquareConfig] = None,
) -> GoodnessOfFitResult:
    """
    Chi-square test of counts against expected counts.

    Expected values are counts, not proportions: their total must match
    the observed total to within ``config.total_rel_tol``.

    Args:
        counts: Observed count per category
        expected: Expected count per category
        label: What the data is tested for (default "distributed as you expect")
        config: Fit configuration

    Returns:
        GoodnessOfFitResult
    """
    config = config or DEFAULT_CONFIG
    observed = _as_counts(counts, "counts")
    expected_arr = _as_counts(expected, "expected")

    if len(observed) == 0 or len(observed) != len(expected_arr):
        logger.warning(
            f"Length mismatch: {len(observed)} observed vs {len(expected_arr)} expected"
        )
        raise LengthMismatch(
            f"Observed and expected must be non-empty and the same length, "
            f"got {len(observed)} and {len(expected_arr)}"
        )

    n = len(observed)
    thresholds = _thresholds_for(n)

    obs_total = float(observed.sum())
    exp_total = float(expected_arr.sum())
    if not math.isclose(obs_total, exp_total, rel_tol=config.total_rel_tol, abs_tol=0.0):
        logger.warning(f"Totals disagree: {obs_total} observed vs {exp_total} expected")
        raise TotalMismatch(obs_total, exp_total)
    if obs_total == 0:
        logger.warning("All counts are zero")
        raise DegenerateInput("There's no data!")

    try:
        statistic = chisquare_statistic(observed, expected_arr)
    except DegenerateInput:
        logger.warning("Zero expected count for a non-empty category")
        raise

    return _build_result(
        statistic, n - 1, thresholds, label or config.nonuniform_label
    )


def uniform_chisquare(
    counts: Counts,
    label: Optional[Union[FitLabel, str]] = None,
    config: Optional[ChiSquareConfig] = None,
) -> str:
    """How random are these counts? Returns an English confidence statement."""
    return uniform_goodness_of_fit(counts, label, config).message


def nonuniform_chisquare(
    counts: Counts,
    expected: Counts,
    label: Optional[Union[FitLabel, str]] = None,
    config: Optional[ChiSquareConfig] = None,
) -> str:
    """Are these counts distributed as expected? Returns an English statement."""
    return nonuniform_goodness_of_fit(counts, expected, label, config).message


chisquare = uniform_chisquare
