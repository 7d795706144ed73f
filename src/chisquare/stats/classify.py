"""
Translate a chi-square statistic into a confidence statement.

The result is deliberately an English sentence rather than a bare pair of
numbers: the bounds are easy to misread as a point probability.
"""

from typing import Optional, Sequence, Tuple, Union

from ..schema import FitLabel, label_text
from .table import CHI_LEVELS


def confidence_bounds(
    statistic: float,
    thresholds: Sequence[float],
    levels: Sequence[int] = CHI_LEVELS,
) -> Tuple[Optional[int], int]:
    """
    Bracket a statistic between two confidence levels.

    Args:
        statistic: Chi-square statistic
        thresholds: Ascending critical values for the degrees of freedom
        levels: Descending percentages, one more than ``thresholds``

    Returns:
        Tuple of (lower, upper) percentages. ``lower`` is None when the
        statistic is not below any threshold; ``upper`` is then the last
        level.
    """
    if len(levels) != len(thresholds) + 1:
        raise ValueError(
            f"Expected {len(thresholds) + 1} confidence levels for "
            f"{len(thresholds)} thresholds, got {len(levels)}"
        )
    for i, threshold in enumerate(thresholds):
        if statistic < threshold:
            return levels[i + 1], levels[i]
    return None, levels[-1]


def format_message(
    lower: Optional[int],
    upper: int,
    label: Union[FitLabel, str],
) -> str:
    """Render bounds from :func:`confidence_bounds` as a sentence."""
    label = label_text(label)
    if lower is None:
        return f"There's a <{upper}% chance that this data is {label}."
    return (
        f"There's a >{lower}% chance, and a <{upper}% chance, "
        f"that this data is {label}."
    )


def classify(
    statistic: float,
    thresholds: Sequence[float],
    levels: Sequence[int] = CHI_LEVELS,
    label: Union[FitLabel, str] = FitLabel.RANDOM,
) -> str:
    """Confidence statement for ``statistic`` against ``thresholds``."""
    lower, upper = confidence_bounds(statistic, thresholds, levels)
    return format_message(lower, upper, label)
