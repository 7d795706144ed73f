"""
Data models for chi-square goodness-of-fit results.

Dataclass schemas for the fit configuration and the structured result
that the English confidence statement is rendered from.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class FitLabel(str, Enum):
    """What the data is being tested for, as it reads in the message."""
    RANDOM = "random"
    EVENLY_DISTRIBUTED = "evenly distributed"
    AS_EXPECTED = "distributed as you expect"


def label_text(label: Union[FitLabel, str]) -> str:
    """Plain string for a label, whether given as FitLabel or str."""
    if isinstance(label, FitLabel):
        return label.value
    return str(label)


@dataclass(frozen=True)
class ChiSquareConfig:
    """Defaults applied by the goodness-of-fit functions."""
    uniform_label: Union[FitLabel, str] = FitLabel.RANDOM
    nonuniform_label: Union[FitLabel, str] = FitLabel.AS_EXPECTED
    # 0.0 means observed and expected totals must be exactly equal
    total_rel_tol: float = 1e-9


DEFAULT_CONFIG = ChiSquareConfig()


@dataclass(frozen=True)
class GoodnessOfFitResult:
    """
    Outcome of a chi-square goodness-of-fit test.

    ``lower`` and ``upper`` are percentage bounds on the chance that the
    deviation is due to randomness alone. ``lower`` is None when the
    statistic is beyond the last critical value, in which case only the
    upper bound is known.
    """
    statistic: float
    degrees_of_freedom: int
    lower: Optional[int]
    upper: int
    label: str

    @property
    def message(self) -> str:
        """English confidence statement for this result."""
        from .stats.classify import format_message

        return format_message(self.lower, self.upper, self.label)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "statistic": self.statistic,
            "degrees_of_freedom": self.degrees_of_freedom,
            "lower": self.lower,
            "upper": self.upper,
            "label": self.label,
            "message": self.message,
        }
