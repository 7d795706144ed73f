"""Chi-square goodness-of-fit tests that report how random your data is."""

from .schema import (
    ChiSquareConfig,
    DEFAULT_CONFIG,
    FitLabel,
    GoodnessOfFitResult,
)
from .errors import (
    ChiSquareError,
    DegenerateInput,
    InvalidCounts,
    LengthMismatch,
    TotalMismatch,
    UnsupportedDegreesOfFreedom,
)
from .stats import (
    CHI_LEVELS,
    CHI_TABLE,
    MAX_CATEGORIES,
    chisquare,
    classify,
    confidence_bounds,
    lookup,
    nonuniform_chisquare,
    nonuniform_goodness_of_fit,
    uniform_chisquare,
    uniform_goodness_of_fit,
)

__version__ = "1.0.0"

__all__ = [
    "ChiSquareConfig",
    "DEFAULT_CONFIG",
    "FitLabel",
    "GoodnessOfFitResult",
    "ChiSquareError",
    "DegenerateInput",
    "InvalidCounts",
    "LengthMismatch",
    "TotalMismatch",
    "UnsupportedDegreesOfFreedom",
    "CHI_LEVELS",
    "CHI_TABLE",
    "MAX_CATEGORIES",
    "chisquare",
    "classify",
    "confidence_bounds",
    "lookup",
    "nonuniform_chisquare",
    "nonuniform_goodness_of_fit",
    "uniform_chisquare",
    "uniform_goodness_of_fit",
]
