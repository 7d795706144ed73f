"""Chi-square statistics module."""

from .table import CHI_LEVELS, CHI_TABLE, MAX_CATEGORIES, lookup
from .classify import classify, confidence_bounds, format_message
from .goodness_of_fit import (
    chisquare,
    chisquare_statistic,
    nonuniform_chisquare,
    nonuniform_goodness_of_fit,
    uniform_chisquare,
    uniform_goodness_of_fit,
)

__all__ = [
    "CHI_LEVELS",
    "CHI_TABLE",
    "MAX_CATEGORIES",
    "lookup",
    "classify",
    "confidence_bounds",
    "format_message",
    "chisquare",
    "chisquare_statistic",
    "nonuniform_chisquare",
    "nonuniform_goodness_of_fit",
    "uniform_chisquare",
    "uniform_goodness_of_fit",
]
