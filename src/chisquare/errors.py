"""Exceptions raised for input the goodness-of-fit tests cannot handle."""


class ChiSquareError(ValueError):
    """Base exception for all goodness-of-fit input errors."""

    pass


class UnsupportedDegreesOfFreedom(ChiSquareError):
    """The critical-value table has no row for this many categories."""

    def __init__(self, categories: int):
        self.categories = categories
        self.degrees_of_freedom = categories - 1
        super().__init__(
            f"I can't handle {categories} choices without a better table."
        )


class DegenerateInput(ChiSquareError):
    """An expected count used as a divisor is zero."""

    pass


class LengthMismatch(ChiSquareError):
    """Observed and expected sequences are empty or differ in length."""

    pass


class TotalMismatch(ChiSquareError):
    """Observed and expected totals disagree."""

    def __init__(self, observed_total: float, expected_total: float):
        self.observed_total = observed_total
        self.expected_total = expected_total
        super().__init__(
            f"Observed total {observed_total} does not match "
            f"expected total {expected_total}"
        )


class InvalidCounts(ChiSquareError):
    """Counts are not a flat sequence of non-negative finite numbers."""

    pass
