"""
Critical values of the chi-square distribution.

Row ``dof`` holds nine ascending thresholds. Threshold ``i`` is the
statistic whose upper-tail probability is ``CHI_LEVELS[i + 1]`` percent,
so a statistic below threshold ``i`` has between ``CHI_LEVELS[i + 1]``
and ``CHI_LEVELS[i]`` percent chance of arising from randomness alone.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

CHI_LEVELS: Tuple[int, ...] = (100, 99, 95, 90, 70, 50, 30, 10, 5, 1)

MIN_DEGREES_OF_FREEDOM = 1
MAX_DEGREES_OF_FREEDOM = 20
MAX_CATEGORIES = MAX_DEGREES_OF_FREEDOM + 1

CHI_TABLE: Mapping[int, Tuple[float, ...]] = MappingProxyType({
    1: (0.00016, 0.0039, 0.016, 0.15, 0.46, 1.07, 2.71, 3.84, 6.64),
    2: (0.020, 0.10, 0.21, 0.71, 1.39, 2.41, 4.60, 5.99, 9.21),
    3: (0.12, 0.35, 0.58, 1.42, 2.37, 3.67, 6.25, 7.82, 11.34),
    4: (0.30, 0.71, 1.06, 2.20, 3.36, 4.88, 7.78, 9.49, 13.28),
    5: (0.55, 1.14, 1.61, 3.00, 4.35, 6.06, 9.24, 11.07, 15.09),
    6: (0.87, 1.64, 2.20, 3.83, 5.35, 7.23, 10.65, 12.59, 16.81),
    7: (1.24, 2.17, 2.83, 4.67, 6.35, 8.38, 12.02, 14.07, 18.48),
    8: (1.65, 2.73, 3.49, 5.53, 7.34, 9.52, 13.36, 15.51, 20.09),
    9: (2.09, 3.33, 4.17, 6.39, 8.34, 10.66, 14.68, 16.92, 21.67),
    10: (2.56, 3.94, 4.86, 7.27, 9.34, 11.78, 15.99, 18.31, 23.21),
    11: (3.05, 4.58, 5.58, 8.15, 10.34, 12.90, 17.28, 19.68, 24.73),
    12: (3.57, 5.23, 6.30, 9.03, 11.34, 14.01, 18.55, 21.03, 26.22),
    13: (4.11, 5.89, 7.04, 9.93, 12.34, 15.12, 19.81, 22.36, 27.69),
    14: (4.66, 6.57, 7.79, 10.82, 13.34, 16.22, 21.06, 23.69, 29.14),
    15: (5.23, 7.26, 8.55, 11.72, 14.34, 17.32, 22.31, 25.00, 30.58),
    16: (5.81, 7.96, 9.31, 12.62, 15.34, 18.42, 23.54, 26.30, 32.00),
    17: (6.41, 8.67, 10.09, 13.53, 16.34, 19.51, 24.77, 27.59, 33.41),
    18: (7.00, 9.39, 10.87, 14.44, 17.34, 20.60, 25.99, 28.87, 34.81),
    19: (7.63, 10.12, 11.65, 15.35, 18.34, 21.69, 27.20, 30.14, 36.19),
    20: (8.26, 10.85, 12.44, 16.27, 19.34, 22.78, 28.41, 31.41, 37.57),
})


def lookup(degrees_of_freedom: int) -> Optional[Tuple[float, ...]]:
    """Critical values for ``degrees_of_freedom``, or None if not tabulated."""
    if isinstance(degrees_of_freedom, bool) or not isinstance(degrees_of_freedom, int):
        return None
    return CHI_TABLE.get(degrees_of_freedom)
