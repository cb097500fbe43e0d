"""
Static Analysis Package.

This package contains the classifiers and the census pass that inspect
type-checked Go syntax trees for string/byte/rune conversions.

Modules:
    - ``kinds``: Classifying resolved types into conversion kinds.
    - ``conversion``: Recognizing conversions among call expressions.
    - ``builtins``: Recognizing ``append``/``copy`` with byte-slice destinations.
    - ``counters``: The aggregate of counts.
    - ``census``: Traversal, category routing and aggregation.
"""

from strconv_census.analysis.builtins import try_builtin
from strconv_census.analysis.census import census_package, route_conversion, run_census
from strconv_census.analysis.conversion import ConversionMatch, try_conversion
from strconv_census.analysis.counters import Counters
from strconv_census.analysis.kinds import classify

__all__ = [
  "ConversionMatch",
  "Counters",
  "census_package",
  "classify",
  "route_conversion",
  "run_census",
  "try_builtin",
  "try_conversion",
]
