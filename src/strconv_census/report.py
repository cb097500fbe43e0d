"""
Census Report Rendering.

Produces the plain-text report: one ``<label>: <count>`` line per category,
grouped by blank lines, followed by the package and line totals.
"""

from typing import List, Sequence

from strconv_census.analysis.counters import Counters
from strconv_census.enums import Category

REPORT_GROUPS: Sequence[Sequence[Category]] = (
  (Category.STR_TO_BYTES, Category.STR_TO_RUNES, Category.BYTES_TO_STR),
  (Category.RUNE_TO_STR, Category.BYTE_TO_STR),
  (Category.PLAIN_APPEND, Category.PLAIN_COPY),
  (Category.REDUNDANT_APPEND, Category.REDUNDANT_COPY),
)


def render_report(counters: Counters) -> List[str]:
  """
  Formats counters as report lines.

  Args:
      counters: Totals from the census.

  Returns:
      List[str]: Lines without trailing newlines; empty strings separate groups.
  """
  lines: List[str] = []
  for group in REPORT_GROUPS:
    for category in group:
      lines.append(f"{category.label}: {counters.get(category)}")
    lines.append("")
  lines.append(f"packages examined: {counters.packages}")
  lines.append(f"lloc examined: {counters.lines}")
  return lines
