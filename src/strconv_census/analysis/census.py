"""
Traversal & Aggregation.

Walks every file of every loaded package, offers each call expression to the
builtin recognizer and then to the conversion recognizer, and accumulates the
outcome into :class:`~strconv_census.analysis.counters.Counters`.

The walk does not stop at a matched call: in ``append(bs, []byte(s)...)`` the
outer call counts as a redundant append and the nested ``[]byte(s)`` is
counted again as a direct conversion.
"""

import logging
import os
from typing import AbstractSet, Dict, Iterable, Optional, Set, Tuple

from strconv_census.analysis.builtins import try_builtin
from strconv_census.analysis.conversion import try_conversion
from strconv_census.analysis.counters import Counters
from strconv_census.analysis.kinds import classify
from strconv_census.enums import Category, Kind
from strconv_census.goast.info import Package
from strconv_census.goast.nodes import CallExpr, File, Node
from strconv_census.goast.visitor import GoVisitor
from strconv_census.utils.console import SITE_LOGGER

site_logger = logging.getLogger(SITE_LOGGER)

ROUTES: Dict[Tuple[Kind, Kind], Category] = {
  (Kind.BYTES, Kind.STRING): Category.STR_TO_BYTES,
  (Kind.RUNES, Kind.STRING): Category.STR_TO_RUNES,
  (Kind.STRING, Kind.BYTES): Category.BYTES_TO_STR,
  (Kind.STRING, Kind.RUNE): Category.RUNE_TO_STR,
  (Kind.STRING, Kind.BYTE): Category.BYTE_TO_STR,
}
"""(target kind, source kind) -> category for recognized conversions."""


def route_conversion(target: Kind, source: Kind) -> Optional[Category]:
  """
  Looks up the category of a conversion from ``source`` to ``target``.

  Args:
      target: Kind of the type converted to.
      source: Kind of the converted expression.

  Returns:
      The category, or None for untracked pairs such as ``[]rune(rune)``.
  """
  return ROUTES.get((target, source))


class ConversionCounter(GoVisitor):
  """
  Counts conversion sites and distinct lines within one package.

  Attributes:
      package: The package being walked; its ``info`` resolves every node visited.
      counters: Accumulator for this package only.
      log_categories: Categories whose matched sites are logged.
  """

  def __init__(self, package: Package, log_categories: AbstractSet[Category] = frozenset()):
    self.package = package
    self.counters = Counters()
    self.log_categories = log_categories
    self._file: Optional[File] = None
    self._lines: Set[int] = set()

  def count_file(self, file: File) -> None:
    """
    Walks one file. Line tracking restarts for each file.

    Args:
        file: A file belonging to ``self.package``.
    """
    self._file = file
    self._lines = set()
    self.walk(file)

  def on_visit(self, node: Node) -> bool:
    if node.line and node.line not in self._lines:
      self._lines.add(node.line)
      self.counters.lines += 1
    return super().on_visit(node)

  def visit_CallExpr(self, node: CallExpr) -> None:
    category = try_builtin(self.package.info, node)
    if category is None:
      category = self._classify_conversion(node)
    if category is not None:
      self._record(category, node)

  def _classify_conversion(self, call: CallExpr) -> Optional[Category]:
    match = try_conversion(self.package.info, call)
    if match is None:
      return None

    target = classify(match.target)
    if target == Kind.OTHER:
      return None
    source = classify(self.package.info.type_of(match.argument))
    if source == Kind.OTHER:
      return None
    return route_conversion(target, source)

  def _record(self, category: Category, node: Node) -> None:
    self.counters.bump(category)
    if category in self.log_categories:
      file_name = os.path.basename(self._file.name) if self._file else "?"
      site_logger.info("%s %s:%s:%d", category.label, self.package.path, file_name, node.line)


def census_package(package: Package, log_categories: AbstractSet[Category] = frozenset()) -> Counters:
  """
  Runs the census over every file of a single package.

  Args:
      package: A transitively error-free package.
      log_categories: Categories whose matched sites are logged.

  Returns:
      Counters: Counts for this package, with ``packages`` set to 1.
  """
  counter = ConversionCounter(package, log_categories)
  counter.counters.packages = 1
  for file in package.files:
    counter.count_file(file)
  return counter.counters


def run_census(packages: Iterable[Package], log_categories: AbstractSet[Category] = frozenset()) -> Counters:
  """
  Runs the census over all packages and merges the results.

  Args:
      packages: Packages to examine, typically from ``load_program``.
      log_categories: Categories whose matched sites are logged.

  Returns:
      Counters: Totals across all packages.
  """
  total = Counters()
  for package in packages:
    total.merge(census_package(package, log_categories))
  return total
