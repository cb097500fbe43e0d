"""
Listing Command Handlers.

``list`` prints the import paths a census would examine; ``categories``
prints the counted categories.
"""

from typing import List

from rich.markup import escape

from strconv_census.config import CensusConfig
from strconv_census.enums import Category
from strconv_census.errors import CensusError
from strconv_census.loader.golist import go_list
from strconv_census.utils.console import log_error


def handle_list(patterns: List[str], config: CensusConfig) -> int:
  """
  Prints the non-vendored import paths matching ``patterns``.

  Args:
      patterns: Package patterns.
      config: Resolved configuration (build tags, go tool).

  Returns:
      int: Exit code.
  """
  try:
    paths = go_list(patterns, tags=config.build_tags, go_binary=config.go_binary)
  except CensusError as e:
    log_error(escape(str(e)))
    return 1

  for path in paths:
    print(path)
  return 0


def handle_categories() -> int:
  """Prints each category's CLI name and report label."""
  width = max(len(c.value) for c in Category)
  for category in Category:
    print(f"{category.value.ljust(width)}  {category.label}")
  return 0
