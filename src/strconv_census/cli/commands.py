"""
CLI Command Handlers Facade.

Re-exports handlers from `strconv_census.cli.handlers` so the dispatcher and
tests can patch a single module.
"""

from strconv_census.cli.handlers.count import handle_count
from strconv_census.cli.handlers.listing import handle_categories, handle_list

__all__ = [
  "handle_categories",
  "handle_count",
  "handle_list",
]
