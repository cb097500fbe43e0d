"""
Count Command Handler.

Lists the requested packages, loads their typed syntax exports, runs the
census, and prints the report to stdout.
"""

from typing import List

from rich.markup import escape

from strconv_census.analysis.census import run_census
from strconv_census.config import CensusConfig
from strconv_census.errors import CensusError, LoadError
from strconv_census.loader.export import ExportStore
from strconv_census.loader.golist import go_list
from strconv_census.loader.program import load_program
from strconv_census.report import render_report
from strconv_census.utils.console import log_error, log_info


def resolve_import_paths(patterns: List[str], config: CensusConfig, use_go_list: bool = True) -> List[str]:
  """
  Expands CLI patterns into import paths.

  Args:
      patterns: Package patterns or literal import paths.
      config: Resolved configuration (build tags, go tool).
      use_go_list: If False, patterns are taken as literal import paths.

  Returns:
      List[str]: Import paths to load.

  Raises:
      PackageListError: If ``go list`` fails.
  """
  if not use_go_list:
    return list(patterns)
  return go_list(patterns, tags=config.build_tags, go_binary=config.go_binary)


def handle_count(patterns: List[str], config: CensusConfig, use_go_list: bool = True, verbose: bool = False) -> int:
  """
  Runs a census over the given packages.

  Args:
      patterns: Package patterns (or import paths when ``use_go_list`` is False).
      config: Resolved configuration.
      use_go_list: Expand patterns with ``go list``.
      verbose: Log progress messages.

  Returns:
      int: Exit code (0 on success, 1 on fatal error). Skipped packages do not fail the run.
  """
  try:
    if config.export_dir is None:
      raise LoadError("no export directory configured (use --export-dir or [tool.strconv_census] export_dir)")

    import_paths = resolve_import_paths(patterns, config, use_go_list)
    if verbose:
      log_info(f"Loading {len(import_paths)} packages from [path]{escape(str(config.export_dir))}[/path]")

    store = ExportStore(config.export_dir)
    packages = load_program(import_paths, store, include_tests=config.include_tests)
  except CensusError as e:
    log_error(escape(str(e)))
    return 1

  counters = run_census(packages, config.log_categories)

  for line in render_report(counters):
    print(line)
  return 0
