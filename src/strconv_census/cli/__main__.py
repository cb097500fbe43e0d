"""
Main Entry Point for the strconv-census CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `strconv_census.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.markup import escape

from strconv_census import __version__
from strconv_census.cli import commands
from strconv_census.config import CensusConfig, split_tags
from strconv_census.errors import ConfigError
from strconv_census.utils.console import log_error


def _add_listing_args(parser: argparse.ArgumentParser) -> None:
  parser.add_argument("patterns", nargs="+", help="Package patterns (e.g. ./... std golang.org/x/tools/...)")
  parser.add_argument("--tags", default=None, help="Build tags, comma or space separated")
  parser.add_argument("--go", dest="go_binary", default=None, help="go tool to run (default: go)")


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(
    prog="strconv-census",
    description="strconv-census: Count string/[]byte/[]rune conversions in Go packages",
  )
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: COUNT ---
  cmd_count = subparsers.add_parser("count", help="Count conversions in the given packages")
  _add_listing_args(cmd_count)
  cmd_count.add_argument("--export-dir", type=Path, default=None, help="Directory of typed syntax exports")
  cmd_count.add_argument(
    "--no-list",
    action="store_true",
    help="Treat patterns as literal import paths instead of running go list",
  )
  cmd_count.add_argument(
    "--no-tests",
    action="store_true",
    default=None,
    help="Skip external _test packages",
  )
  cmd_count.add_argument(
    "--log",
    nargs="*",
    default=None,
    metavar="CATEGORY",
    help="Log every matched site of these categories (names from 'categories', or all/none). "
    "Default: redundant-append redundant-copy",
  )
  cmd_count.add_argument("-v", "--verbose", action="store_true", help="Log progress")

  # --- Command: LIST ---
  cmd_list = subparsers.add_parser("list", help="Print the import paths a census would examine")
  _add_listing_args(cmd_list)

  # --- Command: CATEGORIES ---
  subparsers.add_parser("categories", help="Show the counted conversion categories")

  args = parser.parse_args(argv)

  if args.command == "categories":
    return commands.handle_categories()

  try:
    config = CensusConfig.load(
      build_tags=split_tags(args.tags) if args.tags is not None else None,
      export_dir=getattr(args, "export_dir", None),
      go_binary=args.go_binary,
      include_tests=False if getattr(args, "no_tests", None) else None,
      log_categories=getattr(args, "log", None),
    )
  except ConfigError as e:
    log_error(escape(str(e)))
    return 1

  if args.command == "count":
    return commands.handle_count(args.patterns, config, use_go_list=not args.no_list, verbose=args.verbose)

  elif args.command == "list":
    return commands.handle_list(args.patterns, config)

  return 0


if __name__ == "__main__":
  sys.exit(main())
