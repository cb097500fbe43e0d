"""
Runtime Configuration Store.

Settings come from the ``[tool.strconv_census]`` table of the nearest
``pyproject.toml`` and are overridden by command line arguments:

.. code-block:: toml

    [tool.strconv_census]
    export_dir = "build/typed-export"
    build_tags = ["integration"]
    log = ["redundant-append", "redundant-copy"]
"""

import tomllib
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator

from strconv_census.enums import Category
from strconv_census.errors import ConfigError

DEFAULT_LOG_CATEGORIES = frozenset({Category.REDUNDANT_APPEND, Category.REDUNDANT_COPY})


def parse_categories(names: Iterable[str]) -> Set[Category]:
  """
  Parses category names as accepted on the command line.

  ``all`` selects every category and ``none`` clears the selection made so far.

  Args:
      names: Category values (e.g. "str2bytes", "redundant-copy"), "all" or "none".

  Returns:
      Set[Category]: The selected categories.

  Raises:
      ConfigError: If a name is not recognized.
  """
  selected: Set[Category] = set()
  for raw in names:
    name = raw.strip().lower()
    if name == "all":
      selected.update(Category)
    elif name == "none":
      selected.clear()
    else:
      try:
        selected.add(Category(name))
      except ValueError:
        known = ", ".join(c.value for c in Category)
        raise ConfigError(f"Unknown category: '{raw}'. Known categories: {known}, all, none")
  return selected


def split_tags(raw: Optional[str]) -> List[str]:
  """Splits a ``--tags`` value on commas and whitespace."""
  if not raw:
    return []
  return [t for t in raw.replace(",", " ").split() if t]


class CensusConfig(BaseModel):
  """
  Configuration container for a census run.
  """

  build_tags: List[str] = Field(default_factory=list, description="Build tags passed to go list.")
  export_dir: Optional[Path] = Field(None, description="Directory of typed syntax export documents.")
  go_binary: str = Field("go", description="The go tool to run for package listing.")
  include_tests: bool = Field(True, description="Also examine external _test packages.")
  log_categories: Set[Category] = Field(
    default_factory=lambda: set(DEFAULT_LOG_CATEGORIES),
    description="Categories whose matched sites are logged.",
  )

  @field_validator("go_binary")
  @classmethod
  def validate_go_binary(cls, v: str) -> str:
    """
    Rejects an empty tool name.

    Args:
        v (str): The configured binary.

    Returns:
        str: The stripped name.

    Raises:
        ValueError: If the name is blank.
    """
    v_clean = v.strip()
    if not v_clean:
      raise ValueError("go binary must not be empty")
    return v_clean

  @classmethod
  def load(
    cls,
    build_tags: Optional[List[str]] = None,
    export_dir: Optional[Path] = None,
    go_binary: Optional[str] = None,
    include_tests: Optional[bool] = None,
    log_categories: Optional[List[str]] = None,
    search_path: Optional[Path] = None,
  ) -> "CensusConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        build_tags: Override for build tags.
        export_dir: Override for the export directory.
        go_binary: Override for the go tool.
        include_tests: Override for test package loading.
        log_categories: Override for logged categories (names, "all" or "none").
        search_path: Directory to start searching for TOML config.

    Returns:
        CensusConfig: The fully resolved configuration object.

    Raises:
        ConfigError: If a value is invalid.
    """
    start_dir = search_path or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)

    final_tags = build_tags if build_tags is not None else toml_config.get("build_tags", [])

    final_export = export_dir
    if final_export is None and "export_dir" in toml_config:
      final_export = Path(toml_config["export_dir"])
      if toml_dir and not final_export.is_absolute():
        final_export = (toml_dir / final_export).resolve()

    final_go = go_binary or toml_config.get("go_binary", "go")

    if include_tests is not None:
      final_tests = include_tests
    else:
      final_tests = toml_config.get("include_tests", True)

    if log_categories is not None:
      final_log = parse_categories(log_categories)
    elif "log" in toml_config:
      final_log = parse_categories(toml_config["log"])
    else:
      final_log = set(DEFAULT_LOG_CATEGORIES)

    try:
      return cls(
        build_tags=final_tags,
        export_dir=final_export,
        go_binary=final_go,
        include_tests=final_tests,
        log_categories=final_log,
      )
    except ValidationError as e:
      raise ConfigError(f"Invalid configuration: {e}") from e


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches ``start_path`` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.

  Raises:
      ConfigError: If the nearest pyproject.toml is not valid TOML.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {toml_path}: {e}") from e

      tool_section = data.get("tool", {})
      return tool_section.get("strconv_census", {}), parent

  return {}, None
