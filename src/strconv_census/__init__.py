"""
strconv-census Package.

A static census of string conversions in type-checked Go programs. It counts
every ``[]byte(string)``, ``string([]byte)``, ``[]rune(string)``,
``string(rune)`` and ``string(byte)`` conversion, and every
``append``/``copy`` into a byte slice from a string, separating redundant
``append(bs, []byte(s)...)`` forms from direct ones.

Usage
-----

.. code-block:: python

    import strconv_census as scc

    counters = scc.count_packages(["example.com/m/internal"], export_dir="build/export")
    print(counters.str_to_bytes, counters.redundant_append)

The typed syntax export consumed here is produced by an external Go-side
exporter; see ``strconv_census.loader.schema`` for the document format.
"""

from pathlib import Path
from typing import AbstractSet, Sequence, Union

from strconv_census.analysis.census import run_census
from strconv_census.analysis.counters import Counters
from strconv_census.enums import Category, Kind
from strconv_census.loader.export import ExportStore
from strconv_census.loader.program import load_program

__version__ = "0.1.0"


def count_packages(
  import_paths: Sequence[str],
  export_dir: Union[str, Path],
  include_tests: bool = True,
  log_categories: AbstractSet[Category] = frozenset(),
) -> Counters:
  """
  Runs the census over already-resolved import paths.

  Args:
      import_paths: Package import paths (no patterns; see ``loader.go_list``).
      export_dir: Directory of typed syntax export documents.
      include_tests: Also examine external ``_test`` packages.
      log_categories: Categories whose matched sites are logged.

  Returns:
      Counters: Totals across every examinable package.

  Raises:
      LoadError: If the export directory or a document is unusable.
  """
  store = ExportStore(Path(export_dir))
  packages = load_program(import_paths, store, include_tests=include_tests)
  return run_census(packages, log_categories)


__all__ = [
  "Category",
  "Counters",
  "Kind",
  "count_packages",
  "__version__",
]
