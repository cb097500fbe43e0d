"""
Program Loading.

Selects the packages the census examines. A package (or its external test
package) that did not type-check, or whose dependencies did not, is skipped
with a warning rather than aborting the run.
"""

from typing import List, Sequence

from rich.markup import escape

from strconv_census.goast.info import Package
from strconv_census.loader.export import TEST_SUFFIX, ExportStore
from strconv_census.utils.console import log_warning


def _examinable(package: Package) -> bool:
  return package.transitively_error_free


def load_program(import_paths: Sequence[str], store: ExportStore, include_tests: bool = True) -> List[Package]:
  """
  Loads each requested package and, optionally, its external test package.

  Args:
      import_paths: Import paths, typically from ``go_list``.
      store: Source of typed syntax export documents.
      include_tests: Also load ``<path>_test`` packages when exported.

  Returns:
      List[Package]: Examinable packages in request order, each followed by its test package.

  Raises:
      LoadError: If a document exists but is unreadable or malformed.
  """
  packages: List[Package] = []
  for path in import_paths:
    package = store.load(path)
    if package is None or not _examinable(package):
      log_warning(f"could not examine {escape(path)}")
      continue
    packages.append(package)

    if not include_tests:
      continue
    test_package = store.load(path + TEST_SUFFIX)
    if test_package is None:
      continue
    if not _examinable(test_package):
      log_warning(f"could not examine {escape(path + TEST_SUFFIX)}")
      continue
    packages.append(test_package)

  return packages
