"""
Package Enumeration via ``go list``.

Expands package patterns (``./...``, ``std``, ``golang.org/x/tools/...``)
into import paths, excluding vendored copies.
"""

import subprocess
from typing import List, Optional, Sequence

from strconv_census.errors import PackageListError


def build_go_list_command(patterns: Sequence[str], tags: Sequence[str] = (), go_binary: str = "go") -> List[str]:
  """
  Assembles the ``go list`` command line.

  Args:
      patterns: Package patterns to expand.
      tags: Build tags to apply.
      go_binary: Name or path of the go tool.

  Returns:
      List[str]: argv suitable for ``subprocess.run``.
  """
  cmd = [go_binary, "list"]
  if tags:
    cmd.append(f"-tags={','.join(tags)}")
  cmd.append("--")
  cmd.extend(patterns)
  return cmd


def is_vendored(import_path: str) -> bool:
  """True if any element of the import path is ``vendor``."""
  return "/vendor/" in f"/{import_path}/"


def go_list(
  patterns: Sequence[str],
  tags: Sequence[str] = (),
  go_binary: str = "go",
  cwd: Optional[str] = None,
) -> List[str]:
  """
  Lists the non-vendored import paths matching ``patterns``.

  Args:
      patterns: Package patterns passed to ``go list``.
      tags: Build tags.
      go_binary: Name or path of the go tool.
      cwd: Directory to run in (module root); defaults to the current directory.

  Returns:
      List[str]: Import paths in ``go list`` order.

  Raises:
      PackageListError: If the tool cannot be executed or exits non-zero.
  """
  cmd = build_go_list_command(patterns, tags, go_binary)
  try:
    proc = subprocess.run(cmd, capture_output=True, text=True, cwd=cwd)
  except OSError as e:
    raise PackageListError(f"could not exec go list: {e}") from e

  if proc.returncode != 0:
    detail = proc.stderr.strip() or f"exit status {proc.returncode}"
    raise PackageListError(f"go list failed: {detail}")

  paths = []
  for line in proc.stdout.splitlines():
    name = line.strip()
    if name and not is_vendored(name):
      paths.append(name)
  return paths
