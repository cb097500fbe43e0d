"""
Enumerations for strconv-census.

This module defines the closed classification vocabularies shared by the
analysis, the configuration layer and the report.
"""

from enum import Enum
from typing import Dict


class Kind(str, Enum):
  """
  Semantic kind of a type with respect to text/byte/rune conversions.

  Values are the Go spellings used in diagnostics.
  """

  OTHER = "<other>"
  STRING = "string"
  BYTES = "[]byte"
  RUNES = "[]rune"
  BYTE = "byte"
  RUNE = "rune"


class Category(str, Enum):
  """
  Counted conversion categories, in report order.

  The value is the name accepted on the command line and in
  ``[tool.strconv_census]``; ``label`` is the Go-shaped report label.
  """

  STR_TO_BYTES = "str2bytes"
  STR_TO_RUNES = "str2runes"
  BYTES_TO_STR = "bytes2str"
  RUNE_TO_STR = "rune2str"
  BYTE_TO_STR = "byte2str"
  PLAIN_APPEND = "append"
  PLAIN_COPY = "copy"
  REDUNDANT_APPEND = "redundant-append"
  REDUNDANT_COPY = "redundant-copy"

  @property
  def label(self) -> str:
    """The Go expression shape counted under this category."""
    return _LABELS[self]

  @property
  def field_name(self) -> str:
    """Attribute name on :class:`~strconv_census.analysis.counters.Counters`."""
    return self.name.lower()


_LABELS: Dict[Category, str] = {
  Category.STR_TO_BYTES: "[]byte(string)",
  Category.STR_TO_RUNES: "[]rune(string)",
  Category.BYTES_TO_STR: "string([]byte)",
  Category.RUNE_TO_STR: "string(rune)",
  Category.BYTE_TO_STR: "string(byte)",
  Category.PLAIN_APPEND: "append([]byte, string...)",
  Category.PLAIN_COPY: "copy([]byte, string)",
  Category.REDUNDANT_APPEND: "append([]byte, []byte(string)...)",
  Category.REDUNDANT_COPY: "copy([]byte, []byte(string))",
}
