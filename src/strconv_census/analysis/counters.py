"""
Census Counters.

A single increment-only aggregate of classification outcomes. Counters for
separate packages are independent and combine with :meth:`Counters.merge`.
"""

from pydantic import BaseModel, Field

from strconv_census.enums import Category


class Counters(BaseModel):
  """
  Per-category counts plus traversal totals.
  """

  str_to_bytes: int = Field(0, description="[]byte(string)")
  str_to_runes: int = Field(0, description="[]rune(string)")
  bytes_to_str: int = Field(0, description="string([]byte)")
  rune_to_str: int = Field(0, description="string(rune)")
  byte_to_str: int = Field(0, description="string(byte)")
  plain_append: int = Field(0, description="append([]byte, string...)")
  plain_copy: int = Field(0, description="copy([]byte, string)")
  redundant_append: int = Field(0, description="append([]byte, []byte(string)...)")
  redundant_copy: int = Field(0, description="copy([]byte, []byte(string))")

  packages: int = Field(0, description="Packages examined.")
  lines: int = Field(0, description="Distinct source lines examined (logical lines of code).")

  def bump(self, category: Category) -> None:
    """
    Increments the count of a category by one.

    Args:
        category: The matched category.
    """
    setattr(self, category.field_name, getattr(self, category.field_name) + 1)

  def get(self, category: Category) -> int:
    """Returns the count recorded for ``category``."""
    return getattr(self, category.field_name)

  def merge(self, other: "Counters") -> "Counters":
    """
    Adds another set of counters into this one.

    Args:
        other: Counters from an independent traversal.

    Returns:
        Counters: ``self``, for chaining.
    """
    for name in type(self).model_fields:
      setattr(self, name, getattr(self, name) + getattr(other, name))
    return self
