"""
Kind Classification.

Maps a resolved Go type to one of the six :class:`~strconv_census.enums.Kind`
values. Classification is total: unresolved or unrecognized types are
``Kind.OTHER``.
"""

from typing import Optional

from strconv_census.enums import Kind
from strconv_census.goast.types import Basic, BasicKind, GoType, Named, Slice

_STRING_KINDS = {BasicKind.STRING, BasicKind.UNTYPED_STRING}

# UNTYPED_INT catches string(42). Only sound where the call is already known
# to be a legal conversion; every caller checks that first.
_RUNE_KINDS = {BasicKind.INT32, BasicKind.UNTYPED_RUNE, BasicKind.UNTYPED_INT}


def classify(go_type: Optional[GoType]) -> Kind:
  """
  Determines the conversion-relevant kind of a type.

  Named types classify as their underlying type, so ``type Bytes []byte`` is
  ``Kind.BYTES``.

  Args:
      go_type: A resolved type, or None when the checker recorded nothing.

  Returns:
      Kind: Exactly one kind; never raises.
  """
  go_type = _resolve(go_type)

  if isinstance(go_type, Basic):
    return _basic_kind(go_type)

  if isinstance(go_type, Slice):
    elem = _resolve(go_type.elem)
    if not isinstance(elem, Basic):
      return Kind.OTHER
    elem_kind = _basic_kind(elem)
    if elem_kind == Kind.BYTE:
      return Kind.BYTES
    if elem_kind == Kind.RUNE:
      return Kind.RUNES
    return Kind.OTHER

  return Kind.OTHER


def _resolve(go_type: Optional[GoType]) -> Optional[GoType]:
  if isinstance(go_type, Named):
    return go_type.underlying()
  return go_type


def _basic_kind(basic: Basic) -> Kind:
  if basic.kind in _STRING_KINDS:
    return Kind.STRING
  if basic.kind == BasicKind.UINT8:
    return Kind.BYTE
  if basic.kind in _RUNE_KINDS:
    return Kind.RUNE
  return Kind.OTHER
