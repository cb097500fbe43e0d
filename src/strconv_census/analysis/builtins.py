"""
Builtin Bulk-Copy Recognition.

Recognizes ``append(dst, src...)`` and ``copy(dst, src)`` where ``dst`` is a
byte slice and ``src`` is either a string (which both builtins accept
directly) or a ``[]byte(string)`` conversion that could have been dropped.
"""

from typing import Optional

from strconv_census.analysis.conversion import try_conversion
from strconv_census.analysis.kinds import classify
from strconv_census.enums import Category, Kind
from strconv_census.goast.info import ObjectKind, TypeInfo
from strconv_census.goast.nodes import CallExpr, Ident

APPEND = "append"
COPY = "copy"


def try_builtin(info: TypeInfo, call: CallExpr) -> Optional[Category]:
  """
  Classifies a call to the ``append`` or ``copy`` builtin.

  A ``[]byte(string)`` second argument is reported under the redundant
  category only; it never also counts as a plain append/copy.

  Args:
      info: Resolution context of the package containing ``call``.
      call: The call expression to inspect.

  Returns:
      The matched category, or None when the call is not of interest.
  """
  if not isinstance(call.fun, Ident):
    return None

  obj = info.object_of(call.fun)
  if obj is None or obj.kind != ObjectKind.BUILTIN:
    return None

  if obj.name == APPEND:
    # Only append(X, Y...).
    if len(call.args) != 2 or not call.ellipsis:
      return None
    plain, redundant = Category.PLAIN_APPEND, Category.REDUNDANT_APPEND
  elif obj.name == COPY:
    if len(call.args) != 2:
      return None
    plain, redundant = Category.PLAIN_COPY, Category.REDUNDANT_COPY
  else:
    return None

  dst, src = call.args
  if classify(info.type_of(dst)) != Kind.BYTES:
    return None

  src_kind = classify(info.type_of(src))
  if src_kind == Kind.BYTES:
    match = try_conversion(info, src)
    if match is None or classify(info.type_of(match.argument)) != Kind.STRING:
      return None
    return redundant

  if src_kind == Kind.STRING:
    return plain
  return None
