"""
Conversion Recognition.

Decides whether a call expression such as ``string(bs)``, ``[]byte(s)``,
``p.Bytes(s)`` or ``(*T)(x)`` is a type conversion rather than a call.

Go spells conversions and calls identically, so the decision combines the
callee's syntactic shape with the type the checker recorded for it:

1.  **Arity**: exactly one argument and no ``...`` marker.
2.  **Selections**: ``x.f(...)`` where ``x.f`` is a field or method selection
    is always a call. Package-qualified names (``pkg.T``) are reduced to ``T``.
3.  **Type expressions**: ``[]T(...)``/``[N]T(...)`` and ``*T(...)`` callees can
    only be conversions.
4.  **Identifiers**: accepted when the callee's type is a basic type, or a named
    type whose declared name is the identifier itself. A function or variable
    has a signature (or unrelated) type and is rejected.

Cases outside these shapes (generic instantiations, function literals,
index expressions) are rejected; missing a rare conversion is preferable to
counting a call.
"""

from dataclasses import dataclass
from typing import Optional

from strconv_census.goast.info import TypeInfo
from strconv_census.goast.nodes import ArrayType, CallExpr, Ident, Node, SelectorExpr, StarExpr, unparen
from strconv_census.goast.types import Basic, GoType, Named


@dataclass(frozen=True)
class ConversionMatch:
  """
  A recognized conversion ``target(argument)``.

  Attributes:
      target: Type converted to; None if the checker recorded no type for the callee.
      argument: The single converted expression.
  """

  target: Optional[GoType]
  argument: Node


def try_conversion(info: TypeInfo, node: Node) -> Optional[ConversionMatch]:
  """
  Recognizes a conversion expression.

  Args:
      info: Resolution context of the package containing ``node``.
      node: Any syntax node; non-calls are rejected.

  Returns:
      ConversionMatch if ``node`` is a conversion, else None.
  """
  if not isinstance(node, CallExpr):
    return None
  if len(node.args) != 1 or node.ellipsis:
    return None

  target = info.type_of(node.fun)
  callee = unparen(node.fun)

  # Only interested in the T from pkg.T.
  if isinstance(callee, SelectorExpr):
    if info.selection_of(callee) is not None:
      return None
    callee = callee.sel

  if isinstance(callee, (ArrayType, StarExpr)):
    return ConversionMatch(target=target, argument=node.args[0])

  if isinstance(callee, Ident) and _names_type(callee, target):
    return ConversionMatch(target=target, argument=node.args[0])

  return None


def _names_type(ident: Ident, target: Optional[GoType]) -> bool:
  if isinstance(target, Basic):
    return True
  if isinstance(target, Named):
    return target.name == ident.name
  return False
