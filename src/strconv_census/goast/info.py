"""
Resolution Context.

``TypeInfo`` is the read-only result of type checking one package: which type
each expression has, which object each identifier refers to, and which
selector expressions are field or method selections (as opposed to
package-qualified names). The analysis receives it explicitly for every call
it inspects; it is never stored globally.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from strconv_census.goast.nodes import File, Ident, Node, SelectorExpr
from strconv_census.goast.types import GoType


class ObjectKind(str, Enum):
  """What a resolved identifier denotes."""

  BUILTIN = "builtin"
  FUNC = "func"
  VAR = "var"
  CONST = "const"
  TYPE = "type"
  PACKAGE = "package"
  LABEL = "label"
  NIL = "nil"


class SelectionKind(str, Enum):
  """Kinds of ``x.f`` selections, mirroring ``types.SelectionKind``."""

  FIELD = "field"
  METHOD = "method"
  METHOD_EXPR = "method_expr"


@dataclass(frozen=True)
class Object:
  """A declared entity an identifier resolves to."""

  name: str
  kind: ObjectKind


@dataclass
class TypeInfo:
  """
  Resolution maps for a single package, keyed by node identity.

  Attributes:
      types: Expression -> resolved type.
      uses: Identifier -> the object it refers to.
      selections: Selector expression -> selection kind. Package-qualified
          names (``pkg.Name``) have no entry.
  """

  types: Dict[Node, GoType] = field(default_factory=dict)
  uses: Dict[Ident, Object] = field(default_factory=dict)
  selections: Dict[SelectorExpr, SelectionKind] = field(default_factory=dict)

  def type_of(self, expr: Optional[Node]) -> Optional[GoType]:
    """
    Looks up the type recorded for an expression.

    Args:
        expr: Any node (or None).

    Returns:
        The resolved type, or None if the checker recorded none.
    """
    if expr is None:
      return None
    return self.types.get(expr)

  def object_of(self, ident: Node) -> Optional[Object]:
    """Returns the object an identifier uses, if any."""
    if not isinstance(ident, Ident):
      return None
    return self.uses.get(ident)

  def selection_of(self, selector: SelectorExpr) -> Optional[SelectionKind]:
    """Returns the selection kind of ``x.f``, or None for a qualified name."""
    return self.selections.get(selector)


@dataclass
class Package:
  """
  A type-checked package ready for analysis.

  Attributes:
      path: Import path (``_test`` suffixed for external test packages).
      name: Package clause name.
      files: Parsed files in load order.
      info: Resolution context shared by all files of the package.
      transitively_error_free: False if this package or any dependency failed to type-check.
  """

  path: str
  name: str = ""
  files: List[File] = field(default_factory=list)
  info: TypeInfo = field(default_factory=TypeInfo)
  transitively_error_free: bool = True
