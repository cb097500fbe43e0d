"""
Go Syntax Tree Model.

Nodes are plain dataclasses compared by identity, so they can key the
resolution maps of :class:`~strconv_census.goast.info.TypeInfo` the same way
Go's ``types.Info`` is keyed by ``ast.Expr`` pointers.

Only the expression shapes the conversion heuristics inspect are modelled
explicitly. Every other construct (statements, declarations, literals, other
expressions) is carried as a generic :class:`Node` so that traversal and line
counting still see it.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional


@dataclass(eq=False)
class Node:
  """
  A generic syntax node.

  Attributes:
      kind: Go AST node name (e.g. "AssignStmt", "FuncDecl").
      line: 1-based source line of the node's start; 0 when it has no position.
      nodes: Child nodes in source order.
  """

  kind: str = "Node"
  line: int = 0
  nodes: List["Node"] = field(default_factory=list)

  def children(self) -> Iterator["Node"]:
    """Yields direct children in source order."""
    yield from self.nodes


@dataclass(eq=False)
class Ident(Node):
  name: str = ""
  kind: str = "Ident"


@dataclass(eq=False)
class BasicLit(Node):
  """A literal such as ``42``, ``'r'`` or ``"s"``; ``token`` is INT, CHAR, STRING, ..."""

  value: str = ""
  token: str = ""
  kind: str = "BasicLit"


@dataclass(eq=False)
class ParenExpr(Node):
  x: Optional[Node] = None
  kind: str = "ParenExpr"

  def children(self) -> Iterator[Node]:
    if self.x is not None:
      yield self.x


@dataclass(eq=False)
class SelectorExpr(Node):
  """``x.sel``: either a package-qualified name or a field/method selection."""

  x: Optional[Node] = None
  sel: Optional[Ident] = None
  kind: str = "SelectorExpr"

  def children(self) -> Iterator[Node]:
    if self.x is not None:
      yield self.x
    if self.sel is not None:
      yield self.sel


@dataclass(eq=False)
class CallExpr(Node):
  """
  ``fun(args...)``, which may be a function call or a conversion.

  Attributes:
      fun: The callee expression.
      args: Argument expressions.
      ellipsis: True when the last argument carries the ``...`` marker.
  """

  fun: Optional[Node] = None
  args: List[Node] = field(default_factory=list)
  ellipsis: bool = False
  kind: str = "CallExpr"

  def children(self) -> Iterator[Node]:
    if self.fun is not None:
      yield self.fun
    yield from self.args


@dataclass(eq=False)
class ArrayType(Node):
  """``[len]elt``, or ``[]elt`` for slices (``length`` is None)."""

  length: Optional[Node] = None
  elt: Optional[Node] = None
  kind: str = "ArrayType"

  def children(self) -> Iterator[Node]:
    if self.length is not None:
      yield self.length
    if self.elt is not None:
      yield self.elt


@dataclass(eq=False)
class StarExpr(Node):
  """``*x``: a pointer type or a dereference."""

  x: Optional[Node] = None
  kind: str = "StarExpr"

  def children(self) -> Iterator[Node]:
    if self.x is not None:
      yield self.x


@dataclass(eq=False)
class File(Node):
  """
  A parsed source file.

  Attributes:
      name: File name as recorded by the exporter (usually an absolute path).
  """

  name: str = ""
  kind: str = "File"


def unparen(node: Optional[Node]) -> Optional[Node]:
  """
  Strips any number of enclosing parentheses.

  Args:
      node: An expression, possibly parenthesized.

  Returns:
      The innermost non-parenthesized expression.
  """
  while isinstance(node, ParenExpr):
    node = node.x
  return node

