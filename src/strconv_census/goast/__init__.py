"""
Go Syntax and Type Model.

In-memory representation of a type-checked Go package as delivered by the
typed syntax export:

    - ``types``: The closed set of Go types (basic, slice, named, ...).
    - ``nodes``: Syntax tree nodes, with explicit shapes for the expressions the
      conversion heuristics inspect.
    - ``info``: Resolution context (expression types, identifier uses, selections).
    - ``visitor``: Pre-order visitor base used by the analysis passes.
"""

from strconv_census.goast.info import Object, ObjectKind, Package, SelectionKind, TypeInfo
from strconv_census.goast.nodes import (
  ArrayType,
  BasicLit,
  CallExpr,
  File,
  Ident,
  Node,
  ParenExpr,
  SelectorExpr,
  StarExpr,
  unparen,
)
from strconv_census.goast.visitor import GoVisitor

__all__ = [
  "ArrayType",
  "BasicLit",
  "CallExpr",
  "File",
  "GoVisitor",
  "Ident",
  "Node",
  "Object",
  "ObjectKind",
  "Package",
  "ParenExpr",
  "SelectionKind",
  "SelectorExpr",
  "StarExpr",
  "TypeInfo",
  "unparen",
]
