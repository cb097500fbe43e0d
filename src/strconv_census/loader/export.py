"""
Typed Syntax Export Store.

Reads per-package JSON documents from an export directory and decodes them
into :class:`~strconv_census.goast.info.Package` objects. The document for
import path ``a/b/c`` lives at ``<root>/a/b/c.json``; its external test
package at ``<root>/a/b/c_test.json``.
"""

import json
from pathlib import Path
from typing import Callable, Dict, List, Optional, Set, Tuple

from pydantic import ValidationError

from strconv_census.errors import LoadError
from strconv_census.goast.info import Object, Package, TypeInfo
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
)
from strconv_census.goast.types import (
  Array,
  Basic,
  BasicKind,
  Chan,
  GoType,
  Interface,
  Map,
  Named,
  Pointer,
  Signature,
  Slice,
  Struct,
  Tuple as GoTuple,
)
from strconv_census.loader.schema import NodeEntry, PackageDocument, TypeEntry

TEST_SUFFIX = "_test"


class ExportStore:
  """
  A directory of typed syntax export documents.

  Attributes:
      root: Directory holding the documents.
  """

  def __init__(self, root: Path):
    """
    Initialize the store.

    Args:
        root: Export directory.

    Raises:
        LoadError: If ``root`` is not an existing directory.
    """
    self.root = Path(root)
    if not self.root.is_dir():
      raise LoadError(f"export directory not found: {self.root}")

  def document_path(self, import_path: str) -> Path:
    """Maps an import path to its document location."""
    *dirs, last = import_path.split("/")
    return self.root.joinpath(*dirs) / f"{last}.json"

  def read(self, import_path: str) -> Optional[PackageDocument]:
    """
    Reads and validates the document of a package.

    Args:
        import_path: Package import path.

    Returns:
        The validated document, or None if the package was not exported.

    Raises:
        LoadError: If the document exists but cannot be read or validated.
    """
    path = self.document_path(import_path)
    if not path.is_file():
      return None
    try:
      with open(path, "r", encoding="utf-8") as f:
        content = json.load(f)
      return PackageDocument.model_validate(content)
    except (OSError, json.JSONDecodeError) as e:
      raise LoadError(f"could not read {path}: {e}") from e
    except ValidationError as e:
      raise LoadError(f"invalid export document {path}: {e}") from e

  def load(self, import_path: str) -> Optional[Package]:
    """
    Reads and decodes a package.

    Args:
        import_path: Package import path.

    Returns:
        The decoded package, or None if it was not exported.
    """
    doc = self.read(import_path)
    if doc is None:
      return None
    return decode_package(doc)


def decode_package(doc: PackageDocument) -> Package:
  """
  Builds the in-memory package and its resolution context from a document.

  Args:
      doc: A validated export document.

  Returns:
      Package: Files and ``TypeInfo`` populated from the document.

  Raises:
      LoadError: On dangling type or node references, nodes shared between
          parents, or malformed node shapes.
  """
  types = _build_types(doc.types)
  info = TypeInfo()
  nodes, parented = _build_nodes(doc, types, info)

  files = []
  roots: Set[int] = set()
  for file_entry in doc.files:
    root = nodes.get(file_entry.root)
    if root is None:
      raise LoadError(f"{doc.path}: {file_entry.name} has dangling root node {file_entry.root}")
    if not isinstance(root, File) or file_entry.root in roots or file_entry.root in parented:
      raise LoadError(f"{doc.path}: root {file_entry.root} of {file_entry.name} is not a top-level File node")
    roots.add(file_entry.root)
    root.name = file_entry.name
    files.append(root)

  return Package(
    path=doc.path,
    name=doc.name,
    files=files,
    info=info,
    transitively_error_free=doc.transitively_error_free,
  )


def _type_refs(entry: TypeEntry) -> List[Optional[int]]:
  if entry.kind in ("slice", "array", "pointer", "chan"):
    return [entry.elem]
  if entry.kind == "map":
    return [entry.key, entry.elem]
  if entry.kind == "tuple":
    return list(entry.elems)
  return []


def _build_types(entries: List[TypeEntry]) -> Dict[int, GoType]:
  by_id = {entry.id: entry for entry in entries}
  built: Dict[int, GoType] = {}
  resolving: Set[int] = set()

  # Named types first, so references through them terminate.
  for entry in entries:
    if entry.kind == "named":
      built[entry.id] = Named(name=entry.name or "", package=entry.package or "")

  def checked(type_id: Optional[int], owner: int) -> int:
    if type_id is None:
      raise LoadError(f"type {owner}: missing type reference")
    if type_id not in by_id:
      raise LoadError(f"type {owner}: dangling reference to type {type_id}")
    return type_id

  # Depth-first over element references, children before parents.
  for entry in entries:
    stack = [entry.id]
    while stack:
      type_id = stack[-1]
      if type_id in built:
        stack.pop()
        continue
      current = by_id[type_id]
      pending = [ref for ref in (checked(r, type_id) for r in _type_refs(current)) if ref not in built]
      if not pending:
        built[type_id] = _make_type(current, built)
        resolving.discard(type_id)
        stack.pop()
        continue
      if any(ref in resolving for ref in pending):
        raise LoadError(f"type {type_id}: cycle not broken by a named type")
      resolving.add(type_id)
      stack.extend(pending)

  for entry in entries:
    if entry.kind == "named":
      built[entry.id].bind(built[checked(entry.underlying, entry.id)])

  return built


def _make_type(entry: TypeEntry, built: Dict[int, GoType]) -> GoType:
  if entry.kind == "basic":
    try:
      return Basic(BasicKind.from_name(entry.basic or ""))
    except ValueError as e:
      raise LoadError(f"type {entry.id}: unknown basic type {entry.basic!r}") from e
  if entry.kind == "slice":
    return Slice(built[entry.elem])
  if entry.kind == "array":
    return Array(built[entry.elem], entry.length or 0)
  if entry.kind == "pointer":
    return Pointer(built[entry.elem])
  if entry.kind == "map":
    return Map(built[entry.key], built[entry.elem])
  if entry.kind == "chan":
    return Chan(built[entry.elem])
  if entry.kind == "signature":
    return Signature()
  if entry.kind == "struct":
    return Struct()
  if entry.kind == "interface":
    return Interface()
  if entry.kind == "tuple":
    return GoTuple([built[e] for e in entry.elems])
  raise LoadError(f"type {entry.id}: unsupported kind {entry.kind!r}")


def _build_nodes(
  doc: PackageDocument, types: Dict[int, GoType], info: TypeInfo
) -> Tuple[Dict[int, Node], Set[int]]:
  """
  Creates every node of the table, then links children by id.

  Each node may have at most one parent, so the linked nodes reachable from
  the file roots always form trees.
  """
  built: Dict[int, Node] = {}
  for entry in doc.nodes:
    if entry.id in built:
      raise LoadError(f"{doc.path}: duplicate node id {entry.id}")
    built[entry.id] = _make_node(entry)

  parents: Dict[int, int] = {}

  def child(node_id: Optional[int], owner: NodeEntry) -> Optional[Node]:
    if node_id is None:
      return None
    node = built.get(node_id)
    if node is None:
      raise LoadError(f"{doc.path}:{owner.line}: {owner.node} references unknown node {node_id}")
    if node_id in parents:
      raise LoadError(f"{doc.path}:{owner.line}: node {node_id} has more than one parent")
    parents[node_id] = owner.id
    return node

  for entry in doc.nodes:
    node = built[entry.id]
    _link_node(node, entry, lambda node_id: child(node_id, entry), doc.path)

    if entry.obj is not None and isinstance(node, Ident):
      info.uses[node] = Object(name=entry.obj.name, kind=entry.obj.kind)
    if entry.selection is not None and isinstance(node, SelectorExpr):
      info.selections[node] = entry.selection
    if entry.type_id is not None:
      go_type = types.get(entry.type_id)
      if go_type is None:
        raise LoadError(f"{doc.path}:{entry.line}: {entry.node} references unknown type {entry.type_id}")
      info.types[node] = go_type

  return built, set(parents)


def _make_node(entry: NodeEntry) -> Node:
  shape = entry.node
  if shape == "File":
    return File(line=entry.line)
  if shape == "Ident":
    return Ident(name=entry.name or "", line=entry.line)
  if shape == "BasicLit":
    return BasicLit(value=entry.value or "", token=entry.lit or "", line=entry.line)
  if shape == "ParenExpr":
    return ParenExpr(line=entry.line)
  if shape == "StarExpr":
    return StarExpr(line=entry.line)
  if shape == "SelectorExpr":
    return SelectorExpr(line=entry.line)
  if shape == "CallExpr":
    return CallExpr(ellipsis=entry.ellipsis, line=entry.line)
  if shape == "ArrayType":
    return ArrayType(line=entry.line)
  return Node(kind=shape, line=entry.line)


def _link_node(node: Node, entry: NodeEntry, child: Callable[[Optional[int]], Optional[Node]], pkg_path: str) -> None:
  if isinstance(node, (ParenExpr, StarExpr)):
    node.x = child(entry.x)
  elif isinstance(node, SelectorExpr):
    node.x = child(entry.x)
    sel = child(entry.sel)
    if not isinstance(sel, Ident):
      raise LoadError(f"{pkg_path}:{entry.line}: selector without identifier")
    node.sel = sel
  elif isinstance(node, CallExpr):
    node.fun = child(entry.fun)
    node.args = [child(arg) for arg in entry.args]
  elif isinstance(node, ArrayType):
    node.length = child(entry.length)
    node.elt = child(entry.elt)
  elif not isinstance(node, (Ident, BasicLit)):
    node.nodes = [child(c) for c in entry.children]
