"""
Pydantic Schemas for the Typed Syntax Export.

One JSON document describes one type-checked package as two flat tables:
resolved types and syntax nodes. Nodes reference their types and their child
nodes by id, and each file names its root node. Identifier and selector nodes
carry their resolution inline. No entry nests another.

Example::

    {
      "path": "example.com/m/internal",
      "name": "internal",
      "transitively_error_free": true,
      "types": [{"id": 0, "kind": "basic", "basic": "string"}],
      "nodes": [{"id": 0, "node": "Ident", "line": 2, "name": "internal"},
                {"id": 1, "node": "File", "line": 2, "children": [0]}],
      "files": [{"name": "all.go", "root": 1}]
    }
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from strconv_census.goast.info import ObjectKind, SelectionKind

TypeKindName = Literal[
  "basic",
  "slice",
  "array",
  "pointer",
  "map",
  "chan",
  "named",
  "signature",
  "struct",
  "interface",
  "tuple",
]


class TypeEntry(BaseModel):
  """A row of the package's type table."""

  id: int = Field(..., description="Identifier referenced by nodes and other types.")
  kind: TypeKindName
  basic: Optional[str] = Field(None, description="Go spelling of a basic type, e.g. 'untyped rune'.")
  elem: Optional[int] = Field(None, description="Element type (slice, array, pointer, map, chan).")
  key: Optional[int] = Field(None, description="Key type of a map.")
  length: Optional[int] = Field(None, description="Array length.")
  name: Optional[str] = Field(None, description="Declared name of a named type.")
  package: Optional[str] = Field(None, description="Import path declaring a named type.")
  underlying: Optional[int] = Field(None, description="Underlying type of a named type.")
  elems: List[int] = Field(default_factory=list, description="Tuple members.")


class ObjectEntry(BaseModel):
  """The object an identifier uses."""

  name: str
  kind: ObjectKind


class NodeEntry(BaseModel):
  """
  A syntax node.

  ``node`` names the Go AST node type. Shape-specific fields are only
  meaningful for their shape; any other shape lists its children in
  ``children``. Every child reference is the id of another entry.
  """

  model_config = ConfigDict(populate_by_name=True)

  id: int = Field(..., description="Identifier referenced by parent nodes and files.")
  node: str
  line: int = 0
  type_id: Optional[int] = Field(None, alias="type", description="Resolved type of an expression.")

  # Ident
  name: Optional[str] = None
  obj: Optional[ObjectEntry] = None

  # BasicLit
  value: Optional[str] = None
  lit: Optional[str] = None

  # ParenExpr, StarExpr, SelectorExpr
  x: Optional[int] = None
  sel: Optional[int] = None
  selection: Optional[SelectionKind] = None

  # CallExpr
  fun: Optional[int] = None
  args: List[int] = Field(default_factory=list)
  ellipsis: bool = False

  # ArrayType
  length: Optional[int] = Field(None, alias="len")
  elt: Optional[int] = None

  children: List[int] = Field(default_factory=list)


class FileEntry(BaseModel):
  name: str
  root: int = Field(..., description="Id of the file's File node.")


class PackageDocument(BaseModel):
  """Top-level export document for one package."""

  path: str
  name: str = ""
  transitively_error_free: bool = True
  types: List[TypeEntry] = Field(default_factory=list)
  nodes: List[NodeEntry] = Field(default_factory=list)
  files: List[FileEntry] = Field(default_factory=list)
