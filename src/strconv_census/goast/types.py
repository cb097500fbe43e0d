"""
Go Type Representation.

A closed set of dataclasses mirroring the Go type system as reported by a
type checker. Only the distinctions the census reasons about are modelled in
detail (basic kinds, slices and named types); the remaining composite types
exist so that every resolved expression has *some* type and classification
stays total.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class BasicKind(str, Enum):
  """
  Kinds of Go basic (predeclared) types, keyed by their Go spelling.

  ``byte`` and ``rune`` are not separate kinds: they alias ``uint8`` and
  ``int32`` exactly as go/types spells them.
  """

  INVALID = "invalid type"
  BOOL = "bool"
  INT = "int"
  INT8 = "int8"
  INT16 = "int16"
  INT32 = "int32"
  INT64 = "int64"
  UINT = "uint"
  UINT8 = "uint8"
  UINT16 = "uint16"
  UINT32 = "uint32"
  UINT64 = "uint64"
  UINTPTR = "uintptr"
  FLOAT32 = "float32"
  FLOAT64 = "float64"
  COMPLEX64 = "complex64"
  COMPLEX128 = "complex128"
  STRING = "string"
  UNSAFE_POINTER = "unsafe.Pointer"

  UNTYPED_BOOL = "untyped bool"
  UNTYPED_INT = "untyped int"
  UNTYPED_RUNE = "untyped rune"
  UNTYPED_FLOAT = "untyped float"
  UNTYPED_COMPLEX = "untyped complex"
  UNTYPED_STRING = "untyped string"
  UNTYPED_NIL = "untyped nil"

  @classmethod
  def from_name(cls, name: str) -> "BasicKind":
    """
    Resolves a Go spelling (including the ``byte``/``rune`` aliases) to a kind.

    Args:
        name: Go type name, e.g. "string", "byte", "untyped rune".

    Returns:
        BasicKind: The matching kind.

    Raises:
        ValueError: If the name is not a Go basic type.
    """
    return cls(_ALIASES.get(name, name))


_ALIASES = {"byte": "uint8", "rune": "int32"}


class GoType:
  """Marker base for all resolved Go types."""

  def underlying(self) -> "GoType":
    """Returns the underlying type; only named types differ from themselves."""
    return self


@dataclass(frozen=True)
class Basic(GoType):
  kind: BasicKind

  def __str__(self) -> str:
    return self.kind.value


@dataclass(frozen=True)
class Slice(GoType):
  elem: GoType

  def __str__(self) -> str:
    return f"[]{self.elem}"


@dataclass(frozen=True)
class Array(GoType):
  elem: GoType
  length: int

  def __str__(self) -> str:
    return f"[{self.length}]{self.elem}"


@dataclass(frozen=True)
class Pointer(GoType):
  elem: GoType

  def __str__(self) -> str:
    return f"*{self.elem}"


@dataclass(frozen=True)
class Map(GoType):
  key: GoType
  elem: GoType

  def __str__(self) -> str:
    return f"map[{self.key}]{self.elem}"


@dataclass(frozen=True)
class Chan(GoType):
  elem: GoType

  def __str__(self) -> str:
    return f"chan {self.elem}"


@dataclass(frozen=True)
class Signature(GoType):
  def __str__(self) -> str:
    return "func"


@dataclass(frozen=True)
class Struct(GoType):
  def __str__(self) -> str:
    return "struct{...}"


@dataclass(frozen=True)
class Interface(GoType):
  def __str__(self) -> str:
    return "interface{...}"


@dataclass(frozen=True)
class Tuple(GoType):
  elems: List[GoType] = field(default_factory=list, hash=False)

  def __str__(self) -> str:
    return "(" + ", ".join(str(t) for t in self.elems) + ")"


@dataclass(eq=False)
class Named(GoType):
  """
  A defined (named) type such as ``type Bytes []byte``.

  Compared by identity, like Go's type objects. ``bind`` sets the underlying
  type after construction so recursive declarations can be represented.

  Attributes:
      name: Declared type name (without package qualifier).
      package: Import path of the declaring package ("" for universe types such as ``error``).
  """

  name: str
  package: str = ""
  _underlying: Optional[GoType] = field(default=None, repr=False)

  def bind(self, underlying: GoType) -> None:
    """
    Sets the underlying type.

    Args:
        underlying: The type this named type is defined over.
    """
    self._underlying = underlying

  def underlying(self) -> GoType:
    """
    Resolves the underlying representation, following chains of named types.

    Returns:
        GoType: A non-named type, or ``Basic(INVALID)`` if unbound.
    """
    seen = set()
    current: GoType = self
    while isinstance(current, Named):
      if id(current) in seen or current._underlying is None:
        return Basic(BasicKind.INVALID)
      seen.add(id(current))
      current = current._underlying
    return current

  def __str__(self) -> str:
    return f"{self.package}.{self.name}" if self.package else self.name


# Universe types used throughout the analysis and tests.
STRING = Basic(BasicKind.STRING)
BYTE = Basic(BasicKind.UINT8)
RUNE = Basic(BasicKind.INT32)
UNTYPED_INT = Basic(BasicKind.UNTYPED_INT)
UNTYPED_RUNE = Basic(BasicKind.UNTYPED_RUNE)
UNTYPED_STRING = Basic(BasicKind.UNTYPED_STRING)
