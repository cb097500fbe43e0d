"""
Tests for Kind Classification.

Verifies:
1.  Basic types map to String/Byte/Rune, including untyped constant kinds.
2.  Slices of byte/rune map to Bytes/Runes, through named element types too.
3.  Named types classify as their underlying type.
4.  Totality: every type (and None) maps to exactly one Kind, deterministically.
"""

import pytest
from hypothesis import given, strategies as st

from strconv_census.analysis.kinds import classify
from strconv_census.enums import Kind
from strconv_census.goast.types import (
  Array,
  Basic,
  BasicKind,
  Chan,
  Interface,
  Map,
  Named,
  Pointer,
  Signature,
  Slice,
  Struct,
  Tuple,
)

from gosyntax import BYTE, BYTES, RUNE, RUNES, STRING, named


@pytest.mark.parametrize(
  "basic, expected",
  [
    (BasicKind.STRING, Kind.STRING),
    (BasicKind.UNTYPED_STRING, Kind.STRING),
    (BasicKind.UINT8, Kind.BYTE),
    (BasicKind.INT32, Kind.RUNE),
    (BasicKind.UNTYPED_RUNE, Kind.RUNE),
    (BasicKind.UNTYPED_INT, Kind.RUNE),
    (BasicKind.INT, Kind.OTHER),
    (BasicKind.UINT16, Kind.OTHER),
    (BasicKind.INT8, Kind.OTHER),
    (BasicKind.UNTYPED_FLOAT, Kind.OTHER),
    (BasicKind.BOOL, Kind.OTHER),
  ],
)
def test_basic_kinds(basic, expected):
  assert classify(Basic(basic)) == expected


def test_byte_and_rune_aliases():
  assert BasicKind.from_name("byte") == BasicKind.UINT8
  assert BasicKind.from_name("rune") == BasicKind.INT32
  assert classify(Basic(BasicKind.from_name("byte"))) == Kind.BYTE


def test_slices():
  assert classify(BYTES) == Kind.BYTES
  assert classify(RUNES) == Kind.RUNES
  assert classify(Slice(STRING)) == Kind.OTHER
  assert classify(Slice(BYTES)) == Kind.OTHER


def test_nested_slices_are_other():
  assert classify(Slice(Slice(RUNE))) == Kind.OTHER
  assert classify(Slice(named("Bytes", BYTES))) == Kind.OTHER


def test_named_types_unwrap():
  assert classify(named("String", STRING)) == Kind.STRING
  assert classify(named("Bytes", BYTES)) == Kind.BYTES
  assert classify(named("Runes", RUNES)) == Kind.RUNES
  assert classify(named("Byte", BYTE)) == Kind.BYTE
  assert classify(named("Rune", RUNE)) == Kind.RUNE


def test_slice_of_named_element():
  my_byte = named("MyByte", BYTE)
  assert classify(Slice(my_byte)) == Kind.BYTES


def test_named_over_named_element_slice():
  assert classify(named("Buf", Slice(named("B", BYTE)))) == Kind.BYTES


def test_recursive_named_type_terminates():
  node = Named(name="List")
  node.bind(Slice(node))
  assert classify(node) == Kind.OTHER


def test_unbound_named_is_other():
  assert classify(Named(name="Pending")) == Kind.OTHER


@pytest.mark.parametrize(
  "go_type",
  [
    None,
    Array(BYTE, 4),
    Pointer(STRING),
    Map(STRING, BYTES),
    Chan(BYTE),
    Signature(),
    Struct(),
    Interface(),
    Tuple([STRING, BYTES]),
  ],
)
def test_everything_else_is_other(go_type):
  assert classify(go_type) == Kind.OTHER


_basic = st.sampled_from(list(BasicKind)).map(Basic)
_types = st.recursive(
  _basic,
  lambda inner: st.one_of(
    inner.map(Slice),
    inner.map(Pointer),
    st.tuples(inner, st.integers(0, 8)).map(lambda t: Array(*t)),
    st.tuples(inner, inner).map(lambda t: Map(*t)),
    inner.map(lambda u: named("T", u)),
  ),
  max_leaves=6,
)


@given(_types)
def test_classification_is_total_and_deterministic(go_type):
  first = classify(go_type)
  assert first in set(Kind)
  assert classify(go_type) == first
