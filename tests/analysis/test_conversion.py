"""
Tests for Conversion Recognition.

Covers the accepted shapes (basic and named type identifiers, qualified type
names, slice/pointer type expressions, parentheses) and the rejected ones
(functions, methods, fields, variables, wrong arity, ``...``).
"""

from strconv_census.analysis.conversion import try_conversion
from strconv_census.goast.info import ObjectKind, SelectionKind
from strconv_census.goast.nodes import Node
from strconv_census.goast.types import Pointer, Signature

from gosyntax import BYTE, BYTES, STRING, Syntax, named


def test_basic_identifier_conversion():
  src = Syntax()
  bs = src.var("bs", BYTES)
  call = src.conv(src.type_name("string", STRING), bs)

  match = try_conversion(src.info, call)

  assert match is not None
  assert match.target == STRING
  assert match.argument is bs


def test_slice_type_conversion():
  src = Syntax()
  s = src.var("s", STRING)
  call = src.conv(src.slice_of("byte", BYTE), s)

  match = try_conversion(src.info, call)

  assert match is not None
  assert match.target == BYTES
  assert match.argument is s


def test_parenthesized_callee():
  src = Syntax()
  call = src.conv(src.paren(src.paren(src.type_name("string", STRING))), src.var("bs", BYTES))
  assert try_conversion(src.info, call) is not None


def test_pointer_type_conversion():
  """Scenario: (*T)(x)."""
  src = Syntax()
  t = named("T", STRING, package="example.com/m/internal")
  fun = src.paren(src.star(src.type_name("T", t), Pointer(t)))
  call = src.conv(fun, src.var("x", Pointer(t)))

  match = try_conversion(src.info, call)
  assert match is not None
  assert match.target == Pointer(t)


def test_local_named_type_conversion():
  src = Syntax()
  my_bytes = named("MyBytes", BYTES, package="example.com/m/internal")
  call = src.conv(src.type_name("MyBytes", my_bytes), src.var("s", STRING))

  match = try_conversion(src.info, call)
  assert match is not None
  assert match.target is my_bytes


def test_qualified_named_type_conversion():
  """Scenario: p.Bytes(s) where p declares `type Bytes []byte`."""
  src = Syntax()
  p_bytes = named("Bytes", BYTES)
  call = src.conv(src.qualified("p", "Bytes", p_bytes), src.var("s", STRING))

  match = try_conversion(src.info, call)
  assert match is not None
  assert match.target is p_bytes


def test_qualified_function_call_rejected():
  """Scenario: wrapper.String(bs) where String is a function."""
  src = Syntax()
  fun = src.qualified("wrapper", "String", Signature(), ObjectKind.FUNC)
  call = src.call(fun, src.var("bs", BYTES), result=STRING)
  assert try_conversion(src.info, call) is None


def test_local_function_call_rejected():
  src = Syntax()
  call = src.call(src.func("Bytes"), src.var("s", STRING), result=BYTES)
  assert try_conversion(src.info, call) is None


def test_method_call_rejected():
  src = Syntax()
  receiver = src.var("buf", named("Buffer", BYTES))
  call = src.call(src.select(receiver, "String", Signature(), SelectionKind.METHOD), result=STRING)
  call.args.append(src.var("x", BYTES))
  assert try_conversion(src.info, call) is None


def test_field_of_same_named_type_rejected():
  """
  Scenario: h.Bytes(s) where field Bytes has a func type named Bytes.
  Without the selection check the name test alone would accept it.
  """
  src = Syntax()
  func_named = named("Bytes", Signature())
  holder = src.var("h", named("Holder", STRING))
  call = src.call(src.select(holder, "Bytes", func_named, SelectionKind.FIELD), src.var("s", STRING), result=BYTES)
  assert try_conversion(src.info, call) is None


def test_variable_of_other_named_type_rejected():
  """Scenario: a variable `String` whose type is a named func type with another name."""
  src = Syntax()
  conv_func = named("Converter", Signature())
  call = src.call(src.var("String", conv_func), src.var("bs", BYTES), result=STRING)
  assert try_conversion(src.info, call) is None


def test_unresolved_identifier_rejected():
  src = Syntax()
  call = src.call(src.ident("mystery"), src.var("bs", BYTES))
  assert try_conversion(src.info, call) is None


def test_arity_rejections():
  src = Syntax()
  string_ident = src.type_name("string", STRING)
  assert try_conversion(src.info, src.call(string_ident)) is None

  two = src.call(src.type_name("string", STRING), src.var("a", BYTES), src.var("b", BYTES))
  assert try_conversion(src.info, two) is None


def test_ellipsis_is_never_a_conversion():
  src = Syntax()
  call = src.call(src.slice_of("byte", BYTE), src.var("s", STRING), ellipsis=True)
  assert try_conversion(src.info, call) is None


def test_other_callee_shapes_rejected():
  src = Syntax()
  # A function literal or index expression callee.
  fun = Node(kind="FuncLit", line=1)
  src.info.types[fun] = Signature()
  call = src.call(fun, src.var("s", STRING))
  assert try_conversion(src.info, call) is None


def test_non_call_rejected():
  src = Syntax()
  assert try_conversion(src.info, src.var("s", STRING)) is None
