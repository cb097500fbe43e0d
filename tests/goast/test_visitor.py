"""
Tests for syntax traversal: pre-order dispatch, pruning and parentheses.
"""

from strconv_census.goast.nodes import CallExpr, File, Ident, Node, ParenExpr, unparen
from strconv_census.goast.visitor import GoVisitor


def _tree() -> File:
  call = CallExpr(fun=Ident(name="f", line=2), args=[Ident(name="x", line=2)], line=2)
  return File(
    name="a.go",
    line=1,
    nodes=[
      Node(kind="FuncDecl", line=2, nodes=[Node(kind="ExprStmt", line=2, nodes=[call])]),
      Node(kind="FuncLit", line=5, nodes=[Ident(name="hidden", line=6)]),
    ],
  )


class Recorder(GoVisitor):
  def __init__(self):
    self.seen = []

  def on_visit(self, node):
    self.seen.append(node.kind)
    return super().on_visit(node)


class PruningRecorder(Recorder):
  def visit_FuncLit(self, node):
    return False


def test_walk_is_pre_order():
  recorder = Recorder()
  recorder.walk(_tree())
  assert recorder.seen == ["File", "FuncDecl", "ExprStmt", "CallExpr", "Ident", "Ident", "FuncLit", "Ident"]


def test_visitor_dispatch_and_pruning():
  recorder = PruningRecorder()
  recorder.walk(_tree())
  assert recorder.seen == ["File", "FuncDecl", "ExprStmt", "CallExpr", "Ident", "Ident", "FuncLit"]


def test_walk_handles_deep_nesting():
  node = Ident(name="x", line=1)
  for _ in range(5000):
    node = ParenExpr(x=node, line=1)

  recorder = Recorder()
  recorder.walk(node)

  assert len(recorder.seen) == 5001
  assert isinstance(unparen(node), Ident)
