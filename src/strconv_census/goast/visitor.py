"""
Pre-order visitor over Go syntax trees.

Mirrors the LibCST visitor protocol: subclasses define ``visit_<Kind>``
methods (e.g. ``visit_CallExpr``) and ``on_visit`` dispatches to them.
Returning ``False`` from a visit method prunes that node's children.
"""

from typing import Optional

from strconv_census.goast.nodes import Node


class GoVisitor:
  """Base class for analysis passes over a :class:`~strconv_census.goast.nodes.Node` tree."""

  def on_visit(self, node: Node) -> bool:
    """
    Called once per node before its children.

    Args:
        node: The node being entered.

    Returns:
        bool: False to skip the node's children.
    """
    handler = getattr(self, f"visit_{node.kind}", None)
    if handler is None:
      return True
    result: Optional[bool] = handler(node)
    return result is not False

  def walk(self, root: Node) -> None:
    """
    Visits ``root`` and its descendants in pre-order.

    Args:
        root: Tree to traverse.
    """
    stack = [root]
    while stack:
      node = stack.pop()
      if self.on_visit(node):
        stack.extend(reversed(list(node.children())))
