"""
exprtree.snapshot — deep-serialize an expression tree into plain dicts.

Every node becomes a dict carrying ``_type`` (variant name), ``_id``
(preorder index, root is 0) and ``label``. Leaves add ``value``; operators
add ``left`` and ``right`` holding their children's snapshots.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .nodes import BinaryOp, Node, Value

if TYPE_CHECKING:
    from .tree import ExprTree

__all__ = ["snapshot_node", "snapshot_tree"]


def _snapshot_inner(node: Node, counter: list[int]) -> dict[str, Any]:
    snap: dict[str, Any] = {
        "_type": type(node).__name__,
        "_id": counter[0],
        "label": node.to_string(),
    }
    counter[0] += 1
    if isinstance(node, Value):
        snap["value"] = node.value
    elif isinstance(node, BinaryOp):
        snap["left"] = _snapshot_inner(node.left, counter)
        snap["right"] = _snapshot_inner(node.right, counter)
    return snap


def snapshot_node(node: Optional[Node]) -> Optional[dict[str, Any]]:
    if node is None:
        return None
    return _snapshot_inner(node, [0])


def snapshot_tree(tree: "ExprTree") -> Optional[dict[str, Any]]:
    """Snapshot the whole tree; an empty tree snapshots to ``None``."""
    return snapshot_node(tree.root)


def _iter_snapshot_nodes(snapshot: Any):
    """Yield every node dict in *snapshot*, parents before children."""
    if not isinstance(snapshot, dict) or "_id" not in snapshot:
        return
    yield snapshot
    for side in ("left", "right"):
        if side in snapshot:
            yield from _iter_snapshot_nodes(snapshot[side])
