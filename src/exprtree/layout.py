"""
exprtree.layout — assign (x, y) coordinates to every node of a tree.

x is the node's in-order rank, so every node gets its own column and no
two nodes overlap; y is the depth. The result is centered on x = 0 and
squeezed horizontally when it is wider than ``max_width``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

import numpy as np

from .snapshot import snapshot_tree

if TYPE_CHECKING:
    from .tree import ExprTree

__all__ = ["H_GAP", "LayoutConfig", "MAX_WIDTH", "Position", "V_GAP", "layout_tree"]

H_GAP = 1.3
V_GAP = 1.1
MAX_WIDTH = 12.0


@dataclass(frozen=True)
class Position:
    x: float
    y: float


@dataclass
class LayoutConfig:
    """Spacing options for :func:`layout_tree`."""

    gap_x: float = H_GAP
    gap_y: float = V_GAP
    max_width: float = MAX_WIDTH

    def __post_init__(self) -> None:
        for name in ("gap_x", "gap_y", "max_width"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise ValueError(f"LayoutConfig.{name} must be a positive number, got {value!r}")


def _in_order(snapshot: Optional[dict[str, Any]], depth: int, out: list[tuple[int, int]]) -> None:
    if snapshot is None:
        return
    _in_order(snapshot.get("left"), depth + 1, out)
    out.append((snapshot["_id"], depth))
    _in_order(snapshot.get("right"), depth + 1, out)


def layout_tree(tree: "ExprTree", config: Optional[LayoutConfig] = None) -> dict[int, Position]:
    """Coordinates of every node keyed by its snapshot ``_id``."""
    config = config or LayoutConfig()
    order: list[tuple[int, int]] = []
    _in_order(snapshot_tree(tree), 0, order)
    if not order:
        return {}

    ids = [node_id for node_id, _ in order]
    xs = np.arange(len(order), dtype=float) * config.gap_x
    ys = -np.array([depth for _, depth in order], dtype=float) * config.gap_y

    xs -= (xs.min() + xs.max()) / 2.0
    span = float(xs.max() - xs.min())
    if span > config.max_width:
        xs *= config.max_width / span

    return {node_id: Position(float(x), float(y)) for node_id, x, y in zip(ids, xs, ys)}
