from __future__ import annotations

from typing import Any

__all__ = ["render_tree_text"]


def render_tree_text(snapshot: Any, indent: int = 0, prefix: str = "") -> str:
    """Render a snapshot dict-tree as indented text, one node per line."""
    pad = " " * indent

    if snapshot is None:
        return f"{pad}{prefix}∅"

    lines = [f"{pad}{prefix}[{snapshot['_type']}]({snapshot.get('label', '')})"]
    for side in ("left", "right"):
        if side in snapshot:
            lines.append(render_tree_text(snapshot[side], indent + 4, f"{side}: "))
    return "\n".join(lines)
