"""Path reconstruction from predecessor arrays."""

from __future__ import annotations

from typing import List, Optional, Sequence

from spengine.graph import NodeID


def walk_pointers(pointers: Sequence[Optional[NodeID]], start: Optional[NodeID]) -> List[NodeID]:
    """Follow ``pointers`` from ``start`` until a ``None`` pointer.

    Returns the visited nodes in walk order, ``start`` included. An empty list
    is returned when ``start`` is None.
    """
    walk: List[NodeID] = []
    node = start
    while node is not None:
        walk.append(node)
        node = pointers[node]
    return walk


def reconstruct_path(prev: Sequence[Optional[NodeID]], target: NodeID) -> List[NodeID]:
    """Build the ``origin -> ... -> target`` path from a predecessor array."""
    path = walk_pointers(prev, target)
    path.reverse()
    return path
