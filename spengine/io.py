"""Graph files in YAML (or JSON, which YAML reads too).

Document layout::

    node_count: 3            # optional, derived from nodes when omitted
    nodes:
      - {id: 0, x: 0.0, y: 0.0}
      - {id: 1}
      - 2                    # bare id
    edges:
      - {source: 0, target: 1, weight: 5}
      - {source: 1, target: 2, weight: 1.5, bidirectional: true}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Union

import yaml

from spengine.graph import Graph


def load_graph_yaml(text: str) -> Graph:
    """Parse a graph document.

    Raises:
        ValueError: If the document is not a mapping or has malformed entries,
            or an edge weight is invalid.
        IndexError: If an edge references an undeclared node.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid graph document: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    unknown = set(data) - {"node_count", "nodes", "edges"}
    if unknown:
        raise ValueError(
            f"Unrecognized top-level keys: {', '.join(sorted(map(str, unknown)))}"
        )
    return Graph.from_dict(data)


def load_graph(path: Union[str, Path]) -> Graph:
    """Read a graph document from ``path``."""
    return load_graph_yaml(Path(path).read_text(encoding="utf-8"))


def dump_graph(graph: Graph) -> str:
    """Serialize ``graph`` to a YAML document accepted by :func:`load_graph_yaml`."""
    data: Dict[str, Any] = graph.to_dict()
    return yaml.safe_dump(data, sort_keys=False)
