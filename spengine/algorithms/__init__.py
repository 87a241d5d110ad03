"""Shortest-path algorithms."""

from __future__ import annotations

from spengine.algorithms.base import PathAlgorithm, PathFinder, find_path
from spengine.algorithms.priority_queue import PriorityQueue

__all__ = ["PathAlgorithm", "PathFinder", "PriorityQueue", "find_path"]
