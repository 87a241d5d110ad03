"""Frame sequencing for replaying a search.

A display layer reveals a result's explored edges a few at a time and then
draws the final path. This module produces those frames; it owns no timers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

from spengine.config import PLAYBACK_DEFAULTS
from spengine.graph import NodeID
from spengine.results import ExploredEdge, PathResult


class PlaybackSpeed(Enum):
    """Named replay speeds mapped to explored edges revealed per tick."""

    SLOW = "0.5x"
    NORMAL = "1x"
    FAST = "2x"
    VERY_FAST = "4x"

    @property
    def edges_per_tick(self) -> int:
        return {
            PlaybackSpeed.SLOW: 1,
            PlaybackSpeed.NORMAL: 3,
            PlaybackSpeed.FAST: 8,
            PlaybackSpeed.VERY_FAST: 20,
        }[self]

    @property
    def tick_interval(self) -> float:
        """Seconds between frames. Equal for every speed."""
        return PLAYBACK_DEFAULTS.tick_interval

    def duration(self, result: PathResult) -> float:
        """Nominal seconds needed to replay ``result`` at this speed."""
        return frame_count(result, self.edges_per_tick) * self.tick_interval


@dataclass(frozen=True)
class Frame:
    """One replay step.

    Attributes:
        edges: Explored edges revealed so far.
        path: Final path; empty until the last frame.
        final: True for the closing frame.
    """

    edges: Tuple[ExploredEdge, ...]
    path: Tuple[NodeID, ...] = ()
    final: bool = False


def iter_frames(
    result: PathResult,
    edges_per_tick: int = PLAYBACK_DEFAULTS.edges_per_tick,
) -> Iterator[Frame]:
    """Yield growing prefixes of ``result.explored_edges`` then a final frame.

    Args:
        result: Search result to replay.
        edges_per_tick: Edges revealed per frame.

    Raises:
        ValueError: If ``edges_per_tick`` is not positive.
    """
    if edges_per_tick < 1:
        raise ValueError(f"edges_per_tick must be positive, got {edges_per_tick}")

    explored = result.explored_edges
    for end in range(edges_per_tick, len(explored) + edges_per_tick, edges_per_tick):
        yield Frame(edges=explored[: min(end, len(explored))])
    yield Frame(edges=explored, path=result.path, final=True)


def frame_count(result: PathResult, edges_per_tick: int) -> int:
    """Number of frames :func:`iter_frames` yields, final frame included."""
    if edges_per_tick < 1:
        raise ValueError(f"edges_per_tick must be positive, got {edges_per_tick}")
    return -(-len(result.explored_edges) // edges_per_tick) + 1
