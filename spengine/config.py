"""Configuration classes for spengine components."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GridMapConfig:
    """Parameters for the synthetic grid road map generator."""

    # Grid dimensions (nodes per row / per column)
    width: int = 20
    height: int = 15

    # Distance between neighbouring grid points before jitter
    spacing: float = 30.0

    # Jitter amplitude as a fraction of spacing
    jitter: float = 0.2

    # Chance of a diagonal road from each cell's top-left corner
    diagonal_probability: float = 0.5

    seed: Optional[int] = None

    @property
    def node_count(self) -> int:
        return self.width * self.height

    def validate(self) -> None:
        """Raise ``ValueError`` when the parameters cannot produce a map."""
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.spacing <= 0:
            raise ValueError(f"Spacing must be positive, got {self.spacing}")
        if not 0.0 <= self.jitter < 0.5:
            raise ValueError(f"Jitter must be in [0, 0.5), got {self.jitter}")
        if not 0.0 <= self.diagonal_probability <= 1.0:
            raise ValueError(
                "Diagonal probability must be in [0, 1], "
                f"got {self.diagonal_probability}"
            )


@dataclass
class PlaybackConfig:
    """Chunking of explored edges for incremental display."""

    # Explored edges revealed per frame
    edges_per_tick: int = 3

    # Nominal frame interval in seconds (~60 fps); informational only
    tick_interval: float = 0.016


# Global default instances
GRID_DEFAULTS = GridMapConfig()
PLAYBACK_DEFAULTS = PlaybackConfig()
