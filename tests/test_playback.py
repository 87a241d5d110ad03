import pytest

from spengine.algorithms.dijkstra import find_path
from spengine.config import PLAYBACK_DEFAULTS
from spengine.playback import Frame, PlaybackSpeed, frame_count, iter_frames
from spengine.results import PathResult


def test_frames_reveal_edges_in_chunks(diamond):
    result = find_path(diamond, 0, 3)
    frames = list(iter_frames(result, edges_per_tick=2))

    assert [len(f.edges) for f in frames] == [2, 3, 3]
    assert frames[0].edges == ((0, 1), (0, 2))
    assert not frames[0].final and frames[0].path == ()
    assert frames[-1] == Frame(edges=result.explored_edges, path=(0, 1, 3), final=True)
    assert len(frames) == frame_count(result, 2)


def test_empty_exploration_yields_only_final_frame():
    result = PathResult(distance=0.0, path=(4,))
    frames = list(iter_frames(result, edges_per_tick=3))
    assert frames == [Frame(edges=(), path=(4,), final=True)]
    assert frame_count(result, 3) == 1


def test_exact_multiple_of_tick(line3):
    result = find_path(line3, 0, 2)  # three explored edges
    frames = list(iter_frames(result, edges_per_tick=3))
    assert [len(f.edges) for f in frames] == [3, 3]
    assert frame_count(result, 3) == 2


@pytest.mark.parametrize("tick", [0, -2])
def test_invalid_tick(line3, tick):
    result = find_path(line3, 0, 2)
    with pytest.raises(ValueError):
        list(iter_frames(result, edges_per_tick=tick))
    with pytest.raises(ValueError):
        frame_count(result, tick)


def test_speed_presets():
    assert [s.edges_per_tick for s in PlaybackSpeed] == [1, 3, 8, 20]
    assert PlaybackSpeed("2x") is PlaybackSpeed.FAST


def test_speed_tick_interval_and_duration(diamond):
    result = find_path(diamond, 0, 3)  # three explored edges
    assert all(s.tick_interval == PLAYBACK_DEFAULTS.tick_interval for s in PlaybackSpeed)
    assert PlaybackSpeed.SLOW.duration(result) == pytest.approx(4 * PLAYBACK_DEFAULTS.tick_interval)
    assert PlaybackSpeed.NORMAL.duration(result) == pytest.approx(2 * PLAYBACK_DEFAULTS.tick_interval)
