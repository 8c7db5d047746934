import pytest

from arcadekit.timing import TimeManager


class _Clock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return _Clock()


@pytest.fixture
def manager(clock):
    tm = TimeManager(clock=clock)
    tm.init()
    return tm


def test_delta_time_is_time_since_previous_update(manager, clock):
    clock.now = 0.25
    manager.update()
    assert manager.delta_time == pytest.approx(0.25)
    clock.now = 0.75
    manager.update()
    assert manager.delta_time == pytest.approx(0.5)


def test_fps_stays_zero_before_a_second_passes(manager, clock):
    for step in (0.1, 0.2, 0.3):
        clock.now = step
        manager.update()
    assert manager.fps == 0
    assert manager.frame_count == 3


def test_fps_counts_frames_in_the_last_second(manager, clock):
    for step in (0.25, 0.5, 0.75, 1.0):
        clock.now = step
        manager.update()
    assert manager.fps == 4
    assert manager.frame_count == 0
    assert manager.frame_time == 0.0