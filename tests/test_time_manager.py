# tests/test_time_manager.py
import pytest

import constants as C
from time_manager import TimeManager
from weather import Weather


def test_night_falls_on_every_fourth_step():
    time_manager = TimeManager()
    nights = []
    for _ in range(12):
        nights.append(time_manager.is_night())
        time_manager.advance()
    assert nights == [False, False, False, True] * 3


def test_reset_returns_to_the_first_step():
    time_manager = TimeManager()
    for _ in range(5):
        time_manager.advance()
    time_manager.reset()
    assert time_manager.step == 0
    assert not time_manager.is_night()


def test_pause_stops_the_clock():
    time_manager = TimeManager()
    time_manager.toggle_pause()
    assert time_manager.get_step_interval_seconds() is None
    time_manager.toggle_pause()
    assert time_manager.get_step_interval_seconds() == pytest.approx(
        1.0 / C.STEPS_PER_SECOND[C.DEFAULT_SPEED_LEVEL])


def test_unknown_speed_level_is_ignored():
    time_manager = TimeManager()
    time_manager.set_speed(5)
    assert time_manager.steps_per_second == C.STEPS_PER_SECOND[5]
    time_manager.set_speed(42)
    assert time_manager.speed_level == 5


def test_display_string():
    time_manager = TimeManager()
    assert time_manager.get_display_string(Weather.SUNNY) == "Time: day   Weather: sunny"
    for _ in range(3):
        time_manager.advance()
    assert time_manager.get_display_string(Weather.SNOWING) == "Time: night   Weather: snowing"
