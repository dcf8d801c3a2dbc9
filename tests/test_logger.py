# tests/test_logger.py
import pytest

import logger
from time_manager import TimeManager


@pytest.fixture
def time_manager():
    time_manager = TimeManager()
    logger.set_time_manager(time_manager)
    yield time_manager
    logger.set_time_manager(None)


def test_messages_before_the_first_step(time_manager, capsys):
    logger.log("hello")
    assert capsys.readouterr().out == "[Sim Start] hello\n"


def test_messages_carry_step_and_phase(time_manager, capsys):
    for _ in range(3):
        time_manager.advance()
    logger.log("dark")
    time_manager.advance()
    logger.log("light")
    assert capsys.readouterr().out.splitlines() == [
        "[Step 00003 night] dark",
        "[Step 00004 day] light",
    ]
