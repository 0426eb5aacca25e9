import pygame
import pytest

from fishfeast.config import STATE_IDLE, STATE_OVER
from fishfeast.controller import GameController


@pytest.fixture
def controller(store):
    yield GameController(store)
    pygame.quit()


def finger_down(finger_id, x=0.5, y=0.5):
    return pygame.event.Event(
        pygame.FINGERDOWN, touch_id=0, finger_id=finger_id,
        x=x, y=y, dx=0.0, dy=0.0, pressure=1.0,
    )


def test_touch_starts_game_from_idle(controller):
    assert controller.model.state == STATE_IDLE
    controller._handle_pointer(finger_down(7))
    assert controller.model.running
    assert controller.controls.pointer_id == 7
    assert controller.driver.pending


def test_touch_restarts_after_game_over(controller):
    controller.model.start()
    controller.model.state = STATE_OVER
    controller._handle_pointer(finger_down(3))
    assert controller.model.running
    assert controller.model.lives == 3


def test_touch_while_playing_only_starts_a_drag(controller):
    controller.loop.start()
    controller.model.score = 12
    controller._handle_pointer(finger_down(4))
    assert controller.model.score == 12
    assert controller.controls.pointer_id == 4
