import pytest

from fishfeast.controls import InputSampler


def flags(c):
    return (c.up, c.down, c.left, c.right)


def test_starts_with_no_intent(controls):
    assert flags(controls) == (False, False, False, False)
    assert not controls.dragging


def test_keys_press_and_release(controls):
    controls.press("up")
    controls.press("left")
    assert flags(controls) == (True, False, True, False)
    controls.release("up")
    assert flags(controls) == (False, False, True, False)


def test_unknown_intent_is_rejected(controls):
    with pytest.raises(ValueError):
        controls.press("jump")


def test_drag_sets_intents_past_dead_zone(controls):
    controls.pointer_down(1, 100, 100)
    controls.pointer_move(1, 110, 95)
    assert flags(controls) == (False, False, False, True)

    controls.pointer_move(1, 110, 80)
    assert flags(controls) == (True, False, False, False)

    # Small wiggles fall inside the dead zone and clear the drag
    controls.pointer_move(1, 113, 84)
    assert flags(controls) == (False, False, False, False)


def test_other_pointers_are_ignored(controls):
    controls.pointer_down(1, 0, 0)
    controls.pointer_move(2, 50, 50)
    assert flags(controls) == (False, False, False, False)
    controls.pointer_move(1, -20, 20)
    assert flags(controls) == (False, True, True, False)


def test_new_pointer_replaces_previous_drag(controls):
    controls.pointer_down(1, 0, 0)
    controls.pointer_move(1, 30, 0)
    controls.pointer_down(2, 0, 0)
    assert controls.pointer_id == 2
    assert not controls.right
    controls.pointer_move(1, 60, 0)
    assert not controls.right


def test_release_ends_drag_but_keeps_keys(controls):
    controls.press("down")
    controls.pointer_down("mouse", 0, 0)
    controls.pointer_move("mouse", 20, 0)
    assert controls.right and controls.down

    controls.pointer_up("other")
    assert controls.right

    controls.pointer_up("mouse")
    assert not controls.dragging
    assert not controls.right
    assert controls.down


def test_clear_drops_everything():
    c = InputSampler()
    c.press("right")
    c.pointer_down(3, 0, 0)
    c.pointer_move(3, 0, 40)
    c.clear()
    assert flags(c) == (False, False, False, False)
    assert not c.dragging
