import pytest

from helpers import make_fish, still_player
from fishfeast.config import STATE_OVER, STATE_PAUSED
from fishfeast.driver import FrameDriver, GameLoop


# ── FrameDriver ───────────────────────────────────────────────────
def test_pump_without_request_does_nothing():
    driver = FrameDriver()
    assert not driver.pending
    assert driver.pump(10) is False


def test_request_runs_exactly_once():
    driver = FrameDriver()
    calls = []
    driver.request(calls.append)
    assert driver.pending
    assert driver.pump(16) is True
    assert driver.pump(32) is False
    assert calls == [16]


def test_rerequest_replaces_pending_callback():
    driver = FrameDriver()
    first, second = [], []
    driver.request(first.append)
    driver.request(second.append)
    driver.pump(5)
    assert first == [] and second == [5]


def test_cancel_drops_pending_callback():
    driver = FrameDriver()
    calls = []
    driver.request(calls.append)
    driver.cancel()
    driver.pump(5)
    assert calls == []


def test_timestamps_never_go_backwards():
    driver = FrameDriver()
    seen = []
    driver.request(seen.append)
    driver.pump(100)
    driver.request(seen.append)
    driver.pump(50)
    assert seen == [100, 100]


def test_delta_is_clamped():
    driver = FrameDriver()
    assert driver.delta(1000) == 0
    assert driver.delta(1016) == pytest.approx(0.016)
    assert driver.delta(5000) == pytest.approx(0.033)
    assert driver.delta(4000) == 0
    driver.reset_clock()
    assert driver.delta(9000) == 0


# ── GameLoop ──────────────────────────────────────────────────────
def test_start_requests_a_frame(model, controls):
    loop = GameLoop(model, controls)
    loop.start()
    assert model.running
    assert loop.driver.pending


def test_frames_advance_the_model(model, controls):
    loop = GameLoop(model, controls)
    loop.start()
    loop.driver.pump(0)
    loop.driver.pump(16)
    assert model.elapsed == pytest.approx(16)
    assert loop.driver.pending


def test_paused_frames_keep_ticking_without_stepping(model, controls):
    loop = GameLoop(model, controls)
    loop.start()
    loop.driver.pump(0)
    loop.driver.pump(16)

    loop.toggle_pause()
    assert model.state == STATE_PAUSED
    loop.driver.pump(32)
    assert model.elapsed == pytest.approx(16)
    assert loop.driver.pending

    loop.toggle_pause()
    loop.driver.pump(48)
    assert model.elapsed == pytest.approx(48)


def test_game_over_stops_the_chain(model, controls):
    loop = GameLoop(model, controls)
    loop.start()
    player = still_player(model)
    model.lives = 1
    model.world.enemies[:] = [make_fish(player.x, player.y, 40, vx=1, vy=1)]

    loop.driver.pump(0)

    assert model.state == STATE_OVER
    assert not loop.driver.pending

    loop.restart()
    assert model.running and model.lives == 3
    assert loop.driver.pending


def test_toggle_pause_needs_a_running_game(store, controls):
    from fishfeast.model import GameModel

    model = GameModel(store)
    loop = GameLoop(model, controls)
    loop.toggle_pause()
    assert not model.paused
    loop.driver.pump(0)
    assert model.elapsed == 0


def test_loop_feeds_intents_to_the_model(model, controls):
    loop = GameLoop(model, controls)
    loop.start()
    player = still_player(model)
    model.world.enemies.clear()
    model.world.food.clear()
    controls.press("right")

    loop.driver.pump(0)
    loop.driver.pump(20)

    assert player.vx > 0


def test_restarting_a_live_run_saves_best(model, controls, store):
    loop = GameLoop(model, controls)
    loop.start()
    player = still_player(model)
    model.world.enemies.clear()
    model.world.food[:] = [make_fish(player.x, player.y, 10)]
    loop.driver.pump(0)
    assert model.best == 10

    loop.restart()

    assert store.load() == 10
    assert model.score == 0 and model.best == 10


def test_restart_from_paused_saves_best(model, controls, store):
    loop = GameLoop(model, controls)
    loop.start()
    model.best = 25
    loop.toggle_pause()
    loop.restart()
    assert store.load() == 25
