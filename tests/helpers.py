"""Shared builders for model-level tests."""

from fishfeast.model import Fish


def make_fish(x, y, radius, vx=0.0, vy=0.0):
    fish = Fish(x, y, radius)
    fish.vx = vx
    fish.vy = vy
    return fish


def still_player(model):
    """Park the player at the arena centre with no velocity."""
    player = model.player
    player.x = model.world.width / 2
    player.y = model.world.height / 2
    player.vx = player.vy = 0.0
    return player
