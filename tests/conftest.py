import os
import random

import pytest

# Headless pygame for the view smoke test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from fishfeast.controls import InputSampler
from fishfeast.model import GameModel
from fishfeast.persistence import BestScoreStore


@pytest.fixture(autouse=True)
def _seed():
    random.seed(1234)


@pytest.fixture
def store(tmp_path):
    return BestScoreStore(str(tmp_path / "best.json"))


@pytest.fixture
def model(store):
    m = GameModel(store)
    m.start()
    return m


@pytest.fixture
def controls():
    return InputSampler()

