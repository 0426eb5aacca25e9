import json

from fishfeast.persistence import BestScoreStore


def test_missing_file_reads_as_zero(store):
    assert store.load() == 0


def test_save_then_load(store):
    assert store.save(42) is True
    assert store.load() == 42
    with open(store.path) as fh:
        assert json.load(fh) == {"fish-best": 42}


def test_save_keeps_other_keys(tmp_path):
    path = tmp_path / "best.json"
    path.write_text(json.dumps({"volume": 3, "fish-best": 1}))
    store = BestScoreStore(str(path))
    store.save(9)
    assert json.loads(path.read_text()) == {"volume": 3, "fish-best": 9}


def test_garbage_reads_as_zero(tmp_path):
    path = tmp_path / "best.json"
    for content in ("not json", "[1, 2]", '{"fish-best": "abc"}', '{"other": 5}',
                    '{"fish-best": Infinity}', '{"fish-best": 1e400}'):
        path.write_text(content)
        assert BestScoreStore(str(path)).load() == 0


def test_negative_value_reads_as_zero(tmp_path):
    path = tmp_path / "best.json"
    path.write_text('{"fish-best": -5}')
    assert BestScoreStore(str(path)).load() == 0


def test_numeric_string_is_accepted(tmp_path):
    path = tmp_path / "best.json"
    path.write_text('{"fish-best": "17"}')
    assert BestScoreStore(str(path)).load() == 17


def test_failed_write_is_not_raised(tmp_path, caplog):
    store = BestScoreStore(str(tmp_path / "missing-dir" / "best.json"))
    assert store.save(5) is False
    assert "Could not save best score" in caplog.text
    assert store.load() == 0


def test_non_finite_best_does_not_block_startup(tmp_path):
    from fishfeast.model import GameModel

    path = tmp_path / "best.json"
    path.write_text('{"fish-best": 1e400}')
    assert GameModel(BestScoreStore(str(path))).best == 0
