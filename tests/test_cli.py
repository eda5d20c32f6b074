# tests/test_cli.py
import logging

import pytest

from nnlab.__main__ import build_parser, config_from_args, main, run
from nnlab.config import TrainingConfig


def test_config_defaults_and_with():
    cfg = TrainingConfig()
    assert cfg.hidden_sizes == (10, 8)
    assert (cfg.num_train, cfg.num_test, cfg.epochs) == (120, 30, 300)
    assert cfg.learning_rate == pytest.approx(0.01)
    updated = cfg.with_(epochs=5)
    assert updated.epochs == 5 and cfg.epochs == 300
    with pytest.raises(AttributeError):
        cfg.epochs = 1


@pytest.mark.parametrize("kwargs", [
    {"num_train": 0},
    {"hidden_sizes": (10, 0)},
    {"learning_rate": -0.1},
    {"epochs": -1},
    {"feature_scale": 0},
])
def test_config_validate_rejects(kwargs):
    with pytest.raises(ValueError):
        TrainingConfig(**kwargs).validate()


def test_parser_builds_config():
    args = build_parser().parse_args(
        ["--data", "x.csv", "--hidden", "6", "4", "--epochs", "3", "--seed", "7"])
    cfg = config_from_args(args)
    assert cfg.data_path == "x.csv"
    assert cfg.hidden_sizes == (6, 4)
    assert cfg.epochs == 3 and cfg.seed == 7


def test_run_reports_accuracy(iris_csv, caplog):
    cfg = TrainingConfig(data_path=iris_csv(n_per_class=10), num_train=20,
                         num_test=10, epochs=4, seed=0, log_every=2)
    with caplog.at_level(logging.INFO, logger="nnlab"):
        accuracy = run(cfg)
    assert 0.0 <= accuracy <= 1.0
    assert "Test Accuracy:" in caplog.text
    assert "Neural Network Structure:" in caplog.text
    assert "Epoch 4: Loss = " in caplog.text


def test_main(iris_csv, tmp_path):
    log_file = tmp_path / "run.log"
    code = main(["--data", iris_csv(n_per_class=5), "--train", "10", "--test", "5",
                 "--epochs", "2", "--seed", "1", "--log-file", str(log_file)])
    assert code == 0
    assert "Test Accuracy:" in log_file.read_text()
    pkg_logger = logging.getLogger("nnlab")
    for handler in pkg_logger.handlers[:]:
        handler.close()
        pkg_logger.removeHandler(handler)
