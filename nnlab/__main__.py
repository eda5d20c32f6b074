"""
Train and evaluate a classifier on an iris-style CSV.

    python -m nnlab --data iris.csv --epochs 300 --seed 0
"""
import argparse
import logging

import numpy as np

from .common.log_init import config_logger
from .config import TrainingConfig
from .datasets import CLASSES, scale_features, split_dataset
from .neural_networks import NeuralNetwork

logger = logging.getLogger(__name__)


def build_parser():
    defaults = TrainingConfig()
    parser = argparse.ArgumentParser(
        prog="nnlab", description="Train a feedforward classifier on an iris-style CSV.")
    parser.add_argument("--data", required=True, help="Path to the CSV file (header row, 4 features, species)")
    parser.add_argument("--train", type=int, default=defaults.num_train, help="Number of training examples")
    parser.add_argument("--test", type=int, default=defaults.num_test, help="Number of test examples")
    parser.add_argument("--hidden", type=int, nargs="*", default=list(defaults.hidden_sizes),
                        help="Hidden layer widths")
    parser.add_argument("--lr", type=float, default=defaults.learning_rate, help="Learning rate")
    parser.add_argument("--epochs", type=int, default=defaults.epochs, help="Number of training epochs")
    parser.add_argument("--scale", type=float, default=defaults.feature_scale,
                        help="Divide every feature by this value")
    parser.add_argument("--seed", type=int, default=defaults.seed, help="Random seed")
    parser.add_argument("--log-every", type=int, default=defaults.log_every,
                        help="Report the epoch loss every N epochs")
    parser.add_argument("--log-file", default=defaults.log_file, help="Also write logs to this file")
    return parser


def config_from_args(args):
    return TrainingConfig(
        data_path=args.data,
        num_train=args.train,
        num_test=args.test,
        feature_scale=args.scale,
        hidden_sizes=tuple(args.hidden),
        learning_rate=args.lr,
        epochs=args.epochs,
        seed=args.seed,
        log_every=args.log_every,
        log_file=args.log_file,
    ).validate()


def run(config):
    """
    Load, train, evaluate and report.

    Args:
        config (TrainingConfig): Run configuration

    Returns:
        float: Test accuracy (nan when the test split is empty)
    """
    rng = np.random.default_rng(config.seed)
    train, test = split_dataset(config.data_path, config.num_train, config.num_test, rng)
    scale_features(train, config.feature_scale)
    scale_features(test, config.feature_scale)
    logger.info("Dataset loaded, shuffled and normalized.")
    logger.info("Train examples: %d, Test examples: %d", train.num_examples, test.num_examples)

    nn = NeuralNetwork(train.input_size, config.hidden_sizes, len(CLASSES),
                       learning_rate=config.learning_rate, random_state=config.seed,
                       verbose=True, log_every=config.log_every)
    logger.info("%s", nn)

    nn.train(train, config.epochs)

    accuracy = float("nan")
    if test.num_examples:
        accuracy = nn.evaluate(test)
        logger.info("Test Accuracy: %.2f%%", accuracy * 100)

    sample, _ = train.sample(0)
    prediction = nn.forward(sample)
    logger.info("Prediction for first training sample: %s",
                " ".join(f"{p:.3f}" for p in prediction))
    return accuracy


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    config_logger(config.log_file)
    run(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
