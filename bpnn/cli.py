""" Train a network on an MNIST-style CSV file and report its accuracy on
a held-out CSV file

Usage::

    bpnn-mnist mnist_train.csv mnist_test.csv --hidden 200 --epochs 2
"""
import argparse
import logging
import sys

import numpy

from bpnn.core.exception import ShapeError
from bpnn.core.logger import (
    DEFAULT_LOG_FILENAME, TrainingLogger, setup_logging)
from bpnn.core.neural_network import NeuralNetwork
from bpnn.data.mnist import iter_examples, iter_records
from bpnn.score_functions import accuracy, predicted_label


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)

DEFAULT_INPUT_NODES = 784
DEFAULT_HIDDEN_NODES = 200
DEFAULT_OUTPUT_NODES = 10
DEFAULT_LEARNING_RATE = 0.1
DEFAULT_EPOCHS = 1
DEFAULT_PROGRESS_EVERY = 600


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description=("Train a two layer neural network with online "
                     "backpropagation and report test accuracy."))
    parser.add_argument('train_file', help="CSV file of training records.")
    parser.add_argument('test_file', help="CSV file of test records.")
    parser.add_argument('--input-nodes', type=int,
                        default=DEFAULT_INPUT_NODES,
                        help="Number of values per record.")
    parser.add_argument('--hidden', type=int, default=DEFAULT_HIDDEN_NODES,
                        help="Number of hidden units.")
    parser.add_argument('--output-nodes', type=int,
                        default=DEFAULT_OUTPUT_NODES,
                        help="Number of classes.")
    parser.add_argument('--learning-rate', type=float,
                        default=DEFAULT_LEARNING_RATE,
                        help="Gradient descent step size.")
    parser.add_argument('--epochs', type=int, default=DEFAULT_EPOCHS,
                        help="Number of passes over the training file.")
    parser.add_argument('--seed', type=int, default=None,
                        help="Random seed for weight initialization.")
    parser.add_argument('--progress-every', type=int,
                        default=DEFAULT_PROGRESS_EVERY,
                        help="Log progress after this many records.")
    parser.add_argument('--log-file', default=DEFAULT_LOG_FILENAME,
                        help="Log file, overwritten on each run.")
    parser.add_argument('--quiet', action='store_true',
                        help="Do not echo log records to the console.")
    return parser.parse_args(argv)


def train_epoch(network, path, epoch, n_epochs, progress, progress_every):
    """ Present every record in `path` to the network once. Returns the
    number of records seen.
    """
    count = 0
    for count, (_, inputs, targets) in enumerate(
            iter_examples(path, network.output_nodes), start=1):
        network.train(inputs, targets)
        if progress_every > 0 and count % progress_every == 0:
            logger.info("Epoch {:d}: trained on {:d} records".format(
                epoch, count))
    progress.progress("epochs complete", epoch, n_epochs)
    return count


def evaluate(network, path):
    """ Query the network on every record in `path`

    Returns
    -------
    predicted, expected: list of int
    """
    predicted = []
    expected = []
    for label, inputs in iter_records(path):
        output = network.query(inputs)
        answer = predicted_label(output)
        logger.debug("correct number: {} | network answer: {} ({})".format(
            label, answer, numpy.array2string(output, precision=4)))
        predicted.append(answer)
        expected.append(label)
    return predicted, expected


def run(args):
    if args.epochs < 1:
        raise ValueError("`epochs` must be at least 1; got {}".format(
            args.epochs))

    network = NeuralNetwork(
        input_nodes=args.input_nodes,
        hidden_nodes=args.hidden,
        output_nodes=args.output_nodes,
        learning_rate=args.learning_rate,
        random_state=numpy.random.RandomState(args.seed))

    progress = TrainingLogger(logger)

    with progress.timed("Training"):
        for epoch in range(1, args.epochs + 1):
            n_records = train_epoch(network, args.train_file, epoch,
                                    args.epochs, progress,
                                    args.progress_every)
            if n_records == 0:
                msg = "Training file {} contains no records"
                raise ValueError(msg.format(args.train_file))

    with progress.timed("Testing"):
        predicted, expected = evaluate(network, args.test_file)

    score = accuracy(predicted, expected)
    logger.info("Accuracy: {:.4f} ({:d} of {:d} correct)".format(
        score, sum(p == e for p, e in zip(predicted, expected)),
        len(expected)))

    return score


def main(argv=None):
    args = parse_args(argv)
    setup_logging(filename=args.log_file, stdout=not args.quiet)

    try:
        run(args)
    except (ShapeError, ValueError, OSError) as e:
        logger.error(str(e))
        return 1

    logger.info("Finish!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
