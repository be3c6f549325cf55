""" Reading of MNIST-style CSV records

Each line has the form `label,p1,p2,...,pN` with pixel values in [0, 255].
"""
import numpy


MAX_PIXEL_VALUE = 255.0
INPUT_LOW = 0.01
INPUT_SCALE = 0.99

TARGET_LOW = 0.01
TARGET_HIGH = 0.99


def scale_inputs(values):
    """ Maps raw pixel values in [0, 255] into [0.01, 1.0], keeping the
    inputs away from zero where they would cancel their weight updates
    """
    values = numpy.asarray(values, dtype=numpy.float64)
    return values / MAX_PIXEL_VALUE * INPUT_SCALE + INPUT_LOW


def parse_record(line, line_number=None):
    """ Parse one CSV record

    Parameters
    ----------
    line: str
        A line of the form `label,p1,...,pN`.

    line_number: int, default=None
        Only used to make error messages point at the offending line.

    Returns
    -------
    label, inputs: int, ndarray
        The class label and the scaled pixel values.
    """
    where = "" if line_number is None else " on line {}".format(line_number)
    fields = line.strip().split(',')

    if len(fields) < 2:
        msg = "Expected a label and at least one value{}"
        raise ValueError(msg.format(where))

    try:
        values = numpy.array([float(field) for field in fields])
    except ValueError:
        msg = "Record{} contains a non-numeric field"
        raise ValueError(msg.format(where))

    if not numpy.isfinite(values).all():
        msg = "Record{} contains a non-finite value"
        raise ValueError(msg.format(where))

    label = values[0]
    if label < 0 or label != numpy.floor(label):
        msg = "Label `{}`{} is not a non-negative integer"
        raise ValueError(msg.format(fields[0].strip(), where))

    return int(label), scale_inputs(values[1:])


def one_hot(label, n_classes, low=TARGET_LOW, high=TARGET_HIGH):
    """ Target vector with `high` at index `label` and `low` elsewhere.
    The soft bounds avoid asking the sigmoid for values it only reaches
    asymptotically.
    """
    if not 0 <= label < n_classes:
        msg = "Label {} is out of range for {} classes"
        raise ValueError(msg.format(label, n_classes))

    targets = numpy.full(n_classes, low, dtype=numpy.float64)
    targets[label] = high

    return targets


def iter_records(path):
    """ Lazily yields `(label, inputs)` for each non-blank line of the
    file at `path`
    """
    with open(path, 'r') as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip():
                continue
            yield parse_record(line, line_number=line_number)


def iter_examples(path, n_classes):
    """ Yields `(label, inputs, targets)` training triples
    """
    for label, inputs in iter_records(path):
        yield label, inputs, one_hot(label, n_classes)
