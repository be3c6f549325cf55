import numpy


def predicted_label(output):
    """ The class predicted by a network output, i.e., the index of the
    largest output value
    """
    output = numpy.asarray(output)

    if output.ndim != 1 or output.size == 0:
        msg = "`output` should be a non-empty vector; got shape {}"
        raise ValueError(msg.format(output.shape))

    return int(numpy.argmax(output))


def accuracy(predicted, expected):
    """ Fraction of `predicted` labels that equal the `expected` labels
    """
    predicted = numpy.asarray(predicted)
    expected = numpy.asarray(expected)

    if predicted.shape != expected.shape:
        msg = "`predicted` shape {} does not match `expected` shape {}"
        raise ValueError(msg.format(predicted.shape, expected.shape))

    if predicted.size == 0:
        raise ValueError("Cannot compute accuracy of zero predictions")

    return float((predicted == expected).mean())


def squared_error(output, targets):
    """ Sum of squared differences between a network output and its
    targets
    """
    diff = numpy.asarray(output, dtype=float) - numpy.asarray(targets,
                                                              dtype=float)
    return float(numpy.dot(diff, diff))
