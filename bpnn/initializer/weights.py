import numpy

from bpnn.matrix import Matrix


def weight_bound(fan_in):
    """ The half-width of the uniform interval used for a layer with
    `fan_in` incoming connections
    """
    return 1.0 / numpy.sqrt(fan_in)


def init_weights(fan_in, fan_out, random_state=None):
    """ Create a weight matrix for a fully connected layer

    Parameters
    ----------
    fan_in: int
        Number of units feeding into the layer (matrix columns).

    fan_out: int
        Number of units in the layer (matrix rows).

    random_state: numpy.random.RandomState, default=None
        Provide a RandomState object for reproducible results.

    Returns
    -------
    weights: Matrix, shape=(fan_out, fan_in)
        Each cell is drawn independently from the uniform distribution
        on [-1/sqrt(fan_in), 1/sqrt(fan_in)], which keeps the initial
        weighted sums out of the flat tails of the sigmoid.

    """
    if fan_in < 1 or fan_out < 1:
        msg = "Layer fans must be positive; got fan_in={}, fan_out={}"
        raise ValueError(msg.format(fan_in, fan_out))

    if random_state is None:
        random_state = numpy.random.RandomState()

    bound = weight_bound(fan_in)

    return Matrix(random_state.uniform(
        low=-bound, high=bound, size=(fan_out, fan_in)))
