# flake8: noqa

from ._version import version as __version__

from .activation import sigmoid, sigmoid_derivative
from .core.exception import ShapeError
from .core.neural_network import NeuralNetwork
from .initializer import init_weights
from .matrix import Matrix
