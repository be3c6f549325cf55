"""
A two layer feedforward neural network trained one example at a time.

Input (R^n) => Hidden (R^h) => Output (R^m)

Every unit applies the same scalar activation (the logistic sigmoid by
default) to the weighted sum of the previous layer. There are no bias
terms. Weights are updated by stochastic gradient descent on the squared
error immediately after each example is presented.
"""
import logging
import numbers

import numpy

from bpnn.activation import sigmoid, sigmoid_derivative
from bpnn.core.exception import ShapeError
from bpnn.initializer import init_weights
from bpnn.matrix import Matrix


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


class NeuralNetwork(object):
    """
    Single hidden layer network with full connectivity.

    params: weights_input_hidden, where w[j,i] = weight from input i to
                hidden unit j. Shape (hidden_nodes, input_nodes).
            weights_hidden_output, where w[k,j] = weight from hidden unit
                j to output unit k. Shape (output_nodes, hidden_nodes).

    For a single input column vector x, the computation chain is:
    h = f( dot(weights_input_hidden, x) )
    output = f( dot(weights_hidden_output, h) )

    Note
    ----
    The backward pass multiplies errors by `activation_derivative`
    evaluated at the *output* of each layer. The default derivative,
    y * (1 - y), is only correct when `activation` is the logistic
    sigmoid. Supply a matching `activation_derivative` whenever a
    different activation is used.
    """
    def __init__(self, input_nodes, hidden_nodes, output_nodes,
                 learning_rate, activation=sigmoid,
                 activation_derivative=None, random_state=None):
        """
        Parameters
        ----------
        input_nodes, hidden_nodes, output_nodes: int
            Number of units in each layer.

        learning_rate: float
            Step size of each gradient descent update. Fixed for the
            lifetime of the network.

        activation: callable, default=sigmoid
            Scalar function applied element-wise after each weighted sum.

        activation_derivative: callable, default=None
            Derivative of `activation` written as a function of the
            activation's output. None selects the sigmoid shortcut.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.
        """
        for name, value in (('input_nodes', input_nodes),
                            ('hidden_nodes', hidden_nodes),
                            ('output_nodes', output_nodes)):
            if not isinstance(value, numbers.Integral) or value < 1:
                msg = "`{}` must be a positive integer; got {!r}"
                raise ValueError(msg.format(name, value))

        if (not isinstance(learning_rate, numbers.Real) or
                not numpy.isfinite(learning_rate) or learning_rate <= 0):
            msg = "`learning_rate` must be a positive finite number; got {!r}"
            raise ValueError(msg.format(learning_rate))

        if not callable(activation):
            raise TypeError("`activation` must be callable")

        if activation_derivative is None:
            activation_derivative = sigmoid_derivative
        elif not callable(activation_derivative):
            raise TypeError("`activation_derivative` must be callable")

        self.input_nodes = input_nodes
        self.hidden_nodes = hidden_nodes
        self.output_nodes = output_nodes
        self.learning_rate = float(learning_rate)
        self.activation = activation
        self.activation_derivative = activation_derivative

        self.rs = numpy.random.RandomState() if random_state is None \
            else random_state

        self.weights_input_hidden = init_weights(
            fan_in=input_nodes, fan_out=hidden_nodes, random_state=self.rs)
        self.weights_hidden_output = init_weights(
            fan_in=hidden_nodes, fan_out=output_nodes, random_state=self.rs)

        logger.debug("Created {!r} with learning rate {:g}".format(
            self, self.learning_rate))

    def __repr__(self):
        return "<NeuralNetwork input=%d, hidden=%d, output=%d>" % (
            self.input_nodes, self.hidden_nodes, self.output_nodes)

    def get_weights(self):
        """
        Returns
        -------
        weights: list of Matrix
            [weights_input_hidden, weights_hidden_output]
        """
        return [self.weights_input_hidden, self.weights_hidden_output]

    def set_weights(self, weights_input_hidden, weights_hidden_output):
        """
        Replace both weight matrices. Accepts `Matrix` instances or
        anything convertible to a two dimensional array.
        """
        if not isinstance(weights_input_hidden, Matrix):
            weights_input_hidden = Matrix(weights_input_hidden)
        if not isinstance(weights_hidden_output, Matrix):
            weights_hidden_output = Matrix(weights_hidden_output)

        expected = (self.hidden_nodes, self.input_nodes)
        if weights_input_hidden.shape != expected:
            msg = "`weights_input_hidden` has shape {} but should be {}"
            raise ShapeError(msg.format(weights_input_hidden.shape, expected))

        expected = (self.output_nodes, self.hidden_nodes)
        if weights_hidden_output.shape != expected:
            msg = "`weights_hidden_output` has shape {} but should be {}"
            raise ShapeError(msg.format(weights_hidden_output.shape, expected))

        self.weights_input_hidden = weights_input_hidden
        self.weights_hidden_output = weights_hidden_output

    def _as_column(self, values, length, name):
        column = Matrix.from_vector(values)
        if column.rows != length:
            msg = "`{}` has length {} but the network expects {}"
            raise ShapeError(msg.format(name, column.rows, length))
        return column

    def _layer_output(self, inputs, weights):
        return weights.multiply(inputs).apply(self.activation)

    def _forward(self, inputs):
        hidden = self._layer_output(inputs, self.weights_input_hidden)
        output = self._layer_output(hidden, self.weights_hidden_output)
        return hidden, output

    def query(self, inputs):
        """
        Parameters
        ----------
        inputs: sequence of float, length=input_nodes
            Expected to be pre-scaled into the sensitive region of the
            activation, e.g., [0.01, 1.0].

        Returns
        -------
        output: ndarray, shape=(output_nodes,)
        """
        x = self._as_column(inputs, self.input_nodes, 'inputs')
        _, output = self._forward(x)
        return output.flatten()

    def _delta(self, error, output):
        """ The error signal at a layer: `error * f'(output)`
        """
        return error.hadamard(output.apply(self.activation_derivative))

    def _weighting_adjustment(self, error, output, previous_output):
        """
        Compute the weight change for one layer as the outer product of
        that layer's delta and the previous layer's output, scaled by the
        learning rate.

        Parameters
        ----------
        error, output: Matrix, shape=(n, 1)
            The error and the activated output of the layer.

        previous_output: Matrix, shape=(p, 1)
            The activated output feeding into the layer.

        Returns
        -------
        adjustment: Matrix, shape=(n, p)
        """
        delta = self._delta(error, output)
        return delta.multiply(previous_output.transpose()).scale(
            self.learning_rate)

    def train(self, inputs, targets):
        """
        Run one step of gradient descent on a single example.

        Parameters
        ----------
        inputs: sequence of float, length=input_nodes

        targets: sequence of float, length=output_nodes
            Conventionally one value near 0.99 and the rest near 0.01.

        Raises
        ------
        ShapeError
            If either vector has the wrong length. No weights are
            modified in that case.
        """
        x = self._as_column(inputs, self.input_nodes, 'inputs')
        t = self._as_column(targets, self.output_nodes, 'targets')

        hidden, output = self._forward(x)

        output_error = t.subtract(output)
        output_delta = self._delta(output_error, output)

        # The hidden error must use the output weights as they stood
        # before this step's update.
        hidden_error = self.weights_hidden_output.transpose().multiply(
            output_delta)

        who_adjustment = self._weighting_adjustment(
            output_error, output, hidden)
        self.weights_hidden_output = self.weights_hidden_output.add(
            who_adjustment)

        wih_adjustment = self._weighting_adjustment(hidden_error, hidden, x)
        self.weights_input_hidden = self.weights_input_hidden.add(
            wih_adjustment)
