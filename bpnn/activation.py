""" Activation functions for the network

Both functions accept a scalar or a numpy array. The derivative takes the
*output* of the activation rather than its input, which lets the backward
pass reuse the values computed in the forward pass.
"""
from scipy.special import expit


def sigmoid(x):
    """ The logistic function 1 / (1 + exp(-x)), with range (0, 1)
    """
    return expit(x)


def sigmoid_derivative(y):
    """ Derivative of the logistic function expressed in terms of its
    output `y = sigmoid(x)`
    """
    return y * (1.0 - y)
