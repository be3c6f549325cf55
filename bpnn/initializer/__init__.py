# flake8: noqa

from .weights import init_weights, weight_bound
