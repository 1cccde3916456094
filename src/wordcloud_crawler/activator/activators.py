"""
Activation functions for neural-network units.
"""
from enum import Enum

import numpy as np


class ActivationFunction(Enum):
    HYPERBOLIC_TANGENT = 'tanh'
    SIGMOID = 'sigmoid'


class Activator:
    """A scalar function applied element-wise; accepts floats or numpy arrays."""
    function = None

    def activate(self, x):
        raise NotImplementedError

    def derivative(self, y):
        """Slope of the function, given its output y = activate(x)."""
        raise NotImplementedError

    def __call__(self, x):
        return self.activate(x)

    def __repr__(self):
        return f"{type(self).__name__}()"


class HyperbolicTangentActivator(Activator):
    function = ActivationFunction.HYPERBOLIC_TANGENT

    def activate(self, x):
        return np.tanh(x)

    def derivative(self, y):
        return 1.0 - np.square(y)


class SigmoidActivator(Activator):
    function = ActivationFunction.SIGMOID

    def activate(self, x):
        return 1.0 / (1.0 + np.exp(-np.asarray(x, dtype=float)))

    def derivative(self, y):
        return y * (1.0 - y)
