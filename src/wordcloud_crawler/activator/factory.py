"""
Selects the activator for an ActivationFunction.
"""
from wordcloud_crawler.activator.activators import (
    ActivationFunction, HyperbolicTangentActivator, SigmoidActivator
)


def get_activator(function):
    """Tanh for HYPERBOLIC_TANGENT, sigmoid for anything else."""
    if function == ActivationFunction.HYPERBOLIC_TANGENT:
        return HyperbolicTangentActivator()
    return SigmoidActivator()


class ActivatorFactory:
    """Process-wide instance handing out activators, see get_activator()."""
    _instance = None

    @classmethod
    def get_instance(cls):
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_activator(self, function):
        return get_activator(function)
