from wordcloud_crawler.activator.activators import (
    ActivationFunction, Activator, HyperbolicTangentActivator, SigmoidActivator
)
from wordcloud_crawler.activator.factory import ActivatorFactory, get_activator

__all__ = [
    "ActivationFunction", "Activator", "ActivatorFactory", "HyperbolicTangentActivator",
    "SigmoidActivator", "get_activator",
]
