""" The activation functions available to a network. Each variant bundles
its forward function with its derivative, where the derivative is expressed
in terms of the already-computed output `y = f(x)` rather than the input `x`
"""
from collections import namedtuple

import numpy


LEAKY_RELU_SLOPE = 0.01


Activation = namedtuple(
    'Activation',
    ['name', 'function', 'derivative', 'output_weight_range'])


def tanh(x):
    return numpy.tanh(x)


def tanh_derivative(y):
    return 1.0 - y**2


def leaky_relu(x):
    return numpy.where(x > 0.0, x, LEAKY_RELU_SLOPE * x)


def leaky_relu_derivative(y):
    return numpy.where(y > 0.0, 1.0, LEAKY_RELU_SLOPE)


TANH = Activation(
    name='tanh',
    function=tanh,
    derivative=tanh_derivative,
    output_weight_range=2.0)

# The unbounded output calls for a narrower initial hidden => output range
LEAKY_RELU = Activation(
    name='leaky_relu',
    function=leaky_relu,
    derivative=leaky_relu_derivative,
    output_weight_range=0.5)

ACTIVATIONS = {
    activation.name: activation for activation in (TANH, LEAKY_RELU)
}


def get_activation(activation):
    """ Look up an activation variant

    Parameters
    ----------
    activation: str or Activation
        Either the name of the variant (one of :code:`ACTIVATIONS`) or
        one of the provided `Activation` instances

    Returns
    -------
    activation: Activation
    """
    if isinstance(activation, Activation):
        if ACTIVATIONS.get(activation.name) is not activation:
            msg = "Unknown activation variant {!r}"
            raise ValueError(msg.format(activation.name))
        return activation

    try:
        return ACTIVATIONS[activation]
    except (KeyError, TypeError):
        msg = "Unknown activation {!r}; should be one of {}"
        raise ValueError(msg.format(activation, sorted(ACTIVATIONS)))
