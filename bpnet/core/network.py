"""
A simple single hidden layer neural network trained by
backpropagation with momentum.

Input (R^n + bias) => Hidden (R^h) => Output (R^m)

The same activation function is applied at the hidden and output
layers. Weights are updated one pattern at a time, blending in the
previous weight change scaled by a momentum factor.
"""
from collections import namedtuple
import logging
import numbers

import numpy

from bpnet.activation_functions import get_activation
from bpnet.core.exception import (
    InputSizeMismatch, InputTypeError, NonFiniteValues, OutputSizeMismatch)
from bpnet.core.logger import progress_message


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)

DEFAULT_INPUT_WEIGHT_RANGE = 0.2


# Returned by `Network.test` for each pattern
Evaluation = namedtuple('Evaluation', ['inputs', 'predicted', 'expected'])


def as_flat_vector(values, name='inputs'):
    """ Convert `values` to a 1d float array, raising `InputTypeError` if
    `values` is not a flat sequence of numbers
    """
    if isinstance(values, (str, bytes)):
        msg = "`{}` should be a sequence of numbers, not {}"
        raise InputTypeError(msg.format(name, type(values).__name__))

    try:
        arr = numpy.asarray(values)
    except (TypeError, ValueError):
        msg = "`{}` could not be read as a sequence of numbers"
        raise InputTypeError(msg.format(name))

    if arr.ndim != 1:
        msg = "`{}` should be a flat sequence but has {} dimension(s)"
        raise InputTypeError(msg.format(name, arr.ndim))

    if arr.dtype.kind not in 'biuf':
        msg = "`{}` should contain numbers but has dtype {}"
        raise InputTypeError(msg.format(name, arr.dtype))

    return arr.astype(float)


class Network:
    """
    Single hidden layer network with a constant bias unit prepended
    to the input layer.

    params: weights_input_hidden, shape=(n_hidden, n_input), where
                [j, i] = weight from input unit i to hidden unit j.
            weights_hidden_output, shape=(n_output, n_hidden), where
                [k, j] = weight from hidden unit j to output unit k.

    For a single input vector x, the computation chain is:
    a_in = [1, x]
    a_hidden = f( dot(weights_input_hidden, a_in) )
    a_output = f( dot(weights_hidden_output, a_hidden) )
    """
    def __init__(self, n_input, n_hidden, n_output, activation='tanh',
                 input_weight_range=DEFAULT_INPUT_WEIGHT_RANGE,
                 output_weight_range=None, random_state=None,
                 check_finite=True):
        """
        Parameters
        ----------
        n_input: int
            Number of input units, not counting the bias unit.

        n_hidden: int
            Number of hidden units.

        n_output: int
            Number of output units.

        activation: str or Activation, default='tanh'
            One of 'tanh' or 'leaky_relu'
            (see :mod:`bpnet.activation_functions`).

        input_weight_range: float, default=0.2
            Input => hidden weights are drawn uniformly from
            [-input_weight_range, input_weight_range).

        output_weight_range: float, default=None
            Hidden => output weights are drawn uniformly from
            [-output_weight_range, output_weight_range). The default
            (None) uses the range suggested by the activation variant.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.

        check_finite: bool, default=True
            If True, NaN or infinite inputs and targets are rejected and
            a weight update that would produce non-finite weights raises
            `NonFiniteValues` instead of being applied.
        """
        # The extra input unit is the bias
        self.n_input = n_input + 1
        self.n_hidden = n_hidden
        self.n_output = n_output

        self.activation = get_activation(activation)
        self.random_state = (numpy.random.RandomState()
                             if random_state is None else random_state)
        self.check_finite = check_finite

        if output_weight_range is None:
            output_weight_range = self.activation.output_weight_range

        self.input_weight_range = input_weight_range
        self.output_weight_range = output_weight_range

        # Activations for the units
        self.activations_input = numpy.ones((self.n_input, 1))
        self.activations_hidden = numpy.ones((self.n_hidden, 1))
        self.activations_output = numpy.ones((self.n_output, 1))

        # This both initializes and randomizes.
        self.randomize_weights()

    def __repr__(self):
        return "<Network n_input=%d, n_hidden=%d, n_output=%d, %s>" % (
            self.n_input - 1, self.n_hidden, self.n_output,
            self.activation.name)

    def randomize_weights(self):
        """
        Draw new uniform random weights and reset the momentum terms.
        """
        self.weights_input_hidden = self.random_state.uniform(
            -self.input_weight_range, self.input_weight_range,
            size=(self.n_hidden, self.n_input))
        self.weights_hidden_output = self.random_state.uniform(
            -self.output_weight_range, self.output_weight_range,
            size=(self.n_output, self.n_hidden))

        # Last change in weights for momentum
        self.momentum_input_hidden = numpy.zeros(
            (self.n_hidden, self.n_input))
        self.momentum_hidden_output = numpy.zeros(
            (self.n_output, self.n_hidden))

    def _check_finite(self, **arrays):
        if not self.check_finite:
            return

        for name, arr in arrays.items():
            if not numpy.isfinite(arr).all():
                msg = "Non-finite values encountered in `{}`"
                raise NonFiniteValues(msg.format(name))

    def update(self, inputs):
        """
        Run the forward pass.

        Parameters
        ----------
        inputs: sequence of numbers, len=n_input
            The input values (excluding the bias unit).

        Returns
        -------
        output: ndarray, shape=(n_output,)
            The output unit activations.
        """
        inputs = as_flat_vector(inputs, name='inputs')

        if inputs.shape[0] != self.n_input - 1:
            msg = "Input length {} doesn't match the expected length {}"
            raise InputSizeMismatch(
                msg.format(inputs.shape[0], self.n_input - 1))

        self._check_finite(inputs=inputs)

        # Index 0 is the bias and is never overwritten
        activations_input = self.activations_input.copy()
        activations_input[1:, 0] = inputs

        activations_hidden = self.activation.function(
            numpy.dot(self.weights_input_hidden, activations_input))

        activations_output = self.activation.function(
            numpy.dot(self.weights_hidden_output, activations_hidden))

        self.activations_input = activations_input
        self.activations_hidden = activations_hidden
        self.activations_output = activations_output

        return activations_output[:, 0].copy()

    def back_propagate(self, targets, learning_rate, momentum):
        """
        Run the backward pass and update the weights with respect to
        the activations from the most recent call to `update`.

        Parameters
        ----------
        targets: sequence of numbers, len=n_output
            The desired output values.

        learning_rate: float
            Scale of the current weight change.

        momentum: float
            Scale of the previous weight change.

        Returns
        -------
        error: float
            Half the sum of squared output errors prior to the update.
        """
        targets = as_flat_vector(targets, name='targets')

        if targets.shape[0] != self.n_output:
            msg = "Targets length {} doesn't match the expected length {}"
            raise OutputSizeMismatch(
                msg.format(targets.shape[0], self.n_output))

        self._check_finite(targets=targets)

        derivative = self.activation.derivative

        # Error terms for the output units
        output_error = targets.reshape(-1, 1) - self.activations_output
        output_delta = derivative(self.activations_output) * output_error

        # Error terms for the hidden units
        hidden_error = numpy.dot(self.weights_hidden_output.T, output_delta)
        hidden_delta = derivative(self.activations_hidden) * hidden_error

        # Hidden => output weights
        output_change = numpy.dot(output_delta, self.activations_hidden.T)
        weights_hidden_output = (self.weights_hidden_output +
                                 learning_rate * output_change +
                                 momentum * self.momentum_hidden_output)

        # Input => hidden weights
        hidden_change = numpy.dot(hidden_delta, self.activations_input.T)
        weights_input_hidden = (self.weights_input_hidden +
                                learning_rate * hidden_change +
                                momentum * self.momentum_input_hidden)

        self._check_finite(weights_hidden_output=weights_hidden_output,
                           weights_input_hidden=weights_input_hidden)

        self.weights_hidden_output = weights_hidden_output
        self.momentum_hidden_output = output_change
        self.weights_input_hidden = weights_input_hidden
        self.momentum_input_hidden = hidden_change

        return 0.5 * float((output_error**2).sum())

    def train(self, patterns, iterations=1000, learning_rate=0.5,
              momentum=0.1, error_threshold=None, min_iterations=0,
              report_every=None, on_epoch=None):
        """
        Run `iterations` epochs of pattern-by-pattern backpropagation.

        Parameters
        ----------
        patterns: list of (inputs, targets) pairs
            The training patterns.

        iterations: int, default=1000
            Maximum number of epochs (full passes over `patterns`).

        learning_rate: float, default=0.5
            Must be positive.

        momentum: float, default=0.1
            Must be non-negative.

        error_threshold: float, default=None
            If given, training stops once the absolute epoch error drops
            below this value. The default (None) always runs all
            `iterations` epochs.

        min_iterations: int, default=0
            The number of epochs that must complete before the
            `error_threshold` check can stop training.

        report_every: int, default=None
            Log the epoch error every `report_every` epochs. The default
            (None) reports roughly ten times over `iterations`.

        on_epoch: callable or list of callables, default=None
            Called after each epoch with signature :code:`on_epoch(i, error)`
            where `error` is the summed error over epoch `i`.

        Returns
        -------
        errors: ndarray, shape=(n_epochs,)
            The summed error of each epoch that was run.
        """
        ############################################################
        # Input validation
        patterns = list(patterns)
        if len(patterns) == 0:
            raise ValueError("`patterns` should not be empty")

        if not isinstance(iterations, numbers.Integral) or iterations < 0:
            msg = "`iterations` ({}) should be a non-negative integer"
            raise ValueError(msg.format(iterations))

        if learning_rate <= 0:
            msg = "`learning_rate` ({}) should be positive"
            raise ValueError(msg.format(learning_rate))

        if momentum < 0:
            msg = "`momentum` ({}) should be non-negative"
            raise ValueError(msg.format(momentum))

        if error_threshold is not None and error_threshold <= 0:
            msg = "`error_threshold` ({}) should be positive or None"
            raise ValueError(msg.format(error_threshold))

        if (not isinstance(min_iterations, numbers.Integral) or
                min_iterations < 0):
            msg = "`min_iterations` ({}) should be a non-negative integer"
            raise ValueError(msg.format(min_iterations))

        if report_every is None:
            report_every = max(1, iterations // 10)
        elif (not isinstance(report_every, numbers.Integral) or
                report_every < 1):
            msg = "`report_every` ({}) should be a positive integer"
            raise ValueError(msg.format(report_every))

        if on_epoch:
            if not isinstance(on_epoch, list):
                on_epoch = [on_epoch]

            if not all([callable(func) for func in on_epoch]):
                msg = "All on_epoch items must be callable"
                raise TypeError(msg)
        # End Input validation
        ############################################################

        errors = []

        for i in range(iterations):
            error = 0.0
            for inputs, targets in patterns:
                self.update(inputs)
                error += self.back_propagate(
                    targets, learning_rate=learning_rate, momentum=momentum)

            errors.append(error)

            if on_epoch:
                for func in on_epoch:
                    func(i, error)

            if i % report_every == 0:
                logger.info(progress_message(
                    "error: {:.6f}".format(error), i, iterations))

            if (error_threshold is not None and i + 1 >= min_iterations and
                    abs(error) < error_threshold):
                msg = "Stopping after epoch {:d}; error {:.6g} < {:.6g}"
                logger.info(msg.format(i, error, error_threshold))
                break

        return numpy.array(errors)

    def test(self, patterns):
        """
        Run the forward pass on each pattern's input.

        Parameters
        ----------
        patterns: list of (inputs, targets) pairs

        Returns
        -------
        results: list of Evaluation
            The (inputs, predicted, expected) triplet for each pattern.
        """
        results = []

        for inputs, targets in patterns:
            predicted = self.update(inputs)
            result = Evaluation(
                inputs=as_flat_vector(inputs, name='inputs'),
                predicted=predicted,
                expected=as_flat_vector(targets, name='targets'))
            results.append(result)

            logger.info("{} -> {}".format(result.inputs, result.predicted))

        return results

    def weights(self):
        """
        Returns
        -------
        weights_input_hidden, weights_hidden_output: ndarray, ndarray
            Copies of the current weight matrices.
        """
        logger.info("Input weights:\n{}".format(self.weights_input_hidden))
        logger.info("Output weights:\n{}".format(self.weights_hidden_output))

        return (self.weights_input_hidden.copy(),
                self.weights_hidden_output.copy())
