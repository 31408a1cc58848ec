import unittest

import numpy as np

from bpnet.activation_functions import (
    Activation, get_activation, leaky_relu, leaky_relu_derivative,
    LEAKY_RELU, TANH, tanh, tanh_derivative)


class TestActivationFunctions(unittest.TestCase):

    def test_tanh(self):
        x = np.linspace(-3, 3, 13)
        np.testing.assert_allclose(tanh(x), np.tanh(x))

    def test_tanh_derivative_from_output(self):
        x = np.linspace(-3, 3, 13)
        y = tanh(x)
        expected = 1.0 / np.cosh(x)**2

        np.testing.assert_allclose(tanh_derivative(y), expected)

    def test_leaky_relu(self):
        x = np.array([-2.0, -0.5, 0.0, 0.5, 2.0])
        np.testing.assert_allclose(
            leaky_relu(x), [-0.02, -0.005, 0.0, 0.5, 2.0])

    def test_leaky_relu_derivative_from_output(self):
        y = leaky_relu(np.array([-2.0, 0.0, 3.0]))
        np.testing.assert_array_equal(
            leaky_relu_derivative(y), [0.01, 0.01, 1.0])

    def test_column_vectors_keep_shape(self):
        x = np.ones((4, 1))

        for activation in (TANH, LEAKY_RELU):
            self.assertEqual(activation.function(x).shape, (4, 1))
            self.assertEqual(activation.derivative(x).shape, (4, 1))


class TestGetActivation(unittest.TestCase):

    def test_by_name(self):
        self.assertIs(get_activation('tanh'), TANH)
        self.assertIs(get_activation('leaky_relu'), LEAKY_RELU)

    def test_by_instance(self):
        self.assertIs(get_activation(TANH), TANH)

    def test_unknown(self):
        with self.assertRaises(ValueError):
            get_activation('relu')

        with self.assertRaises(ValueError):
            get_activation(None)

        # The set of variants is closed
        custom = Activation(name='tanh', function=np.tanh,
                            derivative=tanh_derivative,
                            output_weight_range=1.0)
        with self.assertRaises(ValueError):
            get_activation(custom)


if __name__ == '__main__':
    unittest.main()
