import unittest

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from bpnet.visualize import plot_error_history


class TestVisualize(unittest.TestCase):

    def tearDown(self):
        plt.close('all')

    def test_plot_error_history(self):
        errors = np.exp(-np.linspace(0, 5, 50))

        ax = plot_error_history(errors)

        line, = ax.get_lines()
        np.testing.assert_array_equal(line.get_ydata(), errors)
        self.assertEqual(ax.get_yscale(), 'log')
        self.assertEqual(ax.get_xlabel(), 'Epoch')

    def test_plot_onto_axis_linear(self):
        _, ax = plt.subplots(1, 1)

        returned = plot_error_history([0.0, 1.0, 0.5], ax=ax)

        self.assertIs(returned, ax)
        self.assertEqual(ax.get_yscale(), 'linear')

    def test_bad_shape(self):
        with self.assertRaises(ValueError):
            plot_error_history(np.ones((2, 2)))


if __name__ == '__main__':
    unittest.main()
