import logging
import unittest

import numpy as np

from bpnet.core.network import Network
from bpnet.data.logic_gates import XOR
from bpnet.util.on_epoch import collect_errors, log_momentum


class TestOnEpoch(unittest.TestCase):

    def test_collect_errors(self):
        network = Network(2, 2, 1, random_state=np.random.RandomState(123))

        errors = []
        returned = network.train(
            XOR, iterations=15, on_epoch=collect_errors(errors))

        np.testing.assert_array_equal(errors, returned)

    def test_log_momentum(self):
        network = Network(2, 2, 1, random_state=np.random.RandomState(123))
        logger = logging.getLogger('test_on_epoch')

        with self.assertLogs(logger, level='DEBUG') as logs:
            network.train(XOR, iterations=10,
                          on_epoch=log_momentum(network, every=5,
                                                logger=logger))

        # Two messages for each of epochs 0 and 5
        self.assertEqual(len(logs.output), 4)
        self.assertIn('Epoch 5 hidden => output momentum', logs.output[2])


if __name__ == '__main__':
    unittest.main()
