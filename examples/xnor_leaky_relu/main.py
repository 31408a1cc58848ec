import logging

import numpy as np

from bpnet import Network
from bpnet.core.logger import setup_logging
from bpnet.data.logic_gates import get_patterns
from bpnet.util.on_epoch import log_momentum


setup_logging(filename='xnor-leaky-relu-log.txt', level=logging.DEBUG)

random_state = np.random.RandomState(1234)

patterns = get_patterns('xnor')

# The leaky ReLU variant uses a narrower hidden => output initial range
# (see `bpnet.activation_functions.LEAKY_RELU`)
network = Network(2, 4, 1, activation='leaky_relu',
                  random_state=random_state)

# Stop early once the summed epoch error is small enough
errors = network.train(patterns, iterations=50000,
                       learning_rate=0.001, momentum=0.005,
                       error_threshold=1e-4, report_every=1000,
                       on_epoch=log_momentum(network, every=1000))

network.test(patterns)
network.weights()
