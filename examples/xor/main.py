import numpy as np

from bpnet import Network
from bpnet.core.logger import setup_logging
from bpnet.data.logic_gates import get_patterns


setup_logging(filename='xor-log.txt')

random_state = np.random.RandomState(1234)

patterns = get_patterns('xor')

# Two inputs, two hidden units, and one output unit
network = Network(2, 2, 1, activation='tanh', random_state=random_state)

# Runs all iterations; the error is reported every 100 epochs
errors = network.train(patterns, iterations=1000,
                       learning_rate=0.5, momentum=0.1)

network.test(patterns)
