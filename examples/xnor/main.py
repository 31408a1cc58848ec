import matplotlib.pyplot as plt
import numpy as np

from bpnet import Network
from bpnet.core.logger import setup_logging
from bpnet.data.logic_gates import get_patterns
from bpnet.visualize import plot_error_history


setup_logging(filename='xnor-log.txt')

random_state = np.random.RandomState(1234)

patterns = get_patterns('xnor')

network = Network(2, 2, 1, activation='tanh', random_state=random_state)

errors = network.train(patterns, iterations=10000, learning_rate=0.5,
                       momentum=0.1, report_every=1000)

network.test(patterns)
network.weights()

plot_error_history(errors)
plt.show()
