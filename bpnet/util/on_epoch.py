""" This module provides a few simple `on_epoch` functions that can be
used in the Network.train member function
"""
import logging


def collect_errors(error_list):
    """ Collects the epoch errors. Errors are appended to
    :code:`error_list` and so an empty list should be provided. Usage::

        errors = []
        network.train(patterns, on_epoch=collect_errors(errors))
    """

    def on_epoch(i, error):
        error_list.append(error)

    return on_epoch


def log_momentum(network, every=1000, logger=None):
    """ Log the network's momentum terms (i.e., the previous weight
    changes) at DEBUG level every :code:`every` epochs
    """
    logger = logger or logging.getLogger('on_epoch')

    def on_epoch(i, error):
        if i % every == 0:
            logger.debug("Epoch {:d} hidden => output momentum:\n{}".format(
                i, network.momentum_hidden_output))
            logger.debug("Epoch {:d} input => hidden momentum:\n{}".format(
                i, network.momentum_input_hidden))

    return on_epoch
