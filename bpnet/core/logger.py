import logging
import os
import sys


DEFAULT_LOG_FILENAME = 'train-log.txt'

LINE_FORMAT = ("[%(asctime)s] [%(name)s:%(lineno)d] "
               "%(levelname)-8s %(message)s")
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(filename=None, stdout=True, level=logging.INFO):
    """ Sets up logging formatting, etc

    Parameters
    ----------
    filename: str, default=None
        The log file, which is overwritten if it exists. The default
        (None) writes :code:`DEFAULT_LOG_FILENAME` to the current directory.
        Pass :code:`False` to disable logging to a file.

    stdout: bool, default=True
        If True, log records are also written to standard output

    level: int, default=logging.INFO
        The level of the root logger
    """
    formatter = logging.Formatter(fmt=LINE_FORMAT, datefmt=DATE_FORMAT)
    handlers = []

    if filename is not False:
        # Handles when filename is None
        filename = filename or os.path.join(os.path.curdir,
                                            DEFAULT_LOG_FILENAME)
        handlers.append(logging.FileHandler(filename, mode='w'))

    if stdout:
        handlers.append(logging.StreamHandler(sys.stdout))

    root = logging.getLogger()

    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.setLevel(level)

    return root


def progress_message(msg, i, n):
    """ Prefix `msg` with the zero-padded progress "(i / n)"
    """
    return "({:0{width}d} / {:d}) {:s}".format(i, n, msg, width=len(str(n)))
