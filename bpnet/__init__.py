# flake8: noqa

from ._version import version as __version__

from .activation_functions import (
    get_activation,
    LEAKY_RELU,
    TANH,
)

from .core.exception import (
    InputSizeMismatch,
    InputTypeError,
    NonFiniteValues,
    OutputSizeMismatch,
)

from .core.network import (
    Evaluation,
    Network,
)
