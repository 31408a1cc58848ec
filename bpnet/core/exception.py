class InputSizeMismatch(ValueError):
    """ Raised when the forward pass input length doesn't match the number
    of (non-bias) input units
    """


class OutputSizeMismatch(ValueError):
    """ Raised when the backward pass targets length doesn't match the number
    of output units
    """


class InputTypeError(TypeError):
    """ Raised when inputs or targets are not a flat sequence of numbers
    """


class NonFiniteValues(ArithmeticError):
    """ Raised when a NaN or infinite value is supplied to, or would be
    produced in, a network that checks for finite values
    """
