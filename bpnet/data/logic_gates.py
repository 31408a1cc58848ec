""" Truth tables of two-input logic gates, as lists of
:code:`(inputs, targets)` training patterns
"""

XOR = [
    ([0, 0], [0]),
    ([0, 1], [1]),
    ([1, 0], [1]),
    ([1, 1], [0]),
]

XNOR = [
    ([0, 0], [1]),
    ([0, 1], [0]),
    ([1, 0], [0]),
    ([1, 1], [1]),
]

AND = [
    ([0, 0], [0]),
    ([0, 1], [0]),
    ([1, 0], [0]),
    ([1, 1], [1]),
]

OR = [
    ([0, 0], [0]),
    ([0, 1], [1]),
    ([1, 0], [1]),
    ([1, 1], [1]),
]

NAND = [
    ([0, 0], [1]),
    ([0, 1], [1]),
    ([1, 0], [1]),
    ([1, 1], [0]),
]

GATES = {
    'and': AND,
    'nand': NAND,
    'or': OR,
    'xnor': XNOR,
    'xor': XOR,
}


def get_patterns(name):
    """ Returns a copy of the truth table for the gate `name`
    (case insensitive), e.g., :code:`get_patterns('xor')`
    """
    try:
        table = GATES[name.lower()]
    except (KeyError, AttributeError):
        msg = "Unknown gate {!r}; should be one of {}"
        raise ValueError(msg.format(name, sorted(GATES)))

    return [(list(inputs), list(targets)) for inputs, targets in table]
