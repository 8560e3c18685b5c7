# formula/exceptions.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for formula text processing.

A ParseError is always recoverable: the caller reports its message and asks
for new input. No formula is produced when it is raised.
"""


class ParseError(RuntimeError):
    """Exception raised when formula text does not match the grammar.

    Covers unrecognized leading tokens, missing operators, unmatched
    parentheses and malformed parenthetical content.
    """

    pass
