# formula/operators.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Connective and propositional variable catalogs

"""Closed catalogs of the symbols that may appear in a formula.

Operator Symbols:
    ->   implication (IMPLIES)
    <->  biconditional (IFF)
    V    disjunction (OR)
    ^    conjunction (AND)
    ~    negation (NOT, the only unary connective)

Propositional variables are limited to the five atoms p, q, r, s and t.
"""

from enum import Enum
from typing import Iterator, Optional


class Operator(Enum):
    """Logical connectives and their canonical textual symbols."""

    IMPLIES = "->"
    IFF = "<->"
    OR = "V"
    AND = "^"
    NOT = "~"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def length(self) -> int:
        """Number of characters in the symbol, e.g. 3 for '<->'."""
        return len(self.value)

    @property
    def is_unary(self) -> bool:
        return self is Operator.NOT

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional["Operator"]:
        """Identify the operator whose symbol is exactly ``symbol``.

        Returns:
            Matching operator, or None when the text is not an operator
        """
        for op in cls:
            if op.value == symbol:
                return op
        return None

    @classmethod
    def binary(cls) -> Iterator["Operator"]:
        """Iterate over the binary connectives in declaration order."""
        return (op for op in cls if not op.is_unary)

    def __str__(self) -> str:
        return self.value


class AtomSymbol(Enum):
    """Propositional variables available to formulas."""

    P = "p"
    Q = "q"
    R = "r"
    S = "s"
    T = "t"

    @classmethod
    def from_char(cls, char: str) -> Optional["AtomSymbol"]:
        for atom in cls:
            if atom.value == char:
                return atom
        return None

    def __str__(self) -> str:
        return self.value
