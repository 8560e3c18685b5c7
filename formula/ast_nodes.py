# formula/ast_nodes.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Formula tree node classes for propositional logic statements

"""Immutable formula tree nodes.

This module defines the three shapes a propositional formula can take. Nodes
are frozen dataclasses and are never modified once built: inference rules
always produce fresh nodes that reference existing sub-trees.

Node Types:
    Atom: One of the propositional variables p, q, r, s, t
    Negation: The unary NOT connective applied to one operand
    Binary: IMPLIES, IFF, OR or AND joining a left and a right operand

Equality is defined by canonical rendering, not by tree identity. Two trees
that render to the same text compare (and hash) equal.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from .operators import AtomSymbol, Operator


@dataclass(frozen=True, slots=True, eq=False)
class Formula:
    """Base class for all formula nodes.

    Subclasses implement ``render`` and describe themselves through the
    ``operator`` and ``operands`` properties, which is all the rule engine
    needs to inspect a formula structurally.
    """

    @property
    def operator(self) -> Optional[Operator]:
        """Main connective of the formula, or None for atoms."""
        raise NotImplementedError

    @property
    def operands(self) -> Tuple[Formula, ...]:
        """Immediate sub-formulas, left to right."""
        raise NotImplementedError

    def render(self, standalone: bool = False) -> str:
        """Return the canonical text of the formula.

        Args:
            standalone: Render a bare atom as a parenthesized statement,
                e.g. ``(p)``. Has no effect on compound formulas.

        Returns:
            Canonical textual representation
        """
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Formula):
            return NotImplemented
        return self.render() == other.render()

    def __hash__(self) -> int:
        return hash(self.render())


@dataclass(frozen=True, slots=True, eq=False)
class Atom(Formula):
    """Propositional variable.

    Attributes:
        symbol: Variable identity; a plain character such as ``"p"`` is
            accepted and converted to its AtomSymbol
    """

    symbol: AtomSymbol

    def __post_init__(self):
        if isinstance(self.symbol, AtomSymbol):
            return
        atom = AtomSymbol.from_char(self.symbol)
        if atom is None:
            raise ValueError(f"'{self.symbol}' is not a propositional variable")
        object.__setattr__(self, "symbol", atom)

    @property
    def operator(self) -> Optional[Operator]:
        return None

    @property
    def operands(self) -> Tuple[Formula, ...]:
        return ()

    def render(self, standalone: bool = False) -> str:
        if standalone:
            return f"({self.symbol})"
        return str(self.symbol)

    def __repr__(self) -> str:
        return f"Atom({self.symbol.value!r})"


@dataclass(frozen=True, slots=True, eq=False)
class Negation(Formula):
    """Logical negation of a single operand.

    Attributes:
        operand: The negated formula
    """

    operand: Formula

    @property
    def operator(self) -> Optional[Operator]:
        return Operator.NOT

    @property
    def operands(self) -> Tuple[Formula, ...]:
        return (self.operand,)

    def render(self, standalone: bool = False) -> str:
        # No parentheses of its own; a compound operand brings its own.
        return f"{Operator.NOT}{self.operand.render()}"

    def __repr__(self) -> str:
        return f"Negation({self.operand!r})"


@dataclass(frozen=True, slots=True, eq=False)
class Binary(Formula):
    """Binary connective joining two operands.

    Attributes:
        op: One of IMPLIES, IFF, OR, AND
        left: Left operand (antecedent, first disjunct or first conjunct)
        right: Right operand (consequent, second disjunct or second conjunct)

    Raises:
        ValueError: If ``op`` is the unary NOT connective
    """

    op: Operator
    left: Formula
    right: Formula

    def __post_init__(self):
        if self.op.is_unary:
            raise ValueError(f"Operator '{self.op}' is not a binary connective")

    @property
    def operator(self) -> Optional[Operator]:
        return self.op

    @property
    def operands(self) -> Tuple[Formula, ...]:
        return (self.left, self.right)

    def render(self, standalone: bool = False) -> str:
        return f"({self.left.render()} {self.op} {self.right.render()})"

    def __repr__(self) -> str:
        return f"Binary({self.op.name}, {self.left!r}, {self.right!r})"


def negate(formula: Formula) -> Negation:
    """Build the negation of ``formula``."""
    return Negation(formula)


def implies(antecedent: Formula, consequent: Formula) -> Binary:
    return Binary(Operator.IMPLIES, antecedent, consequent)


def conjoin(left: Formula, right: Formula) -> Binary:
    return Binary(Operator.AND, left, right)


def disjoin(left: Formula, right: Formula) -> Binary:
    return Binary(Operator.OR, left, right)
