# formula/__init__.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Formula model, parsing and rendering for propositional logic statements

"""Propositional formula model with its textual grammar.

This package turns formula text into immutable formula trees and renders
trees back to canonical text. The two directions obey a round-trip law that
the rule engine depends on:

    parse(render(F)) == F           for every formula F
    render(parse(T)) == T           for every canonical text T (spaces aside)

Core Functions:
    parse: Converts formula text into a Formula
    render: Canonical text of a Formula
    equals: Render-based structural equality

Syntax:
    - Atoms: p, q, r, s, t
    - Connectives: -> (implies), <-> (iff), V (or), ^ (and), ~ (not)
    - Parenthetical grouping, whitespace anywhere

Example:
    >>> from formula import parse, render
    >>> render(parse("(p -> q) ^ ~r"))
    '((p -> q) ^ ~r)'
"""

from .ast_nodes import Atom, Binary, Formula, Negation
from .exceptions import ParseError
from .grammar import _FormulaParser
from .operators import AtomSymbol, Operator
from utils.logger import get_logger


def parse(source: str) -> Formula:
    """Parse formula text into a formula tree.

    Uses a fresh parser instance for each invocation so that parsing stays
    stateless.

    Args:
        source: Formula text to parse

    Returns:
        Root node of the parsed formula

    Raises:
        ParseError: Text is empty, contains illegal characters or does not
            match the grammar
    """
    parser = _FormulaParser()

    try:
        return parser.parse(source)
    except ParseError:
        raise
    except Exception as exc:
        get_logger().debug(f"Parser crashed on {source!r}: {type(exc).__name__}")
        raise ParseError(str(exc)) from exc


def render(formula: Formula, standalone: bool = False) -> str:
    """Return the canonical text of ``formula``.

    Args:
        formula: Formula to render
        standalone: Parenthesize a bare atom, as ``(p)``

    Returns:
        Canonical text
    """
    return formula.render(standalone=standalone)


def equals(first: Formula, second: Formula) -> bool:
    """Structural equality: identical canonical renderings."""
    return render(first) == render(second)


__all__ = [
    "parse",
    "render",
    "equals",
    "ParseError",
    "Formula",
    "Atom",
    "Negation",
    "Binary",
    "Operator",
    "AtomSymbol",
]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing and rendering components"
