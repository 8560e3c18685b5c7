# formula/grammar.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Recursive-descent parser for propositional formulas

"""Formula grammar implementation over the SLY token stream.

The grammar has no precedence table. Every binary connective groups to the
right and precedence emerges from a single left-to-right pass:

    formula  := primary [ binop formula ]
    primary  := ATOM | "(" formula ")" | "~" operand

Negation Scope:
- Outside every parenthesis, a ``~`` that is not directly followed by ``(``
  negates everything after it: ``~p ^ q`` reads as ``~(p ^ q)``.
- A ``~`` directly followed by ``(``, or any ``~`` inside parentheses,
  negates the next primary only: ``~(p) ^ q`` reads as ``(~p ^ q)``.

Canonical renderings always wrap binary formulas in parentheses, so the wide
top-level negation never changes how rendered text parses back.

Each parsing step returns the formula it built together with the number of
tokens it consumed.
"""

from typing import List, Tuple

from sly.lex import Token

from .ast_nodes import Atom, Binary, Formula, Negation
from .exceptions import ParseError
from .lexer import BINARY_TOKENS, FormulaLexer
from .operators import Operator
from utils.logger import get_logger


class _FormulaParser:
    """Recursive-descent parser for propositional formulas.

    Stateless apart from the token list of the current call, so a fresh
    instance can be used for every formula.
    """

    def parse(self, text: str) -> Formula:
        """Parse formula text into a formula tree.

        Args:
            text: Formula text; whitespace is insignificant

        Returns:
            Root node of the parsed formula

        Raises:
            ParseError: If the text is empty or does not match the grammar
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        try:
            tokens = list(FormulaLexer().tokenize(text))

            if not tokens:
                raise ParseError("Input formula is empty.")

            formula, consumed = self._formula(tokens, 0, len(tokens), nested=False)

            logger.debug(
                f"Parsed {consumed} tokens into {type(formula).__name__}: {formula}"
            )
            return formula

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def _formula(
        self, tokens: List[Token], start: int, end: int, nested: bool
    ) -> Tuple[Formula, int]:
        """Parse ``tokens[start:end]`` completely as one formula."""
        primary, used = self._primary(tokens, start, end, nested)
        pos = start + used

        if pos == end:
            return primary, used

        token = tokens[pos]
        if token.type not in BINARY_TOKENS or pos + 1 >= end:
            raise ParseError(f"Expected operator at position {token.index}")

        op = Operator[token.type]
        right, right_used = self._formula(tokens, pos + 1, end, nested)

        return Binary(op, primary, right), used + 1 + right_used

    def _primary(
        self, tokens: List[Token], start: int, end: int, nested: bool
    ) -> Tuple[Formula, int]:
        """Parse the leading operand of ``tokens[start:end]``."""
        token = tokens[start]

        if token.type == "ATOM":
            return Atom(token.value), 1

        if token.type == "LPAREN":
            close = self._find_close_paren(tokens, start, end)
            if close == start + 1:
                raise ParseError(
                    f"Error in parenthesis at position {token.index}, not a statement"
                )
            inner, _ = self._formula(tokens, start + 1, close, nested=True)
            # Redundant parentheses collapse onto the inner formula
            return inner, close + 1 - start

        if token.type == "NOT":
            if start + 1 >= end:
                raise ParseError(
                    f"Expected statement after '{Operator.NOT}' at position {token.index}"
                )

            if nested or tokens[start + 1].type == "LPAREN":
                operand, used = self._primary(tokens, start + 1, end, nested)
                return Negation(operand), used + 1

            operand, used = self._formula(tokens, start + 1, end, nested=False)
            return Negation(operand), used + 1

        raise ParseError(f"Unrecognized token '{token.value}' at position {token.index}")

    @staticmethod
    def _find_close_paren(tokens: List[Token], start: int, end: int) -> int:
        """Locate the parenthesis closing the one at ``start``.

        Raises:
            ParseError: If no matching parenthesis exists before ``end``
        """
        depth = 0

        for i in range(start + 1, end):
            kind = tokens[i].type
            if kind == "LPAREN":
                depth += 1
            elif kind == "RPAREN":
                if depth == 0:
                    return i
                depth -= 1

        raise ParseError(
            f"No matching parenthesis for '(' at position {tokens[start].index}"
        )
