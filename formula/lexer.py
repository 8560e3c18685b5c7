# formula/lexer.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Tokenizer for formula text built on SLY

"""Tokenizer for propositional formula strings.

Every connective symbol is matched as a whole token, so ``->`` and ``<->``
can never be confused even though they share the ``-`` character, and an
``->`` can never be found inside an ``<->``.

Token types:
- ATOM: p, q, r, s, t
- IFF, IMPLIES, OR, AND, NOT: <->, ->, V, ^, ~
- LPAREN, RPAREN: ( )

Spaces, tabs and line breaks between tokens are skipped.
"""

from sly import Lexer

from .operators import Operator
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY lexer for formula text.

    Connective token types carry the names of their Operator members, so
    ``Operator[token.type]`` maps a token back to its connective.
    """

    tokens = {ATOM, IFF, IMPLIES, OR, AND, NOT, LPAREN, RPAREN}  # noqa: F821

    ignore = " \t\r\n"

    # <-> must be tried before ->
    IFF = r"<->"
    IMPLIES = r"->"
    OR = r"V"
    AND = r"\^"
    NOT = r"~"

    LPAREN = r"\("
    RPAREN = r"\)"

    ATOM = r"[pqrst]"

    def error(self, t):
        """Reject a character outside the formula alphabet.

        Raises:
            ValueError: Naming the character and its position in the text
        """
        char, position = t.value[0], self.index
        get_logger().debug(f"Lexer stopped at '{char}' (position {position})")
        raise ValueError(
            f"Illegal character '{char}' encountered at position {position}"
        )


BINARY_TOKENS = frozenset(op.name for op in Operator.binary())
