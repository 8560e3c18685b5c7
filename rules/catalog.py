# rules/catalog.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Closed catalog of named inference and replacement rules

"""Rule catalog for the proof assistant.

Every rule has a terse name, typed by the user to invoke it, and a verbose
label for display. Rules of inference consume whole facts; rules of
replacement rewrite a sub-formula addressed by a coordinate path. Of the
replacement rules only Double Negation has a transformation, the others are
recognized names that refuse to run.
"""

from enum import Enum
from typing import Optional

from utils.logger import get_logger


class Rule(Enum):
    """Named rules, in catalog order.

    Member values are ``(terse, verbose, arity, replacement, implemented)``.
    Arity counts the formula arguments a single application takes; for
    Addition the second argument is the formula being added.
    """

    MP = ("MP", "Modus Ponens", 2, False, True)
    MT = ("MT", "Modus Tollens", 2, False, True)
    DS = ("DS", "Disjunctive Syllogism", 2, False, True)
    HS = ("HS", "Hypothetical Syllogism", 2, False, True)
    SIMP = ("Simp", "Simplification", 1, False, True)
    CONJ = ("Conj", "Conjunction", 2, False, True)
    CD = ("CD", "Constructive Dilemma", 2, False, True)
    ABS = ("Abs", "Absorption", 1, False, True)
    ADD = ("Add", "Addition", 2, False, True)
    DM = ("DM", "DeMorgans", 1, True, False)
    COM = ("Com", "Commutation", 1, True, False)
    ASSOC = ("Assoc", "Association", 1, True, False)
    DIST = ("Dist", "Distribution", 1, True, False)
    DN = ("DN", "Double Negation", 1, True, True)
    TRANS = ("Trans", "Transposition", 1, True, False)
    IMPL = ("Impl", "Material Implication", 1, True, False)
    EQUIV = ("Equiv", "Material Equivalence", 1, True, False)
    EXP = ("Exp", "Exportation", 1, True, False)
    TAUT = ("Taut", "Tautology", 1, True, False)

    def __init__(
        self, terse: str, verbose: str, arity: int, replacement: bool, implemented: bool
    ):
        self.terse = terse
        self.verbose = verbose
        self.arity = arity
        self.is_replacement = replacement
        self.is_implemented = implemented

    def label(self, verbose: bool = False) -> str:
        """Return the verbose label or the terse name."""
        return self.verbose if verbose else self.terse

    def __str__(self) -> str:
        return self.terse

    @classmethod
    def lookup(cls, name: str) -> Optional["Rule"]:
        """Find a rule by its terse name, ignoring case.

        Args:
            name: Terse rule name as typed by the user

        Returns:
            Matching rule, or None when no rule has that name
        """
        for rule in cls:
            if rule.terse.lower() == name.strip().lower():
                return rule

        get_logger().debug(f"No rule named '{name}'")
        return None
