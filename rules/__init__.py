# rules/__init__.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Rule catalog and inference engine for deriving new statements

"""Named inference rules and their batch application.

Core Functions:
    lookup_rule: Case-insensitive lookup of a rule by its terse name
    apply_rule: Batch application over argument sequences

Example:
    >>> from formula import parse
    >>> from rules import Rule, apply_rule
    >>> apply_rule(Rule.MP, [parse("p -> q")], [parse("p")])
    [Atom('q')]
"""

from typing import Optional

from .catalog import Rule
from .engine import apply_rule, matcher_for, rewrite_at
from .exceptions import RuleFormatError


def lookup_rule(name: str) -> Optional[Rule]:
    """Find a rule by terse name, ignoring case; None when absent."""
    return Rule.lookup(name)


__all__ = [
    "Rule",
    "RuleFormatError",
    "lookup_rule",
    "apply_rule",
    "matcher_for",
    "rewrite_at",
]
