# session/commands.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Input modes, session commands and the rule call mini-grammar

"""Vocabulary of the interactive proof session.

Rule Call Format:
    name(arg0[,arg1])

    name   1-4 letters, the terse name of a rule (any case)
    argN   a fact number or the wildcard ``*``

Rules of replacement take a statement coordinate path as ``arg1`` instead of
a second fact: dotted 1/2 positions such as ``2.1``, or ``0`` for the whole
statement.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

from facts import WILDCARD
from rules import Rule, RuleFormatError

# Coordinate path meaning "the whole statement"
BASE_COORDINATE_INDICATOR = "0"

RULE_FORMAT = re.compile(
    r"[a-zA-Z]{1,4}\([0-9\*]+(,[0-9\*]+){0,1}(,[1-2\.]+[1-2])*\)"
)


class Mode(Enum):
    """What plain (non-command) input means at this point of the session."""

    PREMISE = auto()
    CONCLUSION = auto()
    RULE = auto()


class Command(Enum):
    """Session commands and the word that invokes each."""

    EXIT = "exit"
    DONE = "done"
    SHOW_FACTS = "facts"
    THEREFORE = "therefore"
    RESET = "reset"
    HELP = "help"

    @classmethod
    def match(cls, text: str, mode: Mode) -> Optional["Command"]:
        """Return the command ``text`` invokes in ``mode``, if any."""
        word = text.strip().lower()
        for command in COMMANDS_BY_MODE[mode]:
            if command.value == word:
                return command
        return None


COMMANDS_BY_MODE: Dict[Mode, Tuple[Command, ...]] = {
    Mode.PREMISE: (Command.EXIT, Command.THEREFORE, Command.SHOW_FACTS, Command.HELP),
    Mode.CONCLUSION: (Command.EXIT, Command.SHOW_FACTS, Command.HELP),
    Mode.RULE: (
        Command.EXIT,
        Command.DONE,
        Command.SHOW_FACTS,
        Command.RESET,
        Command.HELP,
    ),
}


@dataclass(frozen=True)
class RuleCall:
    """A parsed ``name(arg0[,arg1])`` rule call.

    Attributes:
        name: Rule name as typed
        arguments: Raw argument strings, at least one
    """

    name: str
    arguments: Tuple[str, ...]

    @classmethod
    def parse(cls, text: str) -> "RuleCall":
        """Split rule call text into name and arguments.

        Raises:
            RuleFormatError: Text does not follow the rule call format
        """
        text = "".join(text.split())
        if not RULE_FORMAT.fullmatch(text):
            raise RuleFormatError("rule", "Rule format must be name(arg0[,arg1])")

        name, _, rest = text.partition("(")
        arguments = tuple(rest[:-1].split(","))

        if len(arguments) > 2:
            raise RuleFormatError(name, "Too many arguments")

        return cls(name, arguments)

    def uses_wildcard(self) -> bool:
        """True if any fact argument is the wildcard."""
        return WILDCARD in self.arguments


def parse_coordinates(rule: Rule, text: str) -> Optional[Tuple[int, ...]]:
    """Convert a dotted coordinate path into operand positions.

    Args:
        rule: Rule reported on failure
        text: Dotted path such as ``2.1``, or ``0`` for the top level

    Returns:
        Tuple of 1-based positions, or None for the top level

    Raises:
        RuleFormatError: The path contains something other than numbers
    """
    if text == BASE_COORDINATE_INDICATOR:
        return None

    positions: List[int] = []
    for part in text.split("."):
        if not part.isdigit():
            raise RuleFormatError(rule, "Invalid statement coordinates")
        positions.append(int(part))

    return tuple(positions)
