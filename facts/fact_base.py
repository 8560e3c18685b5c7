# facts/fact_base.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Numbered store of accepted statements for a proof session

"""Fact store for proof sessions.

Facts are kept in insertion order under 1-based integer keys that only ever
grow. A formula equal to one already stored is never added twice; equality
is the formula's own render-based equality. The store also holds the
conclusion the user is trying to reach.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from formula import Formula, Operator
from rules import RuleFormatError
from utils.logger import get_logger

# Selector meaning "every stored fact"
WILDCARD = "*"


class FactBase:
    """Append-only ordered mapping from fact number to formula.

    Attributes:
        conclusion: Statement the session is trying to derive, if set
    """

    def __init__(self):
        self._facts: Dict[int, Formula] = {}
        self._next_index = 1
        self.conclusion: Optional[Formula] = None

    def add(self, formula: Formula) -> bool:
        """Store ``formula`` under the next number.

        Returns:
            True if stored, False if an equal fact already exists
        """
        logger = get_logger()

        if formula in self._facts.values():
            logger.fact_rejected(str(formula))
            return False

        index = self._next_index
        self._facts[index] = formula
        self._next_index += 1

        logger.fact_added(index, str(formula))
        return True

    def add_all(self, formulas: Iterable[Formula]) -> bool:
        """Store every formula in order.

        Returns:
            True only if every formula was new
        """
        all_entered = True
        for formula in formulas:
            all_entered &= self.add(formula)
        return all_entered

    def get(self, index: int) -> Optional[Formula]:
        return self._facts.get(index)

    def __getitem__(self, index: int) -> Formula:
        return self._facts[index]

    def __contains__(self, formula: Formula) -> bool:
        return formula in self._facts.values()

    def __len__(self) -> int:
        return len(self._facts)

    def __iter__(self) -> Iterator[Tuple[int, Formula]]:
        return iter(self._facts.items())

    def values(self) -> List[Formula]:
        return list(self._facts.values())

    def select(self, key: str) -> List[Formula]:
        """Resolve a fact reference typed in a rule call.

        Args:
            key: The wildcard ``*`` or a positive fact number

        Returns:
            Every fact for the wildcard, the single numbered fact, or an
            empty list when no fact has that number

        Raises:
            RuleFormatError: ``key`` is neither the wildcard nor a number
        """
        key = key.strip()
        if key == WILDCARD:
            return self.values()

        if not key.isdigit() or int(key) < 1:
            raise RuleFormatError("rule", f"Invalid fact reference '{key}'")

        fact = self._facts.get(int(key))
        return [fact] if fact is not None else []

    def by_operator(self, op: Optional[Operator]) -> List[Formula]:
        """Facts whose main connective is ``op`` (None selects atoms)."""
        return [fact for fact in self._facts.values() if fact.operator is op]

    def is_proven(self) -> bool:
        """True once the conclusion is among the stored facts."""
        return self.conclusion is not None and self.conclusion in self

    def clear(self):
        """Forget every fact and the conclusion; numbering restarts at 1."""
        get_logger().debug("Clearing fact base")
        self._facts.clear()
        self._next_index = 1
        self.conclusion = None
