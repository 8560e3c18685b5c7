# rules/engine.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Structural pattern matchers and batch application for inference rules

"""Inference rule engine.

Each operational rule is a pure structural matcher over one or two formulas:
it either returns a new formula or raises RuleFormatError naming the rule.
Results are built directly as tree nodes that reference the operands'
sub-trees; every built result is checked against the parser so that what is
stored always reads back as the same formula.

Batch application runs a matcher over the cross product of its argument
sequences (first sequence outer, second inner). In strict mode the first
failure aborts the batch; in silent mode failures are dropped and only the
successful applications are returned.
"""

from itertools import product
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from formula import ParseError, parse
from formula.ast_nodes import (
    Binary,
    Formula,
    Negation,
    conjoin,
    disjoin,
    implies,
    negate,
)
from formula.operators import Operator

from .catalog import Rule
from .exceptions import RuleFormatError
from utils.logger import get_logger


Coordinates = Tuple[int, ...]


def _is(formula: Formula, op: Operator) -> bool:
    return formula.operator is op


def _checked(rule: Rule, result: Formula) -> Formula:
    """Verify that ``result`` reads back from its own rendering.

    Raises:
        RuleFormatError: If the rendering does not parse to an equal formula
    """
    text = result.render()
    try:
        reparsed = parse(text)
    except ParseError as exc:
        raise RuleFormatError(rule, f"Result '{text}' is not a statement") from exc

    if reparsed != result:
        raise RuleFormatError(rule, f"Result '{text}' does not read back")
    return result


def modus_ponens(implication: Formula, antecedent: Formula) -> Formula:
    """From ``A -> B`` and ``A`` conclude ``B``."""
    if _is(implication, Operator.IMPLIES) and implication.left == antecedent:
        return implication.right
    raise RuleFormatError(Rule.MP)


def modus_tollens(implication: Formula, negated_consequent: Formula) -> Formula:
    """From ``A -> B`` and ``~B`` conclude ``~A``."""
    if (
        _is(implication, Operator.IMPLIES)
        and _is(negated_consequent, Operator.NOT)
        and negated_consequent.operand == implication.right
    ):
        return _checked(Rule.MT, negate(implication.left))
    raise RuleFormatError(Rule.MT)


def disjunctive_syllogism(disjunction: Formula, negated_disjunct: Formula) -> Formula:
    """From ``A V B`` and ``~A`` conclude ``B``."""
    if _is(disjunction, Operator.OR) and negated_disjunct == negate(disjunction.left):
        return disjunction.right
    raise RuleFormatError(Rule.DS)


def hypothetical_syllogism(first: Formula, second: Formula) -> Formula:
    """From ``A -> B`` and ``B -> C`` conclude ``A -> C``."""
    if (
        _is(first, Operator.IMPLIES)
        and _is(second, Operator.IMPLIES)
        and first.right == second.left
    ):
        return _checked(Rule.HS, implies(first.left, second.right))
    raise RuleFormatError(Rule.HS)


def simplification(conjunction: Formula) -> Formula:
    """From ``A ^ B`` conclude ``A``."""
    if _is(conjunction, Operator.AND):
        return conjunction.left
    raise RuleFormatError(Rule.SIMP)


def conjunction(first: Formula, second: Formula) -> Formula:
    """From ``A`` and ``B`` conclude ``A ^ B``."""
    return _checked(Rule.CONJ, conjoin(first, second))


def constructive_dilemma(implications: Formula, disjunction: Formula) -> Formula:
    """From ``(A -> B) ^ (C -> D)`` and ``A V C`` conclude ``B V D``."""
    if (
        _is(implications, Operator.AND)
        and _is(implications.left, Operator.IMPLIES)
        and _is(implications.right, Operator.IMPLIES)
        and _is(disjunction, Operator.OR)
        and disjunction.left == implications.left.left
        and disjunction.right == implications.right.left
    ):
        return _checked(
            Rule.CD, disjoin(implications.left.right, implications.right.right)
        )
    raise RuleFormatError(Rule.CD)


def absorption(implication: Formula) -> Formula:
    """From ``A -> B`` conclude ``A -> (A ^ B)``."""
    if _is(implication, Operator.IMPLIES):
        antecedent = implication.left
        return _checked(
            Rule.ABS, implies(antecedent, conjoin(antecedent, implication.right))
        )
    raise RuleFormatError(Rule.ABS)


def addition(formula: Formula, addend: Formula) -> Formula:
    """From ``A`` conclude ``A V B`` for any ``B``."""
    return _checked(Rule.ADD, disjoin(formula, addend))


def double_negation(formula: Formula) -> Formula:
    """Rewrite ``~~A`` as ``A`` and anything else ``A`` as ``~~A``."""
    if _is(formula, Operator.NOT) and _is(formula.operand, Operator.NOT):
        return formula.operand.operand
    return _checked(Rule.DN, negate(negate(formula)))


def _replace_operand(formula: Formula, position: int, operand: Formula) -> Formula:
    if isinstance(formula, Negation):
        return Negation(operand)
    if position == 0:
        return Binary(formula.operator, operand, formula.right)
    return Binary(formula.operator, formula.left, operand)


def rewrite_at(
    rule: Rule,
    formula: Formula,
    coordinates: Optional[Coordinates],
    transform: Callable[[Formula], Formula],
) -> Formula:
    """Apply ``transform`` to the sub-formula at ``coordinates``.

    Coordinates are 1-based operand positions read from the top of the
    formula downwards; ``(2, 1)`` addresses the left operand of the right
    operand. An empty path (or None) addresses the whole formula. Nodes on
    the path are rebuilt around the rewritten sub-formula.

    Args:
        rule: Rule reported on failure
        formula: Formula to rewrite
        coordinates: Operand path, or None for the top level
        transform: Single-formula rewrite

    Returns:
        The rewritten formula

    Raises:
        RuleFormatError: Path leaves the formula or ``transform`` fails
    """
    if not coordinates:
        return transform(formula)

    position, rest = coordinates[0], coordinates[1:]
    if position < 1 or position > 2:
        raise RuleFormatError(rule, "Location too large or small")

    operands = formula.operands
    if position > len(operands):
        raise RuleFormatError(rule, "Invalid location")

    rewritten = rewrite_at(rule, operands[position - 1], rest, transform)
    return _replace_operand(formula, position - 1, rewritten)


_MATCHERS: Dict[Rule, Callable[..., Formula]] = {
    Rule.MP: modus_ponens,
    Rule.MT: modus_tollens,
    Rule.DS: disjunctive_syllogism,
    Rule.HS: hypothetical_syllogism,
    Rule.SIMP: simplification,
    Rule.CONJ: conjunction,
    Rule.CD: constructive_dilemma,
    Rule.ABS: absorption,
    Rule.ADD: addition,
    Rule.DN: double_negation,
}


def matcher_for(rule: Rule) -> Callable[..., Formula]:
    """Return the single-instance matcher for ``rule``.

    Raises:
        RuleFormatError: The rule is recognized but has no transformation
    """
    try:
        return _MATCHERS[rule]
    except KeyError:
        raise RuleFormatError(rule, "Rule not implemented") from None


def _argument_pairs(
    rule: Rule,
    arg0: Sequence[Formula],
    arg1: Union[Sequence[Formula], Formula, None],
) -> Iterable[Tuple[Formula, ...]]:
    if rule.arity == 1:
        return ((formula,) for formula in arg0)

    if arg1 is None:
        raise RuleFormatError(rule, "Missing second argument")

    if rule is Rule.ADD:
        if not isinstance(arg1, Formula):
            if len(arg1) != 1:
                raise RuleFormatError(rule, "Exactly one statement can be added")
            arg1 = arg1[0]
        return ((formula, arg1) for formula in arg0)

    return product(arg0, arg1)


def apply_rule(
    rule: Rule,
    arg0: Sequence[Formula],
    arg1: Union[Sequence[Formula], Formula, None] = None,
    silent: bool = False,
    coordinates: Optional[Coordinates] = None,
) -> List[Formula]:
    """Apply ``rule`` to every combination of its arguments.

    Args:
        rule: Rule to apply
        arg0: Candidates for the first argument
        arg1: Candidates for the second argument of binary rules; for
            Addition, the single formula to add
        silent: Drop failed applications instead of raising
        coordinates: Sub-formula path for rules of replacement

    Returns:
        One result per successful application, in application order

    Raises:
        RuleFormatError: The rule is not implemented, its arguments are
            malformed, or (strict mode) an application fails
    """
    logger = get_logger()
    matcher = matcher_for(rule)

    if coordinates and not rule.is_replacement:
        raise RuleFormatError(rule, "Rule does not take statement coordinates")

    if rule.is_replacement:
        transform = matcher

        def matcher(formula: Formula) -> Formula:
            return rewrite_at(rule, formula, coordinates, transform)

    results: List[Formula] = []

    for args in _argument_pairs(rule, arg0, arg1):
        try:
            results.append(matcher(*args))
        except RuleFormatError as exc:
            if not silent:
                logger.debug(f"{rule} failed on {', '.join(map(str, args))}")
                raise
            logger.rule_skipped(str(rule), ", ".join(map(str, args)), exc.reason)

    logger.rule_applied(str(rule), len(results), silent)
    return results
