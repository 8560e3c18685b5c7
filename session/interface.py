# session/interface.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Line-oriented proof session state machine

"""Interactive proof session.

A session moves through three input modes. Premises are entered first, the
``therefore`` command switches to entering the conclusion, and once a
conclusion is accepted every further line is a rule call whose results are
added to the fact base. ``done`` reports whether the conclusion has been
derived; ``reset`` starts over.

The session performs no I/O itself: ``handle`` takes one input line and
returns a SessionReply that the caller prints.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from facts import FactBase, WILDCARD
from formula import Formula, ParseError, parse
from rules import Rule, RuleFormatError, apply_rule, lookup_rule
from utils.logger import get_logger

from .commands import COMMANDS_BY_MODE, Command, Mode, RuleCall, parse_coordinates

WELCOME = ("Welcome to Proofer - The Logic Engine!", "Enter some premises")
FAREWELL = "Good bye!"
ADDITION_PROMPT = "enter the statement to add:"


@dataclass
class SessionReply:
    """Output produced by one line of input.

    Attributes:
        messages: Lines of regular output
        errors: Lines describing rejected input
        finished: The session has ended
    """

    messages: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    finished: bool = False


@dataclass
class _PendingAddition:
    candidates: List[Formula]
    silent: bool


class ProofSession:
    """State of one interactive proof.

    Attributes:
        facts: Premises and derived statements
        mode: Meaning of the next non-command line
        verbose_rules: Show verbose rule labels in help and rule echoes
    """

    def __init__(self, verbose_rules: bool = False):
        self.facts = FactBase()
        self.mode = Mode.PREMISE
        self.verbose_rules = verbose_rules
        self._pending: Optional[_PendingAddition] = None

    @property
    def awaiting_addition(self) -> bool:
        """True while Addition waits for the statement to add."""
        return self._pending is not None

    def handle(self, line: str) -> SessionReply:
        """Process one line of user input.

        Args:
            line: Raw input line

        Returns:
            Output and errors produced by the line
        """
        logger = get_logger()
        reply = SessionReply()

        if not line.strip():
            return reply

        if self._pending is not None:
            self._complete_addition(line, reply)
            return reply

        command = Command.match(line, self.mode)
        if command is not None:
            logger.command_received(command.value, self.mode.name)
            self._run_command(command, reply)
            return reply

        if self.mode is Mode.PREMISE:
            self._accept_premise(line, reply)
        elif self.mode is Mode.CONCLUSION:
            self._accept_conclusion(line, reply)
        else:
            self._run_rule(line, reply)

        return reply

    # Commands

    def _run_command(self, command: Command, reply: SessionReply):
        if command is Command.EXIT:
            reply.finished = True
        elif command is Command.THEREFORE:
            self.mode = Mode.CONCLUSION
            reply.messages.append("Enter the conclusion")
        elif command is Command.DONE:
            proven = self.facts.is_proven()
            get_logger().conclusion_status(str(self.facts.conclusion), proven)
            if proven:
                reply.messages.append("You've shown the conclusion to be true!")
            else:
                reply.messages.append(
                    "It appears you still haven't shown the conclusion to be true.  "
                    "Are you sure the argument is valid?"
                )
        elif command is Command.SHOW_FACTS:
            reply.messages.extend(self.fact_listing())
        elif command is Command.RESET:
            self.facts.clear()
            self.mode = Mode.PREMISE
            reply.messages.append("Clearing facts, entering premise mode.")
        elif command is Command.HELP:
            reply.messages.extend(self.help_text())

    def fact_listing(self) -> List[str]:
        """Numbered facts, plus the conclusion once rules are being applied."""
        lines = ["", "Facts:"]
        lines.extend(f"{index}\t{fact}" for index, fact in self.facts)
        if self.mode is Mode.RULE:
            lines.extend(["", f"Conclusion: {self.facts.conclusion}"])
        lines.append("")
        return lines

    def help_text(self) -> List[str]:
        """Commands valid in the current mode and the rule catalog."""
        commands = ", ".join(command.value for command in COMMANDS_BY_MODE[self.mode])
        lines = [f"Commands: {commands}"]

        if self.mode is Mode.RULE:
            lines.append("Apply a rule with name(arg0[,arg1]); use * for every fact.")
            for rule in Rule:
                status = "" if rule.is_implemented else " (not implemented)"
                lines.append(f"  {rule.terse:<6} {rule.verbose}{status}")
        else:
            lines.append("Enter statements using p q r s t and -> <-> V ^ ~ ( )")
        return lines

    # Statements

    def _accept_premise(self, line: str, reply: SessionReply):
        try:
            self.facts.add(parse(line))
        except ParseError as exc:
            reply.errors.append(str(exc))

    def _accept_conclusion(self, line: str, reply: SessionReply):
        try:
            self.facts.conclusion = parse(line)
        except ParseError as exc:
            reply.errors.append(str(exc))
            return

        self.mode = Mode.RULE
        reply.messages.append("Entering rule mode")

    # Rules

    def _run_rule(self, line: str, reply: SessionReply):
        try:
            call = RuleCall.parse(line)
            rule = lookup_rule(call.name)
            if rule is None:
                raise RuleFormatError(call.name, "No such rule")

            results = self._apply(rule, call, reply)
        except RuleFormatError as exc:
            reply.errors.append(exc.error_message())
            return

        if results is not None:
            self._record(rule, results, reply)

    def _apply(
        self, rule: Rule, call: RuleCall, reply: SessionReply
    ) -> Optional[List[Formula]]:
        arg0 = self._select(rule, call.arguments[0])
        silent = call.arguments[0] == WILDCARD

        if len(call.arguments) == 2:
            if rule.is_replacement:
                coordinates = parse_coordinates(rule, call.arguments[1])
                return apply_rule(rule, arg0, silent=silent, coordinates=coordinates)

            arg1 = self._select(rule, call.arguments[1])
            return apply_rule(rule, arg0, arg1, silent=call.uses_wildcard())

        if rule is Rule.ADD:
            self._pending = _PendingAddition(arg0, silent)
            reply.messages.append(ADDITION_PROMPT)
            return None

        return apply_rule(rule, arg0, silent=silent)

    def _select(self, rule: Rule, key: str) -> List[Formula]:
        selected = self.facts.select(key)
        if not selected and key != WILDCARD:
            raise RuleFormatError(rule, f"No fact numbered {key}")
        return selected

    def _complete_addition(self, line: str, reply: SessionReply):
        try:
            addend = parse(line)
        except ParseError as exc:
            reply.errors.append(str(exc))
            reply.messages.append(ADDITION_PROMPT)
            return

        pending, self._pending = self._pending, None
        try:
            results = apply_rule(
                Rule.ADD, pending.candidates, addend, silent=pending.silent
            )
        except RuleFormatError as exc:
            reply.errors.append(exc.error_message())
            return

        self._record(Rule.ADD, results, reply)

    def _record(self, rule: Rule, results: List[Formula], reply: SessionReply):
        label = rule.label(self.verbose_rules)
        added: List[Tuple[int, Formula]] = []

        for result in results:
            if self.facts.add(result):
                added.append((len(self.facts), result))

        get_logger().debug(f"{label}: {len(added)} new of {len(results)} result(s)")
        reply.messages.extend(f"{index}\t{fact}  ({label})" for index, fact in added)
