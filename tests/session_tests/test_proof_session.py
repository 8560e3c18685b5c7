# tests/session_tests/test_proof_session.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Test suite for the interactive proof session state machine

"""Test suite for ProofSession mode switching, rule calls and commands."""

import pytest
from formula import parse
from session import Mode, ProofSession
from session.interface import ADDITION_PROMPT
from utils.logger import get_logger


def feed(session, *lines):
    """Send lines to the session and return the last reply."""
    reply = None
    for line in lines:
        reply = session.handle(line)
    return reply


class TestSessionModes:
    """Test cases for premise, conclusion and rule modes."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_starts_in_premise_mode(self, proof_session):
        assert proof_session.mode is Mode.PREMISE
        assert len(proof_session.facts) == 0

    def test_premises_are_stored(self, proof_session, modus_ponens_premises):
        reply = feed(proof_session, *modus_ponens_premises)
        assert reply.messages == [] and reply.errors == []
        assert proof_session.facts.values() == [parse("p -> q"), parse("p")]

    def test_invalid_premise_is_reported(self, proof_session):
        reply = proof_session.handle("p &")
        assert reply.errors and "Illegal character" in reply.errors[0]
        assert proof_session.mode is Mode.PREMISE
        assert len(proof_session.facts) == 0

    def test_blank_line_is_ignored(self, proof_session):
        reply = proof_session.handle("   ")
        assert reply.messages == [] and reply.errors == [] and not reply.finished

    def test_therefore_then_conclusion(self, proof_session):
        reply = proof_session.handle("Therefore")
        assert reply.messages == ["Enter the conclusion"]
        assert proof_session.mode is Mode.CONCLUSION

        reply = proof_session.handle("q")
        assert reply.messages == ["Entering rule mode"]
        assert proof_session.mode is Mode.RULE
        assert proof_session.facts.conclusion == parse("q")

    def test_invalid_conclusion_keeps_mode(self, proof_session):
        feed(proof_session, "therefore")
        reply = proof_session.handle("(p")
        assert "No matching parenthesis" in reply.errors[0]
        assert proof_session.mode is Mode.CONCLUSION

    def test_exit(self, proof_session):
        assert proof_session.handle("exit").finished

    def test_reset(self, rule_mode_session):
        reply = rule_mode_session.handle("reset")
        assert reply.messages == ["Clearing facts, entering premise mode."]
        assert rule_mode_session.mode is Mode.PREMISE
        assert len(rule_mode_session.facts) == 0
        assert rule_mode_session.facts.conclusion is None


class TestSessionRules:
    """Test cases for rule calls in rule mode."""

    def test_modus_ponens_proof(self, rule_mode_session):
        reply = rule_mode_session.handle("done")
        assert "haven't shown" in reply.messages[0]

        reply = rule_mode_session.handle("MP(1,2)")
        assert reply.errors == []
        assert reply.messages == ["3\tq  (MP)"]

        reply = rule_mode_session.handle("done")
        assert reply.messages == ["You've shown the conclusion to be true!"]

    def test_verbose_rule_labels(self, modus_ponens_premises):
        session = ProofSession(verbose_rules=True)
        feed(session, *modus_ponens_premises, "therefore", "q")
        assert session.handle("mp(1,2)").messages == ["3\tq  (Modus Ponens)"]

    def test_duplicate_result_is_not_stored(self, rule_mode_session):
        rule_mode_session.handle("MP(1,2)")
        reply = rule_mode_session.handle("MP(1,2)")
        assert reply.messages == [] and reply.errors == []
        assert len(rule_mode_session.facts) == 3

    def test_strict_failure_is_reported(self, rule_mode_session):
        reply = rule_mode_session.handle("MP(2,1)")
        assert reply.errors == ["Error executing MP - Rule could not be applied"]
        assert len(rule_mode_session.facts) == 2

    def test_wildcard_is_silent(self, rule_mode_session):
        reply = rule_mode_session.handle("MP(*,*)")
        assert reply.errors == []
        assert reply.messages == ["3\tq  (MP)"]

    def test_wildcard_with_no_fit(self, rule_mode_session):
        reply = rule_mode_session.handle("Simp(*)")
        assert reply.messages == [] and reply.errors == []

    def test_unknown_fact_number(self, rule_mode_session):
        reply = rule_mode_session.handle("MP(1,9)")
        assert reply.errors == ["Error executing MP - No fact numbered 9"]

    def test_unknown_rule(self, rule_mode_session):
        reply = rule_mode_session.handle("Foo(1)")
        assert reply.errors == ["Error executing Foo - No such rule"]

    def test_malformed_rule_call(self, rule_mode_session):
        reply = rule_mode_session.handle("p -> q")
        assert reply.errors == [
            "Error executing rule - Rule format must be name(arg0[,arg1])"
        ]

    def test_binary_rule_with_one_argument(self, rule_mode_session):
        reply = rule_mode_session.handle("MP(1)")
        assert reply.errors == ["Error executing MP - Missing second argument"]

    def test_unimplemented_rule(self, rule_mode_session):
        reply = rule_mode_session.handle("DM(1,0)")
        assert reply.errors == ["Error executing DM - Rule not implemented"]

    def test_double_negation_at_coordinates(self, rule_mode_session):
        reply = rule_mode_session.handle("DN(1,2)")
        assert reply.messages == ["3\t(p -> ~~q)  (DN)"]

    def test_double_negation_top_level(self, rule_mode_session):
        assert rule_mode_session.handle("DN(2,0)").messages == ["3\t~~p  (DN)"]
        assert rule_mode_session.handle("DN(2)").messages == []

    def test_double_negation_bad_location(self, rule_mode_session):
        reply = rule_mode_session.handle("DN(2,1)")
        assert reply.errors == ["Error executing DN - Invalid location"]

    def test_facts_listing(self, rule_mode_session):
        reply = rule_mode_session.handle("facts")
        assert "1\t(p -> q)" in reply.messages
        assert "2\tp" in reply.messages
        assert "Conclusion: q" in reply.messages

    def test_help_lists_rules(self, rule_mode_session):
        text = "\n".join(rule_mode_session.handle("help").messages)
        assert "Modus Ponens" in text
        assert "DeMorgans (not implemented)" in text
        assert "done" in text


class TestSessionAddition:
    """Test cases for the Addition follow-up prompt."""

    def test_addition_asks_for_statement(self, rule_mode_session):
        reply = rule_mode_session.handle("Add(2)")
        assert reply.messages == [ADDITION_PROMPT]
        assert rule_mode_session.awaiting_addition

        reply = rule_mode_session.handle("r")
        assert reply.messages == ["3\t(p V r)  (Add)"]
        assert not rule_mode_session.awaiting_addition

    def test_invalid_statement_asks_again(self, rule_mode_session):
        rule_mode_session.handle("Add(2)")
        reply = rule_mode_session.handle("r ->")
        assert reply.errors and reply.messages == [ADDITION_PROMPT]
        assert rule_mode_session.awaiting_addition

        reply = rule_mode_session.handle("done")
        assert reply.errors and rule_mode_session.awaiting_addition

    def test_addition_over_wildcard(self, rule_mode_session):
        rule_mode_session.handle("add(*)")
        reply = rule_mode_session.handle("s")
        assert reply.messages == ["3\t((p -> q) V s)  (Add)", "4\t(p V s)  (Add)"]


class TestSessionPremiseCommands:
    """Test cases for commands outside rule mode."""

    @pytest.mark.parametrize("line", ["done", "reset"])
    def test_rule_mode_commands_are_premises_elsewhere(self, proof_session, line):
        reply = proof_session.handle(line)
        assert reply.errors
        assert proof_session.mode is Mode.PREMISE

    def test_facts_in_premise_mode_has_no_conclusion(self, proof_session):
        proof_session.handle("p")
        messages = proof_session.handle("facts").messages
        assert "1\tp" in messages
        assert not any(line.startswith("Conclusion") for line in messages)

    def test_help_in_premise_mode(self, proof_session):
        messages = proof_session.handle("help").messages
        assert messages[0] == "Commands: exit, therefore, facts, help"
