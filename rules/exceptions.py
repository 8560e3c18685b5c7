# rules/exceptions.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Custom exceptions for inference rule application

"""Domain-specific exceptions for rule application.

Raised when a rule's structural precondition is not met, when a rule call is
malformed, or when a rule of replacement has no transformation available.
Never fatal: callers report ``error_message()`` and carry on.
"""


class RuleFormatError(RuntimeError):
    """Exception raised when a rule cannot be applied to its arguments.

    Attributes:
        rule: Terse name of the rule that failed (or ``"rule"`` for a
            malformed rule call)
        reason: Human-readable explanation of the failure
    """

    def __init__(self, rule, reason: str = "Rule could not be applied"):
        super().__init__(reason)
        self.rule = str(rule)
        self.reason = reason

    def error_message(self) -> str:
        """Return the message shown to the user."""
        return f"Error executing {self.rule} - {self.reason}"
