# session/__init__.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Interactive proof session exports

from .commands import Command, Mode, RuleCall, parse_coordinates
from .interface import FAREWELL, WELCOME, ProofSession, SessionReply

__all__ = [
    "Command",
    "Mode",
    "RuleCall",
    "parse_coordinates",
    "ProofSession",
    "SessionReply",
    "WELCOME",
    "FAREWELL",
]
