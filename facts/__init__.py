# facts/__init__.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Fact store exports

from .fact_base import FactBase, WILDCARD

__all__ = ["FactBase", "WILDCARD"]
