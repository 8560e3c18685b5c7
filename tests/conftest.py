# tests/conftest.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Proofer tests.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common fixtures for formulas, fact bases and sessions
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages are importable.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import facts
        import formula
        import rules
        import session
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def modus_ponens_premises():
    """Premise texts of a one-step Modus Ponens proof.

    Returns:
        List[str]: Premises whose consequence is ``q``
    """
    return ["p -> q", "p"]


@pytest.fixture
def fact_base():
    """Provide an empty fact base."""
    from facts import FactBase

    return FactBase()


@pytest.fixture
def proof_session():
    """Provide a fresh proof session in premise mode."""
    from session import ProofSession

    return ProofSession()


@pytest.fixture
def rule_mode_session(proof_session, modus_ponens_premises):
    """Provide a session holding the Modus Ponens premises with conclusion ``q``."""
    for premise in modus_ponens_premises:
        proof_session.handle(premise)
    proof_session.handle("therefore")
    proof_session.handle("q")
    return proof_session
