# tests/parser_tests/test_formula_model.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Test suite for formula nodes, rendering, equality and the operator catalog

"""Test suite for the formula data model.

Covers canonical rendering, render-based equality and hashing, node
immutability, and the operator and atom catalogs.
"""

import dataclasses
import pytest
from formula import equals, parse, render
from formula.ast_nodes import (
    Atom,
    Binary,
    Formula,
    Negation,
    conjoin,
    disjoin,
    implies,
    negate,
)
from formula.operators import AtomSymbol, Operator


@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class _Verbatim(Formula):
    """Formula node that renders fixed text, with no inner structure."""

    text: str

    @property
    def operator(self):
        return None

    @property
    def operands(self):
        return ()

    def render(self, standalone=False):
        return self.text


class TestRendering:
    """Test cases for canonical rendering."""

    @pytest.mark.parametrize(
        "formula,text",
        [
            (Atom("p"), "p"),
            (Negation(Atom("q")), "~q"),
            (Negation(Negation(Atom("r"))), "~~r"),
            (Binary(Operator.IMPLIES, Atom("p"), Atom("q")), "(p -> q)"),
            (Binary(Operator.IFF, Atom("p"), Atom("q")), "(p <-> q)"),
            (Binary(Operator.OR, Atom("p"), Atom("q")), "(p V q)"),
            (Binary(Operator.AND, Atom("p"), Atom("q")), "(p ^ q)"),
            (Negation(conjoin(Atom("s"), Atom("t"))), "~(s ^ t)"),
            (implies(negate(Atom("p")), disjoin(Atom("q"), Atom("r"))), "(~p -> (q V r))"),
        ],
    )
    def test_render(self, formula, text):
        assert render(formula) == text
        assert str(formula) == text

    def test_standalone_atom_is_parenthesized(self):
        assert render(Atom("p"), standalone=True) == "(p)"
        assert Atom("p").render(standalone=True) == "(p)"

    def test_standalone_has_no_effect_on_compound_formulas(self):
        formula = parse("~(p ^ q)")
        assert render(formula, standalone=True) == render(formula)
        assert render(parse("p ^ q"), standalone=True) == "(p ^ q)"

    def test_standalone_text_parses_back(self):
        assert parse(render(Atom("s"), standalone=True)) == Atom("s")


class TestEquality:
    """Test cases for render-based structural equality."""

    def test_independent_parses_are_equal(self):
        assert parse("(p -> q)") == parse("p->q")
        assert equals(parse("((p))"), Atom("p"))

    def test_parsed_equals_constructed(self):
        assert parse("p ^ q") == conjoin(Atom("p"), Atom("q"))

    def test_different_shapes_with_same_text_are_equal(self):
        built = Binary(Operator.AND, Atom("p"), Atom("q"))
        verbatim = _Verbatim("(p ^ q)")
        assert built == verbatim
        assert verbatim == built
        assert hash(built) == hash(verbatim)

    def test_different_text_is_unequal(self):
        assert parse("p ^ q") != parse("q ^ p")
        assert not equals(parse("~p"), Atom("p"))

    def test_hash_follows_rendering(self):
        assert len({parse("p V q"), parse("(p V q)"), disjoin(Atom("p"), Atom("q"))}) == 1

    def test_not_equal_to_plain_text(self):
        assert Atom("p") != "p"
        assert parse("p ^ q") != "(p ^ q)"


class TestNodes:
    """Test cases for node construction and inspection."""

    def test_atom_accepts_symbol_or_character(self):
        assert Atom(AtomSymbol.Q) == Atom("q")
        assert Atom("q").symbol is AtomSymbol.Q

    def test_unknown_atom_is_rejected(self):
        with pytest.raises(ValueError):
            Atom("x")

    def test_binary_rejects_negation_operator(self):
        with pytest.raises(ValueError):
            Binary(Operator.NOT, Atom("p"), Atom("q"))

    def test_operator_and_operands(self):
        formula = parse("(p -> ~q)")
        assert formula.operator is Operator.IMPLIES
        assert formula.operands == (Atom("p"), Negation(Atom("q")))
        assert formula.operands[1].operator is Operator.NOT
        assert Atom("p").operator is None
        assert Atom("p").operands == ()

    def test_nodes_are_immutable(self):
        formula = parse("p ^ q")
        with pytest.raises(dataclasses.FrozenInstanceError):
            formula.left = Atom("r")

    def test_repr_shows_structure(self):
        assert repr(parse("~p -> q")) == "Negation(Binary(IMPLIES, Atom('p'), Atom('q')))"


class TestOperatorCatalog:
    """Test cases for the connective and atom catalogs."""

    @pytest.mark.parametrize(
        "symbol,operator,length",
        [
            ("->", Operator.IMPLIES, 2),
            ("<->", Operator.IFF, 3),
            ("V", Operator.OR, 1),
            ("^", Operator.AND, 1),
            ("~", Operator.NOT, 1),
        ],
    )
    def test_symbols(self, symbol, operator, length):
        assert Operator.from_symbol(symbol) is operator
        assert operator.symbol == symbol
        assert operator.length == length
        assert str(operator) == symbol

    @pytest.mark.parametrize("symbol", ["-", "<-", ">", "v", "", "p"])
    def test_non_operator_text(self, symbol):
        assert Operator.from_symbol(symbol) is None

    def test_binary_operators_in_order(self):
        assert list(Operator.binary()) == [
            Operator.IMPLIES,
            Operator.IFF,
            Operator.OR,
            Operator.AND,
        ]

    def test_only_negation_is_unary(self):
        assert [op for op in Operator if op.is_unary] == [Operator.NOT]

    def test_atom_symbols(self):
        assert [str(atom) for atom in AtomSymbol] == ["p", "q", "r", "s", "t"]
        assert AtomSymbol.from_char("t") is AtomSymbol.T
        assert AtomSymbol.from_char("u") is None
