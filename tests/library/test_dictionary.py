"""Tests for Dictionary: pole pairs, lexis index and weights."""

from __future__ import annotations

from aggregen.domain.types import Connector
from aggregen.library.dictionary import Dictionary
from tests.conftest import X_MINUS, X_PLUS, make_section


class TestPoles:
    def test_directed_pair(self) -> None:
        d = Dictionary()
        d.add_pole_pair("+", "-")
        assert d.mates(X_PLUS) == [X_MINUS]
        assert d.mates(X_MINUS) == []

    def test_unordered_pair(self) -> None:
        d = Dictionary()
        d.add_pole_pair("+", "-", unordered=True)
        assert d.mates(X_PLUS) == [X_MINUS]
        assert d.mates(X_MINUS) == [X_PLUS]
        assert sorted(d.pole_pairs) == [("+", "-"), ("-", "+")]

    def test_self_mating_pole(self) -> None:
        d = Dictionary()
        d.add_pole_pair("*", "*", unordered=True)
        assert d.mates(Connector("B", "*")) == [Connector("B", "*")]
        assert d.pole_pairs == [("*", "*")]

    def test_duplicate_pair_ignored(self) -> None:
        d = Dictionary()
        d.add_pole_pair("+", "-")
        d.add_pole_pair("+", "-")
        assert d.mates(X_PLUS) == [X_MINUS]


class TestLexis:
    def test_sections_in_load_order(self) -> None:
        a = make_section("A", X_PLUS)
        b = make_section("B", X_MINUS, X_PLUS)
        d = Dictionary()
        d.add_to_lexis([a, b])
        assert d.sections(X_PLUS) == (a, b)
        assert d.sections(X_MINUS) == (b,)
        assert d.sections_with_connector(X_MINUS) == (b,)
        assert d.sections(Connector("Y", "+")) == ()

    def test_repeated_connector_indexed_once(self) -> None:
        a = make_section("A", X_PLUS, X_PLUS)
        d = Dictionary()
        d.add_to_lexis([a])
        assert d.sections(X_PLUS) == (a,)

    def test_roots_by_point_name(self) -> None:
        a1 = make_section("A", X_PLUS)
        a2 = make_section("A", X_MINUS)
        b = make_section("B", X_MINUS)
        d = Dictionary()
        d.add_to_lexis([a1, b, a2])
        assert d.roots("A") == [a1, a2]
        assert d.roots("missing") == []
        assert d.all_sections == (a1, b, a2)


class TestWeights:
    def test_explicit_weight(self) -> None:
        assert Dictionary().weight_of(make_section("A", X_PLUS, weight=2.5)) == 2.5

    def test_missing_weight_uses_default(self) -> None:
        assert Dictionary().weight_of(make_section("A", X_PLUS)) == 0.0
        assert Dictionary(default_weight=1.0).weight_of(make_section("A", X_PLUS)) == 1.0
