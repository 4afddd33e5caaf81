"""Tests for typed declaration records."""

from __future__ import annotations

import pytest

from gridareas.domain.declarations import (
    Declaration,
    Utility,
    to_record,
    to_record_resolver,
)


class TestDeclaration:
    def test_of_skips_none(self) -> None:
        declaration = Declaration.of(("display", "grid"), ("grid-template-rows", None))
        assert declaration.properties == (("display", "grid"),)
        assert len(declaration) == 1

    def test_preserves_order(self) -> None:
        declaration = Declaration.of(("b", "2"), ("a", "1"))
        assert list(declaration.to_dict()) == ["b", "a"]

    def test_get(self) -> None:
        declaration = Declaration.of(("grid-area", "main"))
        assert declaration.get("grid-area") == "main"
        assert declaration.get("display") is None

    def test_frozen(self) -> None:
        declaration = Declaration.of(("grid-area", "main"))
        with pytest.raises(AttributeError):
            declaration.properties = ()  # type: ignore[misc]


class TestToRecord:
    def test_selector_keyed_mapping(self) -> None:
        utilities = [
            Utility("grid-area-a", Declaration.of(("grid-area", "a"))),
            Utility("grid-area-b", Declaration.of(("grid-area", "b"))),
        ]
        assert to_record(utilities) == {
            ".grid-area-a": {"grid-area": "a"},
            ".grid-area-b": {"grid-area": "b"},
        }

    def test_later_utility_wins(self) -> None:
        utilities = [
            Utility("x", Declaration.of(("grid-area", "first"))),
            Utility("x", Declaration.of(("grid-area", "second"))),
        ]
        assert to_record(utilities) == {".x": {"grid-area": "second"}}

    def test_record_resolver_returns_plain_dict(self) -> None:
        def resolve_area(value: str) -> Declaration:
            return Declaration.of(("grid-area", value))

        wrapped = to_record_resolver(resolve_area)
        assert wrapped("main") == {"grid-area": "main"}
        assert wrapped.__name__ == "resolve_area"
