"""Tests for the CSS emitter."""

from __future__ import annotations

import pytest

from gridareas.domain.emitter import (
    emit_area_keyword_utilities,
    emit_area_placement_utility,
    emit_arbitrary_matchers,
    emit_keyword_layout_utilities,
    emit_layout_utility,
    emit_line_utilities,
)
from gridareas.domain.grammar import MalformedLayout
from gridareas.domain.keywords import CSS_WIDE_KEYWORDS, GRID_AREA_KEYWORDS


class TestLayoutUtility:
    def test_full_definition(self) -> None:
        utility = emit_layout_utility(
            "page",
            ["header header", "sidebar main"],
            row_tracks="auto 1fr",
            col_tracks="200px 1fr",
        )
        assert utility.selector == ".grid-areas-page"
        assert utility.declaration.properties == (
            ("display", "grid"),
            ("grid-template-areas", '"header header" "sidebar main"'),
            ("grid-template-rows", "auto 1fr"),
            ("grid-template-columns", "200px 1fr"),
        )

    def test_tracks_omitted_when_absent(self) -> None:
        utility = emit_layout_utility("card", ["a b"])
        assert utility.declaration.to_dict() == {
            "display": "grid",
            "grid-template-areas": '"a b"',
        }

    def test_only_columns(self) -> None:
        utility = emit_layout_utility("card", ["a b"], col_tracks="1fr 2fr")
        assert utility.declaration.get("grid-template-rows") is None
        assert utility.declaration.get("grid-template-columns") == "1fr 2fr"

    def test_empty_row_raises(self) -> None:
        with pytest.raises(MalformedLayout) as excinfo:
            emit_layout_utility("card", ["a b", ""])
        assert excinfo.value.layout == "card"


class TestKeywordUtilities:
    def test_layout_keywords(self) -> None:
        utilities = emit_keyword_layout_utilities()
        assert [u.class_name for u in utilities] == [
            "grid-areas-none",
            "grid-areas-inherit",
            "grid-areas-initial",
            "grid-areas-revert",
            "grid-areas-revert-layer",
            "grid-areas-unset",
        ]
        assert utilities[0].declaration.to_dict() == {
            "display": "grid",
            "grid-template-areas": "none",
        }

    def test_area_keywords_include_auto(self) -> None:
        utilities = emit_area_keyword_utilities()
        assert [u.declaration.get("grid-area") for u in utilities] == list(GRID_AREA_KEYWORDS)
        assert utilities[0].class_name == "grid-area-auto"

    def test_keyword_sets_are_related(self) -> None:
        assert GRID_AREA_KEYWORDS == ("auto", *CSS_WIDE_KEYWORDS)


class TestPlacementUtility:
    def test_grid_area(self) -> None:
        utility = emit_area_placement_utility("main")
        assert utility.selector == ".grid-area-main"
        assert utility.declaration.to_dict() == {"grid-area": "main"}


class TestLineUtilities:
    def test_six_named_line_utilities(self) -> None:
        utilities = emit_line_utilities("main")
        assert {u.class_name: u.declaration.to_dict() for u in utilities} == {
            "row-start-main": {"grid-row-start": "main-start"},
            "row-end-main": {"grid-row-end": "main-end"},
            "row-span-main": {"grid-row": "main-start / main-end"},
            "col-start-main": {"grid-column-start": "main-start"},
            "col-end-main": {"grid-column-end": "main-end"},
            "col-span-main": {"grid-column": "main-start / main-end"},
        }

    def test_order_is_rows_then_columns(self) -> None:
        names = [u.class_name for u in emit_line_utilities("a")]
        assert names == ["row-start-a", "row-end-a", "row-span-a", "col-start-a", "col-end-a", "col-span-a"]


class TestArbitraryMatchers:
    def test_families(self) -> None:
        matchers = emit_arbitrary_matchers()
        assert list(matchers) == ["grid-areas", "grid-area", "row-lines", "col-lines"]
        assert set(matchers["row-lines"]) == {"row-start", "row-end"}
        assert set(matchers["col-lines"]) == {"col-start", "col-end"}

    def test_grid_areas_resolver(self) -> None:
        resolve = emit_arbitrary_matchers()["grid-areas"]["grid-areas"]
        assert resolve("a_b,c_d").to_dict() == {
            "display": "grid",
            "grid-template-areas": '"a b" "c d"',
        }

    def test_grid_areas_resolver_variable(self) -> None:
        resolve = emit_arbitrary_matchers()["grid-areas"]["grid-areas"]
        assert resolve("var(--areas)").get("grid-template-areas") == "var(--areas)"

    def test_grid_area_resolver_replaces_underscores_only(self) -> None:
        resolve = emit_arbitrary_matchers()["grid-area"]["grid-area"]
        assert resolve("1_/_span_2,x").to_dict() == {"grid-area": "1 / span 2,x"}

    @pytest.mark.parametrize(
        "family,prefix,prop",
        [
            ("row-lines", "row-start", "grid-row-start"),
            ("row-lines", "row-end", "grid-row-end"),
            ("col-lines", "col-start", "grid-column-start"),
            ("col-lines", "col-end", "grid-column-end"),
        ],
    )
    def test_line_resolvers_use_raw_value(self, family: str, prefix: str, prop: str) -> None:
        resolve = emit_arbitrary_matchers()[family][prefix]
        assert resolve("my_line").to_dict() == {prop: "my_line"}
