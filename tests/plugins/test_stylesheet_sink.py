"""Tests for the built-in StylesheetSink plugin."""

from __future__ import annotations

from gridareas.domain.classnames import ArbitraryClass
from gridareas.domain.css import render_stylesheet
from gridareas.domain.utilities import generate_utilities, register_utilities
from gridareas.plugins.builtins.stylesheet import StylesheetSink
from gridareas.plugins.manager import PluginManager


def _registered_sink(config: dict | None = None) -> StylesheetSink:
    pm = PluginManager()
    sink = StylesheetSink()
    pm.register_plugin(sink, name="stylesheet")
    register_utilities(generate_utilities(config), pm.sink)
    return sink


class TestStylesheetSink:
    def test_collects_static_families(self) -> None:
        sink = _registered_sink({"page": ["header header", "main ."]})
        assert sink.rules[".grid-areas-page"] == {
            "display": "grid",
            "grid-template-areas": '"header header" "main ."',
        }
        assert sink.rules[".grid-area-main"] == {"grid-area": "main"}
        assert sink.rules[".row-span-header"] == {"grid-row": "header-start / header-end"}

    def test_collects_all_resolvers(self) -> None:
        sink = _registered_sink()
        assert set(sink.resolvers) == {
            "grid-areas",
            "grid-area",
            "row-start",
            "row-end",
            "col-start",
            "col-end",
        }

    def test_resolve_adds_rule(self) -> None:
        sink = _registered_sink()
        before = sink.rule_count
        body = sink.resolve(ArbitraryClass("grid-areas", "a_b,c_d"))
        assert body == {"display": "grid", "grid-template-areas": '"a b" "c d"'}
        assert sink.rules[".grid-areas-[a_b,c_d]"] == body
        assert sink.rule_count == before + 1

    def test_resolve_once_per_value(self) -> None:
        sink = _registered_sink()
        calls: list[str] = []
        original = sink.resolvers["row-start"]

        def counting(value: str) -> dict[str, str]:
            calls.append(value)
            return original(value)

        sink.resolvers["row-start"] = counting
        sink.resolve(ArbitraryClass("row-start", "x"))
        sink.resolve(ArbitraryClass("row-start", "x"))
        assert calls == ["x"]

    def test_unknown_prefix(self) -> None:
        assert StylesheetSink().resolve(ArbitraryClass("grid-area", "x")) is None

    def test_renders(self) -> None:
        sink = _registered_sink({"card": ["a"]})
        sink.resolve(ArbitraryClass("grid-area", "1_/_3"))
        css = render_stylesheet(sink.rules)
        assert ".grid-areas-card {\n  display: grid;\n  grid-template-areas: \"a\";\n}" in css
        assert ".grid-area-\\[1_\\/_3\\] {\n  grid-area: 1 / 3;\n}" in css
