"""Utility generation: one pass from configured layouts to utility families.

Flow: normalize layouts → accumulate area names → emit utilities.
:func:`register_utilities` then hands each family to a sink, the only
boundary with the host that renders the stylesheet.

Keyword collisions: reserved keywords always win. A layout named like a
CSS-wide keyword is dropped; an area named like a ``grid-area`` keyword
gets no placement utility of its own (its line utilities are kept).
Both cases are reported in :attr:`UtilitySet.warnings`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from gridareas.domain.areas import AreaRegistry
from gridareas.domain.declarations import (
    Declaration,
    DeclarationRecord,
    RecordResolver,
    Utility,
    to_record,
    to_record_resolver,
)
from gridareas.domain.emitter import (
    Resolver,
    emit_area_keyword_utilities,
    emit_area_placement_utility,
    emit_arbitrary_matchers,
    emit_keyword_layout_utilities,
    emit_layout_utility,
    emit_line_utilities,
)
from gridareas.domain.keywords import CSS_WIDE_KEYWORDS, GRID_AREA_KEYWORDS
from gridareas.domain.layouts import LayoutDefinition, LayoutSource, normalize_layouts


class UtilitySink(Protocol):
    """Host capability that accepts generated utilities.

    The sink decides how rules are rendered, deduplicated, and ordered.
    """

    def add_utilities(self, utilities: DeclarationRecord) -> None: ...

    def match_utilities(self, resolvers: Mapping[str, RecordResolver]) -> None: ...


@dataclass(frozen=True)
class UtilitySet:
    """Everything produced by one generation pass."""

    layouts: tuple[LayoutDefinition, ...]
    layout_utilities: tuple[Utility, ...]
    placement_utilities: tuple[Utility, ...]
    line_utilities: tuple[Utility, ...]
    area_names: tuple[str, ...]
    area_layouts: Mapping[str, tuple[str, ...]]
    matchers: Mapping[str, Mapping[str, Resolver]]
    warnings: tuple[str, ...] = field(default=())

    @property
    def emitted_layouts(self) -> tuple[LayoutDefinition, ...]:
        """Layouts that produced their own rule (keyword collisions excluded)."""
        return tuple(layout for layout in self.layouts if layout.name not in CSS_WIDE_KEYWORDS)

    @property
    def static_utilities(self) -> tuple[Utility, ...]:
        return self.layout_utilities + self.placement_utilities + self.line_utilities

    def families(self) -> list[tuple[str, tuple[Utility, ...]]]:
        return [
            ("layouts", self.layout_utilities),
            ("placements", self.placement_utilities),
            ("lines", self.line_utilities),
        ]

    def find(self, class_name: str) -> Utility | None:
        """Look up a static utility by class name (no leading dot)."""
        for utility in self.static_utilities:
            if utility.class_name == class_name:
                return utility
        return None

    def resolve(self, prefix: str, value: str) -> Declaration | None:
        """Run the arbitrary-value resolver registered for *prefix*."""
        for resolvers in self.matchers.values():
            resolver = resolvers.get(prefix)
            if resolver is not None:
                return resolver(value)
        return None


def generate_utilities(
    config: Mapping[str, LayoutSource | LayoutDefinition] | None = None,
) -> UtilitySet:
    """Generate every utility family for the configured layouts.

    Raises:
        MalformedLayout: A configured layout has no rows or an empty row.
    """
    layouts = normalize_layouts(config)
    registry = AreaRegistry()
    warnings: list[str] = []

    layout_utilities: list[Utility] = []
    for layout in layouts:
        utility = emit_layout_utility(
            layout.name, layout.rows, layout.row_tracks, layout.col_tracks
        )
        registry.add(layout.name, layout.rows)
        if layout.name in CSS_WIDE_KEYWORDS:
            warnings.append(
                f"Layout {layout.name!r} collides with a reserved keyword and was skipped"
            )
            continue
        layout_utilities.append(utility)
    layout_utilities.extend(emit_keyword_layout_utilities())

    placement_utilities: list[Utility] = []
    line_utilities: list[Utility] = []
    for area in registry.names:
        if area in GRID_AREA_KEYWORDS:
            warnings.append(
                f"Area {area!r} collides with a reserved keyword; "
                f"grid-area-{area} keeps its keyword meaning"
            )
        else:
            placement_utilities.append(emit_area_placement_utility(area))
        line_utilities.extend(emit_line_utilities(area))
    placement_utilities.extend(emit_area_keyword_utilities())

    return UtilitySet(
        layouts=tuple(layouts),
        layout_utilities=tuple(layout_utilities),
        placement_utilities=tuple(placement_utilities),
        line_utilities=tuple(line_utilities),
        area_names=tuple(registry.names),
        area_layouts={area: tuple(registry.layouts_for(area)) for area in registry.names},
        matchers=emit_arbitrary_matchers(),
        warnings=tuple(warnings),
    )


def register_utilities(utility_set: UtilitySet, sink: UtilitySink) -> None:
    """Hand each utility family, then each arbitrary-value family, to *sink*."""
    for _family, utilities in utility_set.families():
        sink.add_utilities(to_record(utilities))
    for resolvers in utility_set.matchers.values():
        sink.match_utilities(
            {prefix: to_record_resolver(resolver) for prefix, resolver in resolvers.items()}
        )
