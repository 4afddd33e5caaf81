"""GenerateService: build the stylesheet, list areas, resolve class names.

Each operation runs a fresh generation pass: configured layouts plus
layouts contributed by plugins (configuration wins on a name clash).
"""

from __future__ import annotations

import glob
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

import structlog

from gridareas.domain.classnames import parse_class_name, scan_arbitrary_classes
from gridareas.domain.css import render_rule, render_stylesheet
from gridareas.domain.grammar import MalformedLayout
from gridareas.domain.utilities import UtilitySet, generate_utilities, register_utilities
from gridareas.plugins.builtins.stylesheet import StylesheetSink
from gridareas.services.base import BaseService
from gridareas.services.result import MALFORMED_LAYOUT, ServiceResult

log = structlog.get_logger(__name__)


def _malformed(op: str, exc: MalformedLayout) -> ServiceResult:
    detail: dict[str, Any] = {}
    if exc.layout is not None:
        detail["layout"] = exc.layout
    if exc.row is not None:
        detail["row"] = exc.row
    return ServiceResult.failure(op, MALFORMED_LAYOUT, str(exc), **detail)


class GenerateService(BaseService):
    """Generate grid-area utilities from the configured layouts."""

    def _generate(self, warnings: list[str]) -> UtilitySet:
        layouts: dict[str, Any] = self.plugins.collect_layouts(warnings)
        layouts.update(self._settings.layout_sources())
        utility_set = generate_utilities(layouts)
        warnings.extend(utility_set.warnings)
        log.debug(
            "utilities.generated",
            layouts=len(utility_set.layouts),
            areas=len(utility_set.area_names),
            static=len(utility_set.static_utilities),
        )
        return utility_set

    def _content_files(self, patterns: Iterable[str]) -> list[Path]:
        root = self._settings.project_root
        files: dict[Path, None] = {}
        for pattern in patterns:
            for match in sorted(glob.glob(pattern, root_dir=root, recursive=True)):
                path = root / match
                if path.is_file():
                    files.setdefault(path, None)
        return list(files)

    def build(
        self,
        *,
        output: Path | None = None,
        content: Sequence[str] | None = None,
    ) -> ServiceResult:
        """Generate the full stylesheet.

        Static utilities come first, in family order; arbitrary classes
        found in *content* files follow in first-seen order. When *output*
        is given the CSS is written there, otherwise it is returned in
        ``data["css"]``.
        """
        op = "build"
        warnings: list[str] = []
        try:
            utility_set = self._generate(warnings)
        except MalformedLayout as exc:
            return _malformed(op, exc)

        sink = StylesheetSink()
        self.plugins.register_plugin(sink, name="stylesheet")
        try:
            register_utilities(utility_set, self.plugins.sink)
        finally:
            self.plugins.unregister(sink)

        patterns = list(content) if content is not None else self._settings.build.content
        files = self._content_files(patterns)
        for path in files:
            text = path.read_text(encoding="utf-8", errors="replace")
            for found in scan_arbitrary_classes(text):
                sink.resolve(found)
        arbitrary = sink.arbitrary_count

        css = render_stylesheet(sink.rules)
        data: dict[str, Any] = {
            "layouts": len(utility_set.emitted_layouts),
            "areas": len(utility_set.area_names),
            "rules": sink.rule_count,
            "arbitrary": arbitrary,
            "files_scanned": len(files),
        }
        if output is not None:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(css, encoding="utf-8")
            data["output"] = str(output)
        else:
            data["css"] = css

        log.info("build.complete", rules=sink.rule_count, arbitrary=arbitrary)
        return ServiceResult.success(op, data, warnings)

    def list_areas(self) -> ServiceResult:
        """List discovered area names with their layouts and line classes."""
        op = "list_areas"
        warnings: list[str] = []
        try:
            utility_set = self._generate(warnings)
        except MalformedLayout as exc:
            return _malformed(op, exc)

        items = [
            {
                "area": area,
                "layouts": list(utility_set.area_layouts[area]),
                "classes": [
                    f"{prefix}-{area}"
                    for prefix in (
                        "grid-area",
                        "row-start",
                        "row-end",
                        "row-span",
                        "col-start",
                        "col-end",
                        "col-span",
                    )
                ],
            }
            for area in utility_set.area_names
        ]
        layouts = [
            {
                "name": layout.name,
                "rows": list(layout.rows),
                "row_tracks": layout.row_tracks,
                "col_tracks": layout.col_tracks,
            }
            for layout in utility_set.layouts
        ]
        data = {"items": items, "layouts": layouts, "count": len(items)}
        return ServiceResult.success(op, data, warnings)

    def resolve(self, class_names: Sequence[str]) -> ServiceResult:
        """Resolve utility class names (static or arbitrary) to CSS rules.

        Unknown class names are reported as warnings, not errors.
        """
        op = "resolve"
        warnings: list[str] = []
        try:
            utility_set = self._generate(warnings)
        except MalformedLayout as exc:
            return _malformed(op, exc)

        items: list[dict[str, Any]] = []
        for raw in class_names:
            class_name = raw.removeprefix(".")
            utility = utility_set.find(class_name)
            if utility is not None:
                body = utility.declaration.to_dict()
            else:
                arbitrary = parse_class_name(class_name)
                declaration = (
                    utility_set.resolve(arbitrary.prefix, arbitrary.value)
                    if arbitrary is not None
                    else None
                )
                if declaration is None:
                    warnings.append(f"Not a grid-areas utility: {class_name}")
                    continue
                body = declaration.to_dict()
            items.append(
                {
                    "class": class_name,
                    "declaration": body,
                    "css": render_rule(f".{class_name}", body),
                }
            )
        return ServiceResult.success(op, {"items": items, "count": len(items)}, warnings)
