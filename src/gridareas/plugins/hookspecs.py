"""Pluggy hook specifications for gridareas.

Two sink hooks mirror the host boundary: static utility families arrive
through ``add_utilities`` (once per family) and arbitrary-value resolvers
through ``match_utilities`` (once per family). One setup hook lets plugins
contribute layouts alongside the configured ones.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pluggy

if TYPE_CHECKING:
    from gridareas.domain.declarations import DeclarationRecord, RecordResolver

hookspec = pluggy.HookspecMarker("gridareas")
hookimpl = pluggy.HookimplMarker("gridareas")


class GridAreasHookSpec:
    """Hook specifications for the gridareas plugin system."""

    @hookspec
    def add_utilities(self, utilities: DeclarationRecord) -> None:
        """Receive one family of static utilities (selector -> properties)."""

    @hookspec
    def match_utilities(self, resolvers: dict[str, RecordResolver]) -> None:
        """Receive one family of arbitrary-value resolvers keyed by class prefix."""

    @hookspec
    def register_layouts(self) -> dict[str, Any] | None:
        """Return layout name -> rows (or full definition) to add to the config."""
