"""StylesheetSink: collects utilities into an ordered rule table.

Registered by the build service for the duration of one build. Static
families arrive through ``add_utilities``; arbitrary classes found in
content files are resolved on demand through the collected resolvers.

Rules are keyed by unescaped selector; escaping happens when rendering.
A later rule for an existing selector replaces the earlier one in place.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gridareas.plugins.hookspecs import hookimpl

if TYPE_CHECKING:
    from gridareas.domain.classnames import ArbitraryClass
    from gridareas.domain.declarations import DeclarationRecord, RecordResolver

logger = logging.getLogger(__name__)


class StylesheetSink:
    """Declaration sink that accumulates rules for stylesheet rendering."""

    def __init__(self) -> None:
        self.rules: dict[str, dict[str, str]] = {}
        self.resolvers: dict[str, RecordResolver] = {}
        self._resolved: set[str] = set()

    @hookimpl
    def add_utilities(self, utilities: DeclarationRecord) -> None:
        for selector, body in utilities.items():
            self.rules[selector] = dict(body)

    @hookimpl
    def match_utilities(self, resolvers: dict[str, RecordResolver]) -> None:
        self.resolvers.update(resolvers)

    def resolve(self, arbitrary: ArbitraryClass) -> dict[str, str] | None:
        """Resolve an arbitrary class once and add its rule.

        Returns the declaration body, or None when no resolver handles
        the class prefix.
        """
        selector = f".{arbitrary.class_name}"
        if selector in self._resolved:
            return self.rules[selector]
        resolver = self.resolvers.get(arbitrary.prefix)
        if resolver is None:
            logger.debug("No resolver for prefix %s", arbitrary.prefix)
            return None
        body = resolver(arbitrary.value)
        self.rules[selector] = body
        self._resolved.add(selector)
        return body

    @property
    def rule_count(self) -> int:
        return len(self.rules)

    @property
    def arbitrary_count(self) -> int:
        return len(self._resolved)
