"""Declaration records: the output unit of the CSS emitter.

A :class:`Declaration` is an ordered, immutable list of property/value
pairs. A :class:`Utility` binds a declaration to a class selector.
Sinks receive plain mappings (see :func:`to_record`) so they need no
knowledge of these types.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

# selector -> property -> value (or a nested body for at-rules)
type CssBody = Mapping[str, str | CssBody]
type DeclarationRecord = dict[str, dict[str, str]]
# raw bracket content -> property map, as handed to sinks
type RecordResolver = Callable[[str], dict[str, str]]


@dataclass(frozen=True)
class Declaration:
    """Ordered CSS property/value pairs for a single rule."""

    properties: tuple[tuple[str, str], ...]

    @classmethod
    def of(cls, *pairs: tuple[str, str | None]) -> Declaration:
        """Build a declaration, skipping pairs whose value is None."""
        return cls(tuple((prop, value) for prop, value in pairs if value is not None))

    def get(self, prop: str) -> str | None:
        for name, value in self.properties:
            if name == prop:
                return value
        return None

    def to_dict(self) -> dict[str, str]:
        return dict(self.properties)

    def __len__(self) -> int:
        return len(self.properties)


@dataclass(frozen=True)
class Utility:
    """A generated utility class and its declaration."""

    class_name: str  # without the leading dot
    declaration: Declaration

    @property
    def selector(self) -> str:
        return f".{self.class_name}"


def to_record(utilities: Iterable[Utility]) -> DeclarationRecord:
    """Convert utilities into the selector-keyed mapping handed to sinks.

    When two utilities share a selector, the later one wins.
    """
    return {utility.selector: utility.declaration.to_dict() for utility in utilities}


def to_record_resolver(resolver: Callable[[str], Declaration]) -> RecordResolver:
    """Wrap a declaration resolver so it returns a plain property map."""

    def resolve(value: str) -> dict[str, str]:
        return resolver(value).to_dict()

    resolve.__name__ = getattr(resolver, "__name__", "resolve")
    return resolve
