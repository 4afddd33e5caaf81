"""Utility class names: parsing, markup scanning, and selector escaping.

Arbitrary-value classes carry their value in brackets:
``grid-areas-[header_header,sidebar_main]``, ``row-start-[main-start]``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Longest first so ``grid-areas`` wins over ``grid-area``.
ARBITRARY_PREFIXES: tuple[str, ...] = (
    "grid-areas",
    "grid-area",
    "row-start",
    "row-end",
    "col-start",
    "col-end",
)

_PREFIX_ALTERNATION = "|".join(re.escape(prefix) for prefix in ARBITRARY_PREFIXES)
_ARBITRARY_CLASS_PATTERN = re.compile(rf"^({_PREFIX_ALTERNATION})-\[(.*)\]$")
# Bracketed classes inside markup; a class ends at whitespace or a quote.
_SCAN_PATTERN = re.compile(rf"(?<![\w-])(?:{_PREFIX_ALTERNATION})-\[[^\s\"'`\]]*\]")
_ESCAPE_SEQUENCE = re.compile(r"\\(.)")
_SAFE_CHAR = re.compile(r"[A-Za-z0-9_-]")


@dataclass(frozen=True)
class ArbitraryClass:
    """A parsed ``<prefix>-[<value>]`` class name."""

    prefix: str
    value: str

    @property
    def class_name(self) -> str:
        return f"{self.prefix}-[{self.value}]"


def unescape(value: str) -> str:
    r"""Drop backslash escapes (``a\,b`` becomes ``a,b``)."""
    return _ESCAPE_SEQUENCE.sub(r"\1", value)


def parse_class_name(class_name: str) -> ArbitraryClass | None:
    """Parse an arbitrary-value class name; None for any other class.

    A leading ``.`` is ignored and escapes are removed from the value.

    Examples:
        >>> parse_class_name("grid-areas-[a_b,c_d]")
        ArbitraryClass(prefix='grid-areas', value='a_b,c_d')
        >>> parse_class_name("grid-area-main") is None
        True
    """
    match = _ARBITRARY_CLASS_PATTERN.match(class_name.removeprefix("."))
    if match is None:
        return None
    return ArbitraryClass(prefix=match.group(1), value=unescape(match.group(2)))


def scan_arbitrary_classes(text: str) -> list[ArbitraryClass]:
    """Find arbitrary-value utility classes in *text*, first-seen order, no duplicates."""
    found: dict[str, ArbitraryClass] = {}
    for match in _SCAN_PATTERN.finditer(text):
        parsed = parse_class_name(match.group(0))
        if parsed is not None and parsed.value:
            found.setdefault(parsed.class_name, parsed)
    return list(found.values())


def escape_class_name(class_name: str) -> str:
    r"""Escape a class name for use in a CSS selector.

    Examples:
        >>> escape_class_name("grid-areas-[a_.,b]")
        'grid-areas-\\[a_\\.\\,b\\]'
        >>> escape_class_name("1col")
        '\\31 col'
    """
    out: list[str] = []
    for index, char in enumerate(class_name):
        leading = index == 0 or (index == 1 and class_name[0] == "-")
        if char in "0123456789" and leading:
            out.append(f"\\{ord(char):x} ")
        elif _SAFE_CHAR.match(char) or ord(char) >= 0x80:
            out.append(char)
        else:
            out.append(f"\\{char}")
    return "".join(out)
