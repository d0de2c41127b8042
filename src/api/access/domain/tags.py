"""Serialization of access tags to and from the legacy text block.

The text form holds one ``key:value`` pair per line. Only the first colon
separates key from value, so values may themselves contain colons.
"""

from __future__ import annotations

from typing import Iterable

from access.domain.value_objects import AccessTag


def parse_tags(text: str) -> list[AccessTag]:
    """Parse a ``key:value`` text block into tags.

    Blank lines, lines without a colon and lines with an empty key are
    skipped. Keys and values are stripped of surrounding whitespace.
    """
    tags: list[AccessTag] = []
    for line in text.splitlines():
        key, sep, value = line.partition(":")
        key = key.strip()
        if not sep or not key:
            continue
        tags.append(AccessTag(key=key, value=value.strip()))
    return tags


def format_tags(tags: Iterable[AccessTag]) -> str:
    """Render tags as a ``key:value`` text block, one per line."""
    return "\n".join(f"{tag.key}:{tag.value}" for tag in tags)
