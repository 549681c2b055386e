"""Session-scoped anchor slug allocation."""

from __future__ import annotations

import re
from pathlib import PurePath

_STRIP_PATTERN = re.compile(r"[^\w\- ]")
_EXTENSION_PATTERN = re.compile(r"\..*$")


class SlugAllocator:
    """Hand out anchor-safe slugs that never repeat within one session."""

    def __init__(self) -> None:
        self._occurrences: dict[str, int] = {}

    def slug(self, label: str) -> str:
        """Return a unique slug for the label, suffixing `-1`, `-2`, ... on collision."""
        base = slugify(label)
        candidate = base
        while candidate in self._occurrences:
            self._occurrences[base] += 1
            candidate = f"{base}-{self._occurrences[base]}"
        self._occurrences[candidate] = 0
        return candidate


def slugify(label: str) -> str:
    """Lowercase the label, drop punctuation, and join words with hyphens."""
    return _STRIP_PATTERN.sub("", label.lower()).replace(" ", "-")


def abbreviate(text: str) -> str:
    """Cut every hyphen-separated part of the text down to three characters."""
    return "-".join(part[:3] for part in text.split("-"))


def document_label(filename: str) -> str:
    """Return the file basename up to its first dot (`doc.schema.json` -> `doc`)."""
    return _EXTENSION_PATTERN.sub("", PurePath(filename).name)
