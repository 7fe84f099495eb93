"""Ticket document model and its plain-text form.

The plain-text form is what an editor shows: the first non-blank line is
the header and each later non-blank line is an item, optionally written
with a leading ``-`` bullet marker.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_BULLET_PREFIX = re.compile(r"^-\s*")


@dataclass(frozen=True)
class Document:
    """A header plus an ordered list of bullet items."""

    header: str
    items: tuple[str, ...] = field(default_factory=tuple)

    def to_raw_text(self) -> str:
        """Return the editable text form, one ``- item`` per line.

        A blank header cannot be represented: :func:`split_raw_text` skips
        blank lines, so the first item would be read back as the header.
        """
        return "\n".join([self.header, *(f"- {item}" for item in self.items)])


def split_raw_text(raw: str) -> Document | None:
    """Split editor text into a :class:`Document`.

    Every line is stripped of surrounding whitespace, the header included.
    Item lines also lose a leading ``-`` marker.

    Returns ``None`` when ``raw`` has no non-blank lines, leaving it to the
    caller to decide what to do with empty input.
    """
    lines = [line.strip() for line in raw.splitlines() if line.strip()]
    if not lines:
        return None
    header, *rest = lines
    return Document(
        header=header,
        items=tuple(_BULLET_PREFIX.sub("", line).strip() for line in rest),
    )
