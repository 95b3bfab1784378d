"""Inline emphasis markup for clue text.

Clue text may carry a small Markdown subset: ``*italic*``, ``**bold**`` and
``***bold-italic***`` (or the underscore equivalents). Each span is replaced by
a ``<span>`` carrying the matching CSS classes.

Rules run longest marker first. A shorter marker would otherwise consume part
of a longer one (``**`` matching inside ``***``). Each rule is applied to the
whole string before the next rule runs, so nested markup is handled by later
rules working on already substituted text.
"""

from __future__ import annotations

import re
from typing import List, Pattern, Tuple

from ..core.constants import BOLD_CLASS, ITALIC_CLASS


def _span_pattern(marker: str) -> Pattern[str]:
    char = re.escape(marker[0])
    fence = re.escape(marker)
    # Content is non-empty and may neither start nor end with the marker character.
    return re.compile(rf"{fence}(?!{char})(.+?)(?<!{char}){fence}")


def _open_tag(*classes: str) -> str:
    return f'<span class="{" ".join(classes)}">'


CLOSE_TAG = "</span>"

MARKUP_RULES: Tuple[Tuple[Pattern[str], str], ...] = (
    (_span_pattern("***"), _open_tag(BOLD_CLASS, ITALIC_CLASS)),
    (_span_pattern("___"), _open_tag(BOLD_CLASS, ITALIC_CLASS)),
    (_span_pattern("**"), _open_tag(BOLD_CLASS)),
    (_span_pattern("__"), _open_tag(BOLD_CLASS)),
    (_span_pattern("*"), _open_tag(ITALIC_CLASS)),
    (_span_pattern("_"), _open_tag(ITALIC_CLASS)),
)


def apply_rule(text: str, pattern: Pattern[str], open_tag: str) -> str:
    """Replace every well-formed span of one rule, scanning left to right."""

    rendered: List[str] = []
    remainder = text
    while True:
        match = pattern.search(remainder)
        if match is None:
            break
        rendered.append(remainder[: match.start()])
        rendered.append(f"{open_tag}{match.group(1)}{CLOSE_TAG}")
        remainder = remainder[match.end():]
    rendered.append(remainder)
    return "".join(rendered)


def render_markup(text: str) -> str:
    """Return ``text`` with inline emphasis converted to markup tags.

    Unmatched markers are left verbatim.
    """

    for pattern, open_tag in MARKUP_RULES:
        text = apply_rule(text, pattern, open_tag)
    return text


__all__ = ["render_markup", "apply_rule", "MARKUP_RULES", "CLOSE_TAG"]
