"""Strip markdown decoration from model output."""

from __future__ import annotations

import re

_CODE_FENCE = "```"
_BOLD = "**"
_ITALIC = "*"
_BULLET_RE = re.compile(r"-\s*")
_BLANK_LINE_RE = re.compile(r"\n\s*\n")


def normalize(raw: str) -> str:
    """Return ``raw`` as plain multi-line text.

    The steps run in a fixed order; bold markers must go before single
    asterisks, and blank lines are collapsed only after bullets are removed.
    Note that every ``-`` is treated as a bullet, including hyphens inside
    words.
    """
    text = raw.strip()
    text = text.replace(_CODE_FENCE, "")
    text = text.replace(_BOLD, "")
    text = text.replace(_ITALIC, "")
    text = _BULLET_RE.sub("", text)
    text = _BLANK_LINE_RE.sub("\n", text)
    return text
