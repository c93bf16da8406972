"""Split analysis text into display lines."""

from __future__ import annotations

from typing import List

from ..core.models import DisplayLine

WARNING_KEYWORDS = ("warning", "alert")


def is_warning_line(line: str) -> bool:
    lowered = line.lower()
    return any(keyword in lowered for keyword in WARNING_KEYWORDS)


def render(text: str) -> List[DisplayLine]:
    return [DisplayLine(content=line, is_warning=is_warning_line(line)) for line in text.split("\n")]
