"""Prompt sent with every skin analysis request."""

from __future__ import annotations

SKIN_ANALYSIS_PROMPT = (
    "Give a Skin Health Analysis of the person in this photo. "
    "Based on the analysis, offer tailored skincare product recommendations "
    "and provide a personalized skincare plan.\n"
    "Warnings/Alerts: If any serious skin issues are detected, list them on "
    "lines that start with \"Warning:\"."
)


def build_prompt(extra: str = "") -> str:
    """Return the fixed prompt with ``extra`` appended verbatim on its own line."""
    if not extra:
        return SKIN_ANALYSIS_PROMPT
    return f"{SKIN_ANALYSIS_PROMPT}\n{extra}"
