from __future__ import annotations

from skincare.analysis.normalizer import normalize
from skincare.analysis.renderer import is_warning_line, render
from skincare.core.models import DisplayLine


def test_flags_warning_line():
    lines = render("Warning: redness detected\nUse gentle cleanser")
    assert lines == [
        DisplayLine(content="Warning: redness detected", is_warning=True),
        DisplayLine(content="Use gentle cleanser", is_warning=False),
    ]


def test_empty_text_renders_single_empty_line():
    assert render("") == [DisplayLine(content="", is_warning=False)]


def test_keeps_empty_lines_in_order():
    lines = render("First\n\nThird")
    assert [line.content for line in lines] == ["First", "", "Third"]


def test_classification_is_case_insensitive():
    assert is_warning_line("ALERT: see a dermatologist")
    assert is_warning_line("Dermatologist alerted")
    assert is_warning_line("No WARNINGS found")
    assert not is_warning_line("Apply sunscreen daily")


def test_content_is_never_altered():
    text = "  warning with padding  "
    assert render(text)[0].content == text


def test_renders_normalized_response():
    text = normalize(
        "**Warnings/Alerts**\n\n- Warning: possible rosacea\n- Drink more water"
    )
    warnings = [line.content for line in render(text) if line.is_warning]
    assert warnings == ["Warnings/Alerts", "Warning: possible rosacea"]
