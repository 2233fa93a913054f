import pytest

from smart_assist.analysis import SUMMARY, classify
from smart_assist.models import VisualStats


def titles(result):
    return [f.title for f in result.findings]


def test_dark_screen_flags_low_contrast():
    result = classify(VisualStats(brightness=80, variance=100), "React")

    assert titles(result) == ["Low contrast UI"]
    finding = result.findings[0]
    assert finding.severity == "High"
    assert finding.description == "The interface appears visually dark, which can reduce readability."
    assert finding.suggestion == "Increase contrast between background and text in your React UI."


def test_high_variance_flags_clutter():
    result = classify(VisualStats(brightness=200, variance=600), "Vue")

    assert titles(result) == ["Visual clutter detected"]
    finding = result.findings[0]
    assert finding.severity == "Medium"
    assert finding.suggestion == "Simplify layout and reduce visual noise in your Vue components."


def test_baseline_when_nothing_fires():
    result = classify(VisualStats(brightness=150, variance=50), "React")

    assert titles(result) == ["Usability baseline met"]
    finding = result.findings[0]
    assert finding.severity == "Low"
    assert finding.description == "No major contrast or density issues detected."
    assert finding.suggestion == "Minor refinements can further improve UX quality."


def test_both_rules_fire_in_order():
    result = classify(VisualStats(brightness=50, variance=700), "Svelte")

    assert titles(result) == ["Low contrast UI", "Visual clutter detected"]
    assert [f.severity for f in result.findings] == ["High", "Medium"]


@pytest.mark.parametrize("brightness,variance", [(115, 500), (115, 0), (255, 500)])
def test_thresholds_are_strict(brightness, variance):
    result = classify(VisualStats(brightness=brightness, variance=variance), "React")

    assert titles(result) == ["Usability baseline met"]


def test_just_past_thresholds():
    result = classify(VisualStats(brightness=114.99, variance=500.01), "React")

    assert titles(result) == ["Low contrast UI", "Visual clutter detected"]


def test_summary_is_fixed():
    dark = classify(VisualStats(brightness=0, variance=0), "React")
    light = classify(VisualStats(brightness=255, variance=0), "Flutter")

    assert dark.summary == light.summary == SUMMARY
    assert SUMMARY == (
        "This analysis is based on measurable visual properties "
        "computed directly from the UI screenshot."
    )


def test_classify_is_deterministic():
    stats = VisualStats(brightness=90, variance=900)

    assert classify(stats, "React") == classify(stats, "React")


def test_serializes_to_issues_payload():
    payload = classify(VisualStats(brightness=80, variance=100), "React").to_payload()

    assert set(payload) == {"issues", "summary"}
    assert payload["issues"][0] == {
        "title": "Low contrast UI",
        "severity": "High",
        "description": "The interface appears visually dark, which can reduce readability.",
        "suggestion": "Increase contrast between background and text in your React UI.",
    }
