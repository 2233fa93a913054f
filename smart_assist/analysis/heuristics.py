"""
Heuristic UX Classifier

Maps brightness statistics to UX findings with two fixed thresholds.
Rules fire independently; when none fires a single baseline finding is returned.
"""

from ..models import AnalysisResult, Finding, VisualStats


# Screens darker than this read as low contrast
BRIGHTNESS_THRESHOLD = 115
# Brightness spread above this reads as cluttered
VARIANCE_THRESHOLD = 500

SUMMARY = (
    "This analysis is based on measurable visual properties "
    "computed directly from the UI screenshot."
)


def classify(stats: VisualStats, platform: str) -> AnalysisResult:
    """
    Classify visual statistics into UX findings.

    Rules:
    - brightness < 115: "Low contrast UI" (High)
    - variance > 500: "Visual clutter detected" (Medium)
    - neither: "Usability baseline met" (Low)

    Args:
        stats: Brightness statistics of the screenshot
        platform: Platform label used in suggestions (e.g. "React")

    Returns:
        AnalysisResult with at least one finding and the fixed summary

    Example:
        result = classify(VisualStats(brightness=80, variance=100), "React")
        assert [f.title for f in result.findings] == ["Low contrast UI"]
    """
    findings = []

    if stats.brightness < BRIGHTNESS_THRESHOLD:
        findings.append(Finding(
            title="Low contrast UI",
            severity="High",
            description="The interface appears visually dark, which can reduce readability.",
            suggestion=f"Increase contrast between background and text in your {platform} UI."
        ))

    if stats.variance > VARIANCE_THRESHOLD:
        findings.append(Finding(
            title="Visual clutter detected",
            severity="Medium",
            description="High brightness variance suggests too many competing elements.",
            suggestion=f"Simplify layout and reduce visual noise in your {platform} components."
        ))

    if not findings:
        findings.append(Finding(
            title="Usability baseline met",
            severity="Low",
            description="No major contrast or density issues detected.",
            suggestion="Minor refinements can further improve UX quality."
        ))

    return AnalysisResult(findings=findings, summary=SUMMARY)
