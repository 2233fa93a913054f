import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from smart_assist.cli import main
from smart_assist.models import AnalysisResult, Finding


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def dark_png(tmp_path, png_bytes):
    path = tmp_path / "dark.png"
    path.write_bytes(png_bytes(color=(40, 40, 40)))
    return path


def test_json_output(runner, dark_png):
    result = runner.invoke(main, [str(dark_png), "--output", "json", "--platform", "Vue"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert [issue["title"] for issue in payload["issues"]] == ["Low contrast UI"]
    assert payload["issues"][0]["suggestion"].endswith("your Vue UI.")
    assert payload["summary"].startswith("This analysis is based on measurable")
    assert "visual_stats" not in payload


def test_json_output_with_stats(runner, dark_png):
    result = runner.invoke(main, [str(dark_png), "--output", "json", "--show-stats"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["visual_stats"] == {"brightness": 40.0, "variance": 0.0}


def test_rich_output(runner, dark_png):
    result = runner.invoke(main, [str(dark_png), "--show-stats"])

    assert result.exit_code == 0, result.output
    assert "Smart Assist" in result.output
    assert "Low contrast UI" in result.output
    assert "Average brightness" in result.output
    assert "Suggestion:" in result.output


def test_platform_from_environment(runner, dark_png, monkeypatch):
    monkeypatch.setenv("PLATFORM", "Flutter")

    result = runner.invoke(main, [str(dark_png), "--output", "json"])

    payload = json.loads(result.output)
    assert payload["issues"][0]["suggestion"].endswith("your Flutter UI.")


def test_ai_mode_reports_unavailable_provider(runner, dark_png):
    with patch("smart_assist.providers.local.LocalProvider.is_available", return_value=False):
        result = runner.invoke(main, [str(dark_png), "--mode", "ai"])

    assert result.exit_code == 1
    assert "not available" in result.output


def test_ai_mode_failure_falls_back(runner, dark_png, monkeypatch):
    # keep the error log off the captured output
    monkeypatch.setenv("LOG_LEVEL", "CRITICAL")

    with patch("smart_assist.providers.local.LocalProvider.is_available", return_value=True), \
            patch("smart_assist.providers.local.LocalProvider.review", side_effect=RuntimeError("boom")):
        result = runner.invoke(main, [str(dark_png), "--mode", "ai", "--output", "json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"issues": [], "summary": "Analysis failed."}


def test_undecodable_image_exits_with_error(runner, tmp_path):
    bogus = tmp_path / "notes.png"
    bogus.write_text("not an image")

    result = runner.invoke(main, [str(bogus)])

    assert result.exit_code == 1
    assert "Could not decode image" in result.output


def test_missing_image_is_usage_error(runner, tmp_path):
    result = runner.invoke(main, [str(tmp_path / "missing.png")])

    assert result.exit_code == 2


def test_rich_output_keeps_bracketed_platform_literal(runner, dark_png):
    result = runner.invoke(main, [str(dark_png), "--platform", "React [/bold]"])

    assert result.exit_code == 0, result.output
    assert "[/bold]" in result.output


def test_rich_output_keeps_model_text_literal(runner, dark_png):
    answer = AnalysisResult(
        findings=[Finding(
            title="[red]Busy[/red] header",
            severity="Medium",
            description="Uses [link] styles.",
            suggestion="Drop the [/i] accents.",
        )],
        summary="[bold]Mixed[/bold]",
    )

    with patch("smart_assist.providers.local.LocalProvider.is_available", return_value=True), \
            patch("smart_assist.providers.local.LocalProvider.review", return_value=answer):
        result = runner.invoke(main, [str(dark_png), "--mode", "ai"])

    assert result.exit_code == 0, result.output
    assert "[red]Busy[/red] header" in result.output
    assert "[link]" in result.output
    assert "[/i]" in result.output
    assert "[bold]Mixed[/bold]" in result.output
