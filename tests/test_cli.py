"""Tests for the command line interface."""

import json

import pytest
from typer.testing import CliRunner

from review_radar.cli import app

runner = CliRunner()

REVIEWS = (
    "Delivery was slow and the box arrived late. The quality is excellent though "
    "and customer service was helpful when I called them about the order."
)


@pytest.fixture
def fast_config(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "acquisition:\n"
        "  tick_interval: 0\n"
        "analysis:\n"
        "  tick_interval: 0\n"
        "  settle_delay: 0\n",
        encoding="utf-8",
    )
    return config_path


def test_validate_url_valid() -> None:
    """Test a supported URL passes."""
    result = runner.invoke(app, ["validate-url", "https://www.amazon.in/dp/X"])

    assert result.exit_code == 0
    assert "Ready to analyze reviews from Amazon" in result.output


def test_validate_url_invalid() -> None:
    """Test unsupported URLs exit with an error code."""
    result = runner.invoke(app, ["validate-url", "https://unknownshop.biz/x"])

    assert result.exit_code == 1
    assert "Platform not supported" in result.output


def test_instructions() -> None:
    """Test platform steps are printed."""
    result = runner.invoke(app, ["instructions", "zomato"])

    assert result.exit_code == 0
    assert "Zomato" in result.output
    assert 'Click on "Reviews" tab' in result.output


def test_analyze_text_markdown(tmp_path, fast_config) -> None:
    """Test text analysis writes a markdown report."""
    source = tmp_path / "reviews.txt"
    source.write_text(REVIEWS, encoding="utf-8")
    output = tmp_path / "report.md"

    result = runner.invoke(app, [
        "analyze-text", str(source),
        "--output", str(output),
        "--seed", "3",
        "--config", str(fast_config),
    ])

    assert result.exit_code == 0, result.output
    assert "Analysis: 100%" in result.output
    assert output.read_text(encoding="utf-8").startswith("# 📊 Review Insights: reviews.txt")


def test_analyze_text_stdin_json(tmp_path, fast_config) -> None:
    """Test stdin input with JSON output."""
    output = tmp_path / "report.json"

    result = runner.invoke(
        app,
        ["analyze-text", "-", "--json", "--output", str(output), "--config", str(fast_config)],
        input=REVIEWS,
    )

    assert result.exit_code == 0, result.output
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["source_label"] == "Pasted reviews"
    assert len(data["clusters"]) == 4
    assert data["analysis"]["summary"]["sentiment"] in {"positive", "negative", "neutral"}


def test_analyze_text_rejects_short_text(tmp_path, fast_config) -> None:
    """Test invalid text exits with an error code."""
    source = tmp_path / "reviews.txt"
    source.write_text("too short", encoding="utf-8")

    result = runner.invoke(app, ["analyze-text", str(source), "--config", str(fast_config)])

    assert result.exit_code == 1
    assert "minimum 50 characters" in result.output


def test_analyze_text_missing_file(tmp_path, fast_config) -> None:
    """Test missing input file exits with an error code."""
    result = runner.invoke(
        app, ["analyze-text", str(tmp_path / "nope.txt"), "--config", str(fast_config)]
    )

    assert result.exit_code == 1
    assert "File not found" in result.output


def test_analyze_url(tmp_path, fast_config) -> None:
    """Test URL analysis writes a report with product details."""
    output = tmp_path / "report.md"

    result = runner.invoke(app, [
        "analyze-url", "https://www.meesho.com/saree/p/1",
        "--output", str(output),
        "--seed", "11",
        "--config", str(fast_config),
    ])

    assert result.exit_code == 0, result.output
    assert "reviews •" in result.output
    report = output.read_text(encoding="utf-8")
    assert "Beautiful Traditional Saree (Meesho" in report


def test_analyze_url_unsupported(fast_config) -> None:
    """Test unsupported URL exits before acquisition."""
    result = runner.invoke(
        app, ["analyze-url", "https://unknownshop.biz/x", "--config", str(fast_config)]
    )

    assert result.exit_code == 1
    assert "Platform not supported" in result.output


def test_analyze_text_rejects_non_utf8(tmp_path, fast_config) -> None:
    """Test undecodable input files exit with an error code."""
    source = tmp_path / "bad.txt"
    source.write_bytes(b"reviews: \xff\xfe broken bytes")

    result = runner.invoke(app, ["analyze-text", str(source), "--config", str(fast_config)])

    assert result.exit_code == 1
    assert "Could not read" in result.output
    assert "as UTF-8 text" in result.output
