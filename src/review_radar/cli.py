"""CLI entry point for review radar."""

import asyncio
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import NoReturn, Optional

import typer

from review_radar.adapters.acquisition import AcquisitionSimulator
from review_radar.adapters.progress import ConsoleMetricsObserver, ConsoleProgressObserver
from review_radar.adapters.report import MarkdownReportGenerator
from review_radar.config import Settings, get_settings
from review_radar.core import (
    AcquisitionTimeout,
    AnalysisTimeout,
    InsightReport,
    InsightSynthesizer,
    InvalidInput,
    Platform,
    RecommendationCatalog,
)
from review_radar.core import platforms
from review_radar.core.randomness import default_source
from review_radar.logging_config import setup_logging
from review_radar.use_cases import AnalysisService, InsightService

app = typer.Typer(help="Turn customer reviews into Fix/Keep insights.", no_args_is_help=True)

CONFIG_OPTION = typer.Option(Path("config.yaml"), "--config", help="YAML config file")
OUTPUT_OPTION = typer.Option(None, "--output", "-o", help="Where to save the report")
JSON_OPTION = typer.Option(False, "--json", help="Write JSON instead of markdown")
SEED_OPTION = typer.Option(None, "--seed", help="Seed for reproducible runs")


def _load(config: Path, seed: Optional[int]) -> Settings:
    settings = get_settings(config)
    if seed is not None:
        settings.seed = seed
    setup_logging(
        level=settings.logging.level,
        json_output=settings.logging.json_output,
        log_file=settings.logging.log_file,
    )
    return settings


def build_service(settings: Settings) -> InsightService:
    """Wire the acquisition and analysis pipeline from settings."""
    rng = default_source(settings.seed)
    acquirer = AcquisitionSimulator(settings.acquisition, rng)
    synthesizer = InsightSynthesizer(RecommendationCatalog(), rng)
    analysis_service = AnalysisService(synthesizer, settings.analysis)
    return InsightService(acquirer, analysis_service, settings.validation)


def _header(title: str) -> None:
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)


def _fail(message: str) -> NoReturn:
    print(f"❌ {message}")
    raise typer.Exit(code=1)


@app.command("validate-url")
def validate_url(url: str) -> None:
    """Check whether a product URL can be analyzed."""
    validation = platforms.validate(url)
    if validation.is_valid:
        print(f"✓ {validation.message}")
        return
    print(f"✗ {validation.message} (platform: {validation.platform.value})")
    raise typer.Exit(code=1)


@app.command("instructions")
def instructions(platform: str) -> None:
    """Print manual review collection steps for a platform."""
    try:
        target = Platform(platform.strip().title())
    except ValueError:
        target = Platform.UNKNOWN

    print(f"📋 Collecting reviews from {target.value}:")
    for number, step in enumerate(platforms.scraping_instructions(target), 1):
        print(f"  {number}. {step}")


@app.command("analyze-url")
def analyze_url(
    url: str,
    output: Optional[Path] = OUTPUT_OPTION,
    as_json: bool = JSON_OPTION,
    seed: Optional[int] = SEED_OPTION,
    config: Path = CONFIG_OPTION,
) -> None:
    """Acquire reviews for a product URL and generate an insight report."""
    settings = _load(config, seed)
    asyncio.run(async_analyze_url(settings, url, output, as_json))


@app.command("analyze-text")
def analyze_text(
    source: str = typer.Argument(..., help="Text file with reviews, '-' for stdin"),
    output: Optional[Path] = OUTPUT_OPTION,
    as_json: bool = JSON_OPTION,
    seed: Optional[int] = SEED_OPTION,
    config: Path = CONFIG_OPTION,
) -> None:
    """Analyze pasted review text and generate an insight report."""
    settings = _load(config, seed)

    if source == "-":
        text = sys.stdin.read()
        label = "Pasted reviews"
    else:
        path = Path(source)
        if not path.is_file():
            _fail(f"File not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            _fail(f"Could not read {path} as UTF-8 text")
        label = path.name

    asyncio.run(async_analyze_text(settings, text, label, output, as_json))


async def async_analyze_url(
    settings: Settings, url: str, output: Optional[Path], as_json: bool
) -> None:
    """Async implementation of analyze-url command."""
    service = build_service(settings)

    _header("🔎 REVIEW RADAR - URL Analysis")
    print(f"\n🔗 URL: {url}")

    validation = platforms.validate(url)
    if not validation.is_valid:
        _fail(validation.message)
    print(f"✓ {validation.message}")

    _header("🕸️  STAGE 1: REVIEW ACQUISITION + ANALYSIS")
    try:
        report = await service.analyze_url(
            url,
            metrics_observer=ConsoleMetricsObserver(),
            progress_observer=ConsoleProgressObserver(),
        )
    except (AcquisitionTimeout, AnalysisTimeout) as e:
        _fail(f"{e}. Please try again.")
    except InvalidInput as e:
        _fail(str(e))

    await _write_report(service, settings, report, output, as_json)


async def async_analyze_text(
    settings: Settings, text: str, label: str, output: Optional[Path], as_json: bool
) -> None:
    """Async implementation of analyze-text command."""
    service = build_service(settings)

    _header("🔎 REVIEW RADAR - Text Analysis")
    print(f"\n📄 Source: {label} ({len(text)} characters)")

    validation = service.validate_text(text)
    if not validation.is_valid:
        for issue in validation.issues:
            print(f"  ⚠️  {issue}")
        _fail("Review text rejected")

    _header("🧠 STAGE 1: ANALYSIS")
    try:
        report = await service.analyze_text(
            text, progress_observer=ConsoleProgressObserver(), source_label=label
        )
    except AnalysisTimeout as e:
        _fail(f"{e}. Please try again.")

    await _write_report(service, settings, report, output, as_json)


async def _write_report(
    service: InsightService,
    settings: Settings,
    report: InsightReport,
    output: Optional[Path],
    as_json: bool,
) -> None:
    _header("📝 STAGE 2: REPORT")

    if as_json:
        content = json.dumps(report.to_dict(), ensure_ascii=False, indent=2)
    else:
        content = await MarkdownReportGenerator().generate(report)

    if output is None:
        timestamp = datetime.now().strftime('%Y-%m-%d_%H-%M-%S')
        suffix = "json" if as_json else "md"
        output = settings.output_dir / f"{timestamp}_report.{suffix}"

    service.save_report(content, output)

    summary = report.analysis.summary
    print(f"  • Sentiment: {summary.sentiment.value} ({summary.rating:.1f} ⭐)")
    print(f"  • Fix: {len(report.fix_clusters)} | Keep: {len(report.keep_clusters)}")

    _header("✅ DONE!")
    print(f"📄 Report saved: {output}")
    print()


if __name__ == "__main__":
    app()
