"""Result export (CSV, JSON) and the console report."""

import csv
import json
from pathlib import Path

import click
import structlog

from leadgen.core.config import Settings
from leadgen.core.errors import PersistError
from leadgen.core.models import FinalResult

log = structlog.get_logger()

CSV_HEADERS = [
    "Company Name",
    "Website",
    "Employee Count",
    "Industry",
    "Location",
    "Key Insights",
    "Personalized Message",
    "Message Generated",
]


def result_to_csv_row(result: FinalResult) -> list:
    return [
        result.name,
        result.website,
        result.employee_count,
        result.industry,
        result.location,
        "; ".join(result.insights),
        result.personalized_message,
        result.message_generated.isoformat(),
    ]


def save_results_to_csv(results: list[FinalResult], path: Path) -> Path:
    """Write results as CSV, replacing any existing file."""
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADERS)
        for result in results:
            writer.writerow(result_to_csv_row(result))

    log.info("results_saved", format="csv", path=str(path), count=len(results))
    return path


def save_results_to_json(results: list[FinalResult], path: Path) -> Path:
    """Write results as a pretty-printed JSON array, replacing any existing file."""
    data = [result.model_dump(mode="json", by_alias=True) for result in results]
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    log.info("results_saved", format="json", path=str(path), count=len(results))
    return path


def load_results_from_json(path: Path) -> list[FinalResult]:
    """Read a JSON export back into result records."""
    data = json.loads(path.read_text(encoding="utf-8"))
    return [FinalResult.model_validate(item) for item in data]


def persist(results: list[FinalResult], settings: Settings) -> tuple[Path, Path]:
    """Write both exports.

    Raises:
        PersistError: either file could not be written.
    """
    output = settings.output
    try:
        Path(output.directory).mkdir(parents=True, exist_ok=True)
        csv_path = save_results_to_csv(results, output.csv_path)
        json_path = save_results_to_json(results, output.json_path)
    except OSError as e:
        log.error("persist_failed", error=str(e))
        raise PersistError(f"Failed to write results: {e}") from e

    click.echo(f"📄 Results saved to {csv_path}")
    click.echo(f"📄 Results saved to {json_path}")
    return csv_path, json_path


def display_single_result(result: FinalResult, index: int):
    click.echo(f"\n📊 LEAD #{index + 1}")
    click.echo(f"Company: {result.name}")
    click.echo(f"Industry: {result.industry}")
    click.echo(f"Size: {result.employee_count} employees")
    click.echo(f"Location: {result.location}")
    click.echo(f"Website: {result.website}")
    click.echo("\n🔍 Key Insights:")
    for insight in result.insights:
        click.echo(f"   • {insight}")
    click.echo("\n✉️ Personalized Message:")
    click.echo(result.personalized_message)
    click.echo("\n" + "-" * 50)


def display_results(results: list[FinalResult]):
    """Print every result as a readable block."""
    click.echo("\n🎯 LEAD GENERATION RESULTS")
    click.echo("=" * 50)

    for index, result in enumerate(results):
        display_single_result(result, index)


def display_summary(results: list[FinalResult]):
    ai_generated = sum(1 for result in results if result.ai_generated)

    click.echo("\n✅ Lead generation completed successfully!")
    click.echo(f"📈 Generated {len(results)} personalized leads")
    click.echo("💾 Results saved to CSV and JSON files")
    click.echo(f"🤖 AI-generated messages: {ai_generated}/{len(results)}")
