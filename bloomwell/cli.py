"""CLI commands for Flask application."""

import click
from flask import current_app
from flask.cli import with_appcontext

from bloomwell.errors import DataSourceError, ReportExportError


@click.group()
def wellness():
    """Wellness report commands."""
    pass


@wellness.command()
@click.argument("user_id")
@click.option("--days", default=None, type=click.IntRange(min=1), help="Analysis window in days")
@click.option("--output-dir", default=None, help="Directory for exported files")
@click.option(
    "--format",
    "export_format",
    type=click.Choice(["json", "csv", "both"]),
    default="both",
    show_default=True,
    help="Export format",
)
@with_appcontext
def report(user_id, days, output_dir, export_format):
    """Generate a wellness report for USER_ID and export it."""
    from bloomwell.services import (
        ReportExporter,
        SQLAlchemyDataSource,
        WellnessReportService,
    )

    if days is None:
        days = current_app.config["DEFAULT_ANALYSIS_DAYS"]

    service = WellnessReportService(SQLAlchemyDataSource())
    try:
        result = service.create_report(user_id, days=days)
    except DataSourceError as e:
        raise click.ClickException(f"Could not load data for {user_id}: {e}")

    click.echo("=== BloomWell Wellness Report ===")
    click.echo(f"User: {result['user_id']}")
    period = result["analysis_period"]
    click.echo(f"Period: {period['start_date']} to {period['end_date']}")
    quality = result["data_quality"]
    click.echo(
        f"Entries: mood={quality['mood_entries']}, "
        f"habits={quality['habit_entries']}, study={quality['study_entries']}"
    )

    mood = result["insights"]["mood"]
    click.echo(f"\nMood Average: {mood['average']}")
    click.echo(f"Mood Trend: {mood['trend']}")

    habits = result["insights"]["habits"]
    if "overall_completion_rate" in habits:
        click.echo(
            f"Habit Completion Rate: {habits['overall_completion_rate'] * 100:.1f}%"
        )

    click.echo("\nRecommendations:")
    if not result["recommendations"]:
        click.echo("  (none)")
    for recommendation in result["recommendations"]:
        click.echo(f"- {recommendation}")

    exporter = ReportExporter(output_dir or current_app.config["REPORT_EXPORT_DIR"])
    try:
        if export_format in ("json", "both"):
            click.echo(f"\nJSON: {exporter.export_json(result)}")
        if export_format in ("csv", "both"):
            click.echo(f"CSV: {exporter.export_csv(result)}")
    except ReportExportError as e:
        raise click.ClickException(str(e))


def init_app(app):
    """Register CLI commands with the app."""
    app.cli.add_command(wellness)
