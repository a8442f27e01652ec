"""Command-line interface for the lead generation workflow."""

import asyncio
import logging
import sys
from pathlib import Path

import click
import structlog
from dotenv import load_dotenv

from leadgen.core.config import DEFAULT_CONFIG_PATH, load_settings
from leadgen.core.errors import LeadGenError
from leadgen.lead_generator import run_lead_generation

# Configure structlog for CLI output
structlog.configure(
    processors=[
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer()
    ],
    wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
)

log = structlog.get_logger()


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx):
    """Lead generation - find companies, research them, draft outreach.

    Just run 'python run.py' to run the full workflow.
    """
    if ctx.invoked_subcommand is None:
        # Default behavior: run the full workflow
        ctx.invoke(run)


@cli.command()
@click.option("--config", "config_path", type=click.Path(), default=str(DEFAULT_CONFIG_PATH),
              help="Config directory path")
def run(config_path: str):
    """Fetch leads, enrich them, generate messages and export results."""
    try:
        settings = load_settings(Path(config_path))
        asyncio.run(run_lead_generation(settings))
    except LeadGenError as e:
        log.error("lead_generation_failed", error=str(e))
        click.echo(f"❌ Error in lead generation process: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        log.exception("lead_generation_crashed", error=str(e))
        click.echo(f"❌ Unhandled error: {e}", err=True)
        sys.exit(1)


def main():
    """Main entry point."""
    load_dotenv()
    cli()


if __name__ == "__main__":
    main()
