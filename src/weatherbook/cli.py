"""Weatherbook CLI - Weather Record Book."""

import json
import logging
import sys

import click

from .config import load_config
from .core.records import ValidationError, current_date, current_time_period, validate_and_build
from .core.formatting import render_record
from .core.store import RecordStore
from .core.suitability import judge_suitability
from .workflows import (
    FormFields,
    add_record,
    error_message,
    query_records,
    status_message,
)

SHELL_HELP = """Commands:
  add     Validate the form fields and store a record
  query   Look up records by date and time of day
  clear   Reset the form fields (stored records are kept)
  status  Show how many records are stored
  help    Show this help
  quit    Leave the session"""

# (attribute, prompt) in form order
ADD_FIELDS = [
    ("temperature", "Temperature (°C)"),
    ("humidity", "Humidity (%)"),
    ("phenomenon", "Phenomenon (sunny/cloudy/rainy/snowy/stormy)"),
    ("date", "Date (YYYY-MM-DD)"),
    ("time", "Time (morning/afternoon)"),
]
QUERY_FIELDS = ADD_FIELDS[3:]


@click.group()
@click.version_option(package_name="weatherbook")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--capacity",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of records (overrides weatherbook.conf)",
)
@click.pass_context
def main(ctx, debug: bool, capacity: int | None):
    """Weatherbook - record weather observations and judge travel suitability."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    if capacity is not None:
        config.capacity = capacity
    ctx.obj = config


def _prompt_fields(form: FormFields, fields: list[tuple[str, str]]) -> None:
    """Prompt for each field, offering the current value as the default."""
    for attr, label in fields:
        current = getattr(form, attr)
        value = click.prompt(label, default=current, show_default=bool(current))
        setattr(form, attr, value)


def run_shell(store: RecordStore) -> None:
    """Interactive form session over a single store."""
    form = FormFields.cleared()
    click.echo(f"Weather Record Book ({status_message(store)}). Type 'help' for commands.")

    with store:
        while True:
            try:
                command = click.prompt(
                    "weatherbook", default="", show_default=False, prompt_suffix="> "
                )
                command = command.strip().lower()

                if not command:
                    continue
                if command in ("quit", "exit"):
                    break

                if command == "add":
                    _prompt_fields(form, ADD_FIELDS)
                    click.echo(add_record(store, form).message)
                elif command == "query":
                    _prompt_fields(form, QUERY_FIELDS)
                    click.echo(query_records(store, form.date, form.time).message)
                elif command == "clear":
                    form = FormFields.cleared()
                    click.echo("Fields cleared.")
                elif command == "status":
                    click.echo(status_message(store))
                elif command == "help":
                    click.echo(SHELL_HELP)
                else:
                    click.echo(f"Unknown command '{command}'. Type 'help' for commands.")
            except click.Abort:
                click.echo()
                break

    click.echo("Goodbye.")


@main.command()
@click.pass_obj
def shell(config):
    """Start an interactive weather record session."""
    run_shell(RecordStore(config.capacity))


@main.command()
@click.option("--temperature", required=True, help="Temperature in °C")
@click.option("--humidity", required=True, help="Relative humidity in %")
@click.option("--phenomenon", required=True, help="e.g. sunny, cloudy, rainy, snowy, stormy")
@click.option("--date", "-d", "target_date", default=None,
              help="Observation date (YYYY-MM-DD), defaults to today")
@click.option("--time", "-t", "time_of_day", default=None,
              help="morning or afternoon, defaults to the current period")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def judge(
    temperature: str,
    humidity: str,
    phenomenon: str,
    target_date: str | None,
    time_of_day: str | None,
    as_json: bool,
):
    """Judge travel suitability for a single observation."""
    record = validate_and_build(
        temperature,
        humidity,
        phenomenon,
        target_date if target_date is not None else current_date(),
        time_of_day if time_of_day is not None else current_time_period().value,
    )
    if isinstance(record, ValidationError):
        click.echo(error_message(record), err=True)
        sys.exit(1)

    if as_json:
        suitability = judge_suitability(record)
        click.echo(
            json.dumps(
                {
                    "temperature": record.temperature,
                    "humidity": record.humidity,
                    "phenomenon": record.phenomenon,
                    "date": record.date,
                    "time": record.time_of_day.value,
                    "suitability": suitability.label,
                    "detail": suitability.detail,
                },
                indent=2,
            )
        )
    else:
        click.echo(render_record(record))


@main.command()
@click.pass_obj
def bot(config):
    """Run the Telegram bot."""
    try:
        from .telegram_bot import run_bot
        click.echo("Starting Weatherbook Telegram bot...")
        click.echo("Press Ctrl+C to stop")
        run_bot(config)
    except ImportError as e:
        click.echo("Error: Missing dependencies. Run 'pip install python-telegram-bot telegramify-markdown'", err=True)
        click.echo(f"Details: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nBot stopped.")


if __name__ == "__main__":
    main()
