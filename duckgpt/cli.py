"""DuckGPT CLI - Command Line Interface."""
from __future__ import annotations

import sys

import click
from loguru import logger

from duckgpt import __version__
from duckgpt.agent import run_agent
from duckgpt.config import DEFAULT_MESSAGE_LIMIT, load_settings
from duckgpt.errors import DuckGPTError

INTERRUPTED_EXIT_CODE = 130


def configure_logging(debug: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else "WARNING")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="duckgpt")
@click.option("--debug", is_flag=True, help="Print interactions between DuckGPT and the language model.")
@click.option(
    "--message-limit",
    type=click.IntRange(min=1),
    default=DEFAULT_MESSAGE_LIMIT,
    show_default=True,
    help="The maximum number of messages to exchange with the language model.",
)
def cli(debug: bool, message_limit: int):
    """
    Ask questions, let GPT do the SQL.

    DuckGPT lets you ask questions about the JSON and CSV files in the
    current directory. It uses OpenAI GPT to compose SQL queries and DuckDB
    to execute them. Please keep in mind that this will incur costs on your
    OpenAI account.
    """
    configure_logging(debug)
    try:
        settings = load_settings(debug=debug, message_limit=message_limit)
        configure_logging(settings.debug)
        run_agent(settings)
    except DuckGPTError as e:
        click.secho(str(e), fg="red", err=True)
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        click.echo("\nInterrupted.", err=True)
        sys.exit(INTERRUPTED_EXIT_CODE)


def main():
    cli()


if __name__ == "__main__":
    main()
