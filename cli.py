import json
import logging
from typing import Literal, NoReturn

import click

from arxivstamp import config
from arxivstamp.application.ports.stamp_source import AbstractStampSource, StampSourceError
from arxivstamp.application.services import (
    check_stamps,
    parse_category,
    parse_identifier,
    parse_stamp,
    resolve_category,
    summarize,
)
from arxivstamp.domain.category import InvalidCategoryError
from arxivstamp.domain.identifier import ArxivIdError
from arxivstamp.domain.stamp import ArxivStampError
from arxivstamp.infrastructure.stamp_source import JSONStampSource, TextStampSource


def _fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(1)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=config.LOG_LEVEL,
    show_default=True,
    help="The logging level.",
)
def cli(log_level: str) -> None:
    """The arxivstamp CLI."""
    logging.basicConfig(level=log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument("value")
def parse_id(value: str) -> None:
    """Parse an arXiv identifier (e.g. 'arXiv:2001.00001v2')."""
    try:
        arxiv_id = parse_identifier(value)
    except ArxivIdError as e:
        _fail(str(e))

    click.echo(f"id: {arxiv_id}")
    click.echo(f"year: {arxiv_id.year}")
    click.echo(f"month: {arxiv_id.month}")
    click.echo(f"number: {arxiv_id.number}")
    click.echo(f"version: {'latest' if arxiv_id.is_latest() else arxiv_id.version}")


@cli.command("parse-category")
@click.argument("value")
@click.option("--legacy", is_flag=True, help="Resolve legacy archive names (e.g. 'alg-geom') first.")
def parse_category_command(value: str, legacy: bool) -> None:
    """Parse an arXiv category (e.g. 'cs.LG')."""
    try:
        category = resolve_category(value) if legacy else parse_category(value)
    except InvalidCategoryError as e:
        _fail(str(e))

    click.echo(f"category: {category}")
    click.echo(f"group: {category.group}")
    click.echo(f"archive: {category.archive}")
    click.echo(f"subject: {category.subject}")


@cli.command("parse-stamp")
@click.argument("value")
def parse_stamp_command(value: str) -> None:
    """Parse an arXiv stamp (e.g. 'arXiv:2001.00001 [cs.LG] 1 Jan 2000')."""
    try:
        stamp = parse_stamp(value)
    except ArxivStampError as e:
        _fail(str(e))

    click.echo(f"id: {stamp.arxiv_id}")
    click.echo(f"category: {stamp.category if stamp.category is not None else '-'}")
    click.echo(f"submitted: {stamp.submitted.isoformat()}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, readable=True))
@click.option(
    "--format",
    "source_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default=config.DEFAULT_SOURCE_FORMAT,
    show_default=True,
    help="The format of the input file: one stamp per line, or JSON lines.",
)
@click.option(
    "--field",
    default=config.JSON_STAMP_FIELD,
    show_default=True,
    help="The key holding the stamp in each JSON entry. Only used if --format is 'json'.",
)
@click.option(
    "--output",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="The output format. Defaults to 'text'.",
)
def check(
    input_file: str,
    source_format: Literal["text", "json"],
    field: str,
    output: Literal["text", "json"],
) -> None:
    """Check every stamp in a file."""
    source: AbstractStampSource
    if source_format.lower() == "json":
        source = JSONStampSource(input_file, field=field)
    else:
        source = TextStampSource(input_file)

    try:
        results = check_stamps(source)
    except StampSourceError as e:
        _fail(str(e))

    summary = summarize(results)
    if output.lower() == "json":
        for result in results:
            click.echo(json.dumps(result.to_dict()))
    else:
        for result in results:
            status = "ok" if result.is_valid else f"invalid: {result.error}"
            click.echo(f"{result.line_number}: {status}")
        click.echo(f"Checked {summary.total} stamps: {summary.valid} valid, {summary.invalid} invalid.")

    if summary.invalid:
        raise SystemExit(1)


if __name__ == "__main__":
    cli()
