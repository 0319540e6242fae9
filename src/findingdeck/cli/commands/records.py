"""CLI command for listing the records parsed from a corpus."""

import json
import sys

import click

from findingdeck.cli.common import (
    EXIT_CONFIG_ERROR,
    EXIT_ERROR,
    EXIT_LOAD_ERROR,
    build_pipeline,
    corpus_options,
    load_viewer_config,
    obtain_corpus,
)
from findingdeck.lib.errors import ConfigError, CorpusLoadError, FileNotFoundError
from findingdeck.lib.logging_config import get_logger, setup_logging
from findingdeck.lib.record_builder import build_records
from findingdeck.models.record import SECTION_ORDER

logger = get_logger(__name__)


@click.command()
@corpus_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text)",
)
def records(
    source: str | None,
    config_path: str | None,
    timeout: float | None,
    fallback_file: str | None,
    verbose: bool,
    quiet: bool,
    output_format: str,
) -> None:
    """List the records and sections found in a corpus.

    Example:

        findingdeck records hallazgos.md --format json
    """
    setup_logging(verbose=verbose, quiet=quiet)

    try:
        config = load_viewer_config(config_path, source, timeout)
        splitter, builder = build_pipeline(config)
        corpus = obtain_corpus(config, fallback_file)
        built = build_records(corpus, splitter=splitter, builder=builder)

        if output_format == "json":
            payload = [record.model_dump(mode="json") for record in built.values()]
            click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
            return

        if not built:
            click.echo("No records found")
            return
        for record in built.values():
            present = [
                label.value for label in SECTION_ORDER if label in record.sections
            ]
            click.echo(f"{record.ordinal}. {record.title}")
            click.echo(f"   sections: {', '.join(present) or '(none)'}")

    except (ConfigError, FileNotFoundError) as e:
        logger.error(f"Configuration error: {e}", exc_info=True)
        click.echo(f"Configuration Error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except CorpusLoadError as e:
        logger.error(f"Corpus load error: {e}", exc_info=True)
        click.echo(f"Load Error: {e}", err=True)
        sys.exit(EXIT_LOAD_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(f"Error: {str(e)}", err=True)
        sys.exit(EXIT_ERROR)
