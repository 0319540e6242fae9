"""CLI command for exporting the single-page findings viewer.

Implements 'findingdeck export': every tab is populated up front and written
into one self-contained HTML file.
"""

import sys
from pathlib import Path

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
from findingdeck.viewer.controller import PresentationController
from findingdeck.viewer.html_surface import HtmlSurface

logger = get_logger(__name__)


@click.command()
@corpus_options
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default="hallazgos.html",
    help="HTML file to write (default: hallazgos.html)",
)
@click.option(
    "--tab",
    "-t",
    type=int,
    default=None,
    help="Tab visible when the page opens (default: 1)",
)
def export(
    source: str | None,
    config_path: str | None,
    timeout: float | None,
    fallback_file: str | None,
    verbose: bool,
    quiet: bool,
    output: str,
    tab: int | None,
) -> None:
    """Write a single-page HTML viewer for a findings corpus.

    SOURCE is a URL or path of the corpus.

    Example:

        findingdeck export hallazgos.md -o informe.html
    """
    setup_logging(verbose=verbose, quiet=quiet)

    try:
        config = load_viewer_config(config_path, source, timeout)
        splitter, builder = build_pipeline(config)
        corpus = obtain_corpus(config, fallback_file)

        surface = HtmlSurface(config.tab_ordinals)
        controller = PresentationController(
            surface, config.tab_ordinals, builder=builder, splitter=splitter
        )
        controller.load(corpus)
        controller.populate_all()
        if tab is not None:
            controller.select(tab)

        Path(output).write_text(
            surface.render_page(config.page_title), encoding="utf-8"
        )
        logger.info(f"Wrote {len(controller.records)} record(s) to {output}")
        click.echo(f"Viewer saved to {output} ({len(controller.records)} hallazgos)")

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
