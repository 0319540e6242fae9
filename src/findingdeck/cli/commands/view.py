"""CLI command for browsing findings in the terminal.

Implements 'findingdeck view': one numbered tab per declared record, built
the first time the tab is opened.
"""

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
from findingdeck.lib.errors import (
    ConfigError,
    CorpusLoadError,
    FileNotFoundError,
    TabNotFoundError,
)
from findingdeck.lib.logging_config import get_logger, setup_logging
from findingdeck.viewer.controller import PresentationController
from findingdeck.viewer.terminal_surface import TerminalSurface

logger = get_logger(__name__)

QUIT_WORDS = frozenset({"q", "quit", "exit", "salir"})


@click.command()
@corpus_options
@click.option(
    "--tab",
    "-t",
    type=int,
    default=None,
    help="Tab to open first (default: 1)",
)
def view(
    source: str | None,
    config_path: str | None,
    timeout: float | None,
    fallback_file: str | None,
    verbose: bool,
    quiet: bool,
    tab: int | None,
) -> None:
    """Browse a findings corpus tab by tab.

    SOURCE is a URL or path of the corpus (default: corpus_source from the
    configuration, "hallazgos.md").

    Example:

        findingdeck view hallazgos.md

        findingdeck view https://example.org/hallazgos.md --timeout 2

    Type a tab number to switch, or 'q' to quit.
    """
    setup_logging(verbose=verbose, quiet=quiet)

    try:
        config = load_viewer_config(config_path, source, timeout)
        splitter, builder = build_pipeline(config)
        surface = TerminalSurface(config.tab_ordinals)
        controller = PresentationController(
            surface, config.tab_ordinals, builder=builder, splitter=splitter
        )
        surface.show()

        corpus = obtain_corpus(config, fallback_file)
        controller.load(corpus)
        if tab is not None:
            controller.select(tab)
        surface.show()

        _interactive_loop(controller, surface)

    except (ConfigError, FileNotFoundError) as e:
        logger.error(f"Configuration error: {e}", exc_info=True)
        click.echo(f"Configuration Error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except CorpusLoadError as e:
        logger.error(f"Corpus load error: {e}", exc_info=True)
        click.echo(f"Load Error: {e}", err=True)
        sys.exit(EXIT_LOAD_ERROR)
    except TabNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(f"Error: {str(e)}", err=True)
        sys.exit(EXIT_ERROR)


def _interactive_loop(
    controller: PresentationController, surface: TerminalSurface
) -> None:
    """Read tab numbers until the user quits or input ends."""
    while True:
        try:
            choice = click.prompt(
                "Hallazgo (número, q para salir)", default="q", show_default=False
            )
        except click.Abort:
            break

        choice = choice.strip().lower()
        if choice in QUIT_WORDS:
            break
        try:
            controller.select(int(choice))
        except ValueError:
            click.echo(f"'{choice}' no es un número de hallazgo", err=True)
            continue
        except TabNotFoundError as e:
            click.echo(str(e), err=True)
            continue
        surface.show()
