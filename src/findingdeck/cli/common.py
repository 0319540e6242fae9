"""Helpers shared by the findingdeck commands.

Every command takes the same corpus/config options, loads the configuration
with CLI overrides on top, and obtains the corpus through ``CorpusLoader``
with an interactive file prompt as fallback.
"""

import asyncio
from collections.abc import Callable
from typing import Any, TypeVar

import click

from findingdeck.config.defaults import section_aliases
from findingdeck.config.loader import ConfigLoader
from findingdeck.lib.corpus_loader import CorpusLoader
from findingdeck.lib.fragment_formatter import FragmentFormatter
from findingdeck.lib.logging_config import get_logger
from findingdeck.lib.record_builder import RecordBuilder
from findingdeck.lib.record_splitter import RecordSplitter
from findingdeck.lib.text_locator import TextLocator
from findingdeck.models.config import ViewerConfig

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# Exit codes
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_LOAD_ERROR = 3


def corpus_options(func: F) -> F:
    """Attach the SOURCE argument and the options every command shares."""
    decorators = [
        click.argument("source", required=False),
        click.option(
            "--config",
            "config_path",
            type=click.Path(exists=True, dir_okay=False),
            default=None,
            help="Path to findingdeck.yaml (default: ./findingdeck.yaml if present)",
        ),
        click.option(
            "--timeout",
            type=float,
            default=None,
            help="Seconds to wait for a remote corpus before asking for a file",
        ),
        click.option(
            "--fallback-file",
            type=click.Path(exists=True, dir_okay=False),
            default=None,
            help="Local corpus used instead of prompting when the source fails",
        ),
        click.option("--verbose", "-v", is_flag=True, help="Enable debug logging"),
        click.option("--quiet", "-q", is_flag=True, help="Only log warnings"),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def load_viewer_config(
    config_path: str | None, source: str | None, timeout: float | None
) -> ViewerConfig:
    """Load configuration with CLI values taking precedence."""
    loader = ConfigLoader()
    return loader.load(
        config_path,
        overrides={"corpus_source": source, "load_timeout": timeout},
    )


def prompt_for_corpus_file(reason: str) -> str:
    """Ask the user for a local corpus file.

    Returns:
        The chosen path, or an empty string when the prompt is aborted
    """
    click.echo(f"{reason}.", err=True)
    try:
        path: str = click.prompt(
            "Ruta del archivo de hallazgos",
            type=click.Path(exists=True, dir_okay=False),
            err=True,
        )
    except click.Abort:
        return ""
    return path


def obtain_corpus(config: ViewerConfig, fallback_file: str | None) -> str:
    """Run the corpus loader to completion.

    Raises:
        CorpusLoadError: If neither the source nor the fallback yields text
    """
    if fallback_file:

        def prompt(reason: str) -> str:
            logger.info(f"{reason}; using {fallback_file}")
            return fallback_file

    else:
        prompt = prompt_for_corpus_file

    loader = CorpusLoader(
        config.corpus_source, timeout=config.load_timeout, prompt_for_file=prompt
    )
    return asyncio.run(loader.load())


def build_pipeline(config: ViewerConfig) -> tuple[RecordSplitter, RecordBuilder]:
    """Create the splitter and builder described by the configuration."""
    splitter = RecordSplitter(config.record_heading_pattern)
    builder = RecordBuilder(
        locator=TextLocator(section_aliases(config.section_aliases)),
        formatter=FragmentFormatter(list_majority=config.list_majority),
    )
    return splitter, builder
