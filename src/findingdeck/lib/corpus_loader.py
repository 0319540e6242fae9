"""Acquire the findings corpus with a bounded wait and a local fallback.

Remote sources are fetched with httpx while a timer runs; whichever finishes
first wins. When the timer wins, or the fetch fails, the fetch task is
cancelled, any late response is discarded, and the user is asked for a local
file instead. The fallback runs at most once per ``load`` call.
"""

import asyncio
from collections.abc import Callable
from pathlib import Path

import httpx

from findingdeck.config.defaults import DEFAULT_LOADER_CONFIG
from findingdeck.lib.errors import CorpusLoadError
from findingdeck.lib.logging_config import get_logger

logger = get_logger(__name__)

# Prompt callback: receives the reason, returns a file path
FilePrompt = Callable[[str], str | Path]


def is_remote(source: str) -> bool:
    """Return True for http(s) URLs."""
    return source.lower().startswith(("http://", "https://"))


def read_corpus_file(path: str | Path, source: str | None = None) -> str:
    """Read a corpus file as UTF-8.

    Raises:
        CorpusLoadError: If the file cannot be read or decoded
    """
    file_path = Path(path).expanduser()
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        message = f"cannot read {file_path}: {e}"
        raise CorpusLoadError(source or str(path), message) from e


class CorpusLoader:
    """Load the corpus from a URL or path, falling back to a prompted file.

    Attributes:
        source: URL or local path of the corpus
        timeout: Seconds to wait for a remote fetch before falling back
        fallback_count: Number of times the fallback ran
    """

    HTTP_TIMEOUT = 30.0  # seconds, transport level; the race is shorter

    def __init__(
        self,
        source: str,
        timeout: float = float(DEFAULT_LOADER_CONFIG["load_timeout"]),
        prompt_for_file: FilePrompt | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the loader.

        Args:
            source: URL (http/https) or local file path
            timeout: Bounded wait for the remote fetch, in seconds
            prompt_for_file: Blocking callback asking the user for a file
                path; it runs in a worker thread. None disables the fallback.
            transport: Optional httpx transport (for testing)

        Raises:
            ValueError: If timeout is not positive
        """
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self.source = source
        self.timeout = timeout
        self.prompt_for_file = prompt_for_file
        self.fallback_count = 0
        self._transport = transport

    async def load(self) -> str:
        """Return the corpus text.

        Raises:
            CorpusLoadError: If both the primary source and the fallback fail
        """
        if is_remote(self.source):
            text = await self._race_fetch()
            if text is not None:
                return text
            return await self._fallback(
                f"Could not fetch {self.source} within {self.timeout:g}s"
            )

        path = Path(self.source).expanduser()
        if path.is_file():
            logger.debug(f"Reading corpus from {path}")
            return read_corpus_file(path, self.source)
        logger.info(f"Corpus file {path} not found")
        return await self._fallback(f"Corpus file {path} not found")

    async def _race_fetch(self) -> str | None:
        task = asyncio.create_task(self._fetch())
        done, _ = await asyncio.wait({task}, timeout=self.timeout)

        if task not in done:
            logger.warning(
                f"Fetching {self.source} exceeded {self.timeout:g}s, cancelling"
            )
            task.add_done_callback(_discard_late_result)
            task.cancel()
            return None

        error = task.exception()
        if error is not None:
            logger.warning(f"Fetching {self.source} failed: {error}")
            return None
        return task.result()

    async def _fetch(self) -> str:
        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=self.HTTP_TIMEOUT,
            follow_redirects=True,
        ) as client:
            response = await client.get(self.source)
            response.raise_for_status()
            return response.text

    async def _fallback(self, reason: str) -> str:
        self.fallback_count += 1
        if self.prompt_for_file is None:
            raise CorpusLoadError(self.source, f"{reason}; no fallback available")

        logger.info(f"Falling back to local file: {reason}")
        chosen = await asyncio.to_thread(self.prompt_for_file, reason)
        if not chosen:
            raise CorpusLoadError(self.source, f"{reason}; no file selected")
        return read_corpus_file(chosen, self.source)


def _discard_late_result(task: "asyncio.Task[str]") -> None:
    if task.cancelled():
        return
    if task.exception() is None:
        logger.debug("Discarding corpus response that arrived after the timeout")
