"""LineReader — the single line-reading interface of a session.

Wraps a ``rich`` console for output and either standard input (through
``Console.input`` so readline editing keeps working) or an explicit text
stream, e.g. a file of scripted answers.

The reader is opened once per session and must be closed on every exit
path; use it as a context manager::

    with LineReader(console) as reader:
        WorkflowRunner(workflow, engine, reader).run()

Standard input is never closed; a stream opened by :meth:`LineReader.open`
is owned by the reader and closed with it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.markup import escape

from workflow_tui.errors import SessionAborted

logger = logging.getLogger(__name__)


class LineReader:
    """Prompt-and-read helper bound to one console.

    Args:
        console: where prompts are written (defaults to a fresh ``Console``)
        stream: text stream to read from; ``None`` reads standard input
        owns_stream: close ``stream`` when the reader closes
        echo: print each line read from ``stream`` after the prompt, so a
            scripted transcript looks like an interactive one
    """

    def __init__(
        self,
        console: Console | None = None,
        stream: TextIO | None = None,
        *,
        owns_stream: bool = False,
        echo: bool = False,
    ) -> None:
        self.console = console or Console()
        self._stream = stream
        self._owns_stream = owns_stream
        self._echo = echo
        self._closed = False

    @classmethod
    def open(cls, path: str | Path, console: Console | None = None) -> LineReader:
        """Read answers from a file, one per line, echoing them to the console."""
        stream = Path(path).open("r", encoding="utf-8")
        logger.debug("Reading answers from %s", path)
        return cls(console, stream, owns_stream=True, echo=True)

    @property
    def closed(self) -> bool:
        return self._closed

    def ask(self, prompt: str) -> str:
        """Show ``prompt`` and return the next line, stripped.

        Raises:
            SessionAborted: if the reader is closed or input has ended.
        """
        if self._closed:
            raise SessionAborted("Input closed")

        if self._stream is None:
            try:
                line = self.console.input(escape(prompt))
            except EOFError:
                raise SessionAborted("Input ended before the workflow completed") from None
            return line.strip()

        self.console.print(prompt, end="", markup=False, highlight=False)
        line = self._stream.readline()
        if line == "":
            # readline() returns "" only at end of stream
            self.console.print()
            raise SessionAborted("Input ended before the workflow completed")
        answer = line.strip()
        if self._echo:
            self.console.print(answer, markup=False, highlight=False)
        else:
            self.console.print()
        return answer

    def close(self) -> None:
        """Release the input; idempotent."""
        if self._closed:
            return
        self._closed = True
        if self._owns_stream and self._stream is not None:
            self._stream.close()
        logger.debug("LineReader closed")

    def __enter__(self) -> LineReader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
