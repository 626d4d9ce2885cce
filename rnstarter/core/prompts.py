"""Line-based question/answer session for interactive prompts.

A session wraps one input stream and one console. Open one per cluster of
related questions and close it when the cluster is done:

    with InteractiveSession() as session:
        if session.ask_yes_no("Configure deep linking? (y/N): "):
            ...

Tests pass an io.StringIO with scripted answers instead of stdin.
"""
import sys
from typing import Optional, TextIO

from rich.console import Console

from rnstarter.core.errors import PromptAborted
from rnstarter.core.logger import get_logger

logger = get_logger(__name__)

YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")


class InteractiveSession:
    """Asks one question at a time over a single input stream."""

    def __init__(self, input_stream: Optional[TextIO] = None, console: Optional[Console] = None):
        self._input = input_stream
        self.console = console or Console()
        self.closed = False

    def __enter__(self) -> "InteractiveSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self.closed = True

    def _read_line(self, question: str) -> str:
        if self.closed:
            raise RuntimeError("InteractiveSession is closed")

        self.console.print(question, end="", markup=False, highlight=False)
        stream = self._input if self._input is not None else sys.stdin
        line = stream.readline()
        if line == "":
            # readline() only returns "" at end of input; an empty answer is "\n"
            self.console.print()
            raise PromptAborted()
        return line.strip()

    def ask_free_text(self, question: str) -> str:
        """Return the trimmed answer verbatim. Callers validate."""
        return self._read_line(question)

    def ask_yes_no(self, question: str, allow_empty_as_no: bool = True) -> bool:
        """Ask until the answer is y/yes/n/no (any case).

        Args:
            question: Prompt text, e.g. "Continue? (y/N): "
            allow_empty_as_no: Treat an empty answer as "no" instead of re-asking

        Returns:
            True for yes, False for no
        """
        while True:
            response = self._read_line(question)

            if not response and allow_empty_as_no:
                return False

            answer = response.lower()
            if answer in YES_ANSWERS:
                return True
            if answer in NO_ANSWERS:
                return False

            logger.debug(f"Rejected yes/no answer: {response!r}")
            self.console.print("[red]❌ Invalid response. Please answer with: y/yes/n/no[/red]")
            if allow_empty_as_no:
                self.console.print("[dim]Press Enter for default (N)[/dim]")
