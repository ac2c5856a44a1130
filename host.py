"""Host environment seam for the spell correction command.

The command never touches the OS selection, clipboard or notification area
directly; it talks to a HostEnvironment. ConsoleHost is the terminal
implementation used by the CLI entry point.
"""
import sys
from typing import Any, Mapping, Optional, Protocol, TextIO

from loguru import logger

from errors import SelectionUnavailableError


class HostEnvironment(Protocol):
    def get_selected_text(self) -> str:
        ...

    def set_clipboard_and_paste(self, text: str) -> None:
        ...

    def show_notice(self, message: str) -> None:
        ...

    def get_preferences(self) -> Mapping[str, Any]:
        ...


class ConsoleHost:
    """Terminal host: selection from an argument or piped stdin, result to stdout,
    notices to stderr.
    """

    def __init__(self, preferences: Optional[Mapping[str, Any]] = None, text: Optional[str] = None,
                 stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
                 stderr: Optional[TextIO] = None):
        self._preferences = preferences if preferences is not None else {}
        self._text = text
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._stderr = stderr if stderr is not None else sys.stderr

    def get_selected_text(self) -> str:
        text = self._text
        if text is None and not self._stdin.isatty():
            text = self._stdin.read()
        if text is None or not text.strip():
            raise SelectionUnavailableError()
        return text

    def set_clipboard_and_paste(self, text: str) -> None:
        self._stdout.write(text + "\n")
        self._stdout.flush()

    def show_notice(self, message: str) -> None:
        try:
            self._stderr.write(message + "\n")
            self._stderr.flush()
        except OSError as e:
            # notices are fire-and-forget
            logger.debug("Could not write notice: {}", e)

    def get_preferences(self) -> Mapping[str, Any]:
        return self._preferences
