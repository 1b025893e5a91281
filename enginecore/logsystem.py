"""Engine logging with positional ``{n}`` placeholders."""

from __future__ import annotations

import logging
import re
from typing import Any

_LOGGER = logging.getLogger("enginecore")

# Either an escaped brace ("\{") or a placeholder running up to the next "}"
# (or to the end of the text when no closing brace follows).
_PLACEHOLDER = re.compile(r"\\\{|\{([^}]*)(?:\}|$)")


def format_message(text: str, *args: Any) -> str:
    """Replace ``{n}`` in ``text`` with ``str(args[n])``.

    A backslash directly before an opening brace escapes it, so ``\\{`` is
    written as a literal ``{``. Raises ValueError for a placeholder that is
    not a number and IndexError for one that names a missing argument.
    """
    values = [str(arg) for arg in args]

    def substitute(match: re.Match[str]) -> str:
        field = match.group(1)
        if field is None:
            return "{"
        try:
            index = int(field)
        except ValueError:
            raise ValueError(f"invalid placeholder {{{field}}} in {text!r}") from None
        if not 0 <= index < len(values):
            raise IndexError(
                f"placeholder {{{index}}} has no argument ({len(values)} given)"
            )
        return values[index]

    return _PLACEHOLDER.sub(substitute, text)


def _log(level: int, text: str, args: tuple[Any, ...]) -> str:
    message = format_message(text, *args)
    _LOGGER.log(level, message)
    return message


def info(text: str, *args: Any) -> str:
    """Log an informational message and return the formatted text."""
    return _log(logging.INFO, text, args)


def warn(text: str, *args: Any) -> str:
    """Log a warning and return the formatted text."""
    return _log(logging.WARNING, text, args)


def error(text: str, *args: Any) -> str:
    """Log an error and return the formatted text."""
    return _log(logging.ERROR, text, args)


def critical(text: str, *args: Any) -> str:
    """Log a critical error and return the formatted text."""
    return _log(logging.CRITICAL, text, args)