"""
User-visible status messages
"""

import sys
from typing import Callable

from .models import Message

Notifier = Callable[[Message], None]

_MARKS: dict[str, str] = {
    "success": "✓",
    "error": "✗",
    "info": "ℹ",
}


def format_message(message: Message) -> str:
    return f"{_MARKS[message.kind]} {message.text}"


def show_message(message: Message) -> None:
    """Print a status message with its mark.

    Messages that dismiss themselves go to stdout; persistent ones (errors)
    go to stderr so they survive redirected progress output.
    """
    stream = sys.stdout if message.dismiss_after is not None else sys.stderr
    print(format_message(message), file=stream)
