"""Message decoration: the pure formatting step and a clock-aware wrapper."""

from datetime import datetime
from typing import Callable

from message_processor.core.config import settings

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

Clock = Callable[[], datetime]


def format_timestamp(moment: datetime) -> str:
    """Render a moment as `YYYY-MM-DD HH:MM:SS` on a 24-hour clock."""
    return moment.strftime(TIMESTAMP_FORMAT)


def decorate(message: str, moment: datetime, marker: str = settings.MESSAGE_MARKER) -> str:
    """Build `<marker> <message> (<timestamp>)`.

    The result depends only on the arguments, so two calls with the same
    message inside the same wall-clock second produce the same string.
    """
    return f"{marker} {message} ({format_timestamp(moment)})"


class MessageProcessor:
    """Decorate inbound messages using the configured marker and a clock."""

    def __init__(self, marker: str = settings.MESSAGE_MARKER, clock: Clock = datetime.now):
        """Receive the marker and a zero-argument clock returning local time."""
        self.marker = marker
        self.clock = clock

    def process(self, message: str) -> str:
        """Decorate `message` with the current time read from the clock."""
        return decorate(message, self.clock(), self.marker)
