"""Parsing and formatting of test durations."""

import logging

log = logging.getLogger(__name__)


def parse_duration(text: str) -> float:
    """Parse a duration such as ``"0.5s"`` into seconds.

    Empty or unparsable values yield 0.0.
    """
    value = text.removesuffix("s")
    if not value:
        return 0.0

    # float() is laxer than the tool's number format.
    if value != value.strip() or "_" in value:
        log.debug("Unparsable duration %r, using 0", text)
        return 0.0

    try:
        return float(value)
    except ValueError:
        log.debug("Unparsable duration %r, using 0", text)
        return 0.0


def format_seconds(seconds: float) -> str:
    """Format seconds for a JUnit ``time`` attribute."""
    return repr(float(seconds))
