"""Human-friendly formatting for console output.

Thin facade over the `humanize` library.
"""

from datetime import timedelta

import humanize


def human_duration(seconds: float) -> str:
    """Format elapsed seconds, e.g. '3 seconds', 'a minute'."""
    if seconds < 1:
        return "less than a second"
    return humanize.naturaldelta(timedelta(seconds=seconds))
