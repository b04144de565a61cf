"""Conversion between seconds and clock-style timestamp strings.

Two textual conventions are involved: the subtitle convention written by the
engine (``HH:MM:SS,mmm``, comma decimal) and the display convention used in
rendered transcripts (``HH:MM:SS.mmm``, dot decimal).
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# Unsigned decimal fields only: no signs, exponents, nan or inf
_SRT_TIMESTAMP_RE = re.compile(r"^(\d+):(\d+):(\d+(?:\.\d*)?)$")


def _split_millis(seconds: float) -> tuple[int, int, int, int]:
    total_ms = max(int(round(seconds * 1000)), 0)
    total_s, ms = divmod(total_ms, 1000)
    m, s = divmod(total_s, 60)
    h, m = divmod(m, 60)
    return h, m, s, ms


def format_timestamp(seconds: float) -> str:
    """Format seconds as ``HH:MM:SS.mmm``. Hours are not capped at 24."""
    h, m, s, ms = _split_millis(seconds)
    return f"{h:02d}:{m:02d}:{s:02d}.{ms:03d}"


def format_timestamp_coarse(seconds: float) -> str:
    """Format seconds as ``HH:MM:SS``, truncating the fractional part."""
    m, s = divmod(max(int(seconds), 0), 60)
    h, m = divmod(m, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"


def format_srt_timestamp(seconds: float) -> str:
    """Format seconds in the subtitle convention, ``HH:MM:SS,mmm``."""
    h, m, s, ms = _split_millis(seconds)
    return f"{h:02d}:{m:02d}:{s:02d},{ms:03d}"


def parse_srt_timestamp(value: str) -> float:
    """Parse ``HH:MM:SS,mmm`` into seconds.

    A dot decimal separator is accepted as well. Input that does not have
    exactly three colon-delimited unsigned decimal fields decodes to ``0.0`` instead
    of raising, so one bad line never aborts a transcript. Callers that need
    strict validation must check the field count themselves.
    """
    m = _SRT_TIMESTAMP_RE.match(value.strip().replace(",", "."))
    if not m:
        logger.debug("Malformed timestamp %r, using 0", value)
        return 0.0

    hours, minutes, secs = m.groups()
    return int(hours) * 3600 + int(minutes) * 60 + float(secs)
