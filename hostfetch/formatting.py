from __future__ import annotations

"""
Pure formatting helpers for hostfetch facts.

- format_uptime: seconds -> "2 days, 1 hour, 5 mins" (zero units omitted).
- strip_trademarks: drop "(R)", "(TM)", "(C)" markers from CPU model names.
- format_used_bytes / format_total_bytes: binary size rendering (MiB below 1 GiB).

Nothing here touches the host; every function is safe to call with any input
the providers can hand it.
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import List

_MIB = 1024 ** 2
_GIB = 1024 ** 3

_SECONDS_PER_DAY = 24 * 60 * 60
_SECONDS_PER_HOUR = 60 * 60
_SECONDS_PER_MINUTE = 60

_TRADEMARK_RE = re.compile(r" *\((?:R|TM|C)\)")


def _plural(value: int, unit: str) -> str:
    return f"{value} {unit}" if value == 1 else f"{value} {unit}s"


def split_uptime(seconds: int) -> tuple[int, int, int]:
    """Decompose seconds into whole (days, hours, minutes), no rounding."""
    seconds = int(seconds)
    days = seconds // _SECONDS_PER_DAY
    hours = (seconds % _SECONDS_PER_DAY) // _SECONDS_PER_HOUR
    minutes = (seconds % _SECONDS_PER_HOUR) // _SECONDS_PER_MINUTE
    return days, hours, minutes


def format_uptime(seconds: int) -> str:
    """
    Render uptime as a comma-joined list of the non-zero units.

    Examples:
        90061 -> "1 day, 1 hour, 1 min"
        3600  -> "1 hour"
        7320  -> "2 hours, 2 mins"
    """
    days, hours, minutes = split_uptime(seconds)
    parts: List[str] = []
    if days > 0:
        parts.append(_plural(days, "day"))
    if hours > 0:
        parts.append(_plural(hours, "hour"))
    if minutes > 0:
        parts.append(_plural(minutes, "min"))
    return ", ".join(parts)


def strip_trademarks(model: str) -> str:
    """'Intel(R) Core(TM) i7-9700K' -> 'Intel Core i7-9700K'"""
    return _TRADEMARK_RE.sub("", model)


def format_ghz(speed_mhz: float) -> str:
    return f"{speed_mhz / 1000:.2f}"


def _half_up(value: float) -> str:
    return str(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_used_bytes(num_bytes: int) -> str:
    """
    Format an in-use byte count: GiB when at least 1 GiB, MiB otherwise.
    One decimal, rounded half-up.
    """
    gib = num_bytes / _GIB
    if gib >= 1:
        return f"{_half_up(gib)} GiB"
    return f"{_half_up(num_bytes / _MIB)} MiB"


def format_total_bytes(num_bytes: int) -> str:
    """
    Format a capacity byte count. GiB values are rounded up to the next 0.1 so
    the shown capacity is never below the real one (7.96 GiB -> "8.0 GiB").
    MiB values are rounded half-up like used memory.
    """
    gib = num_bytes / _GIB
    if gib >= 1:
        return f"{math.ceil(gib * 10) / 10:.1f} GiB"
    return f"{_half_up(num_bytes / _MIB)} MiB"


def format_memory(total: int, available: int) -> str:
    """'<used> / <total>', each side choosing its own unit."""
    return f"{format_used_bytes(total - available)} / {format_total_bytes(total)}"
