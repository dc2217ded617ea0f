"""Timestamp helpers.

Chapter lists on the HTML pages only carry relative labels ("3 days ago");
the chapter API carries absolute timestamps. Both are normalised to the same
ISO-8601 UTC form: millisecond precision with a ``Z`` suffix.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

# Checked in order; the first unit found anywhere in the label wins.
_AGO_UNITS = ("hour", "day", "month", "year")
_INTEGER_RE = re.compile(r"\d+", re.ASCII)


def to_iso(moment: datetime) -> str:
    """Format a datetime as ISO-8601 UTC. Naive values are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> str:
    """Convert an absolute timestamp string to the normalised ISO-8601 form.

    Raises ``ValueError`` when the value is not a recognisable ISO date.
    """
    return to_iso(isoparse(value))


def parse_ago(label: str | None, now: datetime | None = None) -> str | None:
    """Resolve an ago-label such as ``"5 hours ago"`` against ``now``.

    Returns ``None`` when the label is missing, does not contain ``"ago"``, or
    names none of the supported units. Unit matching is by substring, so
    ``"days"`` and ``"yesterday"`` both match ``"day"``. A label with no digits
    resolves to ``now`` itself.
    """
    if not label or "ago" not in label:
        return None

    unit = next((candidate for candidate in _AGO_UNITS if candidate in label), None)
    if unit is None:
        return None

    match = _INTEGER_RE.search(label)
    amount = int(match.group()) if match else 0

    reference = now if now is not None else datetime.now(UTC)
    return to_iso(reference - relativedelta(**{f"{unit}s": amount}))
