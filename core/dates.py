import logging
import re
from datetime import datetime, timedelta, timezone

logger = logging.getLogger(__name__)

# Tried in order; the first layout that parses wins.
LAYOUTS = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%d %H:%M:%S%z",
)

# Month names are matched here rather than with %b so the locale does not matter
MONTHS = {
    name: number for number, name in enumerate(
        ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"), start=1)
}

_OFFSET_RE = re.compile(r"[+-]\d{2}:?\d{2}$")
_END_DATE_RE = re.compile(r"^ends\s+", re.I)
_MONTH_DAY_YEAR_RE = re.compile(r"^([A-Za-z]{3,})\.?\s+(\d{1,2}),?\s+(\d{4})$")


def has_zone(raw):
    """True when the string ends in a UTC marker or an explicit offset."""
    return raw.endswith("Z") or bool(_OFFSET_RE.search(raw))


def normalize(raw, fallback):
    """Parse a loosely formatted timestamp, returning `fallback` on failure."""
    raw = (raw or "").strip()
    if not raw:
        return fallback

    if not has_zone(raw):
        raw += "Z"

    for layout in LAYOUTS:
        try:
            return datetime.strptime(raw, layout)
        except (ValueError, OverflowError):
            continue

    logger.debug(f"Unparseable timestamp {raw!r}, using {fallback.isoformat()}")
    return fallback


def parse_month_day_year(text):
    """'Jan 5, 2026' / 'January 5 2026' as midnight UTC, or None."""
    match = _MONTH_DAY_YEAR_RE.match(text)
    if not match:
        return None
    month = MONTHS.get(match.group(1)[:3].lower())
    if month is None:
        return None
    try:
        return datetime(int(match.group(3)), month, int(match.group(2)), tzinfo=timezone.utc)
    except ValueError:
        return None


def parse_end_date(raw, now=None):
    """Parse availability text such as "Ends tomorrow" or "Ends Jan 5, 2026".

    Relative phrases are anchored to midnight UTC of `now`.  Returns None for
    anything that is not recognised.
    """
    text = _END_DATE_RE.sub("", (raw or "").strip())
    if not text:
        return None

    now = now or datetime.now(timezone.utc)
    today = now.astimezone(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)
    lowered = text.lower()
    if lowered == "today":
        return today
    if lowered == "tomorrow":
        return today + timedelta(days=1)

    return parse_month_day_year(text)
