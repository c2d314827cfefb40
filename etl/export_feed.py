import logging
from pathlib import Path
from email.utils import format_datetime
from datetime import timezone
import xml.etree.ElementTree as ET

from core.models import Feed

CONTENT_NS = "http://purl.org/rss/1.0/modules/content/"
ET.register_namespace("content", CONTENT_NS)

logger = logging.getLogger(__name__)


def _rfc822(dt):
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return format_datetime(dt.astimezone(timezone.utc))


def _add(parent, tag, text):
    el = ET.SubElement(parent, tag)
    el.text = text
    return el


def to_rss(feed: Feed) -> str:
    """Serialize a feed as an RSS 2.0 document."""
    rss = ET.Element("rss", {"version": "2.0"})
    channel = ET.SubElement(rss, "channel")
    _add(channel, "title", feed.title)
    _add(channel, "link", feed.link)
    _add(channel, "description", feed.description)
    if feed.author_email:
        editor = f"{feed.author_email} ({feed.author_name})" if feed.author_name else feed.author_email
        _add(channel, "managingEditor", editor)
        _add(channel, "webMaster", editor)
    _add(channel, "language", "en")
    _add(channel, "lastBuildDate", _rfc822(feed.created))

    for entry in feed.entries:
        item = ET.SubElement(channel, "item")
        _add(item, "title", entry.title)
        _add(item, "link", entry.link)
        _add(item, "guid", entry.link)
        description = entry.description
        if entry.expires is not None:
            description = f"{description} (available until {entry.expires:%Y-%m-%d})"
        _add(item, "description", description)
        if entry.content:
            _add(item, f"{{{CONTENT_NS}}}encoded", entry.content)
        if entry.image_url:
            ET.SubElement(item, "enclosure", {"url": entry.image_url, "type": "image/jpeg", "length": "0"})
        _add(item, "pubDate", _rfc822(entry.published))

    return ET.tostring(rss, encoding="utf-8", xml_declaration=True).decode("utf-8")


def write_rss(feed: Feed, category, output_dir) -> Path:
    """Write `<output_dir>/<category>.rss`, replacing any previous file."""
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    path = out / f"{category}.rss"
    path.write_text(to_rss(feed), encoding="utf-8")
    logger.info(f"EXPORT: Wrote {len(feed.entries)} entries to {path}")
    return path
