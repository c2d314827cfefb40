import logging
from datetime import datetime, timezone

from .models import OfferRecord

logger = logging.getLogger(__name__)

# Lookup locations per field, most specific first
TITLE_SELECTORS = (
    '.item-card-details__body__primary h3',
    'h3',
    "[class*='title']",
)
IMAGE_SELECTORS = (
    "[data-a-target='card-image'] img::attr(src)",
    'img::attr(src)',
)
END_DATE_SELECTOR = '.availability-date span:nth-child(2)'


def node_text(node):
    """All text below `node`, whitespace-collapsed."""
    return ' '.join(' '.join(node.xpath('.//text()').getall()).split())


def first_text(node, query):
    match = node.css(query)
    if not match:
        return ''
    return node_text(match[0])


def first_attr(node, query):
    return (node.css(query).get() or '').strip()


def extract_title(node):
    for query in TITLE_SELECTORS:
        title = first_text(node, query)
        if title:
            return title
    return ''


def extract_url(node):
    url = (node.attrib.get('href') or '').strip()
    if not url:
        url = first_attr(node, 'a::attr(href)')
    if not url:
        # card parts nested inside the offer's anchor
        url = (node.xpath('ancestor::a[@href][1]/@href').get() or '').strip()
    return url


def extract_image(node):
    for query in IMAGE_SELECTORS:
        src = first_attr(node, query)
        if src:
            return src
    return ''


def extract(node, offer_type, now=None):
    """Build an OfferRecord from a single matched node.

    Returns None when no title can be found; such nodes are never emitted.
    """
    title = extract_title(node)
    if not title:
        logger.debug(f"Skipping {offer_type} node without a title")
        return None

    url = extract_url(node)
    if not url:
        logger.debug(f"No link found for {title!r}")

    now = now or datetime.now(timezone.utc)
    return OfferRecord(
        short_title=title,
        full_title=title,
        url=url,
        short_blurb=title,
        detailed_blurb=title,
        # The listing rarely exposes a reliable start time
        start_time=now.isoformat(),
        end_time=first_text(node, END_DATE_SELECTOR),
        image_url=extract_image(node),
        category=offer_type,
        offer_type=offer_type,
    )
