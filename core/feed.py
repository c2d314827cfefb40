from datetime import datetime, timezone
from urllib.parse import urljoin

import config

from .dates import normalize, parse_end_date
from .models import Category, Feed, FeedEntry, OfferRecord

LANDING_PATH = '/home'


def _synthetic(category, short_title, short_blurb, detailed_blurb, now):
    return OfferRecord(
        short_title=short_title,
        full_title=short_title,
        url=LANDING_PATH,
        short_blurb=short_blurb,
        detailed_blurb=detailed_blurb,
        start_time=now.isoformat(),
        category=category.value,
        offer_type=category.value,
    )


def placeholder(category, now=None):
    """Stand-in record for a category where nothing was extracted."""
    category = Category(category)
    now = now or datetime.now(timezone.utc)
    return _synthetic(
        category,
        f"No {category} offers available",
        f"No {category} offers",
        f"Currently no {category} offers are available on Prime Gaming.",
        now,
    )


def failure_placeholder(category, error, now=None):
    """Stand-in record for a category whose page could not be obtained."""
    category = Category(category)
    now = now or datetime.now(timezone.utc)
    return _synthetic(
        category,
        f"Scraping failed for {category}",
        f"Scraping failed for {category}",
        f"Failed to scrape {category} offers: {error}",
        now,
    )


def to_entry(record, now, base_url):
    return FeedEntry(
        title=record.title,
        link=urljoin(base_url, record.url),
        content=record.detailed_blurb,
        description=record.short_blurb,
        published=normalize(record.start_time, now),
        image_url=record.image_url,
        expires=parse_end_date(record.end_time, now),
    )


def assemble(records, category, now=None,
             base_url=config.BASE_URL, site_url=config.FEED_SITE_URL,
             author_name=config.FEED_AUTHOR_NAME,
             author_email=config.FEED_AUTHOR_EMAIL):
    """Build the feed for `category` from its extracted records.

    Records map 1:1 to entries.  Entries are sorted by publish time
    descending; ties keep their input order.
    """
    category = Category(category)
    now = now or datetime.now(timezone.utc)
    if not records:
        records = [placeholder(category, now)]

    entries = [to_entry(record, now, base_url) for record in records]
    entries.sort(key=lambda entry: entry.published, reverse=True)

    return Feed(
        title=f"Prime Gaming RSS {category.value.upper()}",
        link=site_url,
        description=f"Awesome RSS Feeds about Prime Gaming {category} offers!",
        author_name=author_name,
        author_email=author_email,
        created=now,
        entries=entries,
    )
