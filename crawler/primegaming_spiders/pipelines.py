import logging
from datetime import datetime, timezone

import config
from core.errors import ExtractionEmpty
from core.feed import assemble, failure_placeholder
from core.models import OfferRecord
from etl.export_feed import write_rss


class FeedPipeline:
    """Collects one category's offers and hands the finished feed to the RSS sink.

    Scrapy creates a pipeline per crawler, and the orchestrator runs one
    crawler per category, so no state is shared between categories.
    """

    def __init__(self, output_dir=config.FEED_OUTPUT_DIR, base_url=config.BASE_URL,
                 site_url=config.FEED_SITE_URL, author_name=config.FEED_AUTHOR_NAME,
                 author_email=config.FEED_AUTHOR_EMAIL, sink=write_rss):
        self.output_dir = output_dir
        self.base_url = base_url
        self.site_url = site_url
        self.author_name = author_name
        self.author_email = author_email
        self.sink = sink
        self.records = []
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_crawler(cls, crawler):
        settings = crawler.settings
        return cls(
            output_dir=settings.get('RSS_OUTPUT_DIR', config.FEED_OUTPUT_DIR),
            base_url=settings.get('RSS_BASE_URL', config.BASE_URL),
            site_url=settings.get('RSS_SITE_URL', config.FEED_SITE_URL),
            author_name=settings.get('RSS_AUTHOR_NAME', config.FEED_AUTHOR_NAME),
            author_email=settings.get('RSS_AUTHOR_EMAIL', config.FEED_AUTHOR_EMAIL),
        )

    def open_spider(self, spider):
        self.records = []

    def process_item(self, item, spider):
        if isinstance(item, OfferRecord) and item.title:
            self.records.append(item)
        else:
            self.logger.warning(f"PIPELINE: Dropping untitled item from {spider.name}: {item!r}")
        return item

    def close_spider(self, spider):
        category = spider.category
        now = datetime.now(timezone.utc)
        records = self.records

        if spider.acquisition_error is not None:
            spider.error = spider.acquisition_error
            records = [failure_placeholder(category, spider.acquisition_error.reason, now)]
        elif not records:
            spider.error = ExtractionEmpty(category)
            self.logger.warning(f"PIPELINE: No {category} offers found, creating placeholder feed")

        self.logger.info(f"PIPELINE: Assembling {category} feed from {len(records)} offers.")
        feed = assemble(
            records, category, now=now,
            base_url=self.base_url, site_url=self.site_url,
            author_name=self.author_name, author_email=self.author_email,
        )
        spider.feed = feed

        try:
            self.sink(feed, category, self.output_dir)
            self.logger.info(f"PIPELINE: {category} feed created successfully.")
        except Exception as e:
            self.logger.error(f"PIPELINE: Failed to write {category} feed. Error: {e}")
            if spider.error is None:
                spider.error = e
