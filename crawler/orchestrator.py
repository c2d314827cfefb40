import logging
import sys

from scrapy import signals
from scrapy.crawler import CrawlerProcess
from scrapy.settings import Settings

import config
from core.models import Category, CategoryResult

from .primegaming_spiders import settings as default_settings
from .primegaming_spiders.spiders.primegaming import PrimeGamingSpider

logger = logging.getLogger(__name__)


def _settings(overrides=None):
    settings = Settings()
    settings.setmodule(default_settings, priority='project')
    if overrides:
        settings.setdict(overrides, priority='cmdline')
    return settings


def run(categories, start_urls=None, settings=None):
    """Build every category's feed and return the per-category outcome.

    Args:
        categories: Category names, e.g. {"games", "loot"}.
        start_urls: Optional page URL per category name; defaults to
            `config.OFFER_URL`.
        settings: Extra scrapy settings, e.g. `{"RSS_OUTPUT_DIR": "out"}`.
    """
    wanted = sorted({Category(c) for c in categories}, key=lambda c: c.value)
    start_urls = start_urls or {}
    results = {category: CategoryResult(category) for category in wanted}

    def on_closed(spider, reason):
        result = results[spider.category]
        result.feed = spider.feed
        result.error = spider.error
        logger.info(f"Finished {spider.category} ({reason}), error: {spider.error!r}")

    process = CrawlerProcess(_settings(settings), install_root_handler=False)
    for category in wanted:
        crawler = process.create_crawler(PrimeGamingSpider)
        crawler.signals.connect(on_closed, signal=signals.spider_closed)
        process.crawl(crawler, category=category.value, start_url=start_urls.get(category.value))
    process.start()

    return results


def main(argv=None):
    """python -m crawler.orchestrator [games] [loot]"""
    logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    argv = sys.argv[1:] if argv is None else argv
    categories = argv or config.FEED_CATEGORIES

    results = run(categories)
    for category, result in results.items():
        if result.error is not None:
            logger.error(f"{category}: {result.error}")
        entries = len(result.feed.entries) if result.feed else 0
        logger.info(f"{category}: {entries} feed entries")


if __name__ == '__main__':
    main()
