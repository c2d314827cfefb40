import scrapy
from datetime import datetime, timezone

import config
from core.errors import AcquisitionFailure
from core.models import Category
from core.strategies import collect


class PrimeGamingSpider(scrapy.Spider):
    """Fetches the Prime Gaming offer page for one category.

    Run one spider per category, e.g. `scrapy crawl primegaming -a category=loot`.
    """
    name = 'primegaming'

    def __init__(self, category='games', start_url=None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.category = Category(category)
        self.start_url = start_url or config.OFFER_URL
        # Set by the errback / parse when the page cannot be used at all
        self.acquisition_error = None
        # Filled in by FeedPipeline when the spider closes
        self.feed = None
        self.error = None

    def start_requests(self):
        self.logger.info(f"Starting to scrape Prime Gaming {self.category} from {self.start_url}")
        yield scrapy.Request(self.start_url, callback=self.parse, errback=self.on_error, dont_filter=True)

    def parse(self, response):
        """Runs the selector strategy chain over the offer page."""
        if not isinstance(response, scrapy.http.TextResponse):
            self.acquisition_error = AcquisitionFailure(self.category, f"Non-HTML response from {response.url}")
            self.logger.error(str(self.acquisition_error))
            return

        now = datetime.now(timezone.utc)
        try:
            records = collect(response, self.category, now=now)
        except Exception as e:
            self.acquisition_error = AcquisitionFailure(self.category, e)
            self.logger.error(f"Could not extract {self.category} offers from {response.url}: {e!r}")
            return

        self.logger.info(f"Found {len(records)} {self.category} offers on {response.url}")
        for record in records:
            yield record

    def on_error(self, failure):
        self.acquisition_error = AcquisitionFailure(self.category, failure.value)
        self.logger.error(f"Could not fetch {self.start_url}: {failure.value!r}")
