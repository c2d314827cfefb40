import config

BOT_NAME = 'primegaming_spiders'

SPIDER_MODULES = ['crawler.primegaming_spiders.spiders']
NEWSPIDER_MODULE = 'crawler.primegaming_spiders.spiders'

USER_AGENT = 'Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0 Safari/537.36'

# A failed download becomes a placeholder entry, never a retry
RETRY_ENABLED = False
DOWNLOAD_TIMEOUT = config.DOWNLOAD_TIMEOUT
TELNETCONSOLE_ENABLED = False
LOG_LEVEL = config.LOG_LEVEL

ITEM_PIPELINES = {
    'crawler.primegaming_spiders.pipelines.FeedPipeline': 300,
}

RSS_BASE_URL = config.BASE_URL
RSS_SITE_URL = config.FEED_SITE_URL
RSS_AUTHOR_NAME = config.FEED_AUTHOR_NAME
RSS_AUTHOR_EMAIL = config.FEED_AUTHOR_EMAIL
RSS_OUTPUT_DIR = config.FEED_OUTPUT_DIR
