import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

BASE_URL = os.getenv("BASE_URL", "https://gaming.amazon.com")
OFFER_URL = os.getenv("OFFER_URL", f"{BASE_URL}/home")

FEED_SITE_URL = os.getenv("FEED_SITE_URL", "https://feuerlord2.github.io/PrimeGaming-RSS-Site/")
FEED_AUTHOR_NAME = os.getenv("FEED_AUTHOR_NAME", "Daniel Winter")
FEED_AUTHOR_EMAIL = os.getenv("FEED_AUTHOR_EMAIL", "DanielWinterEmsdetten+rss@gmail.com")
FEED_OUTPUT_DIR = os.getenv("FEED_OUTPUT_DIR", "docs")
FEED_CATEGORIES = [c.strip() for c in os.getenv("FEED_CATEGORIES", "games,loot").split(",") if c.strip()]

# Seconds; the only timeout applied to page acquisition
DOWNLOAD_TIMEOUT = int(os.getenv("DOWNLOAD_TIMEOUT", "60"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
SCHEDULE_CRON_HOURS = os.getenv("SCHEDULE_CRON_HOURS", "*/6")
