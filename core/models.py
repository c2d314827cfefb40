from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class Category(str, Enum):
    GAMES = 'games'
    LOOT = 'loot'

    def __str__(self):
        return self.value

    @property
    def offer_type(self):
        """Record class for offers of this category ('game' or 'loot')."""
        return 'game' if self is Category.GAMES else 'loot'


@dataclass(frozen=True)
class OfferRecord:
    short_title: str
    full_title: str
    url: str
    short_blurb: str
    detailed_blurb: str
    # ISO-8601 as emitted at extraction; normalized when the feed is assembled
    start_time: str
    category: str
    offer_type: str
    end_time: str = ''
    image_url: str = ''
    parent_game_title: str = ''

    @property
    def title(self):
        return self.short_title or self.full_title


@dataclass
class FeedEntry:
    title: str
    link: str
    content: str
    description: str
    published: datetime
    image_url: str = ''
    expires: Optional[datetime] = None


@dataclass
class Feed:
    title: str
    link: str
    description: str
    author_name: str
    author_email: str
    created: datetime
    entries: List[FeedEntry] = field(default_factory=list)


@dataclass
class CategoryResult:
    category: Category
    feed: Optional[Feed] = None
    error: Optional[Exception] = None
