import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from .classifier import apply_parent_title, classify
from .extractor import extract
from .models import Category

logger = logging.getLogger(__name__)

OFFER_LISTS = {
    Category.GAMES: 'offer-list-FGWP_FULL',
    Category.LOOT: 'offer-list-IN_GAME_LOOT',
}


class SelectorStrategy(ABC):
    """A match predicate paired with field extraction."""

    name = 'base'
    heuristic = False

    def __init__(self, category):
        self.category = Category(category)

    @abstractmethod
    def candidates(self, document):
        """Nodes that may hold an offer."""

    def try_extract(self, document, now=None):
        now = now or datetime.now(timezone.utc)
        records = []
        for node in self.candidates(document):
            offer_type, parent = classify(node, self.category, heuristic=self.heuristic)
            if offer_type is None:
                continue
            record = extract(node, offer_type, now=now)
            if record is None:
                continue
            records.append(apply_parent_title(record, parent))
        return records

    def __repr__(self):
        return f"<{self.name} strategy for {self.category.value}>"


class StructuralStrategy(SelectorStrategy):
    """Exact container and anchor path of the current markup."""

    name = 'structural'

    def candidates(self, document):
        selector = f'[data-a-target="{OFFER_LISTS[self.category]}"] .item-card__action > a:first-child'
        return document.css(selector)


class CardStrategy(SelectorStrategy):
    """Anything card-like whose text mentions the category."""

    name = 'card'
    heuristic = True

    def candidates(self, document):
        return document.css(".item-card, [class*='card']")


class LinkPatternStrategy(SelectorStrategy):
    """Anchors pointing at offer detail pages, regardless of structure."""

    name = 'link-pattern'

    def candidates(self, document):
        if self.category is Category.LOOT:
            return document.css("a[href*='/loot/']")
        return [
            a for a in document.css("a[href*='/dp/'], a[href*='/detail']")
            if '/loot/' not in (a.attrib.get('href') or '')
        ]


def default_strategies(category):
    return [
        StructuralStrategy(category),
        CardStrategy(category),
        LinkPatternStrategy(category),
    ]


def dedupe(records):
    """Drop repeated offers, keyed by URL or by title when there is no URL."""
    seen = set()
    unique = []
    for record in records:
        key = record.url or record.title
        if key in seen:
            continue
        seen.add(key)
        unique.append(record)
    return unique


def collect(document, category, strategies=None, now=None):
    """Run the strategy chain for `category` and return the first non-empty result.

    Returns [] when every strategy comes up empty.  If nothing was found and at
    least one strategy raised, the first of those errors is re-raised so the
    caller can tell a broken page from an empty one.
    """
    category = Category(category)
    if strategies is None:
        strategies = default_strategies(category)

    errors = []
    for strategy in strategies:
        try:
            records = strategy.try_extract(document, now=now)
        except Exception as e:
            logger.error(f"STRATEGY: {strategy!r} failed: {e}")
            errors.append(e)
            continue
        if records:
            records = dedupe(records)
            logger.info(f"STRATEGY: {strategy!r} found {len(records)} offers")
            return records
        logger.info(f"STRATEGY: {strategy!r} found nothing, trying next")

    if errors:
        raise errors[0]
    return []
