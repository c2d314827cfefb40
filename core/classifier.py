from dataclasses import replace

from .extractor import first_text, node_text
from .models import Category

# Substrings that mark a generic card as belonging to a category
CATEGORY_KEYWORDS = {
    Category.GAMES: ('free game', 'claim'),
    Category.LOOT: ('loot', 'in-game'),
}

PARENT_GAME_SELECTOR = '.item-card-details__body p'
CARD_ANCESTOR_XPATH = "ancestor::*[contains(concat(' ', normalize-space(@class), ' '), ' item-card ')][1]"


def matches_category(node, category):
    text = node_text(node).lower()
    return any(keyword in text for keyword in CATEGORY_KEYWORDS[category])


def find_parent_game(node):
    """Caption naming the base game of a loot offer, or ''."""
    title = first_text(node, PARENT_GAME_SELECTOR)
    if title:
        return title
    card = node.xpath(CARD_ANCESTOR_XPATH)
    if card:
        return first_text(card[0], PARENT_GAME_SELECTOR)
    return ''


def classify(node, category, heuristic=False):
    """Decide the offer type of a candidate node.

    Returns `(offer_type, parent_game_title)`.  In heuristic mode a node whose
    text matches none of the category keywords gets an offer type of None and
    must be dropped.
    """
    category = Category(category)
    if heuristic and not matches_category(node, category):
        return None, ''

    parent = find_parent_game(node) if category is Category.LOOT else ''
    return category.offer_type, parent


def apply_parent_title(record, parent):
    if not parent:
        return record
    return replace(
        record,
        parent_game_title=parent,
        short_title=f"{parent} - {record.short_title}",
    )
