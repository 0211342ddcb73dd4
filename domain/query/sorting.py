"""Library-catalog sorting of items."""

import re
import unicodedata
from collections.abc import Iterable, Sequence

from domain.taxonomy.facets import as_display_string
from domain.taxonomy.models import Item

NAME_FIELD = "name"
DEFAULT_LEADING_ARTICLES: tuple[str, ...] = ("the", "a", "an")

_WHITESPACE = re.compile(r"\s+")


def _canonical(text: str) -> str:
    return unicodedata.normalize("NFD", text)


def strip_leading_article(text: str, articles: Iterable[str] = DEFAULT_LEADING_ARTICLES) -> str:
    """
    Drop one leading article token (``"the zoo"`` -> ``"zoo"``).

    Expects an already case-folded, whitespace-collapsed string; a bare
    article with nothing after it is left alone.
    """
    for article in articles:
        prefix = f"{article.casefold()} "
        if text.startswith(prefix) and len(text) > len(prefix):
            return text[len(prefix) :]
    return text


def sort_key(text: str, articles: Iterable[str] = DEFAULT_LEADING_ARTICLES) -> str:
    """
    Derive the comparison key for a title.

    Examples:
        >>> sort_key("The Zoo")
        'zoo'
        >>> sort_key("Cafe\\u0301") == sort_key("Caf\\u00e9")
        True

    The key is only used for ordering; display strings are never modified.
    """
    folded = _canonical(_canonical(text).casefold())
    collapsed = _WHITESPACE.sub(" ", folded).strip()
    return strip_leading_article(collapsed, articles)


def sort(
    items: Sequence[Item],
    field: str = NAME_FIELD,
    articles: Iterable[str] = DEFAULT_LEADING_ARTICLES,
) -> list[Item]:
    """
    Return a new, stably sorted list of items.

    Args:
        items: Items to order (not mutated)
        field: ``"name"`` or a facet dimension; facet sorts fall back to the name key on ties
        articles: Leading articles ignored when comparing

    Returns:
        New list; items with identical keys keep their input order
    """
    articles = tuple(articles)

    if field == NAME_FIELD:
        return sorted(items, key=lambda item: sort_key(item.name, articles))

    def facet_key(item: Item) -> tuple[str, str]:
        shown = as_display_string(item, field) or ""
        return sort_key(shown, articles), sort_key(item.name, articles)

    return sorted(items, key=facet_key)
