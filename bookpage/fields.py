"""Per-field extractors for a book page.

Each extractor looks at a single node and, when the node carries its field,
writes into the shared ``Book``. Anything missing or malformed is a no-op; the
numeric fields log a warning instead of raising so the rest of the page still
gets extracted.
"""
from bs4.element import PageElement
from .config import DEFAULT_INDICATORS, Indicators
from .models import Book
from .tree import attr_equals, first_child, get_attr, is_element, is_text
from .utils.logger import logger


def _last_segment(url: str) -> str:
    return url.split("/")[-1]


def _to_int(s: str) -> int:
    return int(s.replace(",", ""))


def extract_id(node: PageElement, book: Book, indicators: Indicators = DEFAULT_INDICATORS) -> None:
    url = get_attr(node, indicators.link_attr)
    if url is not None and indicators.book_id_marker in url:
        book.id = _last_segment(url)


def extract_genres(node: PageElement, book: Book, indicators: Indicators = DEFAULT_INDICATORS) -> None:
    url = get_attr(node, indicators.link_attr)
    if url is not None and indicators.genre_marker in url:
        book.genres.append(_last_segment(url))


def extract_cover(node: PageElement, book: Book, indicators: Indicators = DEFAULT_INDICATORS) -> None:
    # <div class=BookCover__image><div><img class=ResponsiveImage role=presentation src=...>
    if not attr_equals(node, "class", indicators.cover_class):
        return

    image = first_child(first_child(node))
    if not is_element(image, "img"):
        return

    correct_class = attr_equals(image, "class", indicators.cover_image_class)
    correct_role = attr_equals(image, "role", indicators.cover_image_role)
    src = get_attr(image, "src")

    if correct_class and correct_role and src is not None:
        book.cover_url = src


def extract_rating(node: PageElement, book: Book, indicators: Indicators = DEFAULT_INDICATORS) -> None:
    if not attr_equals(node, "class", indicators.rating_class):
        return

    text = first_child(node)
    if not is_text(text):
        return

    try:
        book.rating = float(text)
    except ValueError as e:
        logger.warning("Failed to parse rating %r: %s", str(text), e)


def extract_stats(node: PageElement, book: Book, indicators: Indicators = DEFAULT_INDICATORS) -> None:
    """Read rating and review counts from a label like "1,234 ratings and 56 reviews"."""
    if not attr_equals(node, "class", indicators.stats_class):
        return

    label = get_attr(node, "aria-label")
    if label is None:
        return

    parts = label.split(" ")

    for index, field, name in ((0, "rating_count", "ratings"), (3, "review_count", "reviews")):
        if index >= len(parts):
            logger.warning("No %s count in stats label %r", name, label)
            continue
        try:
            setattr(book, field, _to_int(parts[index]))
        except ValueError as e:
            logger.warning("Failed to parse %s count %r: %s", name, parts[index], e)


def extract_authors(node: PageElement, book: Book, indicators: Indicators = DEFAULT_INDICATORS) -> None:
    if not attr_equals(node, "class", indicators.authors_class):
        return

    authors = []
    for child in node.children:
        anchor = first_child(child)
        if not is_element(anchor, "a"):
            continue

        span = first_child(anchor)
        if not is_element(span, "span"):
            continue

        name = first_child(span)
        if not is_text(name):
            continue

        authors.append(str(name))

    book.authors = authors


def extract_title(node: PageElement, book: Book, indicators: Indicators = DEFAULT_INDICATORS) -> None:
    if not (attr_equals(node, "class", indicators.title_class)
            and attr_equals(node, "data-testid", indicators.title_test_id)):
        return

    label = get_attr(node, "aria-label")
    if label is None or not label.startswith(indicators.title_prefix):
        return

    book.title = label[len(indicators.title_prefix):]
