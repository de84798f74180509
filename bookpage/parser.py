from bs4 import BeautifulSoup, FeatureNotFound
from bs4.builder import ParserRejectedMarkup
from bs4.element import PageElement, Tag
from typing import List, Optional
from . import config
from .config import DEFAULT_INDICATORS, Indicators
from .fields import (
    extract_authors,
    extract_cover,
    extract_genres,
    extract_id,
    extract_rating,
    extract_stats,
    extract_title,
)
from .models import Book
from .tree import get_attr, is_element, walk
from .utils.logger import logger

# tag name -> field extractors run on nodes with that tag
DISPATCH = {
    "a": (extract_id, extract_genres),
    "div": (extract_cover, extract_rating, extract_stats, extract_authors),
    "h1": (extract_title,),
}


class ParseError(Exception):
    """Raised when markup cannot be turned into a document tree."""


def parse_document(markup) -> BeautifulSoup:
    # class stays one string so it compares against the literal attribute value
    try:
        return BeautifulSoup(markup, config.HTML_PARSER, multi_valued_attributes=None)
    except (FeatureNotFound, ParserRejectedMarkup, OSError, TypeError, ValueError) as e:
        logger.error("Failed to parse document: %s", e)
        raise ParseError(str(e)) from e


def extract_urls(tree: PageElement, indicators: Indicators = DEFAULT_INDICATORS) -> List[str]:
    urls = []

    def visit(node):
        if not is_element(node, "a"):
            return
        url = get_attr(node, indicators.link_attr)
        if url is not None and url.startswith(indicators.book_url_prefix):
            urls.append(url)

    walk(tree, visit)
    return urls


def extract_book_info(tree: PageElement, book: Optional[Book] = None,
                      indicators: Indicators = DEFAULT_INDICATORS) -> Book:
    if book is None:
        book = Book()

    def visit(node):
        if not isinstance(node, Tag):
            return
        for extract in DISPATCH.get(node.name, ()):
            extract(node, book, indicators)

    walk(tree, visit)
    return book


def get_book_urls(markup, indicators: Indicators = DEFAULT_INDICATORS) -> List[str]:
    """Detail-page links (``/book/show/...``) found in a list or search page."""
    urls = extract_urls(parse_document(markup), indicators)
    logger.debug("Found %d book links", len(urls))
    return urls


def get_book(markup, url: str = "", indicators: Indicators = DEFAULT_INDICATORS) -> Book:
    """Extract a ``Book`` from a book detail page.

    ``url`` is the address the page was fetched from; the page itself is never
    used to fill it in.
    """
    book = extract_book_info(parse_document(markup), Book(url=url), indicators)
    logger.debug("Extracted book %r (%s)", book.title, book.id)
    return book
