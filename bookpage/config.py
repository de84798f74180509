import os
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()

# BeautifulSoup tree builder used to turn raw markup into a document tree
HTML_PARSER = os.getenv("HTML_PARSER", "lxml")


class Indicators(BaseModel):
    """Literals that mark which node of a book page carries which field.

    Tied to the current markup of the catalog's book pages; when the site
    changes shape, this is the one place to edit.
    """
    model_config = ConfigDict(frozen=True)

    link_attr: str = "href"
    book_url_prefix: str = "/book/show/"
    book_id_marker: str = "/work/quotes/"
    genre_marker: str = "/genres/"
    cover_class: str = "BookCover__image"
    cover_image_class: str = "ResponsiveImage"
    cover_image_role: str = "presentation"
    authors_class: str = "ContributorLinksList"
    rating_class: str = "RatingStatistics__rating"
    stats_class: str = "RatingStatistics__meta"
    title_class: str = "Text Text__title1"
    title_test_id: str = "bookTitle"
    title_prefix: str = "Book title: "


DEFAULT_INDICATORS = Indicators()
