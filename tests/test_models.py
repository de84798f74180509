from bookpage.models import Book, Books


def test_book_defaults_are_empty():
    book = Book()
    assert book.authors == [] and book.genres == []
    assert book.rating == 0.0
    assert book.rating_count == 0 and book.review_count == 0
    # lists are not shared between records
    book.genres.append("Fiction")
    assert Book().genres == []


def test_book_serializes_with_public_field_names():
    book = Book(title="Dune", id="12345-foo", ratings=1234, reviews=56)
    data = book.model_dump(by_alias=True)
    assert list(data) == ["title", "url", "id", "cover_url", "authors",
                          "genres", "rating", "ratings", "reviews"]
    assert data["ratings"] == 1234
    assert data["reviews"] == 56


def test_books_container():
    books = Books(books=[Book(title="Dune"), Book(title="Emma")])
    data = books.model_dump(by_alias=True)
    assert [b["title"] for b in data["books"]] == ["Dune", "Emma"]
    assert "ratings" in data["books"][0]
