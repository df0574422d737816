"""
Unit tests for catalog read operations
"""

from datetime import UTC, datetime

import pytest

from library_catalog.catalog import (
    BookRecord,
    Catalog,
    EntityKind,
    SortDirection,
    ValidationError,
)


def titles(books):
    return [book.title for book in books]


class TestGetters:
    def test_get_book_miss_returns_none(self, catalog):
        assert catalog.queries.get_book("does-not-exist") is None

    def test_get_author_and_genre(self, catalog, author_named):
        orwell = author_named("George Orwell")
        fiction = catalog.queries.list_genres()[0]

        assert catalog.queries.get_author(orwell.id) == orwell
        assert catalog.queries.get_genre(fiction.id).name == "Fiction"
        assert catalog.queries.get_author("nope") is None
        assert catalog.queries.get_genre("nope") is None

    def test_list_authors_and_genres(self, catalog):
        assert [a.name for a in catalog.queries.list_authors()] == [
            "Jane Austen",
            "George Orwell",
            "J.K. Rowling",
            "Haruki Murakami",
            "Toni Morrison",
        ]
        assert len(catalog.queries.list_genres()) == 8

    def test_books_by_author(self, catalog, author_named):
        rowling = author_named("J.K. Rowling")

        books = catalog.queries.books_by_author(rowling.id)

        assert len(books) == 3
        assert all(book.author_id == rowling.id for book in books)


class TestListBooks:
    def test_first_two_titles_ascending(self, catalog):
        books = catalog.queries.list_books(limit=2, offset=0, sort_by="title")

        assert titles(books) == ["1984", "1Q84"]

    def test_last_two_titles_descending(self, catalog):
        books = catalog.queries.list_books(
            limit=2, offset=0, sort_by="title", direction=SortDirection.DESC
        )

        assert titles(books) == ["The Bluest Eye", "Song of Solomon"]

    def test_defaults(self, catalog):
        books = catalog.queries.list_books()

        assert len(books) == 10
        assert books[0].title == "1984"

    def test_offset_past_the_end(self, catalog):
        assert titles(catalog.queries.list_books(limit=5, offset=13)) == [
            "Song of Solomon",
            "The Bluest Eye",
        ]
        assert catalog.queries.list_books(limit=5, offset=50) == []

    def test_zero_limit(self, catalog):
        assert catalog.queries.list_books(limit=0) == []

    def test_numeric_sort(self, catalog):
        books = catalog.queries.list_books(limit=3, sort_by="pages")

        assert [b.pages for b in books] == [112, 223, 224]

    def test_graphql_field_name_maps_to_attribute(self, catalog):
        oldest = catalog.queries.list_books(limit=1, sort_by="publishedDate")
        newest = catalog.queries.list_books(
            limit=1, sort_by="publishedDate", direction=SortDirection.DESC
        )

        assert titles(oldest) == ["Sense and Sensibility"]
        assert titles(newest) == ["1Q84"]

    def test_snake_case_field_name(self, catalog):
        books = catalog.queries.list_books(limit=1, sort_by="published_date")

        assert titles(books) == ["Sense and Sensibility"]

    def test_equal_keys_keep_collection_order_in_both_directions(self, catalog):
        highest = catalog.queries.list_books(
            limit=2, sort_by="rating", direction=SortDirection.DESC
        )
        lowest = catalog.queries.list_books(limit=3, sort_by="rating")

        assert titles(highest) == [
            "Harry Potter and the Philosopher's Stone",
            "Harry Potter and the Prisoner of Azkaban",
        ]
        assert titles(lowest) == ["1Q84", "Norwegian Wood", "The Bluest Eye"]

    def test_unknown_field_keeps_collection_order(self, catalog):
        books = catalog.queries.list_books(limit=3, sort_by="popularity")
        reversed_books = catalog.queries.list_books(
            limit=3, sort_by="popularity", direction=SortDirection.DESC
        )

        expected = ["Pride and Prejudice", "Sense and Sensibility", "1984"]
        assert titles(books) == expected
        assert titles(reversed_books) == expected

    def test_missing_values_sort_last_ascending(self):
        catalog = Catalog.create(seed=False)
        now = datetime.now(UTC)
        for book_id, pages in (("a", 10), ("b", None), ("c", 5)):
            catalog.store.insert(
                EntityKind.BOOK,
                BookRecord(
                    id=book_id,
                    title=book_id,
                    author_id="x",
                    pages=pages,
                    created_at=now,
                    updated_at=now,
                ),
            )

        ascending = catalog.queries.list_books(sort_by="pages")
        descending = catalog.queries.list_books(sort_by="pages", direction=SortDirection.DESC)

        assert [b.id for b in ascending] == ["c", "a", "b"]
        assert [b.id for b in descending] == ["b", "a", "c"]

    @pytest.mark.parametrize("limit,offset", [(-1, 0), (2, -3)])
    def test_negative_paging_is_rejected(self, catalog, limit, offset):
        with pytest.raises(ValidationError):
            catalog.queries.list_books(limit=limit, offset=offset)


class TestSearch:
    def test_harry_matches_only_the_three_books(self, catalog):
        hits = catalog.queries.search("harry")

        assert [hit.kind for hit in hits] == [EntityKind.BOOK] * 3
        assert all(hit.record.title.startswith("Harry Potter") for hit in hits)

    def test_case_insensitive(self, catalog):
        lower = catalog.queries.search("harry")
        upper = catalog.queries.search("HARRY")

        assert [hit.record.id for hit in lower] == [hit.record.id for hit in upper]

    def test_books_then_authors_then_genres(self, catalog):
        hits = catalog.queries.search("fiction")

        kinds = [hit.kind for hit in hits]
        books = [hit.record.title for hit in hits if hit.kind is EntityKind.BOOK]
        authors = [hit.record.name for hit in hits if hit.kind is EntityKind.AUTHOR]
        genres = [hit.record.name for hit in hits if hit.kind is EntityKind.GENRE]

        assert kinds == (
            [EntityKind.BOOK] * len(books)
            + [EntityKind.AUTHOR] * len(authors)
            + [EntityKind.GENRE] * len(genres)
        )
        assert books == ["1984", "1Q84"]
        assert authors == ["Haruki Murakami"]
        assert len(genres) == 8

    def test_author_without_bio_is_tagged_as_author(self, catalog):
        hits = catalog.queries.search("austen")

        assert len(hits) == 1
        assert hits[0].kind is EntityKind.AUTHOR
        assert hits[0].record.name == "Jane Austen"

    def test_matches_summary_text(self, catalog):
        hits = catalog.queries.search("hogwarts")

        assert [hit.record.title for hit in hits] == ["Harry Potter and the Philosopher's Stone"]

    def test_no_match(self, catalog):
        assert catalog.queries.search("zzz-nothing") == []
