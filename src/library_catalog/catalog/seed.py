"""
Seed data loaded into the catalog at startup.

Ids are generated fresh for each process; records refer to each other by
position in the tables below.
"""

from __future__ import annotations

import uuid
from datetime import UTC, date, datetime

from ..logging import get_logger
from .models import AuthorRecord, BookRecord, EntityKind, GenreRecord
from .store import EntityStore

logger = get_logger(__name__)


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=UTC)


# (name, bio, created_at, updated_at)
AUTHORS = [
    ("Jane Austen", None, "2023-01-05", "2023-01-05"),
    (
        "George Orwell",
        "English novelist, essayist, and critic. "
        "His work is characterized by lucid prose and social criticism.",
        "2023-01-10",
        "2023-02-15",
    ),
    (
        "J.K. Rowling",
        "British author and philanthropist best known for a seven-book fantasy series "
        "about a young wizard.",
        "2023-01-15",
        "2023-01-15",
    ),
    (
        "Haruki Murakami",
        "Japanese writer known for works of fiction, surrealism and magical realism.",
        "2023-01-20",
        "2023-03-10",
    ),
    (
        "Toni Morrison",
        "American novelist, essayist, and professor who won the Nobel Prize "
        "for Literature in 1993.",
        "2023-01-25",
        "2023-01-25",
    ),
]

# (name, description, created_at, updated_at)
GENRES = [
    (
        "Fiction",
        "Literature created from the imagination, not presented as fact.",
        "2023-01-01",
        "2023-01-01",
    ),
    (
        "Science Fiction",
        "Fiction dealing with imaginative concepts such as futuristic settings and technology.",
        "2023-01-02",
        "2023-01-02",
    ),
    (
        "Fantasy",
        "Fiction with elements of magic, mythical creatures, or supernatural phenomena.",
        "2023-01-03",
        "2023-02-05",
    ),
    (
        "Mystery",
        "Fiction dealing with the solution of a crime or puzzle.",
        "2023-01-04",
        "2023-01-04",
    ),
    (
        "Romance",
        "Fiction focusing on the romantic relationship between characters.",
        "2023-01-05",
        "2023-03-15",
    ),
    (
        "Historical Fiction",
        "Fiction set in the past that incorporates historical events or people.",
        "2023-01-06",
        "2023-01-06",
    ),
    (
        "Dystopian",
        "Fiction set in a dark, often post-apocalyptic future society.",
        "2023-01-07",
        "2023-01-07",
    ),
    ("Non-fiction", "Literature based on facts and real events.", "2023-01-08", "2023-02-20"),
]

# (title, summary, pages, published, author index, genre indexes, rating, available,
#  created_at, updated_at)
BOOKS = [
    (
        "Pride and Prejudice",
        "A romantic novel of manners that follows the character development of Elizabeth Bennet.",
        432, "1813-01-28", 0, (0, 4, 5), 4.7, True, "2023-01-05", "2023-01-05",
    ),
    (
        "Sense and Sensibility",
        "The story of the Dashwood sisters as they come of age.",
        384, "1811-10-30", 0, (0, 4, 5), 4.5, True, "2023-01-06", "2023-02-10",
    ),
    (
        "1984",
        "A dystopian social science fiction novel set in an imagined future.",
        328, "1949-06-08", 1, (0, 6, 1), 4.8, True, "2023-01-10", "2023-01-10",
    ),
    (
        "Animal Farm",
        "An allegorical novella reflecting events leading up to the Russian Revolution.",
        112, "1945-08-17", 1, (0, 6), 4.6, True, "2023-01-11", "2023-03-05",
    ),
    (
        "Harry Potter and the Philosopher's Stone",
        "The first novel in the Harry Potter series, "
        "featuring a young wizard's adventures at Hogwarts.",
        223, "1997-06-26", 2, (0, 2), 4.9, True, "2023-01-15", "2023-01-15",
    ),
    (
        "Harry Potter and the Chamber of Secrets",
        "The second novel in the Harry Potter series.",
        251, "1998-07-02", 2, (0, 2), 4.8, True, "2023-01-16", "2023-02-20",
    ),
    (
        "Harry Potter and the Prisoner of Azkaban",
        "The third novel in the Harry Potter series.",
        317, "1999-07-08", 2, (0, 2), 4.9, True, "2023-01-17", "2023-01-17",
    ),
    (
        "Norwegian Wood",
        "A nostalgic story of loss and sexuality set in Tokyo during the late 1960s.",
        296, "1987-09-04", 3, (0,), 4.2, True, "2023-01-20", "2023-01-20",
    ),
    (
        "Kafka on the Shore",
        "A novel powered by two remarkable characters: a teenage boy and an aging simpleton.",
        505, "2002-09-12", 3, (0, 2), 4.3, True, "2023-01-21", "2023-03-15",
    ),
    (
        "1Q84",
        "A work of speculative fiction about a woman who finds herself in an alternate world.",
        925, "2009-05-29", 3, (0, 1, 2), 4.1, True, "2023-01-22", "2023-01-22",
    ),
    (
        "Beloved",
        "A novel inspired by the life of Margaret Garner, "
        "an African American who escaped slavery.",
        324, "1987-09-02", 4, (0, 5), 4.4, True, "2023-01-25", "2023-02-28",
    ),
    (
        "Song of Solomon",
        "A novel about a young African-American man's search for identity.",
        337, "1977-09-02", 4, (0, 5), 4.3, True, "2023-01-26", "2023-01-26",
    ),
    (
        "The Bluest Eye",
        "A novel about a young African-American girl who wishes for blue eyes.",
        224, "1970-10-12", 4, (0,), 4.2, True, "2023-01-27", "2023-03-20",
    ),
    (
        "Emma",
        "A novel about youthful hubris and romantic misunderstandings.",
        474, "1815-12-23", 0, (0, 4, 5), 4.4, True, "2023-01-07", "2023-01-07",
    ),
    (
        "Homage to Catalonia",
        "An account of Orwell's experiences in the Spanish Civil War.",
        232, "1938-04-25", 1, (7,), 4.3, False, "2023-01-12", "2023-02-25",
    ),
]


def seed_catalog(store: EntityStore) -> dict[str, int]:
    """
    Load the standard authors, genres and books into an empty store.

    Returns:
        Number of records inserted per collection
    """
    if any(store.count(kind) for kind in EntityKind):
        logger.warning("Seeding a non-empty store; existing records are kept")

    author_ids = []
    for name, bio, created, updated in AUTHORS:
        author = AuthorRecord(
            id=str(uuid.uuid4()),
            name=name,
            bio=bio,
            created_at=_ts(created),
            updated_at=_ts(updated),
        )
        store.insert(EntityKind.AUTHOR, author)
        author_ids.append(author.id)

    genre_ids = []
    for name, description, created, updated in GENRES:
        genre = GenreRecord(
            id=str(uuid.uuid4()),
            name=name,
            description=description,
            created_at=_ts(created),
            updated_at=_ts(updated),
        )
        store.insert(EntityKind.GENRE, genre)
        genre_ids.append(genre.id)

    for (
        title,
        summary,
        pages,
        published,
        author_index,
        genre_indexes,
        rating,
        available,
        created,
        updated,
    ) in BOOKS:
        store.insert(
            EntityKind.BOOK,
            BookRecord(
                id=str(uuid.uuid4()),
                title=title,
                summary=summary,
                pages=pages,
                published_date=date.fromisoformat(published),
                author_id=author_ids[author_index],
                genre_ids=tuple(genre_ids[i] for i in genre_indexes),
                rating=rating,
                is_available=available,
                created_at=_ts(created),
                updated_at=_ts(updated),
            ),
        )

    counts = {
        "authors": len(AUTHORS),
        "genres": len(GENRES),
        "books": len(BOOKS),
    }
    logger.info("Catalog seeded", **counts)
    return counts
