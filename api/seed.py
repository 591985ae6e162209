"""
Demonstration records inserted at startup.

Each seed movie gets exactly one generated id, used both as its store key
and as its embedded id.
"""

from api.identifiers import new_movie_id
from api.models.schemas import Director, Movie

SEED_MOVIES = [
    {
        "isbn": "978-3-16-148410-0",
        "title": "The Lord of the Rings",
        "director": {"firstname": "Peter", "lastname": "Jackson"},
    },
    {
        "isbn": "978-0-06-055812-8",
        "title": "The Hitchhiker's Guide to the Galaxy",
        "director": {"firstname": "Garth", "lastname": "Jennings"},
    },
]


def seed_movies() -> list[Movie]:
    """Build fresh Movie objects (with fresh ids) for the sample data."""
    return [
        Movie(
            id=new_movie_id(),
            isbn=entry["isbn"],
            title=entry["title"],
            director=Director(**entry["director"]),
        )
        for entry in SEED_MOVIES
    ]
