"""
In-memory movie store.

The single system of record for the service: a dict of movie id -> Movie
guarded by one mutex. Data is lost on restart -- that's fine, this is a
demo/scaffold service with no persistence.

Every read or write of the dict happens under the lock, so readers never run
alongside writers (or each other) and nobody can observe a half-applied
mutation. Records are copied on the way in and on the way out, outside the
lock; callers never hold a reference into the stored state.

One MovieStore is built per application by api.main.create_app() and handed
to the route handlers through FastAPI dependency injection.
"""

import logging
import threading
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from uuid import UUID

from api.identifiers import new_movie_id
from api.models.schemas import Movie, MovieInput

logger = logging.getLogger(__name__)

# None: wait until the lock is free
DEFAULT_LOCK_TIMEOUT: float | None = None


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class StoreError(Exception):
    """Base class for store failures."""


class MovieNotFoundError(StoreError):
    """The requested movie id is not in the store."""

    def __init__(self, movie_id: UUID):
        super().__init__(f"Movie '{movie_id}' not found")
        self.movie_id = movie_id


class StoreUnavailableError(StoreError):
    """The store lock could not be acquired in time."""


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

class MovieStore:
    """Thread-safe in-memory CRUD store for Movie records.

    lock_timeout is how long (seconds) an operation waits for exclusive
    access before giving up with StoreUnavailableError. None (the default)
    waits forever; set a bound only to turn a wedged store into a 500.
    """

    def __init__(
        self,
        movies: Iterable[Movie] | None = None,
        lock_timeout: float | None = DEFAULT_LOCK_TIMEOUT,
        id_factory: Callable[[], UUID] = new_movie_id,
    ) -> None:
        self._lock = threading.Lock()
        self._lock_timeout = lock_timeout
        self._id_factory = id_factory
        self._movies: dict[UUID, Movie] = {}
        for movie in movies or ():
            # Each record is keyed by its own id -- one identifier per record
            self._movies[movie.id] = movie.model_copy(deep=True)

    @contextmanager
    def _exclusive(self) -> Iterator[dict[UUID, Movie]]:
        timeout = -1 if self._lock_timeout is None else self._lock_timeout
        if not self._lock.acquire(timeout=timeout):
            logger.error("Could not acquire movie store lock within %ss", self._lock_timeout)
            raise StoreUnavailableError("Movie store lock acquisition timed out")
        try:
            yield self._movies
        finally:
            self._lock.release()

    def __len__(self) -> int:
        with self._exclusive() as movies:
            return len(movies)

    def list(self) -> list[Movie]:
        """Snapshot of every stored movie, in no particular order."""
        with self._exclusive() as movies:
            snapshot = list(movies.values())
        # Stored movies are replaced on write, never mutated in place
        return [movie.model_copy(deep=True) for movie in snapshot]

    def get(self, movie_id: UUID) -> Movie:
        with self._exclusive() as movies:
            movie = movies.get(movie_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        return movie.model_copy(deep=True)

    def insert(self, payload: MovieInput) -> Movie:
        """Store a new movie under a freshly generated id and return it."""
        movie = Movie(id=self._id_factory(), **payload.model_dump())
        with self._exclusive() as movies:
            movies[movie.id] = movie
        return movie.model_copy(deep=True)

    def update(self, movie_id: UUID, payload: MovieInput) -> Movie:
        """Overwrite isbn/title/director of an existing movie. The id never changes."""
        movie = Movie(id=movie_id, **payload.model_dump())
        with self._exclusive() as movies:
            if movie_id not in movies:
                raise MovieNotFoundError(movie_id)
            movies[movie_id] = movie
        return movie.model_copy(deep=True)

    def delete(self, movie_id: UUID) -> None:
        with self._exclusive() as movies:
            if movies.pop(movie_id, None) is None:
                raise MovieNotFoundError(movie_id)
