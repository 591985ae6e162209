"""
/movies -- CRUD over the in-memory movie store.

  GET    /movies        list every movie
  GET    /movies/{id}   fetch one movie
  POST   /movies        create a movie (id generated server-side)
  PUT    /movies/{id}   overwrite isbn/title/director of a movie
  DELETE /movies/{id}   remove a movie

Handlers are plain functions (not async) so FastAPI runs them on its worker
thread pool. They never touch the dict directly: every read and write goes
through MovieStore, which serializes them on its lock.

A missing id raises MovieNotFoundError; the handler registered in api.main
turns that into a 404 with an empty body.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from api.models.schemas import Movie, MovieInput
from api.store import MovieStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Movies"])

_UNAVAILABLE = {500: {"description": "Movie store unavailable."}}
_NOT_FOUND = {404: {"description": "No movie with this id (empty body)."}, **_UNAVAILABLE}


def get_store(request: Request) -> MovieStore:
    """The application's MovieStore, attached by create_app()."""
    return request.app.state.store


@router.get(
    "/movies",
    response_model=list[Movie],
    summary="List movies",
    description="Return every stored movie. Order is not guaranteed.",
    responses=_UNAVAILABLE,
)
def list_movies(store: MovieStore = Depends(get_store)) -> list[Movie]:
    movies = store.list()
    logger.debug("Listing %d movies", len(movies))
    return movies


@router.get(
    "/movies/{movie_id}",
    response_model=Movie,
    summary="Get a movie",
    responses=_NOT_FOUND,
)
def get_movie(movie_id: UUID, store: MovieStore = Depends(get_store)) -> Movie:
    return store.get(movie_id)


@router.post(
    "/movies",
    response_model=Movie,
    status_code=status.HTTP_201_CREATED,
    summary="Create a movie",
    description="Store a new movie. Any id in the request body is ignored; the server generates one.",
    responses=_UNAVAILABLE,
)
def create_movie(payload: MovieInput, store: MovieStore = Depends(get_store)) -> Movie:
    movie = store.insert(payload)
    logger.info("Created movie %s (%r)", movie.id, movie.title)
    return movie


@router.put(
    "/movies/{movie_id}",
    response_model=Movie,
    summary="Update a movie",
    description="Overwrite isbn, title and director. The id never changes.",
    responses=_NOT_FOUND,
)
def update_movie(
    movie_id: UUID,
    payload: MovieInput,
    store: MovieStore = Depends(get_store),
) -> Movie:
    movie = store.update(movie_id, payload)
    logger.info("Updated movie %s", movie_id)
    return movie


@router.delete(
    "/movies/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a movie",
    responses=_NOT_FOUND,
)
def delete_movie(movie_id: UUID, store: MovieStore = Depends(get_store)) -> Response:
    store.delete(movie_id)
    logger.info("Deleted movie %s", movie_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
