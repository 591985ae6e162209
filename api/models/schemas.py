"""
Movies API — Pydantic Data Models

Every request and response body in the API is defined here as a Pydantic model.
Pydantic gives us:
  - Structural decoding (wrong shapes get rejected with a 422 before any handler runs)
  - Auto-generated JSON Schema (which powers the Swagger docs at /docs)
  - Serialization to/from JSON

Request payloads decode into MovieInput, which has no id field at all.
The server assigns ids; a client-supplied "id" key is simply ignored.
"""

from uuid import UUID

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Embedded value types
# ---------------------------------------------------------------------------

class Director(BaseModel):
    """A movie's director. No identity of its own -- always embedded in a Movie."""

    firstname: str = Field(
        description="Director's first name.",
        examples=["Peter"],
    )
    lastname: str = Field(
        description="Director's last name.",
        examples=["Jackson"],
    )


# ---------------------------------------------------------------------------
# /movies — request and response bodies
# ---------------------------------------------------------------------------

class MovieInput(BaseModel):
    """What the client sends to create or update a movie.

    Deliberately lacks an id: ids are generated server-side on create and
    never change afterwards."""

    isbn: str = Field(
        description="ISBN of the source work.",
        examples=["978-3-16-148410-0"],
    )
    title: str = Field(
        description="Movie title.",
        examples=["The Lord of the Rings"],
    )
    director: Director


class Movie(MovieInput):
    """A stored movie record. Inherits isbn/title/director from MovieInput,
    adds the server-generated id."""

    id: UUID = Field(
        description="Unique identifier generated by the server on create.",
        examples=["3fa85f64-5717-4562-b3fc-2c963f66afa6"],
    )


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    movies_stored: int
