"""Movie catalog document."""

from __future__ import annotations

from mongoengine import (
    Document,
    EmbeddedDocument,
    EmbeddedDocumentListField,
    StringField,
)


class Rating(EmbeddedDocument):
    """One review-site score, e.g. ``{"source": "Rotten Tomatoes", "value": "91%"}``."""

    source = StringField()
    value = StringField()


class Movie(Document):
    """Movie metadata keyed by the unique ``imdbID``.

    Field names follow the upstream catalog payloads verbatim (``Title``,
    ``Year``...), so documents round-trip without renaming.
    """

    meta = {"collection": "movies", "db_alias": "default"}

    imdbID = StringField(required=True, unique=True)
    Title = StringField()
    Year = StringField()
    Rated = StringField()
    Released = StringField()
    Runtime = StringField()
    Genre = StringField()
    Director = StringField()
    Writer = StringField()
    Actors = StringField()
    Plot = StringField()
    Language = StringField()
    Country = StringField()
    Awards = StringField()
    Poster = StringField()
    Ratings = EmbeddedDocumentListField(Rating)
    Metascore = StringField()
    imdbRating = StringField()
    imdbVotes = StringField()
    Type = StringField()
    DVD = StringField()
    BoxOffice = StringField()
    Production = StringField()
    Website = StringField()
    Response = StringField()

    # Scalar fields accepted by lookup-by-field queries
    LOOKUP_FIELDS = frozenset(
        {
            "imdbID", "Title", "Year", "Rated", "Released", "Runtime", "Genre",
            "Director", "Writer", "Actors", "Plot", "Language", "Country", "Awards",
            "Poster", "Metascore", "imdbRating", "imdbVotes", "Type", "DVD",
            "BoxOffice", "Production", "Website", "Response",
        }
    )

    # Fields a PUT is allowed to replace
    UPDATABLE_FIELDS = ("imdbID", "Title", "Year", "Type", "Poster")

    def __repr__(self) -> str:
        return f"<Movie id={self.id} imdbID={self.imdbID}>"
