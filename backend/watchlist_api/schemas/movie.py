"""Movie resource schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate


class RatingSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    source = fields.String(allow_none=True)
    value = fields.String(allow_none=True)


class MovieSchema(Schema):
    """Representation of a catalog movie; also validates creation payloads."""

    class Meta:
        unknown = EXCLUDE

    id = fields.String(data_key="_id", dump_only=True)
    imdbID = fields.String(required=True, validate=validate.Length(min=1))
    Title = fields.String(allow_none=True)
    Year = fields.String(allow_none=True)
    Rated = fields.String(allow_none=True)
    Released = fields.String(allow_none=True)
    Runtime = fields.String(allow_none=True)
    Genre = fields.String(allow_none=True)
    Director = fields.String(allow_none=True)
    Writer = fields.String(allow_none=True)
    Actors = fields.String(allow_none=True)
    Plot = fields.String(allow_none=True)
    Language = fields.String(allow_none=True)
    Country = fields.String(allow_none=True)
    Awards = fields.String(allow_none=True)
    Poster = fields.String(allow_none=True)
    Ratings = fields.List(fields.Nested(RatingSchema), allow_none=True)
    Metascore = fields.String(allow_none=True)
    imdbRating = fields.String(allow_none=True)
    imdbVotes = fields.String(allow_none=True)
    Type = fields.String(allow_none=True)
    DVD = fields.String(allow_none=True)
    BoxOffice = fields.String(allow_none=True)
    Production = fields.String(allow_none=True)
    Website = fields.String(allow_none=True)
    Response = fields.String(allow_none=True)


class MovieUpdateSchema(Schema):
    """Fields a movie update may replace; anything else is dropped."""

    class Meta:
        unknown = EXCLUDE

    imdbID = fields.String(validate=validate.Length(min=1))
    Title = fields.String(allow_none=True)
    Year = fields.String(allow_none=True)
    Type = fields.String(allow_none=True)
    Poster = fields.String(allow_none=True)
