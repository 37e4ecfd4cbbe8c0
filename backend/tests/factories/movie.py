"""Factory Boy definitions for catalog movies."""

from __future__ import annotations

import factory
from watchlist_api.models.movie import Movie, Rating

from tests.factories import BaseFactory


class RatingFactory(factory.Factory):
    """Build :class:`watchlist_api.models.movie.Rating` (embedded, never saved alone)."""

    class Meta:
        model = Rating

    source = "Internet Movie Database"
    value = factory.Sequence(lambda n: f"{(n % 10) + 0.5}/10")


class MovieFactory(BaseFactory):
    """Build persisted :class:`watchlist_api.models.movie.Movie`."""

    class Meta:
        model = Movie

    imdbID = factory.Sequence(lambda n: f"tt{n:07d}")
    Title = factory.Faker("sentence", nb_words=3)
    Year = factory.Faker("year")
    Type = "movie"
    Director = factory.Faker("name")
    Poster = factory.Faker("image_url")
    Ratings = factory.LazyFunction(lambda: [RatingFactory()])
