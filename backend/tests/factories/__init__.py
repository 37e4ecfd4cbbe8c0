"""Factory Boy helpers persisting documents through mongoengine."""

from __future__ import annotations

import factory.mongoengine


class BaseFactory(factory.mongoengine.MongoEngineFactory):
    """Base class for document factories.

    ``create()`` saves through the connection opened by the ``app`` fixture;
    ``build()`` returns unsaved documents.
    """

    class Meta:
        abstract = True
