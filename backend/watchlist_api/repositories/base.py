"""Generic repository base for mongoengine documents.

This module centralizes persistence-only concerns shared by all repositories:
- Lookup by identifier that treats malformed ObjectIds as "no match".
- Equality lookup by field name restricted to a per-repository whitelist.
- Partial updates restricted to a per-repository updatable-field whitelist.
- No business rules; services decide what a missing document means.

Design decisions
----------------
* Repositories never raise domain errors for "not found"; they return
  ``None`` and let services raise :class:`NotFoundError`.
* Driver/validation errors (``NotUniqueError``, ``ValidationError``) propagate
  to the service, which translates them into :class:`InvalidError`.
* Updates MUST NOT allow mass-assignment: each repo exposes an explicit
  ``_updatable_fields`` whitelist.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from bson import ObjectId
from mongoengine import Document

D = TypeVar("D", bound=Document)


def as_object_id(value: Any) -> ObjectId | None:
    """Return ``value`` as an :class:`ObjectId`, or ``None`` when it is not one.

    :param value: Raw identifier (string or ObjectId).
    :returns: Parsed ObjectId or ``None``.
    :rtype: ObjectId | None
    """
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


class DocumentRepository(Generic[D]):
    """Thin persistence wrapper around a mongoengine document class.

    Subclasses set :attr:`model` and may narrow :attr:`_lookup_fields` and
    :attr:`_updatable_fields`.
    """

    model: type[D]
    _lookup_fields: frozenset[str] = frozenset()
    _updatable_fields: tuple[str, ...] = ()

    # ----------------------------- Reads ------------------------------------

    def find_all(self) -> list[D]:
        """Return every document in natural order."""
        return list(self.model.objects)

    def find_by_id(self, doc_id: Any) -> D | None:
        """Return the document with ``_id == doc_id`` or ``None``."""
        oid = as_object_id(doc_id)
        if oid is None:
            return None
        return self.model.objects(id=oid).first()

    def find_one_by_field(self, name: str, value: Any) -> D | None:
        """Equality lookup on a whitelisted field.

        Unknown field names never reach the database and simply yield ``None``.
        """
        if name not in self._lookup_fields:
            return None
        return self.model.objects(**{name: value}).first()

    def find_many_by_ids(self, ids: Iterable[Any]) -> list[D]:
        """Return documents whose ``_id`` is among ``ids`` (malformed ids ignored)."""
        oids = [oid for oid in (as_object_id(i) for i in ids) if oid is not None]
        if not oids:
            return []
        return list(self.model.objects(id__in=oids))

    # ----------------------------- Writes -----------------------------------

    def insert(self, doc: D) -> D:
        """Validate and persist a new document."""
        doc.save(force_insert=True)
        return doc

    def save(self, doc: D) -> D:
        """Validate and persist changes to an existing document."""
        doc.save()
        return doc

    def update_by_id(
        self,
        doc_id: Any,
        fields: Mapping[str, Any],
        *,
        return_updated: bool = True,
        validate: bool = True,
    ) -> D | None:
        """Apply whitelisted ``fields`` to the document and persist them.

        :param doc_id: Target document id.
        :param fields: Candidate changes; keys outside ``_updatable_fields``
            are dropped.
        :param return_updated: Return the post-update document (otherwise the
            pre-update snapshot).
        :param validate: Run document validation before writing.
        :returns: The document, or ``None`` when ``doc_id`` does not resolve.
        """
        doc = self.find_by_id(doc_id)
        if doc is None:
            return None
        before = None if return_updated else self.find_by_id(doc_id)
        changes = {k: v for k, v in fields.items() if k in self._updatable_fields}
        for key, value in changes.items():
            setattr(doc, key, value)
        if changes:
            doc.save(validate=validate)
        return doc if return_updated else before

    def delete_by_id(self, doc_id: Any) -> D | None:
        """Delete the document and return it, or ``None`` when absent."""
        doc = self.find_by_id(doc_id)
        if doc is None:
            return None
        doc.delete()
        return doc
