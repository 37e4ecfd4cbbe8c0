"""Session-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields


class SessionCreateSchema(Schema):
    """Input payload for signing in.

    Values are taken as sent. Missing or non-string credentials fail the
    credential check (401) rather than schema validation.
    """

    class Meta:
        unknown = EXCLUDE

    email = fields.Raw(load_default="", allow_none=True)
    password = fields.Raw(load_default="", allow_none=True)


class RefreshSchema(Schema):
    """Input payload for exchanging a refresh token.

    A non-string token is passed through and rejected as invalid (401).
    """

    class Meta:
        unknown = EXCLUDE

    refresh_token = fields.Raw(data_key="refreshToken", load_default=None, allow_none=True)


class SessionResponseSchema(Schema):
    """Token pair returned by sign-in and refresh."""

    token = fields.String(required=True)
    refresh_token = fields.String(data_key="refreshToken", required=True)
    permissions = fields.List(fields.String())
    roles = fields.List(fields.String())


class MeSchema(Schema):
    """Profile of the authenticated user."""

    email = fields.String(required=True)
    permissions = fields.List(fields.String())
    roles = fields.List(fields.String())
