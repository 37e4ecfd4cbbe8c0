# watchlist_api/services/_shared/base.py
from __future__ import annotations

from watchlist_api.core import errors as api_errors
from watchlist_api.services._shared.errors import (
    AuthenticationError,
    MovieNotInWatchlistError,
    NotFoundError,
    ServiceError,
)


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Centralize translation of domain errors into API errors.

    Notes
    -----
    - Services never import Flask request state; collaborators are injected
      through keyword-only constructor arguments.
    """

    # -------------------------- Error handling ------------------------------

    @staticmethod
    def translate_exceptions(exc: Exception) -> Exception:
        """
        Map domain/service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :returns: Translated exception ready to be rendered.
        :rtype: Exception
        """
        if isinstance(exc, NotFoundError | MovieNotInWatchlistError):
            # → 404 Not Found
            return api_errors.NotFound(str(exc), code=exc.code)

        if isinstance(exc, AuthenticationError):
            # → 401 Unauthorized
            return api_errors.Unauthorized(str(exc), code=exc.code)

        # Any other ServiceError subclass → 400 Bad Request
        if isinstance(exc, ServiceError):
            return api_errors.Invalid(str(exc), code=exc.code)

        # Fallback: return untouched (will bubble up to Flask handler)
        return exc
