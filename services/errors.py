"""Exceptions raised by services and mapped to HTTP statuses by the routes."""


class NotFoundError(LookupError):
    """Requested row does not exist or belongs to another user (404)."""


class ConflictError(ValueError):
    """Row would duplicate an existing one (409)."""

    def __init__(self, message, existing=None):
        super().__init__(message)
        self.existing = existing
