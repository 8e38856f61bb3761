"""Custom exception hierarchy for street_resolver."""
from typing import Optional


class StreetResolverError(Exception):
    """Base exception for all street_resolver errors."""


class InvalidLookupRequest(StreetResolverError):
    """A lookup request is missing a required field or could not be parsed."""

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"{field} is required")


class StreetStoreError(StreetResolverError):
    """The street store could not be queried."""

    def __init__(self, status: Optional[int], detail: str):
        self.status = status
        self.detail = detail
        super().__init__(f"Street store error (status {status}): {detail}")
