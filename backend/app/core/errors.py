"""Errors raised by the storage layers.

Route handlers translate these into HTTP responses: ``EntryNotFound`` becomes
a 404, ``StorageFault`` a 500.
"""


class CacheError(Exception):
    """Base class for key-value and cache failures."""


class EntryNotFound(CacheError):
    """Key was never written, was deleted, or has outlived its TTL."""

    def __init__(self, key: str):
        super().__init__(f"No entry for key '{key}'")
        self.key = key


class StorageFault(CacheError):
    """The underlying store could not complete a read or write."""
