"""Project exceptions."""


class StoreError(Exception):
    """The movie store failed to complete a read or write."""
