# File: multitouch/core/exceptions.py

"""
Error taxonomy for the persistence layer.

Not-found is never represented here: lookups return ``None``, ``{}``, ``[]``
or the ``-1`` uid sentinel instead.
"""


class MultitouchError(Exception):
    """Base class for errors raised by the multitouch backend."""


class StoreInitializationError(MultitouchError):
    """A store could not bind or prepare one of its queries. Not retryable."""


class StorageError(MultitouchError):
    """
    A query failed while executing.

    Carries the store operation that was running and the driver-level
    exception (also chained as ``__cause__``).
    """

    def __init__(self, operation: str, cause: BaseException):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")
