"""Exception types for misuse that is not a data problem."""


class PrefStoreError(Exception):
    """Base error for prefstore."""


class RecordTypeError(PrefStoreError):
    """Raised when an object without declared fields is used as a record."""


class BackendError(PrefStoreError):
    """Raised when the backing resource cannot be written."""
