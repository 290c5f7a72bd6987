class ContentValidationError(ValueError):
    """Client-supplied content breaks a rule of the content model."""


class StorageError(RuntimeError):
    """The object-storage service rejected or failed a request."""


class NotFoundError(LookupError):
    """A referenced row does not exist."""
