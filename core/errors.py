# core/errors.py


class InvalidStateError(RuntimeError):
    """Raised when an operation is called in a phase that forbids it. Always a caller bug."""
