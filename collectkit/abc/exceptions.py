"""abstract module for exceptions"""


class CollectkitException(Exception):
    """Base class for collectkit related exceptions."""

    def __init__(self, message: str, *args) -> None:
        self.message = message
        super().__init__(message, *args)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CollectkitException):
            return self.args == other.args
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.args)


class PreconditionError(CollectkitException):
    """Raise if a caller violated a precondition. This signals a defect in the calling code."""


class IndexOutOfBoundsError(PreconditionError, IndexError):
    """Raise if a position is outside the bounds of a collection."""

    def __init__(self, position, start, end) -> None:
        super().__init__(f"index {position!r} out of bounds [{start!r}, {end!r})")


class InvalidBatchSizeError(PreconditionError, ValueError):
    """Raise if a batch size is not a positive integer."""

    def __init__(self, batch_size) -> None:
        super().__init__(f"batch size must be a positive integer, got {batch_size!r}")


class InvalidRangeError(PreconditionError, ValueError):
    """Raise if a range of positions can not be used to create a sub-view."""
