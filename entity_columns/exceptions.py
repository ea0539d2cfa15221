class ColumnizeError(ValueError):
    """Base class for exceptions thrown for an unusable layout configuration."""


class InvalidColumnCountError(ColumnizeError):
    """Thrown when fewer than one column is requested."""


class InvalidThumbnailConstraintError(ColumnizeError):
    """Thrown when a maximum thumbnail width or height is negative."""
