class TableBuilderError(ValueError):
    """Base class for exceptions thrown while building a table."""


class InvalidKindError(TableBuilderError):
    """Thrown when a cell or row is given a kind other than 'th' or 'td'."""


class InvalidArgumentError(TableBuilderError):
    """Thrown when a required list of attributes is given as None."""
