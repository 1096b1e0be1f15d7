"""Custom exception hierarchy for catalogmatch."""


class CatalogMatchError(Exception):
    """Base exception for all catalogmatch errors."""


class InvalidThreshold(CatalogMatchError):
    """The threshold is not a number in the closed range [0, 1]."""

    def __init__(self, threshold: object):
        self.threshold = threshold
        super().__init__(
            f"Threshold must be a number between 0 and 1, got {threshold!r}"
        )


class InvalidLimit(CatalogMatchError):
    """The result limit is not a positive integer."""

    def __init__(self, limit: object):
        self.limit = limit
        super().__init__(f"Limit must be a positive integer, got {limit!r}")


class InvalidKey(CatalogMatchError):
    """A key projection returned something other than a string or None."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Match keys must be str or None, got {type(value).__name__}: "
            f"{value!r}"
        )


class NoMatchFound(CatalogMatchError):
    """No candidate scored above the threshold."""

    def __init__(self, query: str, threshold: float):
        self.query = query
        self.threshold = threshold
        super().__init__(
            f"No match found for '{query}' above threshold {threshold}"
        )
