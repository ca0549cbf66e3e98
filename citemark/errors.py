class InvalidSourceError(ValueError):
    """Raised when citation sources cannot be applied to a text."""
