class WrongType(Exception):
    """Raised when a string can't be converted to the requested type."""
