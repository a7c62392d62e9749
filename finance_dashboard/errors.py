class InvalidArgument(ValueError):
    """Raised when a caller breaks a documented precondition."""
