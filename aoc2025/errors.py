class InputFormatError(ValueError):
    """Raised when puzzle input does not match the format a day expects."""
