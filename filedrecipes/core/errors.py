from typing import Optional


class RecipeFormatError(ValueError):
    """Raised when a recipe file does not follow the section format."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message} ({line!r})"
        super().__init__(message)


class RecipeNotFoundError(LookupError):
    pass
