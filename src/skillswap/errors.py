"""Domain errors raised by the stores and mapped to HTTP responses."""


class SkillSwapError(Exception):
    """Base class for expected, caller-facing failures."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(SkillSwapError):
    """A required field is missing or malformed."""

    status_code = 400


class NotFound(SkillSwapError):
    """A referenced id does not exist."""

    status_code = 404
