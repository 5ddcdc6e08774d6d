"""Custom exception hierarchy for the puzzle player."""


class PuzzleError(Exception):
    """Base exception for puzzle player failures."""


class PuzzleFormatError(PuzzleError):
    """Raised when a puzzle payload is malformed or internally inconsistent."""


class PuzzleAPIError(PuzzleError):
    """Raised when the puzzle backend cannot be reached or answers with an error."""
