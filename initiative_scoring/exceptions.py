"""Exception hierarchy for the prioritization engine.

Malformed criteria never raise: they degrade to documented defaults. The only
genuine failure conditions are an empty initiative collection (nothing to
divide by) and an unknown scoring scenario.
"""
from typing import Optional


class InitiativeScoringError(Exception):
    """Base exception for the engine; catch this to handle every engine failure."""


class InvalidInputError(InitiativeScoringError, ValueError):
    """Raised when the caller supplies input the engine cannot score.

    Args:
        message: Human-readable explanation.
        field: Name of the offending input (e.g. ``"initiatives"``), if any.
    """

    error_code = "invalid_input"

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)
