"""
Scoring service exceptions. Each maps onto one HTTP status in main.py.
"""


class ScoringError(Exception):
    """Base class for errors surfaced to API callers"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ScoringError):
    status_code = 404


class InternalError(ScoringError):
    status_code = 500


class InconsistentMatchError(InternalError):
    """A stat entry that an earlier delivery created is missing"""

    def __init__(self, kind: str, name: str):
        super().__init__(f"No {kind} stats found for '{name}'")
        self.kind = kind
        self.name = name
