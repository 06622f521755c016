"""
Exceptions raised at the boundary between the engine and its collaborators.

The engine's own operations never raise these; they exist so score and
storage collaborators share one vocabulary with callers.
"""


class MinefieldError(Exception):
    """Base class for minefield errors."""


class DuplicateSubmissionError(MinefieldError):
    """A score was already submitted for this game session."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Score already submitted for session {session_id}")
        self.session_id = session_id
