"""Git repository access errors."""

from typing import Optional, Sequence

from .base import GitDistanceError


class RepositoryError(GitDistanceError):
    """Raised when git cannot answer a question about the repository."""

    def __init__(self, reason: str, command: Optional[Sequence[str]] = None):
        details = {}
        if command:
            details["command"] = " ".join(command)

        super().__init__(reason, details=details)
        self.reason = reason
        self.command = list(command) if command else None
