"""Git collaborator: changed-file discovery and content retrieval."""

from .provider import GitContentProvider

__all__ = ["GitContentProvider"]
