"""Read changed files and their contents from a git repository via subprocess."""

import subprocess
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from ..exceptions import RepositoryError
from ..logging_config import get_logger
from ..report.models import ContentPair

logger = get_logger(__name__)


class GitContentProvider:
    """Answer the questions the distance report needs from git.

    Every call runs one ``git -C <repo>`` subprocess with a timeout. Files
    that are missing at a ref, or that cannot be read, come back as empty
    strings so the metric engine never sees a failure.
    """

    def __init__(self, repo_path: str = ".", timeout: int = 30):
        self.repo_path = str(Path(repo_path).resolve())
        self.timeout = timeout

    def current_branch(self) -> str:
        """Name of the checked-out branch (``HEAD`` when detached)."""
        result = self._run(["rev-parse", "--abbrev-ref", "HEAD"])
        if result.returncode != 0:
            logger.debug("Failed to get current branch: %s", result.stderr.strip())
            raise RepositoryError("Not in a git repository", result.args)
        branch = result.stdout.strip()
        logger.debug("Current branch: %s", branch)
        return branch

    def changed_files(self, ref_a: str, ref_b: str) -> List[str]:
        """Paths that differ between ``ref_a`` and ``ref_b``, in git's order."""
        logger.debug("Getting changed files between %s and %s", ref_a, ref_b)
        # -z with quotePath off: paths come back verbatim, NUL-terminated
        result = self._run(
            ["-c", "core.quotePath=false", "diff", "--name-only", "-z", f"{ref_a}..{ref_b}"]
        )
        if result.returncode != 0:
            stderr = result.stderr.strip()
            logger.debug("Failed to get changed files: %s", stderr)
            raise RepositoryError(f"Failed to compare branches: {stderr}", result.args)
        files = [path for path in result.stdout.split("\0") if path]
        logger.debug("Found %d changed files", len(files))
        return files

    def file_exists(self, ref: str, path: str) -> bool:
        try:
            result = self._run(["cat-file", "-e", f"{ref}:{path}"])
        except RepositoryError:
            return False
        return result.returncode == 0

    def read_file(self, ref: str, path: str) -> str:
        """Content of ``path`` at ``ref``, or ``""`` if it is absent or unreadable."""
        if not self.file_exists(ref, path):
            logger.debug(
                "File %s does not exist in %s (treating as empty string)", path, ref
            )
            return ""

        logger.debug("Fetching %s from %s", path, ref)
        try:
            result = self._run(["show", f"{ref}:{path}"])
        except RepositoryError as e:
            logger.debug("Failed to fetch %s from %s: %s", path, ref, e)
            return ""
        if result.returncode != 0:
            logger.debug("Failed to fetch %s from %s: %s", path, ref, result.stderr.strip())
            return ""
        return result.stdout

    def iter_pairs(
        self, ref_a: str, ref_b: str, files: Optional[Sequence[str]] = None
    ) -> Iterator[ContentPair]:
        """Yield one ContentPair per file, fetching contents lazily.

        Args:
            ref_a: Old side of the comparison
            ref_b: New side of the comparison
            files: Paths to compare; defaults to ``changed_files(ref_a, ref_b)``
        """
        paths = self.changed_files(ref_a, ref_b) if files is None else list(files)
        for path in paths:
            yield ContentPair(
                identifier=path,
                content_a=self.read_file(ref_a, path),
                content_b=self.read_file(ref_b, path),
            )

    def _run(self, args: Sequence[str]) -> "subprocess.CompletedProcess[str]":
        cmd = ["git", "-C", self.repo_path, *args]
        try:
            result = subprocess.run(cmd, capture_output=True, timeout=self.timeout)
        except FileNotFoundError as e:
            raise RepositoryError("git executable not found", cmd) from e
        except subprocess.TimeoutExpired as e:
            raise RepositoryError(f"git timed out after {self.timeout}s", cmd) from e
        # decoded manually so \r\n survives untranslated
        result.stdout = result.stdout.decode("utf-8", errors="replace")
        result.stderr = result.stderr.decode("utf-8", errors="replace")
        return result
