# git_storage/errors.py
"""
Exceptions raised by :mod:`git_storage`.

Remote errors are *not* wrapped: anything GitHub rejects surfaces as the
original :class:`github.GithubException` (re‑exported here as
:data:`RemoteFailure`) so callers can inspect ``status`` and ``data``.
"""

from github import GithubException


class GitStorageError(Exception):
    """Base class for errors raised by the library itself."""


class InvalidArgumentError(GitStorageError, ValueError):
    """A required argument was empty or malformed."""


class NotFoundError(GitStorageError, LookupError):
    """The path has no version marker on the target branch."""

    def __init__(self, path: str, branch: str):
        super().__init__(f"File not found: {path} (branch {branch})")
        self.path = path
        self.branch = branch


class ReadError(GitStorageError):
    """Reading local bytes for a payload failed."""


RemoteFailure = GithubException

__all__ = [
    "GitStorageError",
    "InvalidArgumentError",
    "NotFoundError",
    "ReadError",
    "RemoteFailure",
]
