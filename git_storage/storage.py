# git_storage/storage.py
"""
A thin facade that treats one GitHub repository + branch as a file store.

Every public method is a direct call‑through to the GitHub content API
(via PyGithub).  Nothing is cached between calls and nothing is retried:
remote errors propagate unchanged as :class:`github.GithubException`.

GitHub may serve cached content for a few seconds after a write, so an
immediate ``list_files``/``download_file`` can lag behind a ``save_file``.
The ``etag`` and ``cache-control`` headers returned by
:meth:`GitStorage.get_repository_info` help spot this, as do the
``x-ratelimit-*`` headers for heavy usage.
"""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from github import Github, GithubException, UnknownObjectException
from github.Auth import Token
from requests.exceptions import RequestException

from .config import CONTENT_ENCODING, DEFAULT_BRANCH, LISTING_FIELDS, TOKEN_ENV_VAR
from .errors import InvalidArgumentError, NotFoundError
from .payload import decode_payload
from .utils import path_from_download_url

log = logging.getLogger(__name__)


class LookupStatus(enum.Enum):
    FOUND = "found"
    ABSENT = "absent"
    FAILED = "failed"


@dataclass(frozen=True)
class MarkerLookup:
    """Outcome of looking up the current ``sha`` of a path.

    ``ABSENT`` means GitHub confirmed there is no file at the path (404, or
    the path is a directory).  ``FAILED`` means the lookup itself did not
    succeed; ``error`` holds the exception so the caller can decide.
    """

    status: LookupStatus
    sha: Optional[str] = None
    error: Optional[BaseException] = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


class GitStorage:
    """Create, read, update and delete files in a single GitHub repository.

    Parameters
    ----------
    owner:
        GitHub user or organisation name.
    repo:
        Repository name.
    token:
        Optional personal access token.  Without it only public
        repositories can be read and every write is rejected by GitHub.
    default_branch:
        Branch used when a call does not name one.
    """

    def __init__(
        self,
        owner: str,
        repo: str,
        token: Optional[str] = None,
        default_branch: Optional[str] = DEFAULT_BRANCH,
    ):
        if not owner or not owner.strip():
            raise InvalidArgumentError("Owner cannot be empty")
        if not repo or not repo.strip():
            raise InvalidArgumentError("Repository name cannot be empty")
        self.owner = owner
        self.repo = repo
        self.token = token
        if default_branch and default_branch.strip():
            self.default_branch = default_branch
        else:
            self.default_branch = DEFAULT_BRANCH

        # lazy: no request until the first content call
        if token:
            self.github = Github(auth=Token(token), lazy=True)
        else:
            self.github = Github(lazy=True)  # read-only mode
        self._repo = self.github.get_repo(self.full_name)

    @classmethod
    def from_env(
        cls, owner: str, repo: str, default_branch: str = DEFAULT_BRANCH
    ) -> "GitStorage":
        """Build a handle using the token from ``$GITHUB_TOKEN`` (if set)."""
        return cls(owner, repo, token=os.getenv(TOKEN_ENV_VAR), default_branch=default_branch)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def read_only(self) -> bool:
        return not self.token

    def set_default_branch(self, branch: str) -> None:
        """Replace the branch used when calls omit one."""
        if not branch or not branch.strip():
            raise InvalidArgumentError("Branch name cannot be empty")
        self.default_branch = branch

    def _branch(self, branch: Optional[str]) -> str:
        return branch or self.default_branch

    # ------------------------------------------------------------------ #
    #  Reads
    # ------------------------------------------------------------------ #
    def get_repository_info(self) -> Dict[str, Any]:
        """Fetch repository metadata together with the response headers.

        Returns ``{"data": ..., "headers": ...}``.  ``headers`` carries the
        rate‑limit counters (``x-ratelimit-limit``, ``x-ratelimit-remaining``,
        ``x-ratelimit-reset``) and cache validators (``etag``,
        ``cache-control``) untouched.
        """
        log.debug("Fetching repository info for %s", self.full_name)
        repo = self.github.get_repo(self.full_name)
        return {"data": repo.raw_data, "headers": repo.raw_headers}

    def list_files(self, folder: str, branch: Optional[str] = None) -> List[Dict[str, Any]]:
        """List the entries of *folder*.

        Returns an empty list when *folder* turns out to be a file.  Rows
        are built from the listing itself; touching ``raw_data`` on a
        listing entry would fetch that file.
        """
        ref = self._branch(branch)
        log.debug("Listing %s@%s", folder, ref)
        contents = self._repo.get_contents(folder, ref=ref)
        if isinstance(contents, list):
            return [
                {field: getattr(entry, field) for field in LISTING_FIELDS}
                for entry in contents
            ]
        return []

    def lookup_version_marker(self, path: str, branch: Optional[str] = None) -> MarkerLookup:
        """Look up the current ``sha`` of *path*, keeping failure apart from absence."""
        ref = self._branch(branch)
        try:
            contents = self._repo.get_contents(path, ref=ref)
        except UnknownObjectException:
            log.debug("No file at %s@%s", path, ref)
            return MarkerLookup(LookupStatus.ABSENT)
        except (GithubException, RequestException) as exc:
            log.warning("Could not lookup %s@%s: %s", path, ref, exc)
            return MarkerLookup(LookupStatus.FAILED, error=exc)
        if isinstance(contents, list):
            log.debug("%s@%s is a directory", path, ref)
            return MarkerLookup(LookupStatus.ABSENT)
        return MarkerLookup(LookupStatus.FOUND, sha=contents.sha)

    def get_file_version_marker(self, path: str, branch: Optional[str] = None) -> Optional[str]:
        """Return the ``sha`` of *path*, or ``None`` if it cannot be resolved.

        ``None`` covers absence as well as permission and network errors;
        use :meth:`lookup_version_marker` to tell them apart.
        """
        return self.lookup_version_marker(path, branch).sha

    def download_file(self, path: str, branch: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """Return the file entry (``content`` plus metadata) for *path*.

        Returns ``None`` unless GitHub served the body inline as base64;
        directories and files too large for the content API end up here.
        """
        ref = self._branch(branch)
        log.debug("Downloading %s@%s", path, ref)
        contents = self._repo.get_contents(path, ref=ref)
        if isinstance(contents, list) or contents.encoding != CONTENT_ENCODING:
            return None
        return contents.raw_data

    def path_from_download_url(self, url: str) -> Optional[str]:
        """Repository path for a ``raw.githubusercontent.com`` *url* of this repo."""
        return path_from_download_url(url, self.owner, self.repo)

    # ------------------------------------------------------------------ #
    #  Writes
    # ------------------------------------------------------------------ #
    def save_file(
        self,
        payload: str,
        path: str,
        message: Optional[str] = None,
        branch: Optional[str] = None,
        skip_version_check: bool = False,
    ) -> Dict[str, Any]:
        """Create or update *path* with base64 *payload*.

        Unless *skip_version_check* is set the current ``sha`` is looked up
        first; a found ``sha`` turns the write into an update.  If that lookup
        fails for any reason other than absence the remote error is raised
        and nothing is written.  Skipping the check saves a request but only
        works for paths that do not exist yet.

        Returns the PyGithub result: ``{"content": ContentFile, "commit": Commit}``.
        """
        ref = self._branch(branch)
        # PyGithub base64-encodes the body itself
        content = decode_payload(payload)
        sha = None
        if not skip_version_check:
            lookup = self.lookup_version_marker(path, ref)
            if lookup.status is LookupStatus.FAILED:
                raise lookup.error
            sha = lookup.sha

        if message is None:
            message = f"{'Update' if sha else 'Create'} {path}"

        if sha:
            log.info("Updating %s@%s", path, ref)
            return self._repo.update_file(path, message, content, sha, branch=ref)
        log.info("Creating %s@%s", path, ref)
        return self._repo.create_file(path, message, content, branch=ref)

    def delete_file(self, path: str, branch: Optional[str] = None) -> Dict[str, Any]:
        """Delete *path*; raises :class:`NotFoundError` if there is no such file."""
        ref = self._branch(branch)
        lookup = self.lookup_version_marker(path, ref)
        if lookup.status is LookupStatus.FAILED:
            raise lookup.error
        if not lookup.found:
            raise NotFoundError(path, ref)

        log.info("Deleting %s@%s", path, ref)
        self._repo.delete_file(path, f"Delete {path}", lookup.sha, branch=ref)
        return {"path": path, "deleted": True}


__all__ = ["GitStorage", "MarkerLookup", "LookupStatus"]
