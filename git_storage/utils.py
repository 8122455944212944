# git_storage/utils.py
"""
Stand‑alone helpers that do not touch the network.

* :func:`path_from_download_url` – map a ``raw.githubusercontent.com`` URL
  back to the repository‑relative path.
* :func:`generate_uuid` – version‑selectable UUID strings, handy for
  building unique file names before an upload.
"""

from __future__ import annotations

import re
import uuid
from typing import Optional

from .config import RAW_CONTENT_HOST
from .errors import InvalidArgumentError


def path_from_download_url(url: str, owner: str, repo: str) -> Optional[str]:
    """Return the file path embedded in a raw download *url*.

    The URL must point at ``owner/repo``; the ref segment is skipped and any
    query string (e.g. the ``?token=...`` GitHub appends for private repos)
    is dropped.  Returns ``None`` when the URL does not fit.

    >>> path_from_download_url(
    ...     "https://raw.githubusercontent.com/me/box/main/a/b.txt?token=X", "me", "box")
    'a/b.txt'
    """
    pattern = (
        rf"https://{re.escape(RAW_CONTENT_HOST)}/"
        rf"{re.escape(owner)}/{re.escape(repo)}/[^/]+/(.+)"
    )
    match = re.search(pattern, url)
    if not match:
        return None
    return match.group(1).split("?")[0]


def generate_uuid(
    version: str,
    name: Optional[str] = None,
    namespace: Optional[str] = None,
) -> str:
    """Generate a UUID string.

    Parameters
    ----------
    version : str
        One of ``"v1"``, ``"v3"``, ``"v4"`` or ``"v5"``.
    name : str, optional
        Required for ``v3``/``v5``.
    namespace : str, optional
        Namespace UUID in canonical form, required for ``v3``/``v5``.
    """
    if version == "v1":
        return str(uuid.uuid1())
    if version == "v4":
        return str(uuid.uuid4())
    if version in ("v3", "v5"):
        if not name or not namespace:
            raise InvalidArgumentError(f"{version} requires name and namespace")
        try:
            ns = uuid.UUID(namespace)
        except ValueError as exc:
            raise InvalidArgumentError(f"Invalid namespace UUID: {namespace!r}") from exc
        make = uuid.uuid3 if version == "v3" else uuid.uuid5
        return str(make(ns, name))
    raise InvalidArgumentError(f"Unsupported UUID version: {version!r}")


__all__ = ["path_from_download_url", "generate_uuid"]
