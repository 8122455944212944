# git_storage/__init__.py
"""
Public API for the GitHub‑backed file store.

Only the names re‑exported here are meant to be imported by applications.
"""

from .storage import GitStorage, MarkerLookup, LookupStatus
from .payload import (
    decode_payload,
    encode_file_to_payload,
    encode_file_to_payload_async,
    write_payload_to_file,
)
from .utils import generate_uuid, path_from_download_url
from .errors import (
    GitStorageError,
    InvalidArgumentError,
    NotFoundError,
    ReadError,
    RemoteFailure,
)

__all__ = [
    "GitStorage",
    "MarkerLookup",
    "LookupStatus",
    "decode_payload",
    "encode_file_to_payload",
    "encode_file_to_payload_async",
    "write_payload_to_file",
    "generate_uuid",
    "path_from_download_url",
    "GitStorageError",
    "InvalidArgumentError",
    "NotFoundError",
    "ReadError",
    "RemoteFailure",
]
