# git_storage/payload.py
"""
Base64 glue between local bytes and the GitHub content API.

The content API wants file bodies as base64 text and returns them the same
way, wrapped with line breaks.  These helpers convert in both directions.
"""

from __future__ import annotations

import asyncio
import base64
import logging
import re
from pathlib import Path
from typing import BinaryIO, Union

from .errors import ReadError

log = logging.getLogger(__name__)

Source = Union[str, Path, BinaryIO]

_LINE_BREAKS = re.compile(r"\r?\n")


def _read_bytes(source: Source) -> bytes:
    if isinstance(source, (str, Path)):
        return Path(source).read_bytes()
    return source.read()


def encode_file_to_payload(source: Source) -> str:
    """Read *source* and return its bytes as base64 text (no data‑URI prefix).

    *source* is either a filesystem path or an open binary file object.
    Raises :class:`ReadError` if the bytes cannot be read.
    """
    try:
        data = _read_bytes(source)
    except OSError as exc:
        raise ReadError(f"File read error: {exc}") from exc
    log.debug("Encoded %d bytes", len(data))
    return base64.b64encode(data).decode("ascii")


async def encode_file_to_payload_async(source: Source) -> str:
    """Async variant of :func:`encode_file_to_payload`.

    The blocking read runs in a worker thread via :func:`asyncio.to_thread`.
    """
    return await asyncio.to_thread(encode_file_to_payload, source)


def decode_payload(payload: str) -> bytes:
    """Decode base64 *payload* (line breaks allowed) into raw bytes."""
    return base64.b64decode(_LINE_BREAKS.sub("", payload))


def write_payload_to_file(payload: str, destination: Union[str, Path]) -> Path:
    """Decode *payload* and write it to *destination*, creating parents."""
    target = Path(destination)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(decode_payload(payload))
    log.info("Wrote %s", target)
    return target


__all__ = [
    "encode_file_to_payload",
    "encode_file_to_payload_async",
    "decode_payload",
    "write_payload_to_file",
]
