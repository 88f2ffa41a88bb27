"""Checksum helpers for artifact identity.

The identity of a rendered PDF is the SHA-1 of its bytes as a 40-character
lowercase hex string.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

CHUNK_SIZE = 64 * 1024


def sha1_hex(data: bytes) -> str:
    """Return the SHA-1 hex digest of raw bytes."""
    return hashlib.sha1(data).hexdigest()


def file_checksum(path: Path) -> str:
    """SHA-1 hex digest of the file at *path*, read in chunks.

    Raises whatever ``OSError`` opening or reading the file raises;
    callers decide whether a missing file is an error.
    """
    digest = hashlib.sha1()
    with Path(path).open("rb") as fh:
        for chunk in iter(lambda: fh.read(CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def is_identity(value: str) -> bool:
    """Whether *value* looks like an artifact identity (40 lowercase hex chars)."""
    return len(value) == 40 and all(c in "0123456789abcdef" for c in value)
