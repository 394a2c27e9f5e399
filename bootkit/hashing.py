"""Selecting a digest algorithm and printing digests."""

from __future__ import annotations

import enum
import sys
from typing import TextIO

from bootkit.md5 import md5
from bootkit.sha256 import sha256


class HashType(enum.Enum):
    """Digest algorithms available for image checks."""

    SHA_256 = "sha256"
    MD5 = "md5"


def get_hash(hash_type: HashType, data) -> bytes:
    """Hash ``data`` with SHA-256 when asked for it, and with MD5 otherwise."""
    if hash_type is HashType.SHA_256:
        return sha256(data)
    return md5(data)


def format_hash(digest) -> str:
    """Render a digest as two lower-case hex digits per byte."""
    return "".join(f"{byte:02x}" for byte in bytes(digest))


def print_hash(digest, file: TextIO | None = None) -> None:
    """Write a digest in hex followed by a newline."""
    out = sys.stdout if file is None else file
    out.write(format_hash(digest) + "\n")