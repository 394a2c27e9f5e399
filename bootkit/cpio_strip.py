"""Remove host metadata from a newc CPIO archive so builds are reproducible.

The i-node number, UID, GID and modification time of every entry are
overwritten in place; the archive keeps its exact size and layout.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

CPIO_ALIGNMENT = 4
HEADER_SIZE = 110
NEWC_MAGIC = b"070701"
TRAILER_NAME = "TRAILER!!!"

# (offset, length) of the ASCII-hex header fields.
_FIELDS = {
    "ino": (6, 8),
    "mode": (14, 8),
    "uid": (22, 8),
    "gid": (30, 8),
    "nlink": (38, 8),
    "mtime": (46, 8),
    "filesize": (54, 8),
    "devmajor": (62, 8),
    "devminor": (70, 8),
    "rdevmajor": (78, 8),
    "rdevminor": (86, 8),
    "namesize": (94, 8),
    "check": (102, 8),
}

# Inode numbers up to 10 are reserved on some file systems.
_FIRST_INODE = 11


class CpioError(ValueError):
    """The data is not a well-formed newc CPIO archive."""


@dataclass(frozen=True)
class CpioEntry:
    """One file entry of an archive, located by offsets into it."""

    name: str
    header_offset: int
    data_offset: int
    data: bytes


def _align(offset: int) -> int:
    return (offset + CPIO_ALIGNMENT - 1) // CPIO_ALIGNMENT * CPIO_ALIGNMENT


def _hex_field(header: bytes, field: str) -> int:
    start, length = _FIELDS[field]
    raw = header[start:start + length]
    try:
        return int(raw.decode("ascii"), 16)
    except (UnicodeDecodeError, ValueError):
        raise CpioError(f"bad {field} field {raw!r}") from None


def iter_entries(data) -> Iterator[CpioEntry]:
    """Yield the file entries of an archive, stopping at the trailer."""
    buf = bytes(memoryview(data))
    offset = 0
    while True:
        header = buf[offset:offset + HEADER_SIZE]
        if len(header) < HEADER_SIZE:
            raise CpioError(f"truncated header at offset {offset}")
        if header[:6] != NEWC_MAGIC:
            raise CpioError(f"bad magic at offset {offset}")
        namesize = _hex_field(header, "namesize")
        filesize = _hex_field(header, "filesize")
        name_start = offset + HEADER_SIZE
        name_end = name_start + namesize
        if namesize == 0 or name_end > len(buf):
            raise CpioError(f"bad file name at offset {offset}")
        raw_name = buf[name_start:name_end].split(b"\0", 1)[0]
        name = raw_name.decode("utf-8", errors="surrogateescape")
        if name == TRAILER_NAME:
            return
        data_offset = _align(name_end)
        data_end = data_offset + filesize
        if data_end > len(buf):
            raise CpioError(f"truncated data for {name!r}")
        yield CpioEntry(name, offset, data_offset, buf[data_offset:data_end])
        offset = _align(data_end)


def strip(data) -> bytes:
    """Return a copy of the archive with per-entry host metadata removed."""
    entries = list(iter_entries(data))
    out = bytearray(data)
    for index, entry in enumerate(entries):
        h = entry.header_offset
        # An 8-byte field written as a NUL-terminated string keeps 7 digits.
        ino_start, ino_len = _FIELDS["ino"]
        ino = f"{_FIRST_INODE + index:08x}".encode("ascii")[:ino_len - 1] + b"\0"
        out[h + ino_start:h + ino_start + ino_len] = ino
        for field in ("uid", "gid", "mtime"):
            start, length = _FIELDS[field]
            out[h + start:h + start + length] = bytes(length)
    return bytes(out)


def strip_file(path) -> None:
    """Strip the archive at ``path`` in place."""
    with open(path, "r+b") as archive:
        stripped = strip(archive.read())
        archive.seek(0)
        archive.write(stripped)


def main(argv=None) -> int:
    """Command-line entry point: strip the archive named by the one argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stderr.write("Usage: cpio-strip file\n Strip meta data from a CPIO file\n")
        return 1
    try:
        strip_file(Path(args[0]))
    except OSError as exc:
        sys.stderr.write(f"failed to process archive: {exc}\n")
        return 1
    except CpioError as exc:
        sys.stderr.write(f"failed to read CPIO info: {exc}\n")
        return 1
    return 0