"""Boot-loader utilities: MD5/SHA-256 hashing, printf, CPIO stripping and driver matching."""

__version__ = "0.1.0"

__all__ = [
    "cpio_strip",
    "devices",
    "hashing",
    "md5",
    "printf",
    "sha256",
]