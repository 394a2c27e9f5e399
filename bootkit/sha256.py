"""SHA-256 message digest (FIPS 180-3)."""

from __future__ import annotations

import struct

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_BLOCK_SIZE = 64

_INITIAL_STATE = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def _ror(n: int, k: int) -> int:
    return ((n >> k) | (n << (32 - k))) & _MASK32


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    w = list(struct.unpack(">16I", block))
    for i in range(16, 64):
        x15, x2 = w[i - 15], w[i - 2]
        r0 = _ror(x15, 7) ^ _ror(x15, 18) ^ (x15 >> 3)
        r1 = _ror(x2, 17) ^ _ror(x2, 19) ^ (x2 >> 10)
        w.append((r1 + w[i - 7] + r0 + w[i - 16]) & _MASK32)

    a, b, c, d, e, f, g, h = state
    for k, wi in zip(_K, w):
        s1 = _ror(e, 6) ^ _ror(e, 11) ^ _ror(e, 25)
        ch = g ^ (e & (f ^ g))
        t1 = (h + s1 + ch + k + wi) & _MASK32
        s0 = _ror(a, 2) ^ _ror(a, 13) ^ _ror(a, 22)
        maj = (a & b) | (c & (a | b))
        t2 = (s0 + maj) & _MASK32
        h, g, f, e, d, c, b, a = g, f, e, (d + t1) & _MASK32, c, b, a, (t1 + t2) & _MASK32
    return tuple((x + y) & _MASK32 for x, y in zip(state, (a, b, c, d, e, f, g, h)))


def _compress_all(state: tuple[int, ...], data: bytes) -> tuple[int, ...]:
    for offset in range(0, len(data), _BLOCK_SIZE):
        state = _compress(state, data[offset:offset + _BLOCK_SIZE])
    return state


class Sha256:
    """Incremental SHA-256 hasher."""

    digest_size = 32
    block_size = _BLOCK_SIZE

    def __init__(self):
        self._state = _INITIAL_STATE
        self._length = 0
        self._pending = b""

    def update(self, data) -> None:
        """Feed more bytes into the hash."""
        chunk = bytes(memoryview(data))
        self._length += len(chunk)
        buffered = self._pending + chunk
        full = len(buffered) - len(buffered) % _BLOCK_SIZE
        self._state = _compress_all(self._state, buffered[:full])
        self._pending = buffered[full:]

    def digest(self) -> bytes:
        """Return the digest of everything fed so far, leaving the hasher usable."""
        bits = (self._length * 8) & _MASK64
        padding = b"\x00" * ((55 - len(self._pending)) % _BLOCK_SIZE)
        tail = self._pending + b"\x80" + padding + struct.pack(">Q", bits)
        return struct.pack(">8I", *_compress_all(self._state, tail))

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()


def sha256(data) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    hasher = Sha256()
    hasher.update(data)
    return hasher.digest()