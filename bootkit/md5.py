"""MD5 message digest (RFC 1321)."""

from __future__ import annotations

import struct

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_BLOCK_SIZE = 64

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_K = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE, 0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE, 0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA, 0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED, 0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C, 0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05, 0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039, 0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1, 0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_SHIFTS = ((7, 12, 17, 22), (5, 9, 14, 20), (4, 11, 16, 23), (6, 10, 15, 21))


def _rol(n: int, k: int) -> int:
    return ((n << k) | (n >> (32 - k))) & _MASK32


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for i, k in enumerate(_K):
        rnd = i >> 4
        if rnd == 0:
            f = d ^ (b & (c ^ d))
            g = i
        elif rnd == 1:
            f = c ^ (d & (c ^ b))
            g = (5 * i + 1) % 16
        elif rnd == 2:
            f = b ^ c ^ d
            g = (3 * i + 5) % 16
        else:
            f = c ^ (b | (~d & _MASK32))
            g = (7 * i) % 16
        rotated = _rol((a + f + k + words[g]) & _MASK32, _SHIFTS[rnd][i & 3])
        a, d, c, b = d, c, b, (b + rotated) & _MASK32
    return tuple((x + y) & _MASK32 for x, y in zip(state, (a, b, c, d)))


def _compress_all(state: tuple[int, ...], data: bytes) -> tuple[int, ...]:
    for offset in range(0, len(data), _BLOCK_SIZE):
        state = _compress(state, data[offset:offset + _BLOCK_SIZE])
    return state


class Md5:
    """Incremental MD5 hasher."""

    digest_size = 16
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
        tail = self._pending + b"\x80" + padding + struct.pack("<Q", bits)
        return struct.pack("<4I", *_compress_all(self._state, tail))

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()


def md5(data) -> bytes:
    """Return the MD5 digest of ``data``."""
    hasher = Md5()
    hasher.update(data)
    return hasher.digest()