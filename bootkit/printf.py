"""Minimal printf-style formatting with the loader's console conventions.

Supported conversions: ``%s``, ``%c``, ``%p``, ``%x``, ``%d``, ``%u``, the
``z``, ``l`` and ``ll`` length prefixes for ``d``/``u``/``x``, and ``%%``.
Width, precision and flag characters are accepted but ignored.  Unknown
conversions produce ``?``.
"""

from __future__ import annotations

import sys
from typing import Callable, Iterable, Iterator, TextIO

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_DIGITS = "0123456789abcdef"
_IGNORED_MODIFIERS = frozenset("0123456789-.")


def _write_num(base: int, n: int) -> str:
    if n == 0:
        return "0"
    digits = []
    while n > 0:
        n, rem = divmod(n, base)
        digits.append(_DIGITS[rem])
    return "".join(reversed(digits))


def _int_arg(value) -> int:
    """An ``int`` argument widened to an unsigned 64-bit value."""
    v = int(value) & _MASK32
    if v & 0x80000000:
        v -= 1 << 32
    return v & _MASK64


def _wide_arg(value) -> int:
    """A ``size_t``/``long`` argument as an unsigned 64-bit value."""
    return int(value) & _MASK64


def _pointer_arg(value) -> int:
    return 0 if value is None else int(value) & _MASK64


def _char_arg(value) -> str:
    if isinstance(value, str) and len(value) == 1:
        return value
    return chr(int(value) & 0xFF)


def _string_arg(value) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    return str(value)


def _sized(conv: str, take: Callable[[], object]) -> str:
    if conv in ("d", "u"):
        return _write_num(10, _wide_arg(take()))
    if conv == "x":
        return _write_num(16, _wide_arg(take()))
    return "?"


def _render(fmt: str, args: Iterable) -> Iterator[str]:
    pending = iter(args)

    def take():
        try:
            return next(pending)
        except StopIteration:
            raise ValueError(f"format {fmt!r} needs more arguments") from None

    chars = iter(fmt)
    escape = False
    for ch in chars:
        if not escape:
            if ch == "%":
                escape = True
            else:
                yield ch
            continue
        if ch == "%":
            yield "%"
            escape = False
            continue
        if ch in _IGNORED_MODIFIERS:
            continue
        escape = False
        if ch == "s":
            yield _string_arg(take())
        elif ch == "p":
            yield _write_num(16, _pointer_arg(take()))
        elif ch == "x":
            yield _write_num(16, _int_arg(take()))
        elif ch in ("d", "u"):
            yield _write_num(10, _int_arg(take()))
        elif ch == "c":
            yield _char_arg(take())
        elif ch == "z":
            yield _sized(next(chars, ""), take)
        elif ch == "l":
            conv = next(chars, "")
            if conv == "l":
                conv = next(chars, "")
            yield _sized(conv, take)
        else:
            yield "?"


def sprintf(fmt: str, *args) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    return "".join(_render(fmt, args))


def printf(fmt: str, *args, out: TextIO | None = None) -> int:
    """Format and write to ``out`` (standard output by default); return the character count."""
    text = sprintf(fmt, *args)
    (sys.stdout if out is None else out).write(text)
    return len(text)


def puts(text: str, out: TextIO | None = None) -> int:
    """Write ``text`` and a newline; return the character count."""
    line = text + "\n"
    (sys.stdout if out is None else out).write(line)
    return len(line)