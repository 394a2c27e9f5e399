import hashlib
import io

import pytest

from bootkit.hashing import HashType, format_hash, get_hash, print_hash


@pytest.mark.parametrize("data", [b"", b"a", b"x" * 200])
def test_sha256_selected(data):
    assert get_hash(HashType.SHA_256, data) == hashlib.sha256(data).digest()


@pytest.mark.parametrize("data", [b"", b"a", b"x" * 200])
def test_md5_selected(data):
    assert get_hash(HashType.MD5, data) == hashlib.md5(data).digest()


def test_digest_lengths():
    assert len(get_hash(HashType.SHA_256, b"data")) == 32
    assert len(get_hash(HashType.MD5, b"data")) == 16


def test_format_hash_pads_bytes():
    assert format_hash(b"\x00\x0f\xff") == "000fff"


def test_format_hash_matches_hex():
    digest = get_hash(HashType.SHA_256, b"image")
    assert format_hash(digest) == digest.hex()


def test_print_hash_writes_line():
    out = io.StringIO()
    digest = get_hash(HashType.MD5, b"image")
    print_hash(digest, out)
    assert out.getvalue() == digest.hex() + "\n"


def test_print_hash_empty():
    out = io.StringIO()
    print_hash(b"", out)
    assert out.getvalue() == "\n"


def test_print_hash_defaults_to_stdout(capsys):
    print_hash(b"\xab\xcd")
    assert capsys.readouterr().out == "abcd\n"