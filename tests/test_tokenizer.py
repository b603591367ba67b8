import io

import pytest

from ezview.errors import BufferOverflow, UnexpectedEndOfInput
from ezview.io.tokenizer import ByteTokenizer


def _tok(data: bytes, chunk_size: int = 4) -> ByteTokenizer:
    # mały blok, żeby cofanie działało też na granicy bloków
    return ByteTokenizer(io.BytesIO(data), chunk_size=chunk_size)


def test_read_byte_and_unread():
    t = _tok(b"ab")
    assert t.read_byte() == ord("a")
    t.unread()
    assert t.read_byte() == ord("a")
    assert t.read_byte() == ord("b")
    assert t.read_byte() is None


def test_unread_only_one_level():
    t = _tok(b"abc")
    t.read_byte()
    t.unread()
    with pytest.raises(RuntimeError):
        t.unread()


def test_unread_across_chunk_boundary():
    t = _tok(b"abcdef", chunk_size=3)
    for _ in range(4):
        t.read_byte()
    t.unread()
    assert t.read_byte() == ord("d")


def test_read_token_stops_at_whitespace_and_pushes_it_back():
    t = _tok(b"P3\n1")
    assert t.read_token() == b"P3"
    assert t.read_byte() == ord("\n")


def test_read_token_empty_when_at_whitespace():
    t = _tok(b" x")
    assert t.read_token() == b""


def test_read_token_eof_before_whitespace():
    t = _tok(b"255")
    with pytest.raises(UnexpectedEndOfInput):
        t.read_token()


def test_read_token_overflow():
    t = _tok(b"x" * 20 + b" ")
    with pytest.raises(BufferOverflow):
        t.read_token(max_length=10)


def test_read_token_exactly_max_length():
    t = _tok(b"x" * 10 + b" ")
    assert t.read_token(max_length=10) == b"x" * 10


def test_skip_whitespace_mixed():
    t = _tok(b" \t\r\n  42 ")
    t.skip_whitespace()
    assert t.read_token() == b"42"


def test_skip_whitespace_eof():
    t = _tok(b"   ")
    with pytest.raises(UnexpectedEndOfInput):
        t.skip_whitespace()


def test_comment_after_line_break_is_skipped():
    t = _tok(b"\n# komentarz\n# drugi\n7 ")
    t.skip_whitespace()
    assert t.read_token() == b"7"


def test_comment_mid_line_is_not_a_comment():
    t = _tok(b"  #x\n")
    t.skip_whitespace()
    assert t.read_token() == b"#x"


def test_skip_comments_without_comment_pushes_back():
    t = _tok(b"9 ")
    t.skip_comments()
    assert t.read_byte() == ord("9")


def test_skip_comments_unterminated():
    t = _tok(b"# bez konca")
    with pytest.raises(UnexpectedEndOfInput):
        t.skip_comments()


def test_skip_comments_at_eof():
    t = _tok(b"")
    with pytest.raises(UnexpectedEndOfInput):
        t.skip_comments()


def test_read_exact_after_unread():
    t = _tok(b"\n\x01\x02\x03\x04\x05")
    t.read_byte()
    t.read_byte()
    t.unread()
    assert t.read_exact(5) == b"\x01\x02\x03\x04\x05"


def test_read_exact_short():
    t = _tok(b"\x01\x02")
    with pytest.raises(UnexpectedEndOfInput):
        t.read_exact(3)
