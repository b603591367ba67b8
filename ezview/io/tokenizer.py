# ezview/io/tokenizer.py
from typing import BinaryIO, Optional

from ..constants import MAX_TOKEN_LENGTH, READ_CHUNK
from ..errors import BufferOverflow, UnexpectedEndOfInput


HASH = 35  # '#'
CR = 13
LF = 10
WHITESPACE = (32, 9, CR, LF)  # spacja, tab, CR, LF


class ByteTokenizer:
    """
    Czytnik bajtów ze strumienia binarnego z cofaniem o jeden bajt.

    Strumień nie musi obsługiwać seek(): czytamy blokami do własnego bufora,
    a "cofnięcie" to po prostu przesunięcie kursora w tym buforze.
    """

    def __init__(self, stream: BinaryIO, chunk_size: int = READ_CHUNK):
        self._stream = stream
        self._chunk_size = chunk_size
        self._buf = b""
        self._pos = 0
        self._can_unread = False

    # ---------- surowe bajty ----------

    def _fill(self) -> bool:
        chunk = self._stream.read(self._chunk_size)
        if not chunk:
            return False
        self._buf = chunk
        self._pos = 0
        return True

    def read_byte(self) -> Optional[int]:
        """Następny bajt (0..255) albo None na końcu strumienia."""
        if self._pos >= len(self._buf) and not self._fill():
            self._can_unread = False
            return None
        b = self._buf[self._pos]
        self._pos += 1
        self._can_unread = True
        return b

    def unread(self):
        """Cofa ostatnio przeczytany bajt (tylko jeden poziom)."""
        if not self._can_unread:
            raise RuntimeError("Nie ma bajtu do cofnięcia.")
        self._pos -= 1
        self._can_unread = False

    def read_exact(self, n: int) -> bytes:
        """Dokładnie n bajtów albo UnexpectedEndOfInput."""
        out = bytearray()
        while len(out) < n:
            if self._pos >= len(self._buf) and not self._fill():
                raise UnexpectedEndOfInput(
                    f"Unexpected EOF: expected {n} bytes, got {len(out)}"
                )
            take = min(n - len(out), len(self._buf) - self._pos)
            out += self._buf[self._pos : self._pos + take]
            self._pos += take
        self._can_unread = False
        return bytes(out)

    # ---------- komentarze / białe znaki / tokeny ----------

    def skip_comments(self):
        """
        Pomija komentarze '#...' do końca linii (także kilka linii z rzędu).
        Jeśli następny bajt nie zaczyna komentarza – zostaje cofnięty.
        """
        in_comment = False
        while True:
            b = self.read_byte()
            if b is None:
                raise UnexpectedEndOfInput()
            if in_comment:
                if b in (LF, CR):
                    in_comment = False
            elif b == HASH:
                in_comment = True
            else:
                self.unread()
                return

    def skip_whitespace(self):
        """
        Pomija spacje, taby, CR i LF. Komentarz rozpoznajemy tylko zaraz po
        znaku końca linii – '#' w środku linii nie jest komentarzem.
        """
        while True:
            b = self.read_byte()
            if b is None:
                raise UnexpectedEndOfInput()
            if b in (LF, CR):
                self.skip_comments()
            if b not in WHITESPACE:
                self.unread()
                return

    def read_token(self, max_length: int = MAX_TOKEN_LENGTH) -> bytes:
        """
        Czyta bajty do najbliższego białego znaku (który zostaje w strumieniu).
        Token może być pusty, jeśli od razu trafimy na biały znak.
        """
        tok = bytearray()
        while True:
            b = self.read_byte()
            if b is None:
                raise UnexpectedEndOfInput()
            if b in WHITESPACE:
                self.unread()
                return bytes(tok)
            if len(tok) >= max_length:
                raise BufferOverflow(
                    f"Token longer than {max_length} bytes: {bytes(tok[:16])!r}..."
                )
            tok.append(b)
