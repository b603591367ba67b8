# ezview/io/ppm.py
import logging
import re
from dataclasses import dataclass
from typing import BinaryIO, List

from ..constants import MAX_TOKEN_LENGTH
from ..errors import InvalidFormat, InvalidSample, OpenFailed
from ..image import Image, RGBSample
from .tokenizer import ByteTokenizer

logger = logging.getLogger(__name__)

MAGIC_P3 = "P3"
MAGIC_P6 = "P6"
MAX_MAXVAL = 65535
MAX_DIMENSION = 0xFFFFFFFF  # szerokość i wysokość to uint32

_INT_RE = re.compile(rb"[+-]?[0-9]+")


@dataclass(frozen=True)
class PPMHeader:
    magic: str  # "P3" albo "P6"
    width: int
    height: int
    maxval: int

    @property
    def bytes_per_sample(self) -> int:
        # P6: do 255 jeden bajt na kanał, powyżej dwa (big-endian)
        return 1 if self.maxval < 256 else 2


def _parse_int(token: bytes):
    """Ścisłe parsowanie liczby dziesiętnej; None dla śmieci."""
    if not _INT_RE.fullmatch(token):
        return None
    return int(token)


def _header_int(token: bytes, what: str) -> int:
    v = _parse_int(token)
    if v is None:
        raise InvalidFormat(f"Expected a {what} value, got {token[:32]!r}")
    if v < 0:
        raise InvalidFormat(f"Negative {what} value: {v}")
    return v


def _normalize(v: int, maxval: int) -> float:
    if maxval == 0:
        return 0.0
    return v / maxval


# ---------- nagłówek ----------


def read_header(tok: ByteTokenizer, max_length: int = MAX_TOKEN_LENGTH) -> PPMHeader:
    magic = tok.read_token(max_length)
    if magic not in (b"P3", b"P6"):
        raise InvalidFormat(
            f"The source file is not a valid PPM3 or PPM6 file (magic {magic[:16]!r})"
        )

    tok.skip_whitespace()
    width = _header_int(tok.read_token(max_length), "width")

    tok.skip_whitespace()
    height = _header_int(tok.read_token(max_length), "height")
    for what, v in (("width", width), ("height", height)):
        if v > MAX_DIMENSION:
            raise InvalidFormat(f"Image {what} {v} does not fit in 32 bits")

    tok.skip_whitespace()
    maxval = _header_int(tok.read_token(max_length), "maximum color")
    if maxval > MAX_MAXVAL:
        raise InvalidFormat(
            f"Expected maximum color value between 0 and {MAX_MAXVAL}, got {maxval}"
        )

    header = PPMHeader(magic.decode("ascii"), width, height, maxval)
    logger.debug("PPM header: %s", header)
    return header


# ---------- P3 (ASCII) ----------


def read_samples_p3(
    tok: ByteTokenizer, header: PPMHeader, max_length: int = MAX_TOKEN_LENGTH
) -> List[RGBSample]:
    w, h, maxval = header.width, header.height, header.maxval
    # lista rośnie wierszami, dopiero po pełnym odczycie trafia do Image
    px: List[RGBSample] = []
    if w == 0:
        return px

    for y in range(h):
        for x in range(w):
            rgb = []
            for _ in range(3):
                tok.skip_whitespace()
                token = tok.read_token(max_length)
                v = _parse_int(token)
                if v is None:
                    raise InvalidSample(
                        InvalidSample.NOT_A_NUMBER,
                        f"Expected a color value at ({x}, {y}), got {token[:32]!r}",
                    )
                if v < 0:
                    raise InvalidSample(
                        InvalidSample.NEGATIVE,
                        f"A negative color sample is not a valid value ({v})",
                    )
                if v > maxval:
                    raise InvalidSample(
                        InvalidSample.EXCEEDS_MAXIMUM,
                        f"A color sample ({v}) is greater than the maximum color "
                        f"value ({maxval})",
                    )
                rgb.append(_normalize(v, maxval))
            px.append(RGBSample(*rgb))
    return px


# ---------- P6 (binarny) ----------


def read_samples_p6(tok: ByteTokenizer, header: PPMHeader) -> List[RGBSample]:
    w, h, maxval = header.width, header.height, header.maxval
    px: List[RGBSample] = []

    # białe znaki (i komentarze) po maxval, raz przed danymi
    tok.skip_whitespace()
    if w == 0:
        return px

    bps = header.bytes_per_sample
    row_len = w * 3 * bps
    lut = [_normalize(v, maxval) for v in range(maxval + 1)]

    for y in range(h):
        buf = tok.read_exact(row_len)
        if bps == 1:
            vals = buf
        else:
            vals = [(buf[i] << 8) | buf[i + 1] for i in range(0, row_len, 2)]
        if vals and max(vals) > maxval:
            raise InvalidSample(
                InvalidSample.EXCEEDS_MAXIMUM,
                f"A color sample ({max(vals)}) in row {y} is greater than the "
                f"maximum color value ({maxval})",
            )
        px.extend(
            RGBSample(lut[vals[i]], lut[vals[i + 1]], lut[vals[i + 2]])
            for i in range(0, w * 3, 3)
        )
    return px


# ---------- całość ----------


def decode_ppm(stream: BinaryIO, max_length: int = MAX_TOKEN_LENGTH) -> Image:
    """
    Dekoduje PPM (P3/P6) z otwartego strumienia binarnego.
    Strumień nie jest zamykany. Każdy błąd przerywa dekodowanie (PPMError).
    """
    tok = ByteTokenizer(stream)
    header = read_header(tok, max_length)
    if header.magic == MAGIC_P3:
        px = read_samples_p3(tok, header, max_length)
    else:
        px = read_samples_p6(tok, header)
    image = Image(header.width, header.height, px)
    logger.debug("Decoded %s image %dx%d", header.magic, image.width, image.height)
    return image


def load_ppm(path, max_length: int = MAX_TOKEN_LENGTH) -> Image:
    """Wczytuje plik PPM z dysku; plik jest zamykany zawsze, także po błędzie."""
    try:
        f = open(path, "rb")
    except OSError as e:
        raise OpenFailed(path, e.strerror or str(e)) from e
    with f:
        return decode_ppm(f, max_length)
