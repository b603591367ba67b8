from .errors import (
    BufferOverflow,
    InvalidFormat,
    InvalidSample,
    OpenFailed,
    PPMError,
    UnexpectedEndOfInput,
)
from .image import Image, RGBSample
from .io.ppm import decode_ppm, load_ppm

__version__ = "0.1.0"

__all__ = [
    "Image",
    "RGBSample",
    "decode_ppm",
    "load_ppm",
    "PPMError",
    "OpenFailed",
    "InvalidFormat",
    "UnexpectedEndOfInput",
    "BufferOverflow",
    "InvalidSample",
]
