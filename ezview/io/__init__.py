from .ppm import PPMHeader, decode_ppm, load_ppm, read_header
from .tokenizer import ByteTokenizer

__all__ = ["ByteTokenizer", "PPMHeader", "decode_ppm", "load_ppm", "read_header"]
