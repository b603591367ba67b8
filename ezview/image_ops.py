# ezview/image_ops.py
from PIL import Image as PILImage

from .image import Image


def _clamp_byte(v: float) -> int:
    v = int(round(v * 255))
    if v < 0:
        return 0
    if v > 255:
        return 255
    return v


def to_rgb8(image: Image) -> bytes:
    """Bufor float (0..1) → bajty RGB 0..255, wierszami od góry."""
    out = bytearray(len(image.pixels) * 3)
    i = 0
    for r, g, b in image.pixels:
        out[i] = _clamp_byte(r)
        out[i + 1] = _clamp_byte(g)
        out[i + 2] = _clamp_byte(b)
        i += 3
    return bytes(out)


def to_pil_image(image: Image) -> PILImage.Image:
    """Obraz Pillow w trybie RGB (np. jako źródło tekstury w podglądzie)."""
    if image.width == 0 or image.height == 0:
        raise ValueError("Pusty obraz – brak pikseli do wyświetlenia.")
    return PILImage.frombytes("RGB", (image.width, image.height), to_rgb8(image))
