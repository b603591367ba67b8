# ezview/image.py
from dataclasses import dataclass, field
from typing import List, NamedTuple


class RGBSample(NamedTuple):
    r: float
    g: float
    b: float


@dataclass
class Image:
    """Zdekodowany obraz: piksele RGB (0..1), wierszami od góry."""

    width: int
    height: int
    pixels: List[RGBSample] = field(default_factory=list)  # długość = width * height

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError("Wymiary obrazu nie mogą być ujemne.")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"Liczba pikseli ({len(self.pixels)}) != {self.width}x{self.height}"
            )

    @property
    def size(self):
        return self.width, self.height

    def pixel(self, x: int, y: int) -> RGBSample:
        return self.pixels[y * self.width + x]
