# ezview/render/state.py
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..constants import (
    ROTATION_STEP,
    SCALE_STEP,
    SCROLL_SCALE_STEP,
    SHEAR_STEP,
    TRANSLATION_STEP,
    TWEEN_FACTOR,
)

Affine = Tuple[float, float, float, float, float, float]
Matrix = List[List[float]]


@dataclass
class RenderState:
    """
    Parametry przekształcenia obrazu: wartości bieżące i docelowe.
    Klawisze zmieniają tylko cele, a tween() co klatkę dociąga bieżące.
    """

    scale: List[float] = field(default_factory=lambda: [1.0, 1.0])
    scale_to: List[float] = field(default_factory=lambda: [1.0, 1.0])
    translation: List[float] = field(default_factory=lambda: [0.0, 0.0])
    translation_to: List[float] = field(default_factory=lambda: [0.0, 0.0])
    shear: List[float] = field(default_factory=lambda: [0.0, 0.0])
    shear_to: List[float] = field(default_factory=lambda: [0.0, 0.0])
    rotation: float = 0.0
    rotation_to: float = 0.0

    def reset(self):
        """Przywraca cele do wartości początkowych (bieżące dojadą same)."""
        self.scale_to = [1.0, 1.0]
        self.shear_to = [0.0, 0.0]
        self.translation_to = [0.0, 0.0]
        self.rotation_to = 0.0

    def tween(self, factor: float = TWEEN_FACTOR):
        _tween(self.scale, self.scale_to, factor)
        _tween(self.translation, self.translation_to, factor)
        _tween(self.shear, self.shear_to, factor)
        self.rotation += (self.rotation_to - self.rotation) * factor


def _tween(current: List[float], target: List[float], factor: float):
    for i in range(len(current)):
        current[i] += (target[i] - current[i]) * factor


# ---------- wejście: klawisze / kółko ----------


def _scale_by(state: RenderState, dx: float, dy: float):
    state.scale_to[0] = max(0.0, state.scale_to[0] + dx)
    state.scale_to[1] = max(0.0, state.scale_to[1] + dy)


def _translate_by(state: RenderState, dx: float, dy: float):
    state.translation_to[0] += dx
    state.translation_to[1] += dy


def _shear_by(state: RenderState, dx: float, dy: float):
    state.shear_to[0] += dx
    state.shear_to[1] += dy


def _rotate_by(state: RenderState, da: float):
    state.rotation_to += da


KEY_ACTIONS = {
    "up": lambda s: _scale_by(s, SCALE_STEP, SCALE_STEP),
    "down": lambda s: _scale_by(s, -SCALE_STEP, -SCALE_STEP),
    "t": lambda s: _scale_by(s, 0.0, SCALE_STEP),
    "g": lambda s: _scale_by(s, 0.0, -SCALE_STEP),
    "h": lambda s: _scale_by(s, SCALE_STEP, 0.0),
    "f": lambda s: _scale_by(s, -SCALE_STEP, 0.0),
    "a": lambda s: _translate_by(s, -TRANSLATION_STEP, 0.0),
    "d": lambda s: _translate_by(s, TRANSLATION_STEP, 0.0),
    "s": lambda s: _translate_by(s, 0.0, -TRANSLATION_STEP),
    "w": lambda s: _translate_by(s, 0.0, TRANSLATION_STEP),
    "e": lambda s: _rotate_by(s, ROTATION_STEP),
    "q": lambda s: _rotate_by(s, -ROTATION_STEP),
    "j": lambda s: _shear_by(s, SHEAR_STEP, 0.0),
    "l": lambda s: _shear_by(s, -SHEAR_STEP, 0.0),
    "i": lambda s: _shear_by(s, 0.0, SHEAR_STEP),
    "k": lambda s: _shear_by(s, 0.0, -SHEAR_STEP),
    "r": lambda s: s.reset(),
}


def apply_key(state: RenderState, keysym: str) -> bool:
    """Obsługa klawisza (keysym z Tk). Zwraca True, jeśli klawisz coś zmienił."""
    action = KEY_ACTIONS.get(keysym.lower())
    if action is None:
        return False
    action(state)
    return True


def apply_scroll(state: RenderState, notches: float):
    """Kółko myszy: skala jednolita o ułamek przewiniętej wartości."""
    step = notches * SCROLL_SCALE_STEP
    _scale_by(state, step, step)


# ---------- macierze 3x3 (afiniczne, 2D) ----------


def _mat_mul(a: Matrix, b: Matrix) -> Matrix:
    return [
        [sum(a[r][k] * b[k][c] for k in range(3)) for c in range(3)] for r in range(3)
    ]


def _mat_inv(m: Matrix) -> Optional[Matrix]:
    """Odwrotność macierzy afinicznej; None dla osobliwej."""
    a, b, c = m[0]
    d, e, f = m[1]
    det = a * e - b * d
    if abs(det) < 1e-12:
        return None
    ia, ib = e / det, -b / det
    id_, ie = -d / det, a / det
    return [
        [ia, ib, -(ia * c + ib * f)],
        [id_, ie, -(id_ * c + ie * f)],
        [0.0, 0.0, 1.0],
    ]


def forward_matrix(state: RenderState) -> Matrix:
    """
    Przekształcenie w układzie [-1, 1] x [-1, 1] (y w górę):
    najpierw skala, potem pochylenie, obrót i na końcu przesunięcie.
    """
    sx, sy = state.scale
    hx, hy = state.shear
    tx, ty = state.translation
    cos_r = math.cos(state.rotation)
    sin_r = math.sin(state.rotation)

    scale = [[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]]
    shear = [[1.0, hx, 0.0], [hy, 1.0, 0.0], [0.0, 0.0, 1.0]]
    rot = [[cos_r, -sin_r, 0.0], [sin_r, cos_r, 0.0], [0.0, 0.0, 1.0]]
    trans = [[1.0, 0.0, tx], [0.0, 1.0, ty], [0.0, 0.0, 1.0]]
    return _mat_mul(trans, _mat_mul(rot, _mat_mul(shear, scale)))


def affine_coefficients(
    state: RenderState, view_size: Tuple[int, int], image_size: Tuple[int, int]
) -> Optional[Affine]:
    """
    Współczynniki (a, b, c, d, e, f) dla PIL Image.transform(AFFINE):
    piksel okna (X, Y) → piksel obrazu (aX + bY + c, dX + eY + f).
    None, gdy przekształcenie jest osobliwe (np. skala 0) – nic nie rysujemy.
    """
    vw, vh = view_size
    iw, ih = image_size
    inv = _mat_inv(forward_matrix(state))
    if inv is None or vw <= 0 or vh <= 0:
        return None

    # piksel okna → [-1, 1] (y w górę)
    pix_to_ndc = [[2.0 / vw, 0.0, -1.0], [0.0, -2.0 / vh, 1.0], [0.0, 0.0, 1.0]]
    # [-1, 1] → piksel obrazu (wiersz 0 u góry)
    ndc_to_img = [[iw / 2.0, 0.0, iw / 2.0], [0.0, -ih / 2.0, ih / 2.0], [0.0, 0.0, 1.0]]

    m = _mat_mul(ndc_to_img, _mat_mul(inv, pix_to_ndc))
    return (m[0][0], m[0][1], m[0][2], m[1][0], m[1][1], m[1][2])
