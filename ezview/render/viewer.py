# ezview/render/viewer.py
import logging
import tkinter as tk
from tkinter import messagebox

from PIL import Image as PILImage
from PIL import ImageTk

from ..constants import APP_SIZE, APP_TITLE, BG_COLOR, FRAME_MS
from ..image import Image
from ..image_ops import to_pil_image
from .state import RenderState, affine_coefficients, apply_key, apply_scroll

logger = logging.getLogger(__name__)


class Viewer(tk.Tk):
    """
    Okno podglądu: obraz rozciągnięty na całe okno, transformowany klawiszami.
    Stan przekształceń trzymamy w self.render_state i przekazujemy jawnie do funkcji.
    """

    def __init__(self, image: Image, src: str = "", size: str = APP_SIZE):
        super().__init__()
        self.title(f"{APP_TITLE} - '{src}'" if src else APP_TITLE)
        self.geometry(size)

        self.render_state = RenderState()
        self._texture = to_pil_image(image)
        self._photo = None
        self._after_id = None

        self.canvas = tk.Canvas(self, bg=BG_COLOR, highlightthickness=0)
        self.canvas.pack(fill="both", expand=True)
        self._item = self.canvas.create_image(0, 0, anchor="nw")

        self._bind_input()
        self.protocol("WM_DELETE_WINDOW", self._on_close)
        self._after_id = self.after(FRAME_MS, self._frame)

    def _bind_input(self):
        self.bind("<Key>", self._on_key)
        self.bind("<Escape>", lambda e: self._on_close())
        # Windows / macOS
        self.bind("<MouseWheel>", self._on_wheel)
        # X11: kółko to przyciski 4 i 5
        self.bind("<Button-4>", lambda e: apply_scroll(self.render_state, 1))
        self.bind("<Button-5>", lambda e: apply_scroll(self.render_state, -1))

    def _on_key(self, e):
        if apply_key(self.render_state, e.keysym):
            logger.debug("key %s -> %s", e.keysym, self.render_state)

    def _on_wheel(self, e):
        # Windows podaje wielokrotności 120, macOS małe liczby całkowite
        notches = e.delta / 120.0 if abs(e.delta) >= 120 else float(e.delta)
        apply_scroll(self.render_state, notches)

    def _on_close(self):
        if self._after_id is not None:
            self.after_cancel(self._after_id)
            self._after_id = None
        self.destroy()

    # ---------- pętla klatek ----------

    def _render(self, vw: int, vh: int) -> PILImage.Image:
        coeffs = affine_coefficients(self.render_state, (vw, vh), self._texture.size)
        if coeffs is None:
            return PILImage.new("RGB", (vw, vh), (0, 0, 0))
        return self._texture.transform(
            (vw, vh),
            PILImage.Transform.AFFINE,
            coeffs,
            resample=PILImage.Resampling.NEAREST,
            fillcolor=(0, 0, 0),
        )

    def _frame(self):
        self._after_id = None
        self.render_state.tween()

        vw = self.canvas.winfo_width()
        vh = self.canvas.winfo_height()
        if vw > 1 and vh > 1:
            try:
                frame = self._render(vw, vh)
            except Exception as e:
                logger.exception("Rendering failed")
                messagebox.showerror("ezview", f"Nie udało się narysować obrazu:\n{e}")
                self._on_close()
                return
            # referencja musi żyć, inaczej Tk zgubi obraz
            self._photo = ImageTk.PhotoImage(frame)
            self.canvas.itemconfigure(self._item, image=self._photo)

        self._after_id = self.after(FRAME_MS, self._frame)


def show_image(image: Image, src: str = "", size: str = APP_SIZE):
    app = Viewer(image, src=src, size=size)
    app.mainloop()
