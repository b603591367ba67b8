from .state import RenderState, affine_coefficients, apply_key, apply_scroll

# Viewer (tkinter + ImageTk) importujemy dopiero przy otwieraniu okna.
__all__ = ["RenderState", "affine_coefficients", "apply_key", "apply_scroll"]
