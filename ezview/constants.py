APP_TITLE = "ezview"
APP_SIZE = "640x480"
BG_COLOR = "#000000"

# maksymalna długość pojedynczego tokenu ASCII w nagłówku / danych P3
MAX_TOKEN_LENGTH = 1024
# rozmiar bloku czytanego ze strumienia przez tokenizer
READ_CHUNK = 1 << 16

# pętla klatek (ms) i tempo "dociągania" wartości do celu
FRAME_MS = 16
TWEEN_FACTOR = 0.1

SCALE_STEP = 0.5
TRANSLATION_STEP = 0.5
SHEAR_STEP = 0.1
ROTATION_STEP = 0.1
SCROLL_SCALE_STEP = 0.5
