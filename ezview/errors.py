# ezview/errors.py
"""Błędy dekodera PPM.

Wszystkie dziedziczą po ValueError, więc stary kod łapiący ValueError
(okna dialogowe, CLI) działa bez zmian.
"""


class PPMError(ValueError):
    """Wspólna baza dla błędów wczytywania PPM."""


class OpenFailed(PPMError, OSError):
    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        msg = f"Could not open source file for reading '{path}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class InvalidFormat(PPMError):
    pass


class UnexpectedEndOfInput(PPMError):
    def __init__(self, msg: str = "Unexpected EOF"):
        super().__init__(msg)


class BufferOverflow(PPMError):
    pass


class InvalidSample(PPMError):
    NEGATIVE = "negative"
    EXCEEDS_MAXIMUM = "exceeds maximum"
    NOT_A_NUMBER = "not a number"

    def __init__(self, reason: str, msg: str):
        self.reason = reason
        super().__init__(msg)
