class Hull3DError(Exception):
    """Базовий виняток пакета."""


class DegenerateInputError(Hull3DError, ValueError):
    """Менше 4 афінно незалежних точок: тетраедр-зародок неможливий."""


class InputFormatError(Hull3DError, ValueError):
    """Вхідний текст не відповідає формату N, N трійок, Q, Q трійок."""
