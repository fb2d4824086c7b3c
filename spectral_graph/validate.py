import math
from typing import List, Sequence, Tuple


class ValidationError(Exception):
    pass


def _parse_field(name: str, text: object) -> Tuple[float, str]:
    raw = "" if text is None else str(text).strip()
    try:
        value = float(raw)
    except ValueError:
        return math.nan, f'{name}: expected a number, got "{raw}"'
    if not math.isfinite(value):
        return math.nan, f'{name}: value must be finite, got "{raw}"'
    return value, ""


def parse_coordinates(
    x_texts: Sequence[object], y_texts: Sequence[object], count: int
) -> Tuple[List[float], List[float]]:
    """Parse the per-vertex coordinate fields ``x1..xN`` and ``y1..yN``.

    Every bad field is reported at once; nothing is returned unless all
    ``2 * count`` fields hold finite numbers.
    """

    if len(x_texts) != count or len(y_texts) != count:
        raise ValidationError(
            f'expected {count} x and {count} y values, got {len(x_texts)} and {len(y_texts)}'
        )

    errors: List[str] = []
    ex: List[float] = []
    ey: List[float] = []
    for axis, texts, out in (("x", x_texts, ex), ("y", y_texts, ey)):
        for i, text in enumerate(texts, start=1):
            value, error = _parse_field(f"{axis}{i}", text)
            if error:
                errors.append(error)
            out.append(value)

    if errors:
        raise ValidationError("; ".join(errors))
    return ex, ey
