import pandas as pd

from grid_errors import InvalidCellValue
from record_store import NUMERIC


def coerce_cell_value(column, text, original=None):
    """Turn draft text into a value matching the column's kind.

    Numeric columns keep integers as ``int`` when the text has no fraction.
    Text columns return the text unchanged. A non-string draft is passed
    through as-is.
    """
    if text is not None and not isinstance(text, str):
        return text
    text = "" if text is None else text

    if column.kind != NUMERIC:
        return text

    stripped = text.strip()
    if stripped == "":
        return float("nan")
    try:
        value = float(stripped)
    except ValueError:
        raise InvalidCellValue(column.name, text, "expected a number") from None
    if value.is_integer() and not isinstance(original, float):
        try:
            return int(stripped)
        except ValueError:
            return int(value)
    return value


def cells_equal(a, b) -> bool:
    a_missing = pd.api.types.is_scalar(a) and pd.isna(a)
    b_missing = pd.api.types.is_scalar(b) and pd.isna(b)
    if a_missing or b_missing:
        return bool(a_missing and b_missing)
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        return False
