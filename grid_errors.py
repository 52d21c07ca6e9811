class GridError(Exception):
    """Base class for rejected grid operations."""


class IndexOutOfRange(GridError, IndexError):
    def __init__(self, index, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Index {index} out of range for {length} rows")


class UnknownColumn(GridError, KeyError):
    def __init__(self, column):
        self.column = column
        super().__init__(column)

    def __str__(self):
        return f"Column '{self.column}' does not exist"


class ShapeMismatch(GridError, ValueError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Record has {actual} values, expected {expected}")


class UnknownEventKind(GridError, ValueError):
    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"Unknown event kind '{kind}'")


class InvalidCellValue(GridError, ValueError):
    def __init__(self, column, text, reason: str = ""):
        self.column = column
        self.text = text
        msg = f"Invalid value for column '{column}': {text!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
