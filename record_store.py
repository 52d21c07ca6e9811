from dataclasses import dataclass

import numpy as np
import pandas as pd
from loguru import logger

from grid_errors import IndexOutOfRange, ShapeMismatch, UnknownColumn

TEXT = "text"
NUMERIC = "numeric"


@dataclass(frozen=True)
class Column:
    name: str
    position: int
    kind: str = TEXT


def infer_kind(value) -> str:
    """Classify a sampled cell value as numeric or text."""
    if isinstance(value, (bool, np.bool_)):
        return TEXT
    if pd.api.types.is_number(value):
        return NUMERIC
    return TEXT


class RecordStore:
    """Ordered record collection backed by an object-dtype DataFrame.

    The frame's columns are column positions (names may repeat) and its
    index labels are stable row ids, so a record keeps its id while its
    position shifts around it.
    """

    def __init__(self, columns, rows=()):
        self._names: list[str] = [str(c) for c in columns]
        self._next_id = 0
        self._df = self._empty_frame()
        self.extend(rows)

    def _empty_frame(self):
        return pd.DataFrame(columns=range(len(self._names)), dtype=object)

    # ---------- columns ----------
    @property
    def column_names(self) -> list[str]:
        return list(self._names)

    @property
    def columns(self) -> list[Column]:
        # Kinds follow the current first record; an empty store is all text.
        if len(self._df) == 0:
            return [Column(name, pos, TEXT) for pos, name in enumerate(self._names)]
        first = self._df.iloc[0].tolist()
        return [
            Column(name, pos, infer_kind(first[pos]))
            for pos, name in enumerate(self._names)
        ]

    def column(self, column) -> Column:
        return self.columns[self.column_index(column)]

    def column_index(self, column) -> int:
        """Resolve a column name or ordinal to its position."""
        if isinstance(column, (int, np.integer)) and not isinstance(column, bool):
            if 0 <= column < len(self._names):
                return int(column)
            raise UnknownColumn(column)
        try:
            return self._names.index(str(column))
        except ValueError:
            raise UnknownColumn(column) from None

    # ---------- reads ----------
    def __len__(self) -> int:
        return len(self._df)

    def _in_range(self, index) -> bool:
        return isinstance(index, (int, np.integer)) and 0 <= index < len(self._df)

    def get(self, index):
        if not self._in_range(index):
            return None
        return self._df.iloc[index].tolist()

    def items(self) -> list[list]:
        return [list(row) for row in self._df.itertuples(index=False, name=None)]

    @property
    def frame(self) -> pd.DataFrame:
        return self._df.copy()

    def row_id(self, index: int) -> int:
        if not self._in_range(index):
            raise IndexOutOfRange(index, len(self._df))
        return int(self._df.index[index])

    def index_of(self, row_id):
        """Current position of a row id, or None once the record is gone."""
        try:
            return int(self._df.index.get_loc(row_id))
        except KeyError:
            return None

    def record_by_id(self, row_id):
        index = self.index_of(row_id)
        if index is None:
            return None
        return self.get(index)

    # ---------- mutation ----------
    def _checked(self, record) -> list:
        values = list(record)
        if len(values) != len(self._names):
            logger.warning(
                f"Rejected record with {len(values)} values, "
                f"expected {len(self._names)}"
            )
            raise ShapeMismatch(len(self._names), len(values))
        return values

    def _append(self, rows: list[list]) -> None:
        ids = list(range(self._next_id, self._next_id + len(rows)))
        self._next_id += len(rows)
        block = pd.DataFrame(rows, index=ids, columns=self._df.columns, dtype=object)
        if len(self._df) == 0:
            self._df = block
        else:
            self._df = pd.concat([self._df, block])

    def add(self, record) -> int:
        self._append([self._checked(record)])
        index = len(self._df) - 1
        logger.trace(f"Added row id {self._df.index[index]} at index {index}")
        return index

    def extend(self, records) -> int:
        """Append many records at once; all are validated before any is stored."""
        rows = [self._checked(r) for r in records]
        if rows:
            self._append(rows)
        return len(rows)

    def remove(self, index: int) -> list:
        if not self._in_range(index):
            raise IndexOutOfRange(index, len(self._df))
        removed = self._df.iloc[index].tolist()
        self._df = self._df.drop(self._df.index[index])
        logger.trace(f"Removed index {index}, {len(self._df)} rows left")
        return removed

    def set_value(self, index: int, column, value):
        """Overwrite one cell and return the previous value."""
        if not self._in_range(index):
            raise IndexOutOfRange(index, len(self._df))
        pos = self.column_index(column)
        old = self._df.iat[index, pos]
        self._df.iat[index, pos] = value
        return old
