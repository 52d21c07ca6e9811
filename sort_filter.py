import locale
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd
from loguru import logger

from record_store import NUMERIC


@dataclass(frozen=True)
class SortState:
    column: int
    descending: bool = False


@dataclass(frozen=True)
class FilterState:
    text: str = ""
    column: Optional[int] = None


def cell_text(value) -> str:
    if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
        return ""
    return str(value)


def _collation_key(value) -> str:
    return locale.strxfrm(cell_text(value).casefold())


class DerivedView:
    """Read-only (original_index, record) sequence after filter and sort."""

    def __init__(self, positions, records, row_ids):
        self._positions = tuple(int(p) for p in positions)
        self._records = tuple(tuple(r) for r in records)
        self._row_ids = tuple(int(r) for r in row_ids)
        self._by_row_id = {rid: i for i, rid in enumerate(self._row_ids)}

    def __len__(self) -> int:
        return len(self._positions)

    def __getitem__(self, i):
        return self._positions[i], list(self._records[i])

    def __iter__(self):
        for i in range(len(self._positions)):
            yield self[i]

    def original_index(self, i: int) -> int:
        return self._positions[i]

    def record(self, i: int) -> list:
        return list(self._records[i])

    def row_id(self, i: int) -> int:
        return self._row_ids[i]

    def position_of_row_id(self, row_id) -> Optional[int]:
        return self._by_row_id.get(row_id)

    def position_of_original(self, original_index: int) -> Optional[int]:
        try:
            return self._positions.index(original_index)
        except ValueError:
            return None

    def records(self) -> list[list]:
        return [list(r) for r in self._records]

    def original_indexes(self) -> list[int]:
        return list(self._positions)


class SortFilterEngine:
    """Derives the filtered, sorted view over a RecordStore.

    Sort and filter are explicit state; every call rebuilds the view from
    the store so the result never depends on the previous view.
    """

    def __init__(self, store):
        self.store = store
        self.sort_state: Optional[SortState] = None
        self.filter_state = FilterState()

    # ---------- state changes ----------
    def sort(self, column, descending: bool = False) -> DerivedView:
        pos = self.store.column_index(column)
        self.sort_state = SortState(pos, bool(descending))
        logger.debug(
            f"Sort by '{self.store.column_names[pos]}' "
            f"{'desc' if descending else 'asc'}"
        )
        return self.derive()

    def toggle_sort(self, column) -> DerivedView:
        pos = self.store.column_index(column)
        descending = False
        if self.sort_state is not None and self.sort_state.column == pos:
            descending = not self.sort_state.descending
        return self.sort(pos, descending=descending)

    def clear_sort(self) -> DerivedView:
        self.sort_state = None
        return self.derive()

    def filter(self, text, column=None) -> DerivedView:
        pos = None if column is None else self.store.column_index(column)
        self.filter_state = FilterState("" if text is None else str(text), pos)
        logger.debug(f"Filter set to {self.filter_state.text!r}")
        return self.derive()

    # ---------- derivation ----------
    def derive(self) -> DerivedView:
        frame = self.store.frame
        positions = np.arange(len(frame))

        if self.filter_state.text and len(frame):
            mask = self._filter_mask(frame)
            frame = frame[mask]
            positions = positions[mask]

        if self.sort_state is not None and len(frame) > 1:
            order = self._sort_order(frame)
            frame = frame.iloc[order]
            positions = positions[order]

        return DerivedView(
            positions.tolist(),
            frame.itertuples(index=False, name=None),
            frame.index.tolist(),
        )

    def _filter_mask(self, frame) -> np.ndarray:
        needle = self.filter_state.text.lower()
        if self.filter_state.column is None:
            targets = list(frame.columns)
        else:
            targets = [frame.columns[self.filter_state.column]]

        mask = np.zeros(len(frame), dtype=bool)
        for col in targets:
            cells = frame[col].map(cell_text).str.lower()
            mask |= cells.str.contains(needle, regex=False).to_numpy(dtype=bool)
        return mask

    def _sort_order(self, frame) -> np.ndarray:
        state = self.sort_state
        column = self.store.columns[state.column]
        values = pd.Series(frame.iloc[:, state.column].to_numpy(), dtype=object)

        if column.kind == NUMERIC:
            keys = pd.to_numeric(values, errors="coerce")
        else:
            keys = values.map(_collation_key)

        ordered = keys.sort_values(
            ascending=not state.descending, kind="stable", na_position="last"
        )
        return ordered.index.to_numpy()
