from dataclasses import dataclass
from typing import Any, Callable, Optional

from loguru import logger

from cell_coercion import cells_equal, coerce_cell_value
from event_bus import ChangeEvent, EventKind
from grid_errors import IndexOutOfRange, InvalidCellValue
from record_store import Column
from sort_filter import cell_text

IDLE = "idle"
EDITING = "editing"
COMMITTING = "committing"


@dataclass
class EditSession:
    derived_index: int
    column: Column
    row_id: int
    original_value: Any
    draft_value: Any
    status: str = EDITING


class CellEditController:
    """Single-session edit state machine: idle -> editing -> committing -> idle."""

    def __init__(self, store, bus, after_write_cb: Optional[Callable] = None):
        self.store = store
        self.bus = bus
        self._after_write = after_write_cb
        self.session: Optional[EditSession] = None

    @property
    def state(self) -> str:
        return self.session.status if self.session else IDLE

    # ---------- transitions ----------
    def double_activate(self, view, derived_index: int, column) -> EditSession:
        pos = self.store.column_index(column)
        if not isinstance(derived_index, int) or not 0 <= derived_index < len(view):
            raise IndexOutOfRange(derived_index, len(view))

        if self.session is not None:
            self.cancel()

        original = view.record(derived_index)[pos]
        self.session = EditSession(
            derived_index=derived_index,
            column=self.store.columns[pos],
            row_id=view.row_id(derived_index),
            original_value=original,
            draft_value=cell_text(original),
        )
        logger.debug(f"Editing row {derived_index}, column '{self.session.column.name}'")
        return self.session

    def set_draft(self, text) -> bool:
        if self.session is None or self.session.status != EDITING:
            return False
        self.session.draft_value = text
        return True

    def cancel(self) -> bool:
        if self.session is None:
            return False
        logger.debug(f"Edit cancelled at row {self.session.derived_index}")
        self.session = None
        return True

    def commit(self, draft=None) -> Optional[ChangeEvent]:
        """Blur: write the draft back if it changed and emit ``change``."""
        session = self.session
        if session is None or session.status != EDITING:
            return None
        if draft is not None:
            session.draft_value = draft

        # Untouched drafts close quietly, whatever the cell held.
        if cell_text(session.draft_value) == cell_text(session.original_value):
            self.session = None
            return None

        session.status = COMMITTING
        try:
            new_value = coerce_cell_value(
                session.column, session.draft_value, session.original_value
            )
        except InvalidCellValue:
            session.status = EDITING
            raise

        if cells_equal(new_value, session.original_value):
            self.session = None
            return None

        index = self.store.index_of(session.row_id)
        if index is None:
            self.session = None
            raise IndexOutOfRange(session.derived_index, len(self.store))

        self.store.set_value(index, session.column.position, new_value)
        self.session = None
        if self._after_write is not None:
            self._after_write(session)

        event = ChangeEvent(
            row=session.derived_index,
            col=session.column.name,
            old_val=session.original_value,
            new_val=new_value,
            col_index=session.column.position,
        )
        self.bus.emit(EventKind.CHANGE, event)
        return event

    def retarget(self, view) -> bool:
        """Follow the edited record into a rebuilt view; cancel if it left it."""
        if self.session is None:
            return False
        pos = view.position_of_row_id(self.session.row_id)
        if pos is None:
            logger.debug("Edited record left the view, cancelling edit")
            self.cancel()
            return False
        self.session.derived_index = pos
        return True
