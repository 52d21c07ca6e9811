import time

from loguru import logger

from cell_edit import CellEditController
from config_paths import load_config
from event_bus import AddEvent, ChangeEvent, EventBus, EventKind, RemoveEvent
from record_store import RecordStore
from sort_filter import SortFilterEngine
from viewport import ScrollThrottle, Virtualizer, ViewportState


class GridController:
    """Public grid API: routes calls to the store, view, viewport and editor.

    Every mutating call runs in the same order: mutate the store, rebuild the
    derived view, retarget the edit session, sync the materialized rows and
    only then notify subscribers.
    """

    def __init__(
        self,
        columns,
        surface,
        rows=(),
        *,
        row_extent=None,
        overscan=None,
        scroll_throttle_ms=None,
        clock=time.monotonic,
    ):
        if row_extent is None or overscan is None or scroll_throttle_ms is None:
            cfg = load_config()
            row_extent = cfg["ROW_EXTENT"] if row_extent is None else row_extent
            overscan = cfg["OVERSCAN"] if overscan is None else overscan
            if scroll_throttle_ms is None:
                scroll_throttle_ms = cfg["SCROLL_THROTTLE_MS"]

        self.surface = surface
        self.store = RecordStore(columns, rows)
        self.bus = EventBus()
        self.engine = SortFilterEngine(self.store)
        self.virtualizer = Virtualizer(
            ViewportState(row_extent=row_extent, overscan=overscan)
        )
        self.throttle = ScrollThrottle(scroll_throttle_ms, clock)
        self.editor = CellEditController(self.store, self.bus, self._after_cell_write)
        self.lazy_render = True

        self._view = self.engine.derive()
        self._bind_surface_hooks()
        self._sync()
        logger.debug(
            f"Grid ready: {len(self.store.column_names)} columns, "
            f"{len(self.store)} rows"
        )

    @classmethod
    def from_layout(cls, obj, surface, **kwargs):
        """Build from ``{"layout": {"columns": [...]}, "rows": [...]}``."""
        columns = obj["layout"]["columns"]
        rows = obj.get("rows") or []
        return cls(columns, surface, rows, **kwargs)

    def _bind_surface_hooks(self):
        hooks = (
            ("on_scroll", self.handle_scroll),
            ("on_resize", self.handle_resize),
            ("on_cell_double_activate", self.double_activate),
        )
        for name, callback in hooks:
            register = getattr(self.surface, name, None)
            if callable(register):
                register(callback)
        register = getattr(self.surface, "on_cell_blur", None)
        if callable(register):
            register(self.blur, self._draft_value)

    # ---------- read ----------
    @property
    def view(self):
        return self._view

    @property
    def columns(self):
        return self.store.columns

    @property
    def materialized_indexes(self) -> list[int]:
        self._settle_scroll()
        return self.virtualizer.materialized_indexes

    @property
    def edit_state(self) -> str:
        return self.editor.state

    def get(self, index):
        return self.store.get(index)

    def items(self) -> list[list]:
        return self.store.items()

    def __len__(self) -> int:
        return len(self.store)

    # ---------- events ----------
    def on(self, kind, handler):
        return self.bus.on(kind, handler)

    def off(self, kind, handler) -> bool:
        return self.bus.off(kind, handler)

    # ---------- mutation ----------
    def add(self, record) -> int:
        index = self.store.add(record)
        row_id = self.store.row_id(index)
        data = self.store.get(index)
        self._refresh()
        logger.debug(f"Added row at index {index}")
        self.bus.emit(EventKind.ADD, AddEvent(index, data))
        self.bus.emit(EventKind.CHANGE, ChangeEvent(self._view.position_of_row_id(row_id)))
        return index

    def remove(self, index: int) -> list:
        row_id = self.store.row_id(index)
        row = self._view.position_of_row_id(row_id)
        data = self.store.remove(index)
        self._refresh()
        logger.debug(f"Removed row at index {index}")
        self.bus.emit(EventKind.REMOVE, RemoveEvent(index, data))
        self.bus.emit(EventKind.CHANGE, ChangeEvent(row))
        return data

    # ---------- sort / filter ----------
    def sort(self, column, descending: bool = False):
        self._refresh(self.engine.sort(column, descending=descending))
        self.bus.emit(EventKind.CHANGE, ChangeEvent(None))
        return self._view

    def toggle_sort(self, column):
        self._refresh(self.engine.toggle_sort(column))
        self.bus.emit(EventKind.CHANGE, ChangeEvent(None))
        return self._view

    def clear_sort(self):
        self._refresh(self.engine.clear_sort())
        self.bus.emit(EventKind.CHANGE, ChangeEvent(None))
        return self._view

    @property
    def sort_state(self):
        return self.engine.sort_state

    def filter(self, text, column=None):
        self._refresh(self.engine.filter(text, column))
        self.bus.emit(EventKind.CHANGE, ChangeEvent(None))
        return self._view

    @property
    def filter_text(self) -> str:
        return self.engine.filter_state.text

    # ---------- editing ----------
    def double_activate(self, derived_index: int, column):
        return self.editor.double_activate(self._view, derived_index, column)

    def set_draft(self, text) -> bool:
        return self.editor.set_draft(text)

    def blur(self, draft=None):
        return self.editor.commit(draft)

    def cancel_edit(self) -> bool:
        return self.editor.cancel()

    def _draft_value(self):
        session = self.editor.session
        return session.draft_value if session is not None else None

    def _after_cell_write(self, session):
        self.virtualizer.invalidate_row(session.row_id, self.surface)
        self._refresh()

    # ---------- viewport ----------
    def handle_scroll(self, *_args) -> bool:
        if not self.lazy_render:
            return False
        if not self.throttle.ready():
            return False
        self._sync()
        return True

    def flush_pending_scroll(self) -> bool:
        if not self.throttle.flush():
            return False
        self._sync()
        return True

    def handle_resize(self, *_args) -> None:
        self._sync()

    def enable_lazy_render(self) -> None:
        self.lazy_render = True
        self._sync()

    def disable_lazy_render(self) -> None:
        self.lazy_render = False
        self._sync()

    def close(self) -> None:
        self.editor.cancel()
        self.throttle.pending = False
        self.virtualizer.clear(self.surface)

    def _read_bounds(self):
        offset, extent = self.surface.get_viewport_bounds()
        self.virtualizer.state.update_bounds(offset, extent)

    def _refresh(self, view=None):
        self._view = view if view is not None else self.engine.derive()
        self.editor.retarget(self._view)
        self._sync()

    def _settle_scroll(self):
        # A dropped scroll is applied once its throttle interval has passed.
        if self.lazy_render and self.throttle.due():
            self.throttle.flush()
            self._sync()

    def _sync(self):
        if self.lazy_render:
            self._read_bounds()
            self.throttle.pending = False
        self.virtualizer.sync(self._view, self.surface, full=not self.lazy_render)
