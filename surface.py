"""
Rendering surface contract and a recycling surface helper.

The engine never builds row visuals itself. A host supplies an object with
``materialize``/``dispose``/``get_viewport_bounds`` and the ``on_*`` hooks
through which it reports scrolling, resizing and cell edits. The hooks may be
left out; the grid only registers the ones a surface has. ``on_cell_blur``
also receives an accessor returning the current draft text.
"""
from typing import Any, Callable, Generic, Optional, Protocol, TypeVar

from loguru import logger

from config_paths import load_config


class RenderingSurface(Protocol):
    def materialize(self, record: list, derived_index: int) -> Any: ...

    def dispose(self, handle: Any) -> None: ...

    def get_viewport_bounds(self) -> tuple[float, float]: ...

    def on_scroll(self, callback: Callable[[], Any]) -> None: ...

    def on_resize(self, callback: Callable[[], Any]) -> None: ...

    def on_cell_double_activate(
        self, callback: Callable[[int, Any], Any]
    ) -> None: ...

    def on_cell_blur(
        self, callback: Callable[[Any], Any], draft_accessor: Callable[[], Any]
    ) -> None: ...


T = TypeVar("T")


class PooledSurface(Generic[T]):
    """
    Surface that recycles row representations instead of rebuilding them.

    Rows are created by ``factory`` and filled by ``bind(row, record, index)``.
    Disposed rows go back to a free list and are handed out again on the
    next ``materialize``. At most ``pool_size`` rows are ever created; once
    the pool is exhausted the oldest live row is taken over. ``draft``, when
    given, supplies the editor text for ``notify_blur`` calls that pass none.

    Example:
        surface = PooledSurface(
            factory=RowLabel,
            bind=lambda row, record, index: row.set_text(record),
            bounds=lambda: (scrollbar.value(), viewport.height()),
        )
        grid = GridController(columns, surface)
    """

    def __init__(
        self,
        factory: Callable[[], T],
        bind: Callable[[T, list, int], None],
        bounds: Optional[Callable[[], tuple[float, float]]] = None,
        pool_size: Optional[int] = None,
        reset: Optional[Callable[[T], None]] = None,
        draft: Optional[Callable[[], str]] = None,
    ):
        self._factory = factory
        self._bind = bind
        self._bounds = bounds
        self._reset = reset
        self._draft = draft
        if pool_size is None:
            pool_size = load_config()["POOL_SIZE"]
        self._pool_size = max(1, pool_size)
        self._free: list[T] = []
        self._active: dict[int, T] = {}  # id(row) -> row, insertion ordered
        self._created = 0
        self._scroll_cbs: list[Callable] = []
        self._resize_cbs: list[Callable] = []
        self._activate_cbs: list[Callable] = []
        self._blur_cbs: list[tuple[Callable, Optional[Callable]]] = []

    @property
    def active_count(self) -> int:
        return len(self._active)

    @property
    def free_count(self) -> int:
        return len(self._free)

    @property
    def created_count(self) -> int:
        return self._created

    # ---------- surface contract ----------
    def materialize(self, record: list, derived_index: int) -> T:
        if self._free:
            row = self._free.pop()
        elif self._created < self._pool_size:
            row = self._factory()
            self._created += 1
        else:
            logger.warning(
                f"Row pool exhausted ({self._pool_size}), recycling oldest live row"
            )
            oldest = next(iter(self._active))
            row = self._active.pop(oldest)
            self._reset_row(row)
        self._bind(row, record, derived_index)
        self._active[id(row)] = row
        return row

    def dispose(self, handle: T) -> None:
        row = self._active.pop(id(handle), None)
        if row is None:
            return
        self._reset_row(row)
        self._free.append(row)

    def get_viewport_bounds(self) -> tuple[float, float]:
        if self._bounds is None:
            return 0.0, 0.0
        return self._bounds()

    def _reset_row(self, row: T) -> None:
        if self._reset is not None:
            self._reset(row)
        elif hasattr(row, "reset"):
            row.reset()

    # ---------- host signal hooks ----------
    def on_scroll(self, callback: Callable) -> None:
        self._scroll_cbs.append(callback)

    def on_resize(self, callback: Callable) -> None:
        self._resize_cbs.append(callback)

    def on_cell_double_activate(self, callback: Callable) -> None:
        self._activate_cbs.append(callback)

    def on_cell_blur(
        self, callback: Callable, draft_accessor: Optional[Callable[[], Any]] = None
    ) -> None:
        self._blur_cbs.append((callback, draft_accessor))

    def notify_scroll(self) -> None:
        for cb in list(self._scroll_cbs):
            cb()

    def notify_resize(self) -> None:
        for cb in list(self._resize_cbs):
            cb()

    def notify_double_activate(self, derived_index: int, column) -> None:
        for cb in list(self._activate_cbs):
            cb(derived_index, column)

    def notify_blur(self, draft: Optional[str] = None) -> None:
        if draft is None and self._draft is not None:
            draft = self._draft()
        for cb, accessor in list(self._blur_cbs):
            value = draft
            if value is None and accessor is not None:
                value = accessor()
            cb(value)
