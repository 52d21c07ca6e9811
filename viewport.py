import math
import time
from dataclasses import dataclass

from loguru import logger


@dataclass(frozen=True)
class RowRange:
    """Inclusive [start, end] range of derived-view indexes; empty if end < start."""

    start: int = 0
    end: int = -1

    @property
    def empty(self) -> bool:
        return self.end < self.start

    def __len__(self) -> int:
        return max(0, self.end - self.start + 1)

    def __iter__(self):
        return iter(range(self.start, self.end + 1))

    def __contains__(self, index) -> bool:
        return self.start <= index <= self.end


EMPTY_RANGE = RowRange()


def compute_row_range(
    length: int,
    row_extent: float,
    scroll_offset: float,
    viewport_extent: float,
    overscan: int = 0,
) -> RowRange:
    """Rows that must be materialized for the given scroll position.

    ``last_visible`` is the row holding the last visible pixel, so the range
    never holds more than ``ceil(viewport_extent / row_extent) + 2 * overscan + 1``
    rows whatever the total length.
    """
    if row_extent <= 0:
        raise ValueError("row_extent must be positive")
    scroll_offset = max(0.0, scroll_offset)
    viewport_extent = max(0.0, viewport_extent)
    if length <= 0 or viewport_extent == 0:
        # Nothing is visible, so overscan has nothing to pad.
        return EMPTY_RANGE
    overscan = max(0, int(overscan))

    first_visible = math.floor(scroll_offset / row_extent)
    last_visible = math.ceil((scroll_offset + viewport_extent) / row_extent) - 1
    last_visible = max(first_visible, last_visible)

    start = max(0, first_visible - overscan)
    end = min(length - 1, last_visible + overscan)
    if start > end:
        # Scrolled past the end, e.g. right after rows were removed.
        return EMPTY_RANGE
    return RowRange(start, end)


@dataclass
class ViewportState:
    scroll_offset: float = 0.0
    viewport_extent: float = 0.0
    row_extent: float = 24.0
    overscan: int = 3

    def __post_init__(self):
        if self.row_extent <= 0:
            raise ValueError("row_extent must be positive")
        self.overscan = max(0, int(self.overscan))
        self.scroll_offset = max(0.0, self.scroll_offset)
        self.viewport_extent = max(0.0, self.viewport_extent)

    def update_bounds(self, scroll_offset: float, viewport_extent: float):
        self.scroll_offset = max(0.0, scroll_offset)
        self.viewport_extent = max(0.0, viewport_extent)

    def content_extent(self, length: int) -> float:
        return max(0, length) * self.row_extent


class Virtualizer:
    """Keeps the surface's live rows equal to the computed range.

    Live rows are keyed by derived index and remember the row id they were
    built for; a row is rebuilt only when it leaves the range or a different
    record lands on its index.
    """

    def __init__(self, state: ViewportState | None = None):
        self.state = state or ViewportState()
        self.range = EMPTY_RANGE
        self._live: dict[int, tuple[int, object]] = {}

    @property
    def materialized_indexes(self) -> list[int]:
        return sorted(self._live)

    def handle(self, derived_index: int):
        entry = self._live.get(derived_index)
        return entry[1] if entry else None

    def compute(self, length: int) -> RowRange:
        s = self.state
        return compute_row_range(
            length, s.row_extent, s.scroll_offset, s.viewport_extent, s.overscan
        )

    def invalidate_row(self, row_id: int, surface) -> bool:
        """Drop the live row built for ``row_id`` so the next sync rebuilds it."""
        for idx, (live_id, handle) in list(self._live.items()):
            if live_id == row_id:
                del self._live[idx]
                surface.dispose(handle)
                return True
        return False

    def sync(self, view, surface, full: bool = False) -> tuple[int, int]:
        """Materialize/dispose the difference; returns (created, disposed).

        ``full`` materializes every row of the view, bypassing the window.
        """
        if full:
            new_range = RowRange(0, len(view) - 1) if len(view) else EMPTY_RANGE
        else:
            new_range = self.compute(len(view))
        disposed = 0
        for idx in list(self._live):
            row_id, handle = self._live[idx]
            if idx in new_range and view.row_id(idx) == row_id:
                continue
            del self._live[idx]
            surface.dispose(handle)
            disposed += 1
            logger.trace(f"Disposed row {idx}")

        created = 0
        for idx in new_range:
            if idx in self._live:
                continue
            handle = surface.materialize(view.record(idx), idx)
            self._live[idx] = (view.row_id(idx), handle)
            created += 1
            logger.trace(f"Materialized row {idx}")

        self.range = new_range
        if created or disposed:
            logger.debug(
                f"Viewport rows {new_range.start}..{new_range.end}: "
                f"+{created} -{disposed}"
            )
        return created, disposed

    def clear(self, surface) -> int:
        count = len(self._live)
        for _, handle in self._live.values():
            surface.dispose(handle)
        self._live.clear()
        self.range = EMPTY_RANGE
        return count


class ScrollThrottle:
    """Rate limit for scroll-driven recomputation.

    ``ready()`` accepts at most one signal per interval; a rejected signal is
    remembered as pending until it is flushed or ``due()`` reports that its
    interval has run out.
    """

    def __init__(self, interval_ms: float = 0, clock=time.monotonic):
        self.interval = max(0.0, interval_ms) / 1000.0
        self.clock = clock
        self.pending = False
        self._last = None

    def ready(self) -> bool:
        now = self.clock()
        if self.interval and self._last is not None and now - self._last < self.interval:
            self.pending = True
            return False
        self._last = now
        self.pending = False
        return True

    def flush(self) -> bool:
        """Consume a pending signal; True if there was one."""
        if not self.pending:
            return False
        self.pending = False
        self._last = self.clock()
        return True

    def due(self) -> bool:
        """True once a pending signal has waited out the interval."""
        if not self.pending:
            return False
        return self._last is None or self.clock() - self._last >= self.interval
