import unittest

from cell_edit import EDITING, IDLE
from grid_controller import GridController
from grid_errors import IndexOutOfRange, InvalidCellValue, UnknownColumn
from sample_data import SampleLayoutInitializer


class DummySurface:
    def __init__(self, offset=0.0, extent=100.0):
        self.offset = offset
        self.extent = extent
        self.live = {}
        self.materialized = []
        self._next = 0

    def materialize(self, record, derived_index):
        self._next += 1
        self.live[self._next] = (list(record), derived_index)
        self.materialized.append((derived_index, list(record)))
        return self._next

    def dispose(self, handle):
        del self.live[handle]

    def get_viewport_bounds(self):
        return self.offset, self.extent

    def rows(self):
        return {index: record for record, index in self.live.values()}


class BlurHookSurface(DummySurface):
    def on_cell_blur(self, callback, draft_value_accessor):
        self._blur = callback
        self._draft = draft_value_accessor

    def blur(self):
        self._blur(self._draft())


def _grid(rows=None, surface=None):
    layout = SampleLayoutInitializer().create()
    if rows is not None:
        layout["rows"] = rows
    return GridController.from_layout(
        layout,
        surface or DummySurface(),
        row_extent=10,
        overscan=2,
        scroll_throttle_ms=0,
    )


def _text_rows():
    return [
        ["Timmy", "Snasdell", "tsnasdell0@senate.gov", "Male", "58"],
        ["Caleb", "Nisen", "cnisen1@xing.com", "Male", "21"],
        ["Bil", "Ohrt", "bohrt2@opensource.org", "Male", "58"],
    ]


class CellEditScenarioTests(unittest.TestCase):
    def test_edit_commits_value_and_fires_change_once(self):
        grid = _grid(_text_rows())
        changes = []
        grid.on("change", changes.append)

        session = grid.double_activate(2, "Age")
        self.assertEqual(session.original_value, "58")
        self.assertEqual(grid.edit_state, EDITING)

        grid.set_draft("59")
        grid.blur()

        self.assertEqual(len(changes), 1)
        event = changes[0]
        self.assertEqual(
            (event.row, event.col, event.old_val, event.new_val), (2, "Age", "58", "59")
        )
        self.assertEqual(event.col_index, 4)
        self.assertEqual(grid.get(2)[4], "59")
        self.assertEqual(grid.edit_state, IDLE)

    def test_numeric_column_coerces_draft(self):
        grid = _grid()
        changes = []
        grid.on("change", changes.append)

        grid.double_activate(2, "Age")
        grid.blur("59")

        self.assertEqual((changes[0].old_val, changes[0].new_val), (58, 59))
        self.assertEqual(grid.get(2)[4], 59)

    def test_blur_without_changes_is_a_no_op(self):
        grid = _grid()
        changes = []
        grid.on("change", changes.append)
        before = grid.items()

        session = grid.double_activate(2, "Age")
        self.assertEqual(session.draft_value, "58")
        grid.blur()

        self.assertEqual(changes, [])
        self.assertEqual(grid.items(), before)
        self.assertEqual(grid.edit_state, IDLE)

    def test_equivalent_numeric_draft_is_a_no_op(self):
        grid = _grid()
        changes = []
        grid.on("change", changes.append)

        grid.double_activate(2, "Age")
        grid.blur(" 58 ")

        self.assertEqual(changes, [])

    def test_second_activation_discards_first_draft(self):
        grid = _grid()
        changes = []
        grid.on("change", changes.append)
        before = grid.items()

        grid.double_activate(2, "Age")
        grid.set_draft("99")
        session = grid.double_activate(3, "Name")

        self.assertEqual((session.derived_index, session.column.name), (3, "Name"))
        self.assertEqual(session.original_value, "Barry")
        self.assertEqual(grid.items(), before)
        self.assertEqual(changes, [])

        grid.blur()
        self.assertEqual(grid.items(), before)
        self.assertEqual(changes, [])

    def test_cancel_discards_draft(self):
        grid = _grid()
        changes = []
        grid.on("change", changes.append)

        grid.double_activate(0, "Name")
        grid.set_draft("Tim")
        self.assertTrue(grid.cancel_edit())

        self.assertEqual(grid.get(0)[0], "Timmy")
        self.assertEqual(changes, [])
        self.assertFalse(grid.set_draft("late"))
        self.assertIsNone(grid.blur())

    def test_invalid_numeric_draft_keeps_session_open(self):
        grid = _grid()

        grid.double_activate(1, "Age")
        with self.assertRaises(InvalidCellValue):
            grid.blur("twenty")

        self.assertEqual(grid.edit_state, EDITING)
        self.assertEqual(grid.get(1)[4], 21)
        grid.blur("22")
        self.assertEqual(grid.get(1)[4], 22)

    def test_bad_activation_keeps_existing_session(self):
        grid = _grid()
        grid.double_activate(0, "Name")

        with self.assertRaises(IndexOutOfRange):
            grid.double_activate(500, "Name")
        with self.assertRaises(UnknownColumn):
            grid.double_activate(1, "Salary")

        self.assertEqual(grid.editor.session.derived_index, 0)


class UntouchedBlurTests(unittest.TestCase):
    def _two_column_grid(self, rows, columns=("Name", "Note")):
        return GridController(
            list(columns),
            DummySurface(),
            rows,
            row_extent=10,
            overscan=2,
            scroll_throttle_ms=0,
        )

    def test_empty_cell_stays_empty(self):
        grid = self._two_column_grid([["x", None]])
        changes = []
        grid.on("change", changes.append)

        session = grid.double_activate(0, "Note")
        self.assertEqual(session.draft_value, "")
        grid.blur()

        self.assertEqual(changes, [])
        self.assertIsNone(grid.get(0)[1])
        self.assertEqual(grid.edit_state, IDLE)

    def test_boolean_in_text_column_is_not_rewritten(self):
        grid = self._two_column_grid([["x", True]])
        changes = []
        grid.on("change", changes.append)

        grid.double_activate(0, "Note")
        grid.blur()

        self.assertEqual(changes, [])
        self.assertEqual(grid.get(0), ["x", True])

    def test_text_in_numeric_column_survives_untouched_blur(self):
        grid = self._two_column_grid([[1], ["n/a"]], columns=("Count",))
        changes = []
        grid.on("change", changes.append)

        grid.double_activate(1, "Count")
        grid.blur()

        self.assertEqual(changes, [])
        self.assertEqual(grid.get(1), ["n/a"])
        self.assertEqual(grid.edit_state, IDLE)

    def test_blur_hook_with_draft_accessor(self):
        surface = BlurHookSurface()
        grid = _grid(_text_rows(), surface)
        changes = []
        grid.on("change", changes.append)

        grid.double_activate(1, "Name")
        grid.set_draft("Kaleb")
        surface.blur()

        self.assertEqual(grid.get(1)[0], "Kaleb")
        self.assertEqual(len(changes), 1)


class CellEditViewInteractionTests(unittest.TestCase):
    def test_edit_under_sort_writes_to_storage_index(self):
        grid = _grid()
        view = grid.sort("Age")
        youngest = view.original_index(0)

        grid.double_activate(0, "Name")
        event = grid.blur("Youngest")

        self.assertEqual(event.row, 0)
        self.assertEqual(grid.get(youngest)[0], "Youngest")
        self.assertNotEqual(youngest, 0)

    def test_sort_during_edit_follows_the_record(self):
        grid = _grid()
        grid.double_activate(2, "Name")

        grid.sort("Age", descending=True)

        session = grid.editor.session
        self.assertIsNotNone(session)
        self.assertEqual(grid.view.record(session.derived_index)[0], "Bil")
        grid.blur("Bill")
        self.assertEqual(grid.get(2)[0], "Bill")

    def test_filtering_out_edited_record_cancels_edit(self):
        grid = _grid()
        grid.double_activate(2, "Name")

        grid.filter("female")

        self.assertEqual(grid.edit_state, IDLE)

    def test_removing_edited_record_cancels_edit(self):
        grid = _grid()
        grid.double_activate(2, "Name")

        grid.remove(2)

        self.assertEqual(grid.edit_state, IDLE)

    def test_removal_of_earlier_record_retargets_edit(self):
        grid = _grid()
        grid.double_activate(2, "Name")

        grid.remove(0)

        self.assertEqual(grid.editor.session.derived_index, 1)
        grid.blur("Bill")
        self.assertEqual(grid.get(1)[0], "Bill")

    def test_committed_row_is_rematerialized(self):
        surface = DummySurface()
        grid = _grid(surface=surface)

        grid.double_activate(1, "Name")
        grid.blur("Kaleb")

        self.assertEqual(surface.rows()[1][0], "Kaleb")
        self.assertEqual(surface.materialized[-1], (1, grid.get(1)))

    def test_change_handler_sees_post_edit_state(self):
        grid = _grid()
        seen = []
        grid.on("change", lambda e: seen.append(grid.get(e.row)[4]))

        grid.double_activate(2, "Age")
        grid.blur("60")

        self.assertEqual(seen, [60])


if __name__ == "__main__":
    unittest.main()
