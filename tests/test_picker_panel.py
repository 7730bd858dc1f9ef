from __future__ import annotations

import unittest

from quickfile.location import Location
from quickfile.navigation import EntryKind, NavigationEntry
from quickfile.picker import PickerOptions, PickerPanel


def _entries(*labels: str) -> list[NavigationEntry]:
    entries = []
    for label in labels:
        kind = EntryKind.UP if label == ".." else (EntryKind.LEAF if "." in label.strip(".") else EntryKind.DIRECTORY)
        entries.append(NavigationEntry(label, kind, Location("/w").join(label), lambda: None))
    return entries


class PickerPanelTests(unittest.TestCase):
    def setUp(self) -> None:
        self.activated: list[NavigationEntry] = []
        self.dismissed = 0
        self.queries: list[str] = []
        self.entries = _entries("..", "src", "package.json", "README.md")

        def dismiss() -> None:
            self.dismissed += 1

        self.panel = PickerPanel(self.activated.append, dismiss)

    def _provider(self, query: str) -> list[NavigationEntry]:
        self.queries.append(query)
        return self.entries

    def _show(self, options: PickerOptions | None = None) -> None:
        self.panel.show(self._provider, options or PickerOptions())

    def test_show_pulls_entries_with_empty_query(self) -> None:
        self._show()

        self.assertTrue(self.panel.visible)
        self.assertEqual(self.queries, [""])
        self.assertEqual([entry.label for entry in self.panel.matches], ["..", "src", "package.json", "README.md"])

    def test_typing_pulls_provider_again_and_filters(self) -> None:
        self._show()

        self.panel.handle_key("j", visible_rows=10)
        self.panel.handle_key("s", visible_rows=10)

        self.assertEqual(self.queries, ["", "j", "js"])
        self.assertEqual([entry.label for entry in self.panel.matches], ["package.json"])

    def test_backspace_and_ctrl_u_edit_query(self) -> None:
        self._show()
        for key in "src":
            self.panel.handle_key(key, visible_rows=10)

        self.panel.handle_key("BACKSPACE", visible_rows=10)
        self.assertEqual(self.panel.query, "sr")
        self.panel.handle_key("CTRL_U", visible_rows=10)
        self.assertEqual(self.panel.query, "")
        self.assertEqual(len(self.panel.matches), 4)

    def test_enter_activates_selected_entry_and_clears_rows(self) -> None:
        self._show()
        self.panel.handle_key("DOWN", visible_rows=10)

        self.panel.handle_key("ENTER", visible_rows=10)

        self.assertEqual([entry.label for entry in self.activated], ["src"])
        self.assertEqual(self.panel.matches, [])

    def test_enter_with_no_matches_does_nothing(self) -> None:
        self._show()
        for key in "zzz":
            self.panel.handle_key(key, visible_rows=10)

        self.panel.handle_key("ENTER", visible_rows=10)

        self.assertEqual(self.activated, [])

    def test_selection_is_clamped(self) -> None:
        self._show()

        self.panel.handle_key("UP", visible_rows=10)
        self.assertEqual(self.panel.selected, 0)
        self.panel.handle_key("END", visible_rows=10)
        self.assertEqual(self.panel.selected, 3)
        self.panel.handle_key("PAGE_DOWN", visible_rows=10)
        self.assertEqual(self.panel.selected, 3)

    def test_escape_closes_and_dismisses(self) -> None:
        self._show()

        self.panel.handle_key("ESC", visible_rows=10)

        self.assertFalse(self.panel.visible)
        self.assertEqual(self.dismissed, 1)

    def test_unmapped_keys_leave_panel_open_and_query_untouched(self) -> None:
        self._show()

        for key in ("UNKNOWN", "DELETE", "LEFT"):
            self.assertFalse(self.panel.handle_key(key, visible_rows=10))

        self.assertTrue(self.panel.visible)
        self.assertEqual(self.panel.query, "")
        self.assertEqual(self.dismissed, 0)

    def test_list_window_follows_selection(self) -> None:
        self._show()

        self.panel.move_selection(3)
        self.panel.ensure_selection_visible(2)

        self.assertEqual(self.panel.list_start, 2)

    def test_non_fuzzy_options_filter_by_substring_only(self) -> None:
        self._show(PickerOptions(fuzzy_match_label=False))

        self.panel.handle_key("p", visible_rows=10)
        self.panel.handle_key("j", visible_rows=10)

        self.assertEqual(self.panel.matches, [])


if __name__ == "__main__":
    unittest.main()
