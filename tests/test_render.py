from __future__ import annotations

import unittest

from quickfile.location import Location
from quickfile.navigation import EntryKind, NavigationEntry
from quickfile.picker import PickerOptions, PickerPanel, compose_screen, render_picker_rows
from quickfile.terminal.ansi import clip_ansi_line, display_width, strip_ansi
from quickfile.terminal.theme import DEFAULT_THEME, PLAIN_THEME, resolve_theme


def _panel(*specs: tuple[str, EntryKind]) -> PickerPanel:
    entries = [NavigationEntry(label, kind, Location("/w").join(label), lambda: None) for label, kind in specs]
    panel = PickerPanel(lambda entry: None, lambda: None)
    panel.show(lambda query: entries, PickerOptions(placeholder="Type file name..."))
    return panel


class RenderTests(unittest.TestCase):
    def test_rows_show_placeholder_entries_and_status(self) -> None:
        panel = _panel(("..", EntryKind.UP), ("src", EntryKind.DIRECTORY), ("index.ts", EntryKind.LEAF))

        rows = render_picker_rows(panel, PLAIN_THEME, 40, 6, "/w/src")

        self.assertEqual(len(rows), 6)
        self.assertEqual(rows[0], "> Type file name...")
        self.assertEqual(rows[1:4], ["▸ ..", "  src/", "  index.ts"])
        self.assertEqual(rows[4], "")
        self.assertEqual(rows[5], "/w/src")

    def test_query_replaces_placeholder(self) -> None:
        panel = _panel(("index.ts", EntryKind.LEAF))
        panel.handle_key("i", visible_rows=5)

        rows = render_picker_rows(panel, PLAIN_THEME, 40, 3, "")

        self.assertEqual(rows[0], "> i")

    def test_rows_are_clipped_to_width(self) -> None:
        panel = _panel(("a-very-long-file-name.txt", EntryKind.LEAF))

        rows = render_picker_rows(panel, DEFAULT_THEME, 10, 3, "status line that is long")

        for row in rows:
            self.assertLessEqual(display_width(row), 10)

    def test_list_scrolls_to_keep_selection_visible(self) -> None:
        panel = _panel(*[(f"f{idx}.txt", EntryKind.LEAF) for idx in range(6)])
        panel.move_selection(5)

        rows = render_picker_rows(panel, PLAIN_THEME, 20, 4, "")

        self.assertEqual(rows[1:3], ["  f4.txt", "▸ f5.txt"])

    def test_compose_screen_addresses_every_row(self) -> None:
        payload = compose_screen(["a", "b"])

        self.assertIn("\x1b[1;1H\x1b[2Ka", payload)
        self.assertIn("\x1b[2;1H\x1b[2Kb", payload)


class AnsiTests(unittest.TestCase):
    def test_clip_preserves_escape_sequences_and_counts_wide_chars(self) -> None:
        clipped = clip_ansi_line("\033[1mab\033[0m界界", 5)

        self.assertEqual(strip_ansi(clipped), "ab界")
        self.assertEqual(display_width(clipped), 4)

    def test_control_characters_are_replaced(self) -> None:
        self.assertEqual(clip_ansi_line("a\x07b", 10), "a?b")

    def test_resolve_theme_falls_back_to_default(self) -> None:
        self.assertIs(resolve_theme("nope"), DEFAULT_THEME)
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)
        self.assertEqual(resolve_theme(" OCEAN ").name, "ocean")


if __name__ == "__main__":
    unittest.main()
