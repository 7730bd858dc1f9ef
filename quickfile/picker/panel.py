"""Terminal picker panel owning query editing, matching and selection."""

from __future__ import annotations

from collections.abc import Callable

from ..navigation.entries import NavigationEntry
from .fuzzy import exact_match_labels, fuzzy_match_labels
from .host import EntryProvider, PickerOptions

PICKER_RESULT_LIMIT = 500


class PickerPanel:
    """Stateful picker host for one terminal screen.

    Entries are pulled from the provider handed to :meth:`show` every time
    the query changes. Activation and dismissal are forwarded to the owner
    callbacks; the panel never interprets entries itself.
    """

    def __init__(
        self,
        activate: Callable[[NavigationEntry], object],
        dismiss: Callable[[], None],
        *,
        limit: int = PICKER_RESULT_LIMIT,
    ) -> None:
        self.activate = activate
        self.dismiss = dismiss
        self.limit = limit
        self.provider: EntryProvider | None = None
        self.options = PickerOptions()
        self.visible = False
        self.query = ""
        self.selected = 0
        self.list_start = 0
        self.matches: list[NavigationEntry] = []
        self.dirty = True

    def show(self, provider: EntryProvider, options: PickerOptions) -> None:
        self.provider = provider
        self.options = options
        self.visible = True
        self.query = ""
        self.refresh_matches(reset_selection=True)

    def close(self) -> None:
        self.provider = None
        self.visible = False
        self.query = ""
        self.matches = []
        self.selected = 0
        self.list_start = 0
        self.dirty = True

    def refresh_matches(self, reset_selection: bool = False) -> None:
        """Pull entries for the current query and rank them by label."""
        entries = list(self.provider(self.query)) if self.provider is not None else []
        labels = [entry.label for entry in entries]
        match_labels = fuzzy_match_labels if self.options.fuzzy_match_label else exact_match_labels
        ranked = match_labels(self.query, labels, limit=self.limit)
        self.matches = [entries[idx] for idx, _label, _score in ranked]
        if reset_selection:
            self.selected = 0
            self.list_start = 0
        else:
            self.selected = max(0, min(self.selected, len(self.matches) - 1))
        self.dirty = True

    def selected_entry(self) -> NavigationEntry | None:
        if not self.matches:
            return None
        return self.matches[self.selected]

    def move_selection(self, direction: int) -> None:
        if not self.matches:
            return
        previous = self.selected
        self.selected = max(0, min(len(self.matches) - 1, self.selected + direction))
        if self.selected != previous:
            self.dirty = True

    def ensure_selection_visible(self, visible_rows: int) -> None:
        rows = max(1, visible_rows)
        if self.selected < self.list_start:
            self.list_start = self.selected
        elif self.selected >= self.list_start + rows:
            self.list_start = self.selected - rows + 1
        self.list_start = max(0, min(self.list_start, max(0, len(self.matches) - rows)))

    def _set_query(self, query: str) -> None:
        if query == self.query:
            return
        self.query = query
        self.refresh_matches(reset_selection=True)

    def _activate_selection(self) -> None:
        entry = self.selected_entry()
        if entry is None:
            return
        # Drop the rows first; the next show() repopulates them.
        self.matches = []
        self.provider = None
        self.dirty = True
        self.activate(entry)

    def handle_key(self, key: str, visible_rows: int) -> bool:
        """Handle one key while the picker is visible; return whether it was consumed."""
        if key in {"ESC", "CTRL_C"}:
            self.close()
            self.dismiss()
            return True
        if not self.visible:
            return False

        if key in {"UP", "CTRL_P"}:
            self.move_selection(-1)
            return True
        if key in {"DOWN", "CTRL_N"}:
            self.move_selection(1)
            return True
        if key == "PAGE_UP":
            self.move_selection(-max(1, visible_rows))
            return True
        if key == "PAGE_DOWN":
            self.move_selection(max(1, visible_rows))
            return True
        if key == "HOME":
            self.move_selection(-len(self.matches))
            return True
        if key == "END":
            self.move_selection(len(self.matches))
            return True
        if key == "BACKSPACE":
            self._set_query(self.query[:-1])
            return True
        if key == "CTRL_U":
            self._set_query("")
            return True
        if key == "CTRL_W":
            self._set_query(self.query.rstrip().rpartition(" ")[0])
            return True
        if key == "ENTER":
            self._activate_selection()
            return True
        if len(key) == 1 and key.isprintable():
            self._set_query(self.query + key)
            return True
        return False


__all__ = ["PICKER_RESULT_LIMIT", "PickerPanel"]
