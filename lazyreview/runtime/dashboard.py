"""Review dashboard controller.

Owns the flattened tree, cursor/scroll state, the overlay prompts, and the
review session. Every filter change re-flattens the tree and re-applies the
cursor and viewport invariants; plain cursor moves only re-run the viewport
check.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..input import (
    KEY_BACKSPACE,
    KEY_CTRL_J,
    KEY_CTRL_S,
    KEY_DOWN,
    KEY_END,
    KEY_ENTER,
    KEY_ESC,
    KEY_HOME,
    KEY_TAB,
    KEY_UP,
    KeyComboBinding,
    KeyComboRegistry,
)
from ..model import (
    OUTCOME_NOTE,
    REVIEW_APPROVED,
    REVIEW_DEFERRED,
    REVIEW_NEEDS_REVISION,
    REVIEW_TYPE_PLAN,
    Item,
)
from ..review import (
    ReviewSaver,
    ReviewSaveResult,
    ReviewSession,
    apply_review_state_from_comments,
    full_session_prompt,
    save_review_actions,
    simple_session_prompt,
)
from ..review.session import Clock, utc_now
from ..search import fuzzy_match_labels
from ..selector import FuzzyFinder, LabelSelector, SelectorOutcome
from ..tree_model import (
    STATUS_FILTER_ALL,
    DisplayNode,
    ReviewTree,
    cycle_status_filter,
    flatten_review_tree,
    index_of_item,
    next_unreviewed_index,
)
from . import config
from .clipboard import copy_text_to_clipboard
from .prompt import TextPrompt
from .state import DashboardState
from .viewport import clamp_cursor, ensure_visible, tree_view_rows

logger = logging.getLogger(__name__)

ClipboardWriter = Callable[[str], "bool | None"]


class ReviewDashboard:
    """Keyboard-driven review of one item tree."""

    def __init__(
        self,
        tree: ReviewTree,
        reviewer: str = "",
        review_type: str = REVIEW_TYPE_PLAN,
        clipboard_writer: ClipboardWriter = copy_text_to_clipboard,
        fuzzy_find: FuzzyFinder = fuzzy_match_labels,
        clock: Clock = utc_now,
        height: int = 24,
        status_filter: str = STATUS_FILTER_ALL,
    ) -> None:
        self.tree = tree
        apply_review_state_from_comments(tree.all_items())
        self.session = ReviewSession(tree.items_by_id, reviewer=reviewer, review_type=review_type, clock=clock)
        self.state = DashboardState(height=height, status_filter=status_filter)
        self.search_prompt = TextPrompt("search")
        self.label_prompt = TextPrompt("label")
        self.assignee_prompt = TextPrompt("assignee")
        self.note_prompt = TextPrompt("note", multiline=True)
        self.note_outcome = ""
        self._note_item_id = ""
        self._assignee_item_id = ""
        self.selector: LabelSelector | None = None
        self.selector_open = False
        self._clipboard_writer = clipboard_writer
        self._fuzzy_find = fuzzy_find
        self._normal_keys = self._build_normal_registry()
        self._summary_keys = self._build_summary_registry()
        self.rebuild()

    @classmethod
    def from_config(cls, tree: ReviewTree, **kwargs: object) -> ReviewDashboard:
        """Create a dashboard seeded from the persisted reviewer preferences."""
        kwargs.setdefault("reviewer", config.load_reviewer())
        kwargs.setdefault("review_type", config.load_review_type())
        kwargs.setdefault("status_filter", config.load_status_filter())
        return cls(tree, **kwargs)  # type: ignore[arg-type]

    @property
    def nodes(self) -> list[DisplayNode]:
        return self.state.nodes

    @property
    def visible_rows(self) -> int:
        return tree_view_rows(self.state.height, self.search_prompt.visible)

    @property
    def selected_item(self) -> Item | None:
        if 0 <= self.state.cursor < len(self.state.nodes):
            return self.state.nodes[self.state.cursor].item
        return None

    def rebuild(self, reset_cursor: bool = False) -> None:
        """Re-flatten with the current filters and restore cursor invariants."""
        row_filter = self.state.row_filter()
        self.state.nodes = flatten_review_tree(self.tree.root, self.tree.all_items(), row_filter.matches)
        if reset_cursor:
            self.state.cursor = 0
            self.state.scroll = 0
        self.state.cursor = clamp_cursor(self.state.cursor, len(self.state.nodes))
        self._ensure_visible()

    def resize(self, height: int) -> None:
        self.state.height = height
        self._ensure_visible()

    def save_reviews(self, saver: ReviewSaver) -> ReviewSaveResult:
        """Hand every recorded action to ``saver``; session state is untouched."""
        return save_review_actions(saver, self.session.actions())

    def handle_key(self, key: str) -> bool:
        """Process one key token; returns ``True`` once the dashboard should exit."""
        self.state.notice = ""
        if self.state.show_summary:
            self._summary_keys.dispatch(key)
        elif self.state.show_help:
            self.state.show_help = False
        elif self.selector_open:
            self._handle_selector_key(key)
        elif self.search_prompt.visible:
            self._handle_search_key(key)
        elif self.label_prompt.visible:
            self._handle_label_key(key)
        elif self.assignee_prompt.visible:
            self._handle_assignee_key(key)
        elif self.note_prompt.visible:
            self._handle_note_key(key)
        else:
            self._normal_keys.dispatch(key)
        return self.state.quitting

    def _ensure_visible(self) -> None:
        self.state.scroll = ensure_visible(
            self.state.cursor,
            self.state.scroll,
            len(self.state.nodes),
            self.visible_rows,
        )

    def _set_cursor(self, cursor: int) -> None:
        cursor = clamp_cursor(cursor, len(self.state.nodes))
        if cursor != self.state.cursor:
            self.state.detail_scroll = 0
        self.state.cursor = cursor
        self._ensure_visible()

    def _move(self, direction: int) -> None:
        if self.state.detail_focus:
            self.state.detail_scroll = max(0, self.state.detail_scroll + direction)
            return
        self._set_cursor(self.state.cursor + direction)

    def _jump_unreviewed(self, direction: int) -> None:
        idx = next_unreviewed_index(self.state.nodes, self.state.cursor, direction)
        if idx is not None:
            self._set_cursor(idx)

    def _record(self, item_id: str, status: str, note: str = "") -> None:
        self.session.record_action(item_id, status, note)
        # The new review status can move the item in or out of the filter.
        self.rebuild()

    def _approve(self) -> None:
        item = self.selected_item
        if item is not None:
            self._record(item.id, REVIEW_APPROVED)

    def _open_note(self, outcome: str) -> None:
        item = self.selected_item
        if item is None:
            return
        self.note_outcome = outcome
        self._note_item_id = item.id
        self.note_prompt.open()

    def _open_search(self) -> None:
        self.search_prompt.open()
        self.state.search_query = ""
        self.rebuild(reset_cursor=True)

    def _open_assignee(self) -> None:
        item = self.selected_item
        if item is None:
            return
        self._assignee_item_id = item.id
        self.assignee_prompt.open(item.assignee)

    def _open_selector(self) -> None:
        if self.selector is None:
            self.selector = LabelSelector(self.tree.all_items(), fuzzy_find=self._fuzzy_find)
        else:
            self.selector.reset()
        self.selector_open = True

    def _clear_labels(self) -> None:
        self.state.active_labels = []
        self.rebuild(reset_cursor=True)

    def _cycle_filter(self) -> None:
        self.state.status_filter = cycle_status_filter(self.state.status_filter)
        self.rebuild()

    def _request_quit(self) -> None:
        if self.session.pending_count() > 0:
            self.state.show_summary = True
        else:
            self.state.quitting = True

    def _build_normal_registry(self) -> KeyComboRegistry:
        registry = KeyComboRegistry()
        registry.register_bindings(
            KeyComboBinding(("j", KEY_DOWN), lambda: self._move(1)),
            KeyComboBinding(("k", KEY_UP), lambda: self._move(-1)),
            KeyComboBinding(("g", KEY_HOME), lambda: self._set_cursor(0)),
            KeyComboBinding(("G", KEY_END), lambda: self._set_cursor(len(self.state.nodes) - 1)),
            KeyComboBinding(("]",), lambda: self._jump_unreviewed(1)),
            KeyComboBinding(("[",), lambda: self._jump_unreviewed(-1)),
            KeyComboBinding(("f",), self._cycle_filter),
            KeyComboBinding(("a",), self._approve),
            KeyComboBinding(("r",), lambda: self._open_note(REVIEW_NEEDS_REVISION)),
            KeyComboBinding(("d",), lambda: self._open_note(REVIEW_DEFERRED)),
            KeyComboBinding(("n",), lambda: self._open_note(OUTCOME_NOTE)),
            KeyComboBinding(("/",), self._open_search),
            KeyComboBinding(("s",), lambda: self.label_prompt.open()),
            KeyComboBinding(("S",), self._clear_labels),
            KeyComboBinding(("A",), self._open_assignee),
            KeyComboBinding(("l",), self._open_selector),
            KeyComboBinding(("q", KEY_ESC), self._request_quit),
        )

        @registry.bind(KEY_TAB)
        def toggle_detail_focus() -> None:
            self.state.detail_focus = not self.state.detail_focus

        @registry.bind("?")
        def show_help() -> None:
            self.state.show_help = True

        return registry

    def _build_summary_registry(self) -> KeyComboRegistry:
        registry = KeyComboRegistry()

        @registry.bind("q")
        def save_and_quit() -> None:
            self.state.save_on_quit = True
            self.state.quitting = True

        @registry.bind("Q")
        def discard_and_quit() -> None:
            self.state.quitting = True

        @registry.bind(KEY_ESC)
        def back_to_tree() -> None:
            self.state.show_summary = False

        registry.register_bindings(
            KeyComboBinding(("p",), lambda: self._copy(simple_session_prompt(self.session.actions()))),
            KeyComboBinding(("P",), lambda: self._copy(full_session_prompt(self.session.actions(), self._title_for))),
        )
        return registry

    def _title_for(self, item_id: str) -> str | None:
        item = self.tree.items_by_id.get(item_id)
        return item.title if item is not None else None

    def _copy(self, text: str) -> None:
        try:
            result = self._clipboard_writer(text)
        except Exception as exc:
            logger.debug("clipboard write failed: %s", exc)
            return
        if result is False:
            logger.debug("clipboard write reported failure")
            return
        self.state.prompt_copied = True

    def _handle_search_key(self, key: str) -> None:
        if key == KEY_ESC:
            self.search_prompt.close()
            self.state.search_query = ""
            self.rebuild(reset_cursor=True)
            return
        if key == KEY_ENTER:
            self.state.search_query = self.search_prompt.close()
            self._ensure_visible()
            return
        if self.search_prompt.edit(key):
            self.state.search_query = self.search_prompt.buffer
            self.rebuild(reset_cursor=True)

    def _handle_label_key(self, key: str) -> None:
        if key == KEY_ESC:
            self.label_prompt.close()
            return
        if key == KEY_ENTER:
            label = self.label_prompt.close().strip()
            if label and self._add_labels([label]):
                self.rebuild(reset_cursor=True)
            return
        if key == KEY_BACKSPACE and not self.label_prompt.buffer:
            if self.state.active_labels:
                self.state.active_labels.pop()
                self.rebuild(reset_cursor=True)
            return
        self.label_prompt.edit(key)

    def _add_labels(self, labels: list[str]) -> bool:
        """Add labels not already active (case-insensitive); return whether any were."""
        added = False
        for label in labels:
            folded = label.casefold()
            if any(active.casefold() == folded for active in self.state.active_labels):
                continue
            self.state.active_labels.append(label)
            added = True
        return added

    def _handle_assignee_key(self, key: str) -> None:
        if key == KEY_ESC:
            self.assignee_prompt.close()
            return
        if key == KEY_ENTER:
            assignee = self.assignee_prompt.close()
            item = self.tree.items_by_id.get(self._assignee_item_id)
            if item is not None:
                item.assignee = assignee
            return
        self.assignee_prompt.edit(key)

    def _handle_note_key(self, key: str) -> None:
        if key == KEY_ESC:
            self.note_prompt.close()
            self.note_outcome = ""
            return
        if key in (KEY_CTRL_S, KEY_CTRL_J):
            note = self.note_prompt.close().strip()
            outcome, self.note_outcome = self.note_outcome, ""
            if outcome == OUTCOME_NOTE and not note:
                return
            self._record(self._note_item_id, outcome, note)
            return
        if key == KEY_ENTER:
            self.note_prompt.newline()
            return
        self.note_prompt.edit(key)

    def _handle_selector_key(self, key: str) -> None:
        selector = self.selector
        if selector is None:
            self.selector_open = False
            return
        selector.handle_key(key)
        if selector.outcome is SelectorOutcome.PENDING:
            return
        if selector.outcome is SelectorOutcome.CONFIRMED and selector.selected_item is not None:
            chosen = selector.selected_item
            if chosen.is_label:
                if self._add_labels(selector.scoped_labels or [chosen.value]):
                    self.rebuild(reset_cursor=True)
            else:
                idx = index_of_item(self.state.nodes, chosen.value)
                if idx is None:
                    self.state.notice = f"{chosen.value} is hidden by the current filters"
                else:
                    self._set_cursor(idx)
        selector.reset()
        self.selector_open = False
