"""Modal label/epic/bead selector with vim-style normal and insert modes."""

from __future__ import annotations

from collections.abc import Iterable

from ..input import KeyComboBinding, KeyComboRegistry, is_printable_key
from ..model import Item
from ..search import fuzzy_match_labels
from .items import SelectorItem, build_selector_items
from .matching import FuzzyFinder, match_fuzzy, match_review_lookup
from .modes import NORMAL, InsertMode, InsertVariant, NormalMode, SelectorMode, SelectorOutcome
from .scope import ScopeFilter


class LabelSelector:
    """Keyboard-driven chooser over labels, open epics, and individual items.

    The selector is finished once :attr:`outcome` leaves ``PENDING``; the
    caller reads the result and calls :meth:`reset` before reusing it.
    """

    def __init__(self, items: Iterable[Item], fuzzy_find: FuzzyFinder = fuzzy_match_labels) -> None:
        self._items = list(items)
        self._all_candidates = build_selector_items(self._items)
        self._scope = ScopeFilter(self._items, self._all_candidates)
        self._fuzzy_find = fuzzy_find
        self._normal_keys = self._build_normal_registry()
        self.reset()

    def reset(self) -> None:
        """Return to a fresh normal-mode selector over the full candidate list."""
        self.mode: SelectorMode = NORMAL
        self.outcome = SelectorOutcome.PENDING
        self.selected_item: SelectorItem | None = None
        self.scoped_labels: list[str] = []
        self.query = ""
        self.selected_index = 0
        self._scope.clear_scope()
        self.candidates: list[SelectorItem] = list(self._all_candidates)

    @property
    def all_candidates(self) -> list[SelectorItem]:
        return list(self._all_candidates)

    @property
    def scope_labels(self) -> list[str]:
        return self._scope.scope_labels

    @property
    def scope_active(self) -> bool:
        return self._scope.active

    @property
    def insert_variant(self) -> InsertVariant | None:
        return self.mode.variant if isinstance(self.mode, InsertMode) else None

    @property
    def highlighted(self) -> SelectorItem | None:
        if 0 <= self.selected_index < len(self.candidates):
            return self.candidates[self.selected_index]
        return None

    def handle_key(self, key: str) -> bool:
        """Apply one key token; return whether the selector consumed it."""
        if self.outcome is not SelectorOutcome.PENDING:
            return False
        if isinstance(self.mode, NormalMode):
            return bool(self._normal_keys.dispatch(key))
        return self._handle_insert_key(self.mode.variant, key)

    def _build_normal_registry(self) -> KeyComboRegistry:
        def enter_insert(variant: InsertVariant) -> bool:
            self.mode = InsertMode(variant)
            return True

        def enter_review_lookup() -> bool:
            self.mode = InsertMode(InsertVariant.REVIEW_LOOKUP)
            self.query = ""
            self._set_candidates([])
            return True

        def move(direction: int) -> bool:
            self._move(direction)
            return True

        def confirm() -> bool:
            self._confirm_highlighted()
            return True

        return KeyComboRegistry().register_bindings(
            KeyComboBinding(("UP", "k"), lambda: move(-1)),
            KeyComboBinding(("DOWN", "j"), lambda: move(1)),
            KeyComboBinding(("i", "/"), lambda: enter_insert(InsertVariant.SEARCH)),
            KeyComboBinding(("s",), lambda: enter_insert(InsertVariant.SCOPE_ADD)),
            KeyComboBinding(("r",), enter_review_lookup),
            KeyComboBinding(("ENTER",), confirm),
            KeyComboBinding(("ESC",), self._normal_escape),
            KeyComboBinding(("BACKSPACE",), self._normal_backspace),
        )

    def _normal_escape(self) -> bool:
        if self._scope.active:
            self._scope.clear_scope()
            self.query = ""
            self.scoped_labels = []
            self._set_candidates(self._all_candidates)
            return True
        self.selected_item = None
        self.outcome = SelectorOutcome.CANCELLED
        return True

    def _normal_backspace(self) -> bool:
        if self.query:
            self.query = ""
            self._set_candidates(self._base_candidates())
        elif self._scope.active:
            self._set_candidates(self._scope.remove_last_scope())
        return True

    def _handle_insert_key(self, variant: InsertVariant, key: str) -> bool:
        if key == "ESC":
            self.mode = NORMAL
            if variant is InsertVariant.REVIEW_LOOKUP:
                self.query = ""
                self._set_candidates(self._base_candidates())
            return True
        if key == "ENTER":
            item = self.highlighted
            if item is None:
                return True
            if variant is InsertVariant.SCOPE_ADD and item.is_label:
                self.query = ""
                self._set_candidates(self._scope.add_to_scope(item.value))
                return True
            self._confirm_highlighted()
            return True
        if key == "BACKSPACE":
            if self.query:
                self.query = self.query[:-1]
                self._refresh(variant)
            return True
        if key == "UP":
            self._move(-1)
            return True
        if key == "DOWN":
            self._move(1)
            return True
        if is_printable_key(key):
            self.query += key
            self._refresh(variant)
            return True
        return False

    def _base_candidates(self) -> list[SelectorItem]:
        return self._scope.candidates if self._scope.active else list(self._all_candidates)

    def _refresh(self, variant: InsertVariant) -> None:
        if variant is InsertVariant.REVIEW_LOOKUP:
            self._set_candidates(match_review_lookup(self.query, self._items))
            return
        self._set_candidates(match_fuzzy(self.query, self._base_candidates(), self._fuzzy_find))

    def _set_candidates(self, candidates: Iterable[SelectorItem]) -> None:
        self.candidates = list(candidates)
        self.selected_index = 0

    def _move(self, direction: int) -> None:
        if not self.candidates:
            return
        self.selected_index = max(0, min(len(self.candidates) - 1, self.selected_index + direction))

    def _confirm_highlighted(self) -> None:
        item = self.highlighted
        if item is None:
            return
        self.selected_item = item
        if self._scope.active and item.is_label:
            self.scoped_labels = [*self._scope.scope_labels, item.value]
        else:
            self.scoped_labels = []
        self.outcome = SelectorOutcome.CONFIRMED
