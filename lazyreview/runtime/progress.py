"""Tutorial progress persistence.

The store is an explicit object bound to one file; callers construct it and
pass it where it is needed. All access goes through one lock so independent
callers cannot interleave load, mutate, and save.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from platformdirs import user_config_dir

from .config import APP_NAME

logger = logging.getLogger(__name__)

PROGRESS_FILENAME = "tutorial-progress.json"


def default_progress_path() -> Path:
    return Path(user_config_dir(APP_NAME, appauthor=False)) / PROGRESS_FILENAME


@dataclass
class TutorialProgress:
    viewed_pages: dict[str, bool] = field(default_factory=dict)
    last_page_id: str = ""
    last_viewed_time: datetime | None = None
    completed_once: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "viewed_pages": dict(self.viewed_pages),
            "last_page_id": self.last_page_id,
            "last_viewed_time": self.last_viewed_time.isoformat() if self.last_viewed_time else None,
            "completed_once": self.completed_once,
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> TutorialProgress:
        """Decode a stored object; wrongly typed fields fall back to defaults."""
        raw_pages = data.get("viewed_pages")
        pages = (
            {str(key): bool(value) for key, value in raw_pages.items()}
            if isinstance(raw_pages, dict)
            else {}
        )
        last_page = data.get("last_page_id")
        raw_time = data.get("last_viewed_time")
        viewed_at: datetime | None = None
        if isinstance(raw_time, str) and raw_time:
            try:
                viewed_at = datetime.fromisoformat(raw_time.replace("Z", "+00:00"))
            except ValueError:
                viewed_at = None
        return cls(
            viewed_pages=pages,
            last_page_id=last_page if isinstance(last_page, str) else "",
            last_viewed_time=viewed_at,
            completed_once=data.get("completed_once") is True,
        )


class ProgressStore:
    """Lock-guarded tutorial progress bound to a single JSON file."""

    def __init__(
        self,
        path: Path,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self.path = Path(path)
        self._clock = clock
        self._lock = threading.Lock()
        self._progress = TutorialProgress()
        self._dirty = False

    @property
    def dirty(self) -> bool:
        with self._lock:
            return self._dirty

    def load(self) -> None:
        """Read progress from disk.

        A missing file starts fresh. A malformed file also starts fresh and is
        overwritten by the next save. Other read errors propagate.
        """
        with self._lock:
            self._dirty = False
            try:
                text = self.path.read_text(encoding="utf-8")
            except FileNotFoundError:
                self._progress = TutorialProgress()
                return
            try:
                data = json.loads(text)
            except ValueError as exc:
                logger.warning("resetting malformed tutorial progress %s: %s", self.path, exc)
                self._progress = TutorialProgress()
                return
            self._progress = TutorialProgress.from_dict(data) if isinstance(data, dict) else TutorialProgress()

    def save(self) -> bool:
        """Write progress atomically; returns ``False`` when nothing changed."""
        with self._lock:
            if not self._dirty:
                return False
            self._progress.last_viewed_time = self._clock()
            payload = json.dumps(self._progress.to_dict(), indent=2) + "\n"
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=self.path.name, suffix=".tmp", dir=self.path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
            self._dirty = False
            return True

    def mark_page_viewed(self, page_id: str) -> None:
        with self._lock:
            if not self._progress.viewed_pages.get(page_id):
                self._progress.viewed_pages[page_id] = True
                self._progress.last_page_id = page_id
                self._dirty = True

    def is_page_viewed(self, page_id: str) -> bool:
        with self._lock:
            return bool(self._progress.viewed_pages.get(page_id))

    def viewed_count(self) -> int:
        with self._lock:
            return sum(1 for viewed in self._progress.viewed_pages.values() if viewed)

    def last_page_id(self) -> str:
        with self._lock:
            return self._progress.last_page_id

    def set_completed_once(self) -> None:
        with self._lock:
            if not self._progress.completed_once:
                self._progress.completed_once = True
                self._dirty = True

    def has_completed_once(self) -> bool:
        with self._lock:
            return self._progress.completed_once

    def reset(self) -> None:
        """Forget all progress; the next save writes the empty state."""
        with self._lock:
            self._progress = TutorialProgress()
            self._dirty = True

    def snapshot(self) -> TutorialProgress:
        with self._lock:
            return TutorialProgress.from_dict(self._progress.to_dict())
