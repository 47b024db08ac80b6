"""Dashboard runtime: controller state, prompts, viewport, and persistence helpers."""

from __future__ import annotations

from .dashboard import ClipboardWriter, ReviewDashboard
from .progress import ProgressStore, TutorialProgress, default_progress_path
from .prompt import TextPrompt
from .state import DashboardState
from .viewport import clamp_cursor, ensure_visible, tree_view_rows, visible_slice

__all__ = [
    "ClipboardWriter",
    "DashboardState",
    "ProgressStore",
    "ReviewDashboard",
    "TextPrompt",
    "TutorialProgress",
    "clamp_cursor",
    "default_progress_path",
    "ensure_visible",
    "tree_view_rows",
    "visible_slice",
]
