from __future__ import annotations

from dataclasses import dataclass, field

from ..tree_model import STATUS_FILTER_ALL, DisplayNode, ReviewFilter


@dataclass
class DashboardState:
    nodes: list[DisplayNode] = field(default_factory=list)
    cursor: int = 0
    scroll: int = 0
    height: int = 24
    status_filter: str = STATUS_FILTER_ALL
    search_query: str = ""
    active_labels: list[str] = field(default_factory=list)
    detail_focus: bool = False
    detail_scroll: int = 0
    show_help: bool = False
    show_summary: bool = False
    prompt_copied: bool = False
    quitting: bool = False
    save_on_quit: bool = False
    notice: str = ""

    def row_filter(self) -> ReviewFilter:
        return ReviewFilter(
            status_filter=self.status_filter,
            search_query=self.search_query,
            active_labels=list(self.active_labels),
        )
