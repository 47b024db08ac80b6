"""Selector input modes and terminal outcomes."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class InsertVariant(enum.Enum):
    SEARCH = "search"
    SCOPE_ADD = "scope_add"
    REVIEW_LOOKUP = "review_lookup"


class SelectorOutcome(enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class NormalMode:
    """Keys navigate and trigger mode changes."""


@dataclass(frozen=True)
class InsertMode:
    """Keys edit the query buffer for one text-entry variant."""

    variant: InsertVariant


SelectorMode = Union[NormalMode, InsertMode]

NORMAL = NormalMode()
