"""Domain Types — rich types and constants shared across the codebase.

Invariants:
    - EntryId wraps the integer primary key — identifiers are never reused
    - Stored ids fit a signed 64-bit column; ids outside it name no entry
    - DEFAULT_NAME is what a blank name becomes; DEFAULT_SUBJECT likewise for sub
    - Admin commands are matched after strip() + lower()

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for commands: compares equal to the raw option string
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EntryId = NewType("EntryId", int)

ENTRY_ID_MIN = -(2**63)
ENTRY_ID_MAX = 2**63 - 1


def is_storable_entry_id(entry_id: int) -> bool:
    """True when entry_id fits the 64-bit primary key column."""
    return ENTRY_ID_MIN <= entry_id <= ENTRY_ID_MAX


# ─── Defaults ────────────────────────────────────────────────────

DEFAULT_NAME = "Anonymous"
DEFAULT_SUBJECT = ""
FALLBACK_BLANK_LINE = "be me"


# ─── Enums ───────────────────────────────────────────────────────

class AdminCommand(str, Enum):
    """Commands accepted through the post `options` field."""
    CLEAR = "clear"


def parse_admin_command(options: str | None) -> AdminCommand | None:
    """Return the admin command named by `options`, or None for ordinary posts."""
    if not options:
        return None
    normalized = options.strip().lower()
    for command in AdminCommand:
        if command.value == normalized:
            return command
    return None


def display_name(name: str | None) -> str:
    """Trimmed poster name, or DEFAULT_NAME when blank."""
    name = (name or "").strip()
    return name or DEFAULT_NAME


def display_subject(sub: str | None) -> str:
    """Trimmed subject line, or DEFAULT_SUBJECT when blank."""
    return (sub or "").strip() or DEFAULT_SUBJECT
