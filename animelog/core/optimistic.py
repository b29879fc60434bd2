"""Client-side bookkeeping for list actions applied before the server answers.

This is a helper for Python clients of the action endpoints; the server
itself never imports it.

A client shows the speculative value right away, sends the action, and then
either adopts the confirmed entry or falls back to the last confirmed state.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from animelog.core.enums import AnimeStatus
from animelog.schemas.anime import ActionResult


def next_status(current: Optional[AnimeStatus], clicked: AnimeStatus) -> Optional[AnimeStatus]:
    """Clicking the active status clears it; any other click selects it"""
    return None if current == clicked else clicked


@dataclass(frozen=True)
class EntryState:
    is_favorite: bool = False
    status: Optional[AnimeStatus] = None


class OptimisticEntry:
    """Confirmed and speculative state of one (user, anime) pair"""

    def __init__(self, confirmed: Optional[EntryState] = None):
        self.confirmed = confirmed or EntryState()
        self.pending: Optional[EntryState] = None

    @property
    def current(self) -> EntryState:
        return self.pending or self.confirmed

    @property
    def is_pending(self) -> bool:
        return self.pending is not None

    def toggle_favorite(self) -> bool:
        """Flip the favorite flag speculatively; returns the new flag"""
        state = self.current
        self.pending = EntryState(is_favorite=not state.is_favorite, status=state.status)
        return self.pending.is_favorite

    def click_status(self, clicked: AnimeStatus) -> Optional[AnimeStatus]:
        """Apply a status click speculatively; returns the status to send"""
        state = self.current
        final_status = next_status(state.status, clicked)
        self.pending = EntryState(is_favorite=state.is_favorite, status=final_status)
        return final_status

    def reconcile(self, result: ActionResult) -> Tuple[EntryState, bool]:
        """Settle the pending change against the server's answer.

        Returns the state now shown and whether the change was kept.
        """
        self.pending = None
        if not result.success:
            return self.confirmed, False
        if result.entry is None:
            self.confirmed = EntryState()
        else:
            self.confirmed = EntryState(is_favorite=result.entry.is_favorite, status=result.entry.status)
        return self.confirmed, True
