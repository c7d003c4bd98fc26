import time
from collections import deque
from typing import Iterable, List

from rps_arena.models import HistoryEntry, Identity, Move


def top_identities(identities: Iterable[Identity], size: int = 5) -> List[Identity]:
    """Highest scores first. sorted() is stable, so ties keep registry order."""
    return sorted(identities, key=lambda i: i.score, reverse=True)[:size]


class HistoryLedger:
    """Bounded record of decided matches, newest first.

    Entries hold name snapshots, so they outlive the players' identities.
    """

    def __init__(self, limit: int = 20, page_size: int = 5, clock=time.time):
        self.limit = limit
        self.page_size = page_size
        self._clock = clock
        self._entries = deque(maxlen=limit)
        self._last_id = 0

    def next_id(self) -> int:
        # Millisecond timestamp, bumped when two matches land in the same tick
        candidate = int(self._clock() * 1000)
        self._last_id = max(candidate, self._last_id + 1)
        return self._last_id

    def push(self, entry: HistoryEntry) -> None:
        # deque(maxlen) drops from the tail when inserting at the head
        self._entries.appendleft(entry)

    def record(self, winner: str, loser: str, win_move: Move, lose_move: Move) -> HistoryEntry:
        entry = HistoryEntry(
            id=self.next_id(),
            winner=winner,
            loser=loser,
            win_move=Move(win_move),
            lose_move=Move(lose_move),
        )
        self.push(entry)
        return entry

    def recent(self) -> List[HistoryEntry]:
        return list(self._entries)[:self.page_size]

    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
