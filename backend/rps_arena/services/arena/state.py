import functools
import threading
import time
from typing import List, Optional, Tuple

from rps_arena.models import Identity, MatchResult, MatchRoom, Move, Verdict, generate_display_name
from .ledger import HistoryLedger, top_identities
from .matchmaking import MatchmakingQueue
from .registry import IdentityRegistry
from .resolver import resolve
from .rooms import RoomTable, generate_room_id


def locked(method):
    """Run an Arena method while holding the arena lock."""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self.lock:
            return method(self, *args, **kwargs)
    return wrapper


class Arena:
    """Owner of all shared match state.

    Every public operation takes ``lock``. The lock is reentrant, so
    callers can also hold it for the whole of an event, including the
    notifications that follow, to keep pairing and resolution atomic.
    """

    def __init__(self, win_reward=10, history_limit=20, history_page_size=5, leaderboard_size=5,
                 name_factory=generate_display_name, room_id_factory=generate_room_id, clock=time.time):
        self.lock = threading.RLock()
        self.registry = IdentityRegistry(name_factory=name_factory, win_reward=win_reward)
        self.queue = MatchmakingQueue()
        self.rooms = RoomTable(id_factory=room_id_factory)
        self.ledger = HistoryLedger(limit=history_limit, page_size=history_page_size, clock=clock)
        self.leaderboard_size = leaderboard_size

    @classmethod
    def from_config(cls, config):
        return cls(
            win_reward=int(config.get('WIN_REWARD', 10)),
            history_limit=int(config.get('HISTORY_LIMIT', 20)),
            history_page_size=int(config.get('HISTORY_PAGE_SIZE', 5)),
            leaderboard_size=int(config.get('LEADERBOARD_SIZE', 5)),
        )

    @property
    def player_count(self) -> int:
        return len(self.registry)

    @locked
    def connect(self, handle: str) -> Identity:
        return self.registry.connect(handle)

    @locked
    def disconnect(self, handle: str) -> List[Tuple[MatchRoom, str]]:
        """Forget a connection everywhere.

        Returns the voided rooms paired with the participant left behind.
        No verdict is computed for them.
        """
        self.registry.disconnect(handle)
        self.queue.cancel(handle)
        room = self.rooms.room_of(handle)
        if not room:
            return []
        self.rooms.destroy(room.room_id)
        return [(room, room.opponent_of(handle))]

    @locked
    def find_match(self, handle: str) -> Optional[MatchRoom]:
        if not self.registry.is_live(handle) or self.rooms.is_seated(handle):
            return None
        self.queue.enqueue(handle)
        return self.pair_waiting()

    @locked
    def pair_waiting(self) -> Optional[MatchRoom]:
        pair = self.queue.try_pair(is_live=self.registry.is_live)
        if not pair:
            return None
        return self.rooms.create(*pair)

    @locked
    def cancel_search(self, handle: str) -> bool:
        return self.queue.cancel(handle)

    @locked
    def submit_move(self, room_id: str, handle: str, move: Move) -> Optional[MatchResult]:
        """Record a move and resolve the room once both players have moved."""
        room = self.rooms.record_move(room_id, handle, move)
        if not room or not room.is_complete:
            return None

        verdict = resolve(room.move_a, room.move_b)
        entry = None
        if verdict is not Verdict.DRAW:
            if verdict is Verdict.A_WINS:
                winner, loser = room.player_a, room.player_b
                win_move, lose_move = room.move_a, room.move_b
            else:
                winner, loser = room.player_b, room.player_a
                win_move, lose_move = room.move_b, room.move_a
            self.registry.record_win(winner)
            entry = self.ledger.record(self._name_of(winner), self._name_of(loser), win_move, lose_move)

        self.rooms.destroy(room.room_id)
        return MatchResult(
            room_id=room.room_id,
            player_a=room.player_a,
            player_b=room.player_b,
            move_a=room.move_a,
            move_b=room.move_b,
            verdict=verdict,
            history_entry=entry,
        )

    @locked
    def score_of(self, handle: str) -> int:
        identity = self.registry.get(handle)
        return identity.score if identity else 0

    @locked
    def leaderboard(self) -> List[Identity]:
        return top_identities(self.registry.identities(), self.leaderboard_size)

    @locked
    def recent_history(self):
        return self.ledger.recent()

    def _name_of(self, handle: str) -> str:
        identity = self.registry.get(handle)
        return identity.username if identity else 'Unknown'
