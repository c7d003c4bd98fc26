from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import random


class Move(str, Enum):
    ROCK = 'rock'
    PAPER = 'paper'
    SCISSORS = 'scissors'


class Verdict(str, Enum):
    A_WINS = 'a'
    B_WINS = 'b'
    DRAW = 'draw'


PREFIXES = ['Neon', 'Cyber', 'Shadow', 'Cosmic', 'Pixel', 'Rapid', 'Turbo', 'Iron', 'Solar', 'Atomic']
SUFFIXES = ['Ninja', 'Wolf', 'Hawk', 'Viper', 'Ghost', 'Knight', 'Storm', 'Falcon', 'Raven', 'Tiger']


def generate_display_name(rng=random):
    """Generate a short, human-readable name. Collisions are tolerated."""
    return f"{rng.choice(PREFIXES)}{rng.choice(SUFFIXES)}{rng.randrange(100)}"


@dataclass
class Identity:
    handle: str
    username: str
    score: int = 0
    wins: int = 0

    def to_dict(self):
        return {
            'username': self.username,
            'score': self.score,
            'wins': self.wins,
        }


@dataclass
class MatchRoom:
    room_id: str
    player_a: str
    player_b: str
    move_a: Optional[Move] = None
    move_b: Optional[Move] = None

    @property
    def players(self):
        return (self.player_a, self.player_b)

    @property
    def is_complete(self):
        return self.move_a is not None and self.move_b is not None

    def has_player(self, handle):
        return handle in (self.player_a, self.player_b)

    def opponent_of(self, handle):
        if handle == self.player_a:
            return self.player_b
        if handle == self.player_b:
            return self.player_a
        return None

    def move_of(self, handle):
        if handle == self.player_a:
            return self.move_a
        if handle == self.player_b:
            return self.move_b
        return None


@dataclass(frozen=True)
class HistoryEntry:
    id: int
    winner: str
    loser: str
    win_move: Move
    lose_move: Move

    def to_dict(self):
        return {
            'id': self.id,
            'winner': self.winner,
            'loser': self.loser,
            'winMove': self.win_move.value,
            'loseMove': self.lose_move.value,
        }


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a resolved room, as seen by each participant."""
    room_id: str
    player_a: str
    player_b: str
    move_a: Move
    move_b: Move
    verdict: Verdict
    history_entry: Optional[HistoryEntry] = field(default=None)

    def result_for(self, handle):
        if self.verdict is Verdict.DRAW:
            return 'draw'
        winner = self.player_a if self.verdict is Verdict.A_WINS else self.player_b
        return 'win' if handle == winner else 'lose'

    def opponent_move_for(self, handle):
        return self.move_b if handle == self.player_a else self.move_a
