import uuid
from typing import Dict, Optional

from rps_arena.models import MatchRoom, Move


def generate_room_id() -> str:
    """Opaque room key, unrelated to the participants' handles."""
    return f"room_{uuid.uuid4().hex}"


class RoomTable:
    """Live match rooms, indexed by id and by seated player."""

    def __init__(self, id_factory=generate_room_id):
        self._rooms: Dict[str, MatchRoom] = {}
        self._seats: Dict[str, str] = {}
        self._id_factory = id_factory

    def create(self, player_a: str, player_b: str) -> MatchRoom:
        if player_a == player_b:
            raise ValueError("a player cannot be matched against themselves")
        for handle in (player_a, player_b):
            if handle in self._seats:
                raise ValueError(f"{handle} is already seated in room {self._seats[handle]}")
        room = MatchRoom(room_id=self._id_factory(), player_a=player_a, player_b=player_b)
        self._rooms[room.room_id] = room
        self._seats[player_a] = room.room_id
        self._seats[player_b] = room.room_id
        return room

    def get(self, room_id: str) -> Optional[MatchRoom]:
        return self._rooms.get(room_id)

    def room_of(self, handle: str) -> Optional[MatchRoom]:
        room_id = self._seats.get(handle)
        return self._rooms.get(room_id) if room_id else None

    def is_seated(self, handle: str) -> bool:
        return handle in self._seats

    def record_move(self, room_id: str, handle: str, move: Move) -> Optional[MatchRoom]:
        """Record a move, first write wins.

        Returns the room when the move was recorded, None for an unknown
        room, a non-participant, or a repeated submission.
        """
        room = self._rooms.get(room_id)
        if not room or not room.has_player(handle):
            return None
        if room.move_of(handle) is not None:
            return None
        if handle == room.player_a:
            room.move_a = Move(move)
        else:
            room.move_b = Move(move)
        return room

    def destroy(self, room_id: str) -> Optional[MatchRoom]:
        room = self._rooms.pop(room_id, None)
        if room:
            for handle in room.players:
                if self._seats.get(handle) == room_id:
                    del self._seats[handle]
        return room

    def __contains__(self, room_id) -> bool:
        return room_id in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)
