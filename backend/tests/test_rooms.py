import pytest

from rps_arena.models import Move
from rps_arena.services.arena.rooms import RoomTable


def test_room_ids_are_opaque():
    rooms = RoomTable()
    room = rooms.create('sid-a', 'sid-b')
    assert room.room_id.startswith('room_')
    assert 'sid-a' not in room.room_id
    assert 'sid-b' not in room.room_id


def test_first_move_wins():
    rooms = RoomTable()
    room = rooms.create('sid-a', 'sid-b')
    assert rooms.record_move(room.room_id, 'sid-a', Move.ROCK) is room
    assert rooms.record_move(room.room_id, 'sid-a', Move.PAPER) is None
    assert room.move_a is Move.ROCK
    assert not room.is_complete


def test_moves_from_outsiders_or_unknown_rooms_are_dropped():
    rooms = RoomTable()
    room = rooms.create('sid-a', 'sid-b')
    assert rooms.record_move(room.room_id, 'sid-c', Move.ROCK) is None
    assert rooms.record_move('room_missing', 'sid-a', Move.ROCK) is None
    assert room.move_a is None and room.move_b is None


def test_player_cannot_sit_in_two_rooms():
    rooms = RoomTable()
    rooms.create('sid-a', 'sid-b')
    with pytest.raises(ValueError):
        rooms.create('sid-b', 'sid-c')


def test_destroy_frees_seats():
    rooms = RoomTable()
    room = rooms.create('sid-a', 'sid-b')
    assert rooms.destroy(room.room_id) is room
    assert room.room_id not in rooms
    assert not rooms.is_seated('sid-a')
    assert rooms.destroy(room.room_id) is None
    # Both players can be seated again
    rooms.create('sid-a', 'sid-b')
