from flask import current_app, request
from flask_socketio import emit
from rps_arena import socketio
from rps_arena.models import Move
from rps_arena.schemas import CancelSearchPayload, FindMatchPayload, MakeMovePayload, parse_payload


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore

def _arena():
    return current_app.extensions['arena']

def _namespace() -> str:
    return current_app.config.get('SOCKETIO_NAMESPACE', '/')

def _leaderboard_payload(arena):
    return [identity.to_dict() for identity in arena.leaderboard()]

def _history_payload(arena):
    return [entry.to_dict() for entry in arena.recent_history()]

def _broadcast(event, data):
    socketio.emit(event, data, namespace=_namespace())

def _send(handle, event, data):
    socketio.emit(event, data, to=handle, namespace=_namespace())

def _announce_match(arena, room) -> None:
    current_app.logger.info(f"[pair] room={room.room_id} a={room.player_a} b={room.player_b}")
    for handle in room.players:
        opponent = arena.registry.get(room.opponent_of(handle))
        _send(handle, 'match_found', {
            'roomId': room.room_id,
            'opponentName': opponent.username if opponent else 'Unknown',
        })


def handle_connect(auth=None):
    arena = _arena()
    sid = _get_sid()
    with arena.lock:
        identity = arena.connect(sid)
        current_app.logger.info(f"[connect] sid={sid} name={identity.username} players={arena.player_count}")
        _broadcast('player_count', arena.player_count)
        emit('your_profile', identity.to_dict())
        emit('leaderboard_update', _leaderboard_payload(arena))
        emit('history_update', _history_payload(arena))


def handle_disconnect(reason=None):
    arena = _arena()
    sid = _get_sid()
    with arena.lock:
        voided = arena.disconnect(sid)
        current_app.logger.info(f"[disconnect] sid={sid} players={arena.player_count} voided={len(voided)}")
        _broadcast('player_count', arena.player_count)
        for room, survivor in voided:
            current_app.logger.info(f"[void] room={room.room_id} survivor={survivor}")
            _send(survivor, 'opponent_disconnected', {})
        # Survivors of a failed pairing may be waiting at the front of the queue;
        # under the arena lock this only pairs when the queue was changed elsewhere
        room = arena.pair_waiting()
        if room:
            _announce_match(arena, room)
        _broadcast('leaderboard_update', _leaderboard_payload(arena))


def handle_find_match(data=None):
    if parse_payload(FindMatchPayload, data) is None:
        current_app.logger.info(f"[drop] find_match sid={_get_sid()} malformed payload")
        return
    arena = _arena()
    sid = _get_sid()
    with arena.lock:
        room = arena.find_match(sid)
        if room:
            _announce_match(arena, room)
        else:
            current_app.logger.debug(f"[queue] sid={sid} waiting={len(arena.queue)}")


def handle_cancel_search(data=None):
    if parse_payload(CancelSearchPayload, data) is None:
        current_app.logger.info(f"[drop] cancel_search sid={_get_sid()} malformed payload")
        return
    arena = _arena()
    with arena.lock:
        arena.cancel_search(_get_sid())


def handle_make_move(data=None):
    payload = parse_payload(MakeMovePayload, data)
    sid = _get_sid()
    if payload is None:
        current_app.logger.info(f"[drop] make_move sid={sid} malformed payload")
        return
    arena = _arena()
    with arena.lock:
        result = arena.submit_move(payload.roomId, sid, Move(payload.move))
        if result is None:
            return
        current_app.logger.info(
            f"[resolve] room={result.room_id} a={result.move_a.value} b={result.move_b.value} verdict={result.verdict.value}"
        )
        for handle in (result.player_a, result.player_b):
            _send(handle, 'game_result', {
                'result': result.result_for(handle),
                'opponentMove': result.opponent_move_for(handle).value,
                'newScore': arena.score_of(handle),
            })
        _broadcast('leaderboard_update', _leaderboard_payload(arena))
        _broadcast('history_update', _history_payload(arena))


def handle_error(exc):
    # Keep the server alive; a bad event only costs that event
    current_app.logger.exception(f"[error] sid={_get_sid()} {exc}")


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on the given namespace."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('find_match', handle_find_match, namespace=namespace)
    socketio.on_event('cancel_search', handle_cancel_search, namespace=namespace)
    socketio.on_event('make_move', handle_make_move, namespace=namespace)
    socketio.on_error_default(handle_error)
