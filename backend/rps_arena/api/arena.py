from flask import Blueprint, current_app, jsonify

arena_api = Blueprint('arena', __name__)


def _arena():
    return current_app.extensions['arena']


@arena_api.route('/state', methods=['GET'])
def get_state():
    """
    Returns the live player count, leaderboard and recent matches.
    """
    arena = _arena()
    with arena.lock:
        return jsonify({
            'players': arena.player_count,
            'leaderboard': [i.to_dict() for i in arena.leaderboard()],
            'history': [e.to_dict() for e in arena.recent_history()],
        }), 200


@arena_api.route('/history', methods=['GET'])
def get_history():
    """
    Returns every retained match, newest first.
    """
    arena = _arena()
    with arena.lock:
        return jsonify([e.to_dict() for e in arena.ledger.entries()]), 200
