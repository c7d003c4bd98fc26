from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config, parse_origins

socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = parse_origins(flask_app.config.get('CORS_ORIGINS', '*'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One arena per app, so each test app starts from an empty state
    from rps_arena.services.arena import Arena
    flask_app.extensions['arena'] = Arena.from_config(flask_app.config)

    from rps_arena.main import main
    flask_app.register_blueprint(main)

    from rps_arena.api.arena import arena_api
    flask_app.register_blueprint(arena_api, url_prefix='/api/arena')

    # Importing here ensures the handlers bind to the initialized socketio instance
    from rps_arena.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=flask_app.config.get('SOCKETIO_NAMESPACE', '/'))

    return flask_app
