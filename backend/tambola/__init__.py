from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

socketio = SocketIO(async_mode=None)


def _allowed_origins(raw):
    origins = [o.strip() for o in (raw or '').split(',') if o.strip()]
    if not origins or '*' in origins:
        return '*'
    return origins


def get_coordinator(flask_app=None):
    """Return the game coordinator bound to the given (or current) app."""
    if flask_app is None:
        from flask import current_app
        flask_app = current_app
    return flask_app.extensions['tambola']


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    from tambola.logging_config import configure_logging
    configure_logging(flask_app)

    allowed_origins = _allowed_origins(flask_app.config.get('CORS_ORIGINS'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One game per process; handlers reach it through the app
    from tambola.services.game.coordinator import GameCoordinator
    flask_app.extensions['tambola'] = GameCoordinator(
        ticket_max_attempts=flask_app.config.get('TICKET_MAX_ATTEMPTS', 50),
        max_name_length=flask_app.config.get('MAX_NAME_LENGTH', 0),
    )

    from tambola.routes import main
    flask_app.register_blueprint(main)

    from tambola.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=flask_app.config.get('SOCKETIO_NAMESPACE', '/ws'))

    @click.command('print-ticket')
    @click.option('--count', default=1, show_default=True, help='Number of tickets to print.')
    def print_ticket_command(count):
        """Generates tickets and prints them as grids."""
        from tambola.services.game.tickets import generate_ticket
        for i in range(count):
            if i:
                click.echo()
            ticket = generate_ticket(max_attempts=flask_app.config.get('TICKET_MAX_ATTEMPTS', 50))
            for row in ticket:
                click.echo(' '.join(f'{n:>2}' if n else ' .' for n in row))

    flask_app.cli.add_command(print_ticket_command)

    return flask_app
