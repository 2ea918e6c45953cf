from flask import Blueprint, current_app, jsonify, render_template

from tambola import get_coordinator

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return render_template('index.html', namespace=current_app.config.get('SOCKETIO_NAMESPACE', '/ws'))


@main.route('/health')
def health():
    return jsonify({'status': 'ok'})


@main.route('/api/state')
def game_state():
    """Fresh snapshot for clients that missed broadcasts."""
    return jsonify(get_coordinator().snapshot())
