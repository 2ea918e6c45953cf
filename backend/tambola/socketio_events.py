from flask import current_app, request
from flask_socketio import emit
from tambola import get_coordinator, socketio
from tambola.errors import GameError
from typing import Callable, List


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _deliver(messages: List) -> None:
    """Send coordinator output: broadcasts to everyone, the rest to one sid."""
    namespace = request.namespace  # type: ignore
    for message in messages:
        args = () if message.payload is None else (message.payload,)
        if message.is_broadcast:
            socketio.emit(message.event, *args, namespace=namespace)
        else:
            socketio.emit(message.event, *args, to=message.to, namespace=namespace)


def _run(tag: str, action: Callable[[], List]) -> None:
    try:
        messages = action()
    except GameError as exc:
        current_app.logger.info(f"[rejected] sid={_get_sid()} action={tag} code={exc.code} message={exc.message}")
        emit('error', exc.message)
        return
    current_app.logger.debug(f"[{tag}] sid={_get_sid()} messages={messages}")
    _deliver(messages)


def handle_connect(auth=None):
    _run('connect', lambda: get_coordinator().connect(_get_sid()))


def handle_disconnect(*args):
    # Newer python-socketio passes a disconnect reason
    sid = _get_sid()
    _run('leave', lambda: get_coordinator().leave(sid))


def handle_join_game(name=None):
    current_app.logger.info(f"[join] sid={_get_sid()} name={name!r}")
    _run('join', lambda: get_coordinator().join(_get_sid(), name))


def handle_start_game(*args):
    current_app.logger.info(f"[start] sid={_get_sid()}")
    _run('start', get_coordinator().start)


def handle_call_number(*args):
    _run('call', get_coordinator().call_number)


def handle_mark_number(number=None):
    current_app.logger.info(f"[mark] sid={_get_sid()} number={number!r}")
    _run('mark', lambda: get_coordinator().mark(_get_sid(), number))


def handle_claim_win(pattern=None):
    current_app.logger.info(f"[claim] sid={_get_sid()} pattern={pattern!r}")
    _run('claim', lambda: get_coordinator().claim(_get_sid(), pattern))


def handle_reset_game(*args):
    current_app.logger.info(f"[reset] sid={_get_sid()}")
    _run('reset', get_coordinator().reset)


def register_socketio_handlers(namespace: str = '/ws') -> None:
    """Register Socket.IO event handlers on ``namespace``.

    There is no host role: any connection may start, call or reset.
    """
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('joinGame', handle_join_game, namespace=namespace)
    socketio.on_event('startGame', handle_start_game, namespace=namespace)
    socketio.on_event('callNumber', handle_call_number, namespace=namespace)
    socketio.on_event('markNumber', handle_mark_number, namespace=namespace)
    socketio.on_event('claimWin', handle_claim_win, namespace=namespace)
    socketio.on_event('resetGame', handle_reset_game, namespace=namespace)
