import logging
import threading
from typing import Any, List, Optional

from tambola.errors import (
    AlreadyWonError,
    GameNotActiveError,
    InvalidClaimError,
    InvalidNameError,
    InvalidNumberError,
    NumberNotCalledError,
    NumberNotOnTicketError,
    PlayerNotFoundError,
)
from tambola.models import GameState, Player
from .patterns import FULL_HOUSE, check_win, display_name
from .tickets import full_pool, generate_ticket, shuffle, ticket_contains

logger = logging.getLogger(__name__)


class Message:
    """An outbound event. ``to`` is a connection id, or None for everyone."""

    def __init__(self, event: str, payload: Any = None, to: Optional[str] = None):
        self.event = event
        self.payload = payload
        self.to = to

    @property
    def is_broadcast(self) -> bool:
        return self.to is None

    def __repr__(self):
        target = 'all' if self.to is None else self.to
        return f'<Message {self.event} to={target}>'


class GameCoordinator:
    """Owns the shared game state and applies player and host actions to it.

    Every action validates before it mutates, and returns the messages the
    transport should deliver. Rejections raise a ``GameError`` and leave the
    state untouched. Actions are serialised by one lock so each runs to
    completion before the next starts.
    """

    def __init__(self, rng=None, ticket_max_attempts: int = 50, max_name_length: int = 0):
        self.state = GameState()
        self._rng = rng
        self._ticket_max_attempts = ticket_max_attempts
        self._max_name_length = max_name_length
        self._lock = threading.RLock()

    def _new_ticket(self):
        return generate_ticket(self._rng, self._ticket_max_attempts)

    def _require_player(self, sid: str) -> Player:
        player = self.state.players.get(sid)
        if player is None:
            raise PlayerNotFoundError()
        return player

    def _roster_messages(self) -> List[Message]:
        return [
            Message('playerList', self.state.player_names()),
            Message('playerCount', len(self.state.players)),
        ]

    def snapshot(self) -> dict:
        with self._lock:
            return self.state.to_dict()

    def connect(self, sid: str) -> List[Message]:
        with self._lock:
            return [
                Message('gameState', self.state.to_dict(), to=sid),
                Message('playerList', self.state.player_names(), to=sid),
                Message('playerCount', len(self.state.players), to=sid),
            ]

    def join(self, sid: str, name) -> List[Message]:
        if not isinstance(name, str) or not name.strip():
            raise InvalidNameError()
        name = name.strip()
        if self._max_name_length and len(name) > self._max_name_length:
            raise InvalidNameError(f'Name must be at most {self._max_name_length} characters')
        with self._lock:
            player = Player(sid, name, self._new_ticket())
            self.state.players[sid] = player
            logger.info('player %s joined as %r', sid, name)
            return [Message('ticketGenerated', player.ticket, to=sid)] + self._roster_messages()

    def start(self) -> List[Message]:
        with self._lock:
            state = self.state
            state.is_active = True
            state.called_numbers = []
            state.available_numbers = shuffle(full_pool(), self._rng)
            state.winners.clear()
            for player in state.players.values():
                player.marked_numbers.clear()
            logger.info('game started with %d players', len(state.players))
            return [
                Message('gameStarted'),
                Message('winnersUpdate', state.winners.to_dict()),
            ]

    def call_number(self) -> List[Message]:
        """Draw the next number; nothing happens unless a round is running."""
        with self._lock:
            state = self.state
            if not state.is_active or not state.available_numbers:
                return []
            number = state.available_numbers.pop()
            state.called_numbers.append(number)
            logger.info('called %d (%d left)', number, len(state.available_numbers))
            return [Message('numberCalled', {
                'number': number,
                'calledNumbers': list(state.called_numbers),
            })]

    def mark(self, sid: str, number) -> List[Message]:
        with self._lock:
            player = self._require_player(sid)
            if isinstance(number, bool) or not isinstance(number, int):
                raise InvalidNumberError()
            if number not in self.state.called_numbers:
                raise NumberNotCalledError()
            if not ticket_contains(player.ticket, number):
                raise NumberNotOnTicketError(number)
            if not player.mark(number):
                return []
            return [Message('numberMarked', number, to=sid)]

    def claim(self, sid: str, pattern) -> List[Message]:
        with self._lock:
            state = self.state
            player = self._require_player(sid)
            if not state.is_active and pattern != FULL_HOUSE:
                raise GameNotActiveError()
            if not isinstance(pattern, str) or not check_win(player.ticket, player.marked_numbers, pattern):
                raise InvalidClaimError(pattern)
            if state.winners.has_won(pattern, player.name):
                raise AlreadyWonError(pattern)

            state.winners.record(pattern, player.name)
            logger.info('%r won %s', player.name, pattern)
            messages = [Message('winnerAnnounced', {
                'pattern': display_name(pattern),
                'winner': player.name,
            })]
            if pattern == FULL_HOUSE:
                state.is_active = False
                messages.append(Message('gameEnded'))
            messages.append(Message('winnersUpdate', state.winners.to_dict()))
            messages.append(Message('winConfirmed', pattern, to=sid))
            return messages

    def reset(self) -> List[Message]:
        with self._lock:
            state = self.state
            state.is_active = False
            state.called_numbers = []
            state.available_numbers = full_pool()
            state.winners.clear()
            for player in state.players.values():
                player.ticket = self._new_ticket()
                player.marked_numbers.clear()
            logger.info('game reset, %d tickets reissued', len(state.players))
            messages = [Message('gameReset')]
            messages.extend(
                Message('ticketGenerated', player.ticket, to=sid)
                for sid, player in state.players.items()
            )
            return messages

    def leave(self, sid: str) -> List[Message]:
        with self._lock:
            player = self.state.players.pop(sid, None)
            if player is None:
                return []
            logger.info('player %r left', player.name)
            return self._roster_messages()
