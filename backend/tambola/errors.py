"""Rejections raised by game actions.

Every rejection carries a short machine-readable ``code`` and the
human-readable ``message`` that is sent back to the originating connection.
"""


class GameError(Exception):
    code = 'game_error'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'code': self.code, 'message': self.message}


class InvalidNameError(GameError):
    code = 'invalid_name'

    def __init__(self, message: str = 'Please enter a valid name'):
        super().__init__(message)


class PlayerNotFoundError(GameError):
    code = 'player_not_found'

    def __init__(self, message: str = 'Player not found'):
        super().__init__(message)


class InvalidNumberError(GameError):
    code = 'invalid_number'

    def __init__(self, message: str = 'Invalid number'):
        super().__init__(message)


class NumberNotCalledError(GameError):
    code = 'not_called'

    def __init__(self, message: str = 'Number has not been called yet'):
        super().__init__(message)


class NumberNotOnTicketError(GameError):
    code = 'not_on_ticket'

    def __init__(self, number: int):
        super().__init__(f'Number {number} is not on your ticket')
        self.number = number


class GameNotActiveError(GameError):
    code = 'game_not_active'

    def __init__(self, message: str = 'Game is not active'):
        super().__init__(message)


class InvalidClaimError(GameError):
    code = 'invalid_claim'

    def __init__(self, pattern: str):
        super().__init__(f'Invalid claim for {pattern}. Please verify your numbers.')
        self.pattern = pattern


class AlreadyWonError(GameError):
    code = 'already_won'

    def __init__(self, pattern: str):
        super().__init__(f'{pattern} has already been won')
        self.pattern = pattern
