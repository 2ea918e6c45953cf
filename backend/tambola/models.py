from typing import Dict, List, Optional, Set

from tambola.services.game.patterns import LINE_PATTERNS, SINGLE_WINNER_PATTERNS
from tambola.services.game.tickets import full_pool


class Player:
    def __init__(self, sid: str, name: str, ticket: List[List[int]]):
        self.sid = sid
        self.name = name
        self.ticket = ticket
        self.marked_numbers: Set[int] = set()

    def mark(self, number: int) -> bool:
        """Add ``number`` to the marked set; False if it was already there."""
        if number in self.marked_numbers:
            return False
        self.marked_numbers.add(number)
        return True

    def to_dict(self, include_ticket=False):
        data = {
            'name': self.name,
            'markedNumbers': sorted(self.marked_numbers),
        }
        if include_ticket:
            data['ticket'] = [list(row) for row in self.ticket]
        return data


class Winners:
    def __init__(self):
        self.clear()

    def clear(self) -> None:
        self.single: Dict[str, Optional[str]] = {p: None for p in SINGLE_WINNER_PATTERNS}
        self.lines: Dict[str, List[str]] = {p: [] for p in LINE_PATTERNS}

    def has_won(self, pattern: str, name: str) -> bool:
        """Whether ``pattern`` is closed to ``name``."""
        if pattern in self.single:
            return self.single[pattern] is not None
        return name in self.lines.get(pattern, [])

    def record(self, pattern: str, name: str) -> None:
        if pattern in self.single:
            self.single[pattern] = name
        else:
            self.lines[pattern].append(name)

    def to_dict(self):
        data = {p: winner for p, winner in self.single.items()}
        data.update({p: list(names) for p, names in self.lines.items()})
        return data


class GameState:
    def __init__(self):
        self.is_active = False
        self.called_numbers: List[int] = []
        self.available_numbers: List[int] = full_pool()
        self.players: Dict[str, Player] = {}
        self.winners = Winners()

    def player_names(self) -> List[str]:
        return [p.name for p in self.players.values()]

    def to_dict(self):
        return {
            'isActive': self.is_active,
            'calledNumbers': list(self.called_numbers),
            'availableCount': len(self.available_numbers),
            'players': self.player_names(),
            'playerCount': len(self.players),
            'winners': self.winners.to_dict(),
        }
