import logging
from typing import Collection, List

from .tickets import COLUMNS, ROWS, Ticket, flatten_ticket

logger = logging.getLogger(__name__)

EARLY_FIVE = 'earlyFive'
TOP_LINE = 'topLine'
MIDDLE_LINE = 'middleLine'
BOTTOM_LINE = 'bottomLine'
CORNERS = 'corners'
FULL_HOUSE = 'fullHouse'

DISPLAY_NAMES = {
    EARLY_FIVE: 'Early Five',
    TOP_LINE: 'Top Line',
    MIDDLE_LINE: 'Middle Line',
    BOTTOM_LINE: 'Bottom Line',
    CORNERS: 'Four Corners',
    FULL_HOUSE: 'Full House',
}
PATTERNS = tuple(DISPLAY_NAMES)

# First valid claim locks these
SINGLE_WINNER_PATTERNS = (EARLY_FIVE, CORNERS, FULL_HOUSE)
# Each of these collects every distinct player name that completes it
LINE_PATTERNS = {TOP_LINE: 0, MIDDLE_LINE: 1, BOTTOM_LINE: 2}

EARLY_FIVE_COUNT = 5


def display_name(pattern: str) -> str:
    return DISPLAY_NAMES.get(pattern, pattern)


def corner_numbers(ticket: Ticket) -> List[int]:
    """Non-zero values in the four grid corners."""
    corners = [
        ticket[0][0],
        ticket[0][COLUMNS - 1],
        ticket[ROWS - 1][0],
        ticket[ROWS - 1][COLUMNS - 1],
    ]
    return [n for n in corners if n != 0]


def check_win(ticket: Ticket, marked: Collection[int], pattern: str) -> bool:
    """Decide whether ``marked`` satisfies ``pattern`` on ``ticket``.

    Unknown patterns are never satisfied. Neither argument is modified.
    """
    marked = frozenset(marked)
    if pattern == EARLY_FIVE:
        hits = sum(1 for n in flatten_ticket(ticket) if n in marked)
        result = hits >= EARLY_FIVE_COUNT
    elif pattern in LINE_PATTERNS:
        row = ticket[LINE_PATTERNS[pattern]]
        result = all(n in marked for n in row if n != 0)
    elif pattern == CORNERS:
        corners = corner_numbers(ticket)
        result = bool(corners) and all(n in marked for n in corners)
    elif pattern == FULL_HOUSE:
        result = all(n in marked for n in flatten_ticket(ticket))
    else:
        result = False
    logger.debug('check_win pattern=%s marked=%d result=%s', pattern, len(marked), result)
    return result
