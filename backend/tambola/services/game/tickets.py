import random
from typing import List, Optional, Tuple

ROWS = 3
COLUMNS = 9
NUMBERS_PER_ROW = 5
LOWEST_NUMBER = 1
HIGHEST_NUMBER = 90

# Inclusive value range for each ticket column
COLUMN_RANGES: List[Tuple[int, int]] = [
    (1, 9), (10, 19), (20, 29), (30, 39), (40, 49),
    (50, 59), (60, 69), (70, 79), (80, 90),
]

Ticket = List[List[int]]


def column_range(col: int) -> Tuple[int, int]:
    return COLUMN_RANGES[col]


def full_pool() -> List[int]:
    """All callable numbers in ascending order."""
    return list(range(LOWEST_NUMBER, HIGHEST_NUMBER + 1))


def shuffle(numbers: list, rng: Optional[random.Random] = None) -> list:
    """Shuffle ``numbers`` in place and return it."""
    (rng or random).shuffle(numbers)
    return numbers


def _pick_number(col: int, used: set, rng, max_attempts: int) -> int:
    low, high = COLUMN_RANGES[col]
    for _ in range(max_attempts):
        number = rng.randint(low, high)
        if number not in used:
            return number
    # Too many collisions: take the lowest free value in range
    for number in range(low, high + 1):
        if number not in used:
            return number
    raise RuntimeError(f'column {col} has no free numbers')


def generate_ticket(rng: Optional[random.Random] = None, max_attempts: int = 50) -> Ticket:
    """Generate one 3x9 tambola ticket.

    Each row gets exactly five numbers in five randomly chosen columns, every
    number comes from its column's range and appears once on the ticket. The
    values of each column are then sorted so they ascend from the top row to
    the bottom row. Empty cells hold 0.
    """
    rng = rng or random
    ticket = [[0] * COLUMNS for _ in range(ROWS)]
    used = set()

    for row in range(ROWS):
        for col in rng.sample(range(COLUMNS), NUMBERS_PER_ROW):
            number = _pick_number(col, used, rng, max_attempts)
            used.add(number)
            ticket[row][col] = number

    for col in range(COLUMNS):
        rows = [row for row in range(ROWS) if ticket[row][col] != 0]
        values = sorted(ticket[row][col] for row in rows)
        for row, value in zip(rows, values):
            ticket[row][col] = value

    return ticket


def flatten_ticket(ticket: Ticket) -> List[int]:
    """Non-zero ticket values in row-major order."""
    return [n for row in ticket for n in row if n != 0]


def ticket_contains(ticket: Ticket, number) -> bool:
    return number != 0 and any(number in row for row in ticket)


def validate_ticket(ticket: Ticket) -> List[str]:
    """Return a list of structural problems; empty when the ticket is valid."""
    problems = []
    if len(ticket) != ROWS or any(len(row) != COLUMNS for row in ticket):
        return [f'ticket must be {ROWS}x{COLUMNS}']

    for row_idx, row in enumerate(ticket):
        count = sum(1 for n in row if n != 0)
        if count != NUMBERS_PER_ROW:
            problems.append(f'row {row_idx} has {count} numbers, expected {NUMBERS_PER_ROW}')

    for col in range(COLUMNS):
        low, high = COLUMN_RANGES[col]
        values = [ticket[row][col] for row in range(ROWS) if ticket[row][col] != 0]
        for value in values:
            if not low <= value <= high:
                problems.append(f'{value} is outside column {col} range {low}-{high}')
        if any(a >= b for a, b in zip(values, values[1:])):
            problems.append(f'column {col} is not ascending: {values}')

    numbers = flatten_ticket(ticket)
    if len(numbers) != len(set(numbers)):
        problems.append('ticket contains duplicate numbers')
    return problems
