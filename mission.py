"""
Parsing of the mission text: grid size header followed by robot scripts
"""
from typing import List, Tuple

from robot import Position, Script
from utils import Bearing, Instruction


class ParseError(ValueError):
    """Raised when the mission text does not follow the input grammar"""


def _parse_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ParseError(f"{what} must be an integer, got {token!r}")


def parse_grid_size(line: str) -> Tuple[int, int]:
    """Parse the 'maxX maxY' header into the inclusive upper-right corner"""
    tokens = line.split()
    if len(tokens) != 2:
        raise ParseError(f"grid size line must have exactly two fields: {line!r}")

    max_x = _parse_int(tokens[0], "grid width")
    max_y = _parse_int(tokens[1], "grid height")
    if max_x < 0 or max_y < 0:
        raise ParseError(f"grid size must be non-negative: {line!r}")
    return max_x, max_y


def get_start_position(line: str) -> Position:
    """Parse an 'x y bearing' line"""
    tokens = line.split()
    if len(tokens) != 3:
        raise ParseError(f"start position must be 'x y bearing': {line!r}")

    x = _parse_int(tokens[0], "x coordinate")
    y = _parse_int(tokens[1], "y coordinate")
    try:
        bearing = Bearing[tokens[2]]
    except KeyError:
        raise ParseError(f"bearing must be one of N, E, S, W, got {tokens[2]!r}")
    return Position(x, y, bearing)


def parse_instructions(line: str) -> str:
    """Check that every character is L, R or F and return the instruction string"""
    valid = {i.value for i in Instruction}
    for char in line:
        if char not in valid:
            raise ParseError(f"instruction must be F, L, or R, got {char!r} in {line!r}")
    return line


def split_input(text: str) -> Tuple[str, List[Script]]:
    """
    Split mission text into the size header and the robot scripts.

    Blank lines between blocks are optional; every non-blank line after the
    header is taken in (position, instructions) pairs.

    Returns:
        (size_line, scripts)

    Raises:
        ParseError: If the text is empty or a robot block is incomplete
    """
    lines = [l.strip() for l in text.splitlines()]
    lines = [l for l in lines if l]
    if not lines:
        raise ParseError("input is empty, expected a grid size line")

    size_line, rest = lines[0], lines[1:]

    scripts = []
    i = 0
    while i < len(rest):
        position_line = rest[i]
        start = get_start_position(position_line)
        # End of input, or another position line where instructions belong
        if i + 1 >= len(rest) or len(rest[i + 1].split()) > 1:
            raise ParseError(f"robot at {position_line!r} is missing its instruction line")
        instructions = parse_instructions(rest[i + 1])
        scripts.append(Script(start, instructions))
        i += 2
    return size_line, scripts
