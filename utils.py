import re
from enum import Enum

def strip_ansi(text):
    """Remove ANSI escape codes from text"""
    ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|[\[0-?]*[ -/]*[@-~])')
    return ansi_escape.sub('', text)

class Bearing(Enum):
    # Declared clockwise; value is the unit step (dx, dy) with y pointing North
    N = (0, 1)
    E = (1, 0)
    S = (0, -1)
    W = (-1, 0)

    def __str__(self):
        return self.name

class Instruction(Enum):
    L = 'L'
    R = 'R'
    F = 'F'

def rotate_left(bearing):
    dirs = list(Bearing)
    idx = dirs.index(bearing)
    return dirs[(idx - 1) % 4]

def rotate_right(bearing):
    dirs = list(Bearing)
    idx = dirs.index(bearing)
    return dirs[(idx + 1) % 4]
