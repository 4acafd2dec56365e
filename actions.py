from robot import Position
from utils import Instruction, rotate_left, rotate_right

# Functions taking a grid, a position and/or an instruction always take them
# in the order (grid, position, instruction).

def move_unchecked(position, steps):
    """Advance along the current bearing without any bounds check (steps may be negative)"""
    dx, dy = position.bearing.value
    return Position(position.x + dx * steps, position.y + dy * steps, position.bearing)

def is_scent_blocked(grid, position):
    """True if a step forward would leave the grid from a scented cell"""
    return grid.is_out_of_bounds(move_unchecked(position, 1)) and grid.has_scent(position)

def go_forwards(grid, position):
    """
    Move one cell forward. Driving off an unscented edge is allowed (the robot
    becomes lost); from a scented cell the step off the edge is refused.
    """
    if is_scent_blocked(grid, position):
        return position
    return move_unchecked(position, 1)

def get_next_position(grid, position, instruction):
    # Lost robots ignore the rest of their instructions
    if grid.is_out_of_bounds(position):
        return position

    instruction = Instruction(instruction)
    if instruction is Instruction.L:
        return position.with_bearing(rotate_left(position.bearing))
    elif instruction is Instruction.R:
        return position.with_bearing(rotate_right(position.bearing))
    elif instruction is Instruction.F:
        return go_forwards(grid, position)
    raise ValueError(f"Unknown instruction: {instruction}")

def get_end_position(grid, position, instructions, trace=None):
    """
    Fold every instruction over the starting position.

    Args:
        grid: Grid the robot drives on (only read here)
        position: Starting Position
        instructions: String (or sequence) of L/R/F instructions
        trace: Optional list receiving the position after each instruction

    Returns:
        The final Position; out of bounds if the robot was lost
    """
    for instruction in instructions:
        position = get_next_position(grid, position, instruction)
        if trace is not None:
            trace.append(position)
    return position
