from mission import parse_grid_size

# The grid looks like this:
#     y (North)
#     ^
#     |
#     +-------> x (East)
# Only scented cells (a robot was lost from them) are stored, as (x, y) pairs.
class Grid:
    def __init__(self, max_x, max_y):
        self.max_x = max_x
        self.max_y = max_y
        self.scents = set()

    @property
    def shape(self):
        return (self.max_x + 1, self.max_y + 1)

    def is_out_of_bounds(self, pos):
        return pos.x < 0 or pos.x > self.max_x or pos.y < 0 or pos.y > self.max_y

    def has_scent(self, pos):
        if self.is_out_of_bounds(pos):
            return False
        return (pos.x, pos.y) in self.scents

    def apply_scent(self, pos):
        if self.is_out_of_bounds(pos):
            raise ValueError(f"cannot leave scent off the grid at ({pos.x}, {pos.y})")
        self.scents.add((pos.x, pos.y))

    def scent_count(self):
        return len(self.scents)

    def scented_cells(self):
        return sorted(self.scents)

def make_grid(size_line):
    """Build an unscented grid from a 'maxX maxY' line (bounds are inclusive)"""
    max_x, max_y = parse_grid_size(size_line)
    return Grid(max_x, max_y)
