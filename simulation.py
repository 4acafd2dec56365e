"""
Simulation class for driving robots one after another over a shared grid
"""
from actions import get_end_position, move_unchecked
from grid import make_grid
from mission import ParseError, split_input
from utils import Instruction, strip_ansi

LOST_MARKER = "LOST"


class Simulation:
    def __init__(self, grid, scripts, verbose=False):
        self.grid = grid
        self.scripts = scripts
        self.verbose = verbose
        self.reports = []

        # Counters for the statistics runner
        self.robots_run = 0
        self.lost_count = 0
        self.scent_saves = 0  # forward steps refused at a scented edge

    def run(self):
        # Order matters: later robots rely on scent left by earlier ones
        for index, script in enumerate(self.scripts):
            report = self._drive_robot(index, script)
            self.reports.append(report)
            self.robots_run += 1

        if self.verbose:
            self._print_summary()
        return self.reports

    def _drive_robot(self, index, script):
        """Run one script to completion and return its report line"""
        if self.verbose:
            print(f"DEBUG: R{index} starts at {script.start.describe()} with {len(script.instructions)} instructions")

        trace = []
        end = get_end_position(self.grid, script.start, script.instructions, trace)
        self._count_scent_saves(script, trace)

        if self.grid.is_out_of_bounds(end):
            # A lost robot stops as soon as it leaves the grid, so one step
            # back is the cell it fell from
            last = move_unchecked(end, -1)
            self.grid.apply_scent(last)
            self.lost_count += 1
            if self.verbose:
                print(f"DEBUG: R{index} lost off the edge, scent left at ({last.x}, {last.y})")
                self._print_grid(last)
            return f"{last.describe()} {LOST_MARKER}"

        if self.verbose:
            print(f"DEBUG: R{index} finished at {end.describe()}")
            self._print_grid(end)
        return end.describe()

    def _count_scent_saves(self, script, trace):
        previous = script.start
        for instruction, position in zip(script.instructions, trace):
            # A still-alive robot that issued F and did not move was held back by scent
            if (Instruction(instruction) is Instruction.F and position == previous
                    and not self.grid.is_out_of_bounds(position)):
                self.scent_saves += 1
                if self.verbose:
                    print(f"DEBUG: scent at ({position.x}, {position.y}) kept robot on the grid")
            previous = position

    def _print_grid(self, robot_pos=None):
        """Print the grid with North at the top, scents and the robot's cell"""
        YELLOW = "\033[33m"
        GREEN = "\033[32m"
        RESET = "\033[0m"
        arrows = {'N': '↑', 'S': '↓', 'E': '→', 'W': '←'}

        print("\nGrid View:")
        print("Legend: S=scent, ↑=N, ↓=S, →=E, ←=W")
        for y in range(self.grid.max_y, -1, -1):
            row = []
            for x in range(self.grid.max_x + 1):
                cell = "."
                if (x, y) in self.grid.scents:
                    cell = f"{YELLOW}S{RESET}"
                if robot_pos is not None and (robot_pos.x, robot_pos.y) == (x, y):
                    cell = f"{GREEN}{arrows[robot_pos.bearing.name]}{RESET}" + cell.replace(".", "")
                padding = ' ' * (3 - len(strip_ansi(cell)))
                row.append(cell + padding)
            print(f"{y:2d}: {''.join(row)}")
        print('    ' + ''.join(f'{x:<3}' for x in range(self.grid.max_x + 1)))

    def _print_summary(self):
        print(f"\nRobots run: {self.robots_run}")
        print(f"Lost: {self.lost_count}")
        print(f"Steps refused by scent: {self.scent_saves}")
        print(f"Scented cells: {self.grid.scented_cells()}")


def drive_robots(input_text, verbose=False):
    """Simulate every robot in the mission text and return one report line per robot"""
    size_line, scripts = split_input(input_text)
    grid = make_grid(size_line)
    for script in scripts:
        if grid.is_out_of_bounds(script.start):
            raise ParseError(f"robot starts off the grid at {script.start.describe()}")
    sim = Simulation(grid, scripts, verbose=verbose)
    return "\n".join(sim.run())
