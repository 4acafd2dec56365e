import sys

from mission import ParseError
from simulation import drive_robots

def read_input(path=None):
    if path is None:
        return sys.stdin.read()
    with open(path) as f:
        return f.read()

def main(argv=None):
    # Usage: main.py [input_file] [--verbose]   (reads stdin without a file)
    args = sys.argv[1:] if argv is None else argv
    verbose = "--verbose" in args
    paths = [a for a in args if a != "--verbose"]

    try:
        text = read_input(paths[0] if paths else None)
    except OSError as e:
        print(f"Cannot read input: {e}", file=sys.stderr)
        return 1

    try:
        output = drive_robots(text, verbose=verbose)
    except ParseError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 1

    if output:
        print(output)
    return 0

if __name__ == "__main__":
    sys.exit(main())
