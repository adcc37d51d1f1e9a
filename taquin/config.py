"""Default tunables. CLI options override these at run time."""

# Depth ceilings (moves) for the uninformed strategies.
BFS_MAX_DEPTH = 30
DFS_MAX_DEPTH = 20

# A solution within this many moves of the optimum grades MEDIUM.
QUALITY_TOLERANCE = 5

# Random-walk length for scrambles is size² times this.
DEFAULT_SCRAMBLE_FACTOR = 100

# Puzzle used when the CLI is given no board.
DEMO_LAYOUT: list[list[int]] = [[2, 3, 6], [1, 5, 0], [4, 7, 8]]
