import sys

# Default simulation parameters
DEFAULT_DEVICE = 'cpu'
DEFAULT_INITIAL_DENSITY = 0.5

# B3/S23: three live neighbors give birth (or keep a cell alive),
# two keep the current state, anything else kills
BIRTH_NEIGHBORS = 3
SURVIVAL_NEIGHBORS = 2

# 3x3 ring used to count the eight neighbors of every cell
NEIGHBOR_KERNEL = [
    [1, 1, 1],
    [1, 0, 1],
    [1, 1, 1]
]

# (row, col) offsets in the order top-left, top, top-right, right,
# bottom-right, bottom, bottom-left, left
NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, 1),
    (1, 1), (1, 0), (1, -1),
    (0, -1)
)

# Largest number of cells a grid may hold
MAX_AREA = sys.maxsize

# Text rendering
ALIVE_CHAR = '#'
DEAD_CHAR = '.'
