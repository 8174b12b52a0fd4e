import itertools
import logging
import numbers
import operator

import numpy as np
import torch

from . import errors
from .cell import Cell
from .constants import (DEFAULT_DEVICE, DEFAULT_INITIAL_DENSITY,
                        BIRTH_NEIGHBORS, SURVIVAL_NEIGHBORS, NEIGHBOR_KERNEL,
                        NEIGHBOR_OFFSETS, MAX_AREA, ALIVE_CHAR, DEAD_CHAR)
from .views import CellRef, Row, Col, RowMut, ColMut

logger = logging.getLogger(__name__)


def _dimension(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
    if value <= 0:
        raise errors.dimension_not_positive(name, value)
    return int(value)


class Game:
    """Conway's Game of Life on a toroidal grid.

    Cells live in a flat row-major buffer (index = row * width + col) of
    ``width * height`` entries, with a second buffer of the same shape used
    as scratch space by ``tick``. Every coordinate pair is ``(row, col)``,
    including ``game[row, col]``.
    """

    def __init__(self, width, height, device=DEFAULT_DEVICE):
        width = _dimension('width', width)
        height = _dimension('height', height)
        area = width * height
        if area > MAX_AREA:
            raise errors.area_overflow(width, height, MAX_AREA)

        self._width = width
        self._height = height
        self.device = device if torch.cuda.is_available() and device == 'cuda' else 'cpu'
        if device == 'cuda' and self.device != 'cuda':
            logger.warning("CUDA requested but not available, falling back to CPU")

        self.cells = torch.zeros(area, dtype=torch.uint8, device=self.device)
        self._next = torch.zeros_like(self.cells)
        self.generation = 0

        # Convolution kernel for counting neighbors
        self.kernel = torch.tensor(
            NEIGHBOR_KERNEL, dtype=torch.float32, device=self.device
        ).view(1, 1, 3, 3)

        logger.debug("Created %dx%d game on %s", width, height, self.device)

    @classmethod
    def from_array(cls, array, device=DEFAULT_DEVICE):
        """Build a game from a 2D array-like shaped (height, width).

        Entries greater than zero (or True) become alive.
        """
        if not isinstance(array, torch.Tensor):
            array = torch.as_tensor(np.asarray(array))
        if array.dim() != 2:
            raise ValueError(f"expected a 2D array, got {array.dim()} dimensions")

        height, width = array.shape
        game = cls(width, height, device=device)
        game.fill_from(array.reshape(-1))
        return game

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def area(self):
        return self._width * self._height

    @property
    def population(self):
        """Number of live cells."""
        return int(self.cells.sum())

    def tick(self):
        """Advance the grid by exactly one generation."""
        self._check_invariants()

        neighbors = self._count_neighbors()
        current = self.cells.view(self._height, self._width)
        upcoming = self._next.view(self._height, self._width)

        # 3 neighbors -> alive, 2 -> unchanged, anything else -> dead
        upcoming.copy_(current * (neighbors == SURVIVAL_NEIGHBORS))
        upcoming.masked_fill_(neighbors == BIRTH_NEIGHBORS, 1)

        # Publish in place so views created before the tick stay attached
        self.cells.copy_(self._next)
        self.generation += 1

    def advance(self, generations):
        """Tick ``generations`` times."""
        if generations < 0:
            raise ValueError(f"generations must not be negative (got {generations})")
        logger.debug("Advancing %d generations from generation %d",
                     generations, self.generation)
        for _ in range(generations):
            self.tick()

    def _count_neighbors(self):
        # Pad the grid with circular boundaries so every cell has 8 neighbors
        grid_float = self.cells.view(self._height, self._width).float()
        padded_grid = torch.nn.functional.pad(
            grid_float.unsqueeze(0).unsqueeze(0),
            (1, 1, 1, 1),
            mode='circular'
        )

        neighbors = torch.nn.functional.conv2d(
            padded_grid,
            self.kernel,
            padding=0
        )
        return neighbors[0, 0].to(torch.uint8)

    def _check_invariants(self):
        cells_len = self.cells.numel()
        next_len = self._next.numel()
        if self._width <= 0 or self._height <= 0:
            logger.error("Game dimensions corrupted: width=%s height=%s",
                         self._width, self._height)
            raise errors.broken_dimensions(self)
        area = self._width * self._height
        if cells_len != area or next_len != area:
            logger.error("Game buffers corrupted: expected %d cells, "
                         "cells has %d, scratch has %d", area, cells_len, next_len)
            raise errors.broken_invariants(self, cells_len, next_len)

    def neighbor_indices(self, row, col):
        """Flat indices of the 8 toroidally wrapped neighbors of (row, col).

        Order is top-left, top, top-right, right, bottom-right, bottom,
        bottom-left, left. On grids narrower or shorter than 3 the same
        index can appear more than once.
        """
        row, col = self._coordinates(row, col)
        return [
            ((row + d_row) % self._height) * self._width + (col + d_col) % self._width
            for d_row, d_col in NEIGHBOR_OFFSETS
        ]

    def live_neighbors(self, row, col):
        indices = torch.tensor(self.neighbor_indices(row, col), device=self.device)
        return int(self.cells[indices].sum())

    def _coordinates(self, row, col):
        return self._checked_row(row), self._checked_col(col)

    def _offset(self, row, col):
        row, col = self._coordinates(row, col)
        return row * self._width + col

    def _checked_row(self, row):
        row = operator.index(row)
        if not 0 <= row < self._height:
            raise errors.out_of_bounds('height', self._height, row)
        return row

    def _checked_col(self, col):
        col = operator.index(col)
        if not 0 <= col < self._width:
            raise errors.out_of_bounds('width', self._width, col)
        return col

    def get(self, row, col):
        """Return the cell at (row, col), or None if out of bounds."""
        row, col = operator.index(row), operator.index(col)
        if 0 <= row < self._height and 0 <= col < self._width:
            return Cell(int(self.cells[row * self._width + col]))
        return None

    def get_mut(self, row, col):
        """Return a writable CellRef for (row, col), or None if out of bounds."""
        row, col = operator.index(row), operator.index(col)
        if 0 <= row < self._height and 0 <= col < self._width:
            return CellRef(self.cells, row * self._width + col, self._width)
        return None

    @staticmethod
    def _key(key):
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Game indices must be (row, col) tuples")
        return key

    def __getitem__(self, key):
        return Cell(int(self.cells[self._offset(*self._key(key))]))

    def __setitem__(self, key, value):
        self.cells[self._offset(*self._key(key))] = int(Cell.of(value))

    def get_row(self, row):
        """Snapshot of one row as a tuple of Cells."""
        begin = self._checked_row(row) * self._width
        return tuple(Cell(v) for v in self.cells[begin:begin + self._width].tolist())

    def get_row_mut(self, row):
        """Contiguous uint8 view of one row; writes go to the grid.

        Columns have no contiguous equivalent, use ``col_mut`` instead.
        """
        begin = self._checked_row(row) * self._width
        return self.cells[begin:begin + self._width]

    def row(self, row):
        return Row(self.cells, self._checked_row(row), self._width)

    def row_mut(self, row):
        return RowMut(self.cells, self._checked_row(row), self._width)

    def col(self, col):
        return Col(self.cells, self._checked_col(col), self._width, self._height)

    def col_mut(self, col):
        return ColMut(self.cells, self._checked_col(col), self._width, self._height)

    def clear(self):
        """Kill every cell."""
        self.cells.zero_()

    def invert(self):
        self.cells.bitwise_xor_(1)

    def all_dead(self):
        return not bool(self.cells.any())

    def all_alive(self):
        return bool(self.cells.all())

    def fill_random(self, chance=DEFAULT_INITIAL_DENSITY, generator=None):
        """
        Make every cell alive independently with probability ``chance``.

        Args:
            chance: Probability of a cell being alive, in [0, 1]
            generator: Optional torch.Generator to draw samples from
        """
        if not 0.0 <= chance <= 1.0:
            raise ValueError(f"chance must be in [0, 1] (got {chance})")
        logger.debug("Filling %dx%d game with chance %s",
                     self._width, self._height, chance)

        probabilities = torch.full((self.area,), float(chance), device=self.device)
        self.fill_from(torch.bernoulli(probabilities, generator=generator))

    def fill_from(self, samples):
        """
        Set every cell from a sequence of per-cell samples, in row-major order.

        Args:
            samples: A tensor or numpy array with exactly ``area`` entries, or
                any iterable of bools/ints (only the first ``area`` items are
                consumed, so endless generators are fine)
        """
        area = self.area
        if isinstance(samples, np.ndarray):
            samples = torch.from_numpy(np.ascontiguousarray(samples))

        if isinstance(samples, torch.Tensor):
            if samples.numel() != area:
                raise ValueError(f"expected {area} samples, got {samples.numel()}")
            samples = samples.reshape(-1)
            if samples.dtype != torch.bool:
                samples = samples > 0
        else:
            values = [int(Cell.of(s)) for s in itertools.islice(samples, area)]
            if len(values) < area:
                raise ValueError(f"expected {area} samples, got {len(values)}")
            samples = torch.tensor(values, dtype=torch.uint8)

        self.cells.copy_(samples.to(self.device))

    def to_numpy(self):
        """Copy of the grid as a (height, width) uint8 numpy array."""
        return self.cells.view(self._height, self._width).cpu().numpy().copy()

    def copy(self):
        twin = Game(self._width, self._height, device=self.device)
        twin.cells.copy_(self.cells)
        twin.generation = self.generation
        return twin

    def __eq__(self, other):
        if not isinstance(other, Game):
            return NotImplemented
        return (self._width == other._width and
                self._height == other._height and
                torch.equal(self.cells.cpu(), other.cells.cpu()))

    __hash__ = None

    def __repr__(self):
        return (f"Game(width={self._width}, height={self._height}, "
                f"generation={self.generation}, population={self.population})")

    def __str__(self):
        lines = []
        for values in self.cells.view(self._height, self._width).tolist():
            lines.append(''.join(ALIVE_CHAR if v else DEAD_CHAR for v in values))
        return '\n'.join(lines)
