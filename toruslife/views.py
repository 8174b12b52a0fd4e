"""
Row and column views over a Game's flat cell buffer.

A view is a window (start, stride, count) into the row-major buffer: rows
walk consecutive indices, columns stride by the grid width. Views are
single-pass iterators; ask the Game for a fresh one to walk it again.
"""

from .cell import Cell


class CellRef:
    """Handle to one cell of a live grid. Writes go straight to the buffer."""

    __slots__ = ('_cells', '_index', '_width')

    def __init__(self, cells, index, width):
        self._cells = cells
        self._index = index
        self._width = width

    @property
    def index(self):
        return self._index

    @property
    def row(self):
        return self._index // self._width

    @property
    def col(self):
        return self._index % self._width

    @property
    def value(self):
        return Cell(int(self._cells[self._index]))

    @value.setter
    def value(self, value):
        self._cells[self._index] = int(Cell.of(value))

    def toggle(self):
        self.value = ~self.value

    def __bool__(self):
        return bool(self.value)

    def __int__(self):
        return int(self.value)

    def __eq__(self, other):
        if isinstance(other, CellRef):
            return self.value == other.value
        if isinstance(other, (Cell, bool, int)):
            return self.value == Cell.of(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"CellRef(row={self.row}, col={self.col}, value={self.value.name})"


class _CellWindow:
    def __init__(self, cells, start, stride, count, width):
        self._cells = cells
        self._width = width
        self._remaining = range(start, start + stride * count, stride)

    def __iter__(self):
        return self

    def __next__(self):
        if not self._remaining:
            raise StopIteration
        index = self._remaining[0]
        self._remaining = self._remaining[1:]
        return self._item(index)

    def __len__(self):
        return len(self._remaining)

    def _item(self, index):
        return Cell(int(self._cells[index]))


class Row(_CellWindow):
    """Cells of one row, in column order."""

    def __init__(self, cells, row, width):
        super().__init__(cells, row * width, 1, width, width)


class Col(_CellWindow):
    """Cells of one column, in row order."""

    def __init__(self, cells, col, width, height):
        super().__init__(cells, col, width, height, width)


class RowMut(Row):
    """Like Row, but yields writable CellRefs."""

    def _item(self, index):
        return CellRef(self._cells, index, self._width)


class ColMut(Col):
    """Like Col, but yields writable CellRefs."""

    def _item(self, index):
        return CellRef(self._cells, index, self._width)
