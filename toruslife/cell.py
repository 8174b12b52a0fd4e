import enum
import numbers


class Cell(enum.IntEnum):
    """A single cell of the grid, either dead or alive.

    Cells are plain integers underneath, so ``int(cell)`` is 0 or 1 and
    ordinary arithmetic (``sum(cells)``, ``cell * 2``) just works. Building
    a Cell from any integer gives ALIVE for values above zero and DEAD
    otherwise; building one from a bool gives ALIVE for True.
    """
    DEAD = 0
    ALIVE = 1

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, numbers.Integral):
            return cls.ALIVE if value > 0 else cls.DEAD
        return None

    @classmethod
    def default(cls):
        return cls.DEAD

    @classmethod
    def of(cls, value):
        """Coerce a Cell, bool, integer or 0-d tensor/array scalar to a Cell."""
        if isinstance(value, cls):
            return value
        # torch tensors and numpy scalars
        if hasattr(value, 'item'):
            value = value.item()
        return cls(value)

    def __invert__(self):
        return Cell.DEAD if self is Cell.ALIVE else Cell.ALIVE

    def toggled(self):
        return ~self

    @property
    def is_alive(self):
        return self is Cell.ALIVE


ALIVE = Cell.ALIVE
DEAD = Cell.DEAD
