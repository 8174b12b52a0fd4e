"""
Conway's Game of Life on a toroidal grid, backed by torch tensors
"""

from .cell import Cell, ALIVE, DEAD
from .model import Game
from .views import CellRef, Row, Col, RowMut, ColMut
from .errors import InvariantError
from .constants import *

__version__ = "0.1.0"
