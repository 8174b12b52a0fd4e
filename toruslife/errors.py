"""
Exceptions raised by toruslife.

User mistakes surface as the built-in ValueError, IndexError, OverflowError
and TypeError. InvariantError is reserved for internal defects.
"""


class InvariantError(RuntimeError):
    """Raised when a Game's buffers no longer agree with its dimensions.

    This is a bug in toruslife, never the result of bad arguments.
    """


def dimension_not_positive(name, value):
    return ValueError(f"{name} must be at least 1 (got {value})")


def area_overflow(width, height, limit):
    return OverflowError(
        f"width * height overflow: {width} * {height} exceeds {limit}"
    )


def out_of_bounds(dimension, size, index):
    return IndexError(
        f"index out of bounds: {dimension} is {size} but the index is {index}"
    )


def broken_invariants(game, cells_len, next_len):
    return InvariantError(
        f"fatal error in toruslife: len is not {game.width * game.height} "
        f"({game.width} * {game.height})\n"
        f"cells.numel(): {cells_len}\n"
        f"next.numel(): {next_len}\n"
        "This is a bug."
    )


def broken_dimensions(game):
    return InvariantError(
        f"fatal error in toruslife: width and height must be positive\n"
        f"width: {game.width}\n"
        f"height: {game.height}\n"
        "This is a bug."
    )
