import math


def round_half_up(value, digits=0):
    """Round halves away from the floor (2.5 -> 3, -2.5 -> -2), not to even."""
    factor = 10 ** digits
    rounded = math.floor(value * factor + 0.5) / factor
    if digits == 0:
        return int(rounded)
    return rounded
