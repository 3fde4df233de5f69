import random


def select_endpoints(width, height, rng=None):
    """
    Pick a (start, end) pair of diagonally opposite corners.

    One of four equally likely pairs: top-left -> bottom-right,
    bottom-left -> top-right, top-right -> bottom-left,
    bottom-right -> top-left. Does not look at the carved grid.
    """
    rng = rng if rng is not None else random
    right, bottom = width - 1, height - 1
    choice = rng.randrange(4)
    if choice == 0:
        return (0, 0), (right, bottom)
    elif choice == 1:
        return (0, bottom), (right, 0)
    elif choice == 2:
        return (right, 0), (0, bottom)
    else:
        return (right, bottom), (0, 0)
