class InconsistentDataError(Exception):
    pass


def calculate_total_distance(left: list[int], right: list[int]) -> int:
    """
    Compute the total distance between two lists of integers.

    Each list is sorted independently and elements at the same rank are
    paired up. The result is the sum of the absolute differences of those
    pairs. Neither input is modified.
    """
    if len(left) != len(right):
        msg = (
            "Input lists must have the same length for pairing, got"
            f" {len(left)} and {len(right)}"
        )
        raise InconsistentDataError(msg)

    return sum(abs(lhs - rhs) for lhs, rhs in zip(sorted(left), sorted(right)))
