"""Nearest-argument lookup over a sorted gain or loss curve.

Curve arguments come out of a division by 100, so exact float equality
is never used to match them. Two arguments closer than
``MAX_ARGUMENT_DELTA`` are treated as equal.

When a query sits exactly halfway between two break points the lower one
wins if its argument is negative, the upper one otherwise. Between a
loss point and a gain point straddling zero this prefers the loss side.
"""

from vbgp.configuration.mapping import MappingCurve

# Largest difference between two small computed floats still considered
# equal. Found experimentally on arguments with three decimal digits.
MAX_ARGUMENT_DELTA = 6.94e-18


def find_nearest_value_index(curve: MappingCurve, arg: float) -> int:
    """Return the index of the break point whose argument is nearest to ``arg``.

    Args:
        curve: Curve sorted ascending by argument, at least one point
        arg: Normalized argument to search for

    Returns:
        Index into ``curve``, always in range

    Raises:
        ValueError: If the curve is empty
    """
    arguments = curve.arguments
    count = len(arguments)
    if count == 0:
        raise ValueError("Cannot search an empty mapping curve")

    if arg <= arguments[0] + MAX_ARGUMENT_DELTA:
        return 0
    if arg >= arguments[count - 1] - MAX_ARGUMENT_DELTA:
        return count - 1

    left = 0
    right = count - 1

    while True:
        if abs(arg - arguments[left]) <= MAX_ARGUMENT_DELTA:
            return left

        if left >= right:
            break

        mid = left + (right - left) // 2
        dv = arg - arguments[mid]
        if dv < 0 and abs(dv) > MAX_ARGUMENT_DELTA:
            right = mid
        else:
            left = mid + 1

    # left >= 1 here: arg is strictly above the first argument
    dv_lower = abs(arg - arguments[left - 1])
    dv_upper = abs(arg - arguments[left])
    if abs(dv_lower - dv_upper) <= MAX_ARGUMENT_DELTA:
        return left - 1 if arguments[left - 1] < 0 else left
    return left - 1 if dv_lower < dv_upper else left


def find_nearest_value(curve: MappingCurve, arg: float) -> float:
    """Return the value mapped to the exact or nearest argument match."""
    return float(curve.values[find_nearest_value_index(curve, arg)])
