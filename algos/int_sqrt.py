"""Integer square root by binary search."""


def get_sqrt(value: int) -> int:
    """Return the floor of the square root; values below 2 are returned as given."""
    if value < 2:
        return value
    left, right = 1, value // 2
    result = 0
    while left <= right:
        mid = left + (right - left) // 2
        square = mid * mid
        if square == value:
            return mid
        if square < value:
            left = mid + 1
            result = mid
        else:
            right = mid - 1
    return result