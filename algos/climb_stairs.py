"""Number of ways to climb a staircase taking one or two steps at a time."""


def climb_stairs(num_stairs: int) -> int:
    """Return the number of distinct climbs; zero stairs or a negative count gives 0."""
    if num_stairs < 0:
        return 0
    ways = [0, 1, 2]
    while len(ways) <= num_stairs:
        ways.append(ways[-1] + ways[-2])
    return ways[num_stairs]