from bisect import bisect_left
from typing import Any, Callable, List, Optional, Tuple

from .exceptions import UnsupportedKeyError
from .run import Run, overlaps


def overlapping_range(runs: List[Run], candidate: Run) -> Tuple[int, int]:
    """
    Find the runs overlapping `candidate` in a sorted list of disjoint runs.

    Returns the half-open span ``(first, last)`` of indices. When no run
    overlaps, the span is empty and `first` is where `candidate` should be
    inserted to keep the list sorted.
    """
    first = bisect_left(runs, candidate)

    # disjoint runs starting before the candidate have sorted ends, so only
    # the closest one can reach into it
    if first > 0 and overlaps(runs[first - 1], candidate):
        first -= 1

    last = first
    while last < len(runs) and overlaps(runs[last], candidate):
        last += 1
    return first, last


def lookup(
    runs: List[Run], key: Any, successor: Callable[[Any], Any]
) -> Optional[int]:
    """
    Return the index of the run covering `key`, or `None`.
    """
    try:
        following = successor(key)
    except TypeError as exc:
        raise UnsupportedKeyError("Key %r has no successor" % (key,)) from exc
    probe = Run(key, following)

    i = bisect_left(runs, probe)
    if i < len(runs) and runs[i].b == key:
        return i

    if i > 0 and key in runs[i - 1]:
        return i - 1
    return None
