from typing import Optional, Tuple

import attr

from .exceptions import InvalidRunError


@attr.s(frozen=True, order=True, repr=False)
class Run:
    """
    A half-open interval ``[b, e)`` over an ordered, discrete domain.

    Runs are immutable and ordered by their start bound, then by their end
    bound, so they can be kept in a plain sorted list.
    """

    b = attr.ib()
    "The inclusive start bound."
    e = attr.ib()
    "The exclusive end bound."

    def __attrs_post_init__(self) -> None:
        if not self.b < self.e:
            raise InvalidRunError(
                "Run start %r must be before its end %r" % (self.b, self.e)
            )

    def __contains__(self, key) -> bool:
        return self.b <= key < self.e

    def __repr__(self) -> str:
        return "Run(%r, %r)" % (self.b, self.e)

    def to_range(self) -> range:
        """
        Return the run as a :class:`range`, for integer keys only.
        """
        return range(self.b, self.e)


def _by_start(lhs: Run, rhs: Run) -> Tuple[Run, Run]:
    if rhs.b < lhs.b:
        return rhs, lhs
    return lhs, rhs


def overlaps(lhs: Run, rhs: Run) -> bool:
    """
    Return whether the two runs share at least one point.

    Runs which merely touch, such as ``[0, 5)`` and ``[5, 10)``, do not
    overlap.
    """
    first, second = _by_start(lhs, rhs)
    return second.b < first.e


def merge_if_overlapping(lhs: Run, rhs: Run) -> Optional[Run]:
    """
    Merge two overlapping runs.

    Returns the merged run, the earlier run itself if both end together, or
    `None` if the earlier run (by start bound) already contains the other.
    """
    first, second = _by_start(lhs, rhs)
    if first.e < second.e:
        return Run(first.b, second.e)
    elif first.e == second.e:
        return first
    else:
        return None


def union(lhs: Run, rhs: Run) -> Run:
    """
    Return the union of two overlapping runs.

    When :func:`merge_if_overlapping` reports no merge, the containing run is
    returned, whichever of the two arguments it is.
    """
    merged = merge_if_overlapping(lhs, rhs)
    if merged is None:
        return _by_start(lhs, rhs)[0]
    return merged
