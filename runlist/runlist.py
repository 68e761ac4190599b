import logging
from collections.abc import Sequence
from typing import Any, Iterable, Iterator, List, Optional

from .configuration import RunListConfiguration
from .exceptions import InvalidRunError
from .run import Run, union
from .scan import lookup, overlapping_range


def _as_run(value: Any) -> Run:
    if isinstance(value, Run):
        return value
    if isinstance(value, range):
        if value.step != 1:
            raise InvalidRunError("Range %r must have a step of 1" % (value,))
        return Run(value.start, value.stop)
    b, e = value
    return Run(b, e)


class RunList(Sequence):
    """
    A subset of an ordered, discrete domain stored as sorted, disjoint runs.

    Runs which overlap are merged as they are added, but runs which merely
    touch are kept apart. When the run-list is inverted, membership queries
    answer for the complement of the stored runs.

    The run-list is a sequence of :class:`Run`, but the ``in`` operator tests
    keys of the domain like :meth:`in_run`, not stored runs. Use
    ``run in runlist.runs`` to look for a run.

    :param runs: An iterable of :class:`Run`, ``(b, e)`` pairs or
                 :class:`range` objects to add.
    :param configuration: A :class:`RunListConfiguration`.
    """

    def __init__(
        self,
        runs: Iterable[Any] = [],
        configuration: Optional[RunListConfiguration] = None,
    ) -> None:
        if configuration is None:
            configuration = RunListConfiguration()
        self._configuration = configuration
        self._logger = logging.getLogger(configuration.logger_name)

        self.__inverted = False
        self.__runs: List[Run] = []
        for value in runs:
            self._add_run(_as_run(value))

    @property
    def configuration(self) -> RunListConfiguration:
        return self._configuration

    @property
    def inverted(self) -> bool:
        """
        Whether membership answers are complemented.
        """
        return self.__inverted

    @property
    def runs(self) -> List[Run]:
        return list(self.__runs)

    def add_run(self, b: Any, e: Any) -> None:
        """
        Add the half-open interval ``[b, e)``, merging it with every run it
        overlaps.
        """
        self._add_run(Run(b, e))

    def sub_run(self, b: Any, e: Any) -> None:
        """
        Remove the half-open interval ``[b, e)`` from every run it overlaps.
        """
        self._sub_run(Run(b, e))

    def in_run(self, key: Any) -> bool:
        """
        Return whether `key` is a member, taking inversion into account.
        """
        return self.in_run_(key) != self.__inverted

    def in_run_(self, key: Any) -> bool:
        """
        Return whether `key` lies within a stored run, ignoring inversion.
        """
        return lookup(self.__runs, key, self._configuration.successor) is not None

    def invert(self) -> None:
        self.__inverted = not self.__inverted
        self._logger.debug("Inverted set to %s", self.__inverted)

    def add(self, other: "RunList") -> None:
        """
        Add every member of `other` to this run-list.
        """
        theirs, their_inversion = list(other.__runs), other.__inverted

        if not self.__inverted and not their_inversion:
            # R | S
            self._add_runs(theirs)
        elif not self.__inverted:
            # R | ~S == ~(S - R)
            self._replace_runs(theirs, inverted=True)
        elif not their_inversion:
            # ~R | S == ~(R - S)
            self._sub_runs(theirs)
        else:
            # ~R | ~S == ~(R & S)
            self._intersect_runs(theirs)

    def sub(self, other: "RunList") -> None:
        """
        Remove every member of `other` from this run-list.
        """
        theirs, their_inversion = list(other.__runs), other.__inverted

        if not self.__inverted and not their_inversion:
            # R - S
            self._sub_runs(theirs)
        elif not self.__inverted:
            # R - ~S == R & S
            self._intersect_runs(theirs)
        elif not their_inversion:
            # ~R - S == ~(R | S)
            self._add_runs(theirs)
        else:
            # ~R - ~S == S - R
            self._replace_runs(theirs, inverted=False)

    def intersect(self, other: "RunList") -> None:
        """
        Keep only the members of this run-list which are also in `other`.
        """
        theirs, their_inversion = list(other.__runs), other.__inverted

        if not self.__inverted and not their_inversion:
            # R & S
            self._intersect_runs(theirs)
        elif not self.__inverted:
            # R & ~S == R - S
            self._sub_runs(theirs)
        elif not their_inversion:
            # ~R & S == S - R
            self._replace_runs(theirs, inverted=False)
        else:
            # ~R & ~S == ~(R | S)
            self._add_runs(theirs)

    def copy(self) -> "RunList":
        clone = RunList(configuration=self._configuration)
        clone.__inverted = self.__inverted
        clone.__runs = list(self.__runs)
        return clone

    def _add_run(self, candidate: Run) -> None:
        first, last = overlapping_range(self.__runs, candidate)

        merged = candidate
        for existing in self.__runs[first:last]:
            merged = union(merged, existing)
        if last > first:
            self._logger.debug(
                "Merged %r with %d run(s) into %r", candidate, last - first, merged
            )

        self.__runs[first:last] = [merged]

    def _add_runs(self, runs: Iterable[Run]) -> None:
        for run in runs:
            self._add_run(run)

    def _sub_run(self, cut: Run) -> None:
        first, last = overlapping_range(self.__runs, cut)

        remains = []
        for existing in self.__runs[first:last]:
            if existing.b < cut.b:
                remains.append(Run(existing.b, cut.b))
            if cut.e < existing.e:
                remains.append(Run(cut.e, existing.e))
        if last > first:
            self._logger.debug(
                "Removed %r from %d run(s), leaving %r", cut, last - first, remains
            )

        self.__runs[first:last] = remains

    def _sub_runs(self, runs: Iterable[Run]) -> None:
        for run in runs:
            self._sub_run(run)

    def _intersect_runs(self, runs: List[Run]) -> None:
        # R & S == R - (R - S)
        outside = self.copy()
        outside._sub_runs(runs)
        self._sub_runs(outside.__runs)

    def _replace_runs(self, runs: List[Run], inverted: bool) -> None:
        # stores `runs - self` under the given inversion
        remains = RunList(configuration=self._configuration)
        remains.__runs = runs
        remains._sub_runs(self.__runs)
        self.__runs = remains.__runs
        self.__inverted = inverted

    def __bool__(self) -> bool:
        return bool(self.__runs)

    def __contains__(self, key: Any) -> bool:
        return self.in_run(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RunList):
            return NotImplemented

        return (
            self.__inverted == other.__inverted and self.__runs == other.__runs
        )

    def __getitem__(self, key):
        return self.__runs[key]

    def __iter__(self) -> Iterator[Run]:
        return iter(self.__runs)

    def __len__(self) -> int:
        return len(self.__runs)

    def __repr__(self) -> str:
        if self.__inverted:
            return "RunList({}, inverted=True)".format(repr(self.__runs))
        return "RunList({})".format(repr(self.__runs))

    def __or__(self, other: object) -> "RunList":
        if not isinstance(other, RunList):
            return NotImplemented
        result = self.copy()
        result.add(other)
        return result

    def __ior__(self, other: object) -> "RunList":
        if not isinstance(other, RunList):
            return NotImplemented
        self.add(other)
        return self

    def __sub__(self, other: object) -> "RunList":
        if not isinstance(other, RunList):
            return NotImplemented
        result = self.copy()
        result.sub(other)
        return result

    def __isub__(self, other: object) -> "RunList":
        if not isinstance(other, RunList):
            return NotImplemented
        self.sub(other)
        return self

    def __and__(self, other: object) -> "RunList":
        if not isinstance(other, RunList):
            return NotImplemented
        result = self.copy()
        result.intersect(other)
        return result

    def __iand__(self, other: object) -> "RunList":
        if not isinstance(other, RunList):
            return NotImplemented
        self.intersect(other)
        return self
