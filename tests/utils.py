import logging
import os
import random

from runlist import RunList, overlaps

DOMAIN = range(-5, 45)


def covered(runlist: RunList, domain=DOMAIN) -> set:
    """
    Return the keys of `domain` which are members of `runlist`.
    """
    return set(key for key in domain if runlist.in_run(key))


def is_disjoint(runlist: RunList) -> bool:
    runs = list(runlist)
    return all(not overlaps(a, b) for a, b in zip(runs, runs[1:]))


def random_run(rng: random.Random):
    b = rng.randrange(DOMAIN.start, DOMAIN.stop - 1)
    e = rng.randrange(b + 1, DOMAIN.stop)
    return b, e


if os.environ.get("RUNLIST_DEBUG"):
    logging.basicConfig(level=logging.DEBUG)
