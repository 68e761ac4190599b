from dataclasses import dataclass, field
from typing import Any, Callable


def increment(key: Any) -> Any:
    return key + 1


@dataclass
class RunListConfiguration:
    """
    A configuration for a :class:`~runlist.RunList`.
    """

    successor: Callable[[Any], Any] = field(default=increment)
    """
    A function returning the value immediately following a key, used to
    build the single-point run for membership lookups.
    """

    logger_name: str = "runlist"
    "The name of the logger receiving debug records."
