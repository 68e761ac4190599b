# flake8: noqa

from .configuration import RunListConfiguration
from .exceptions import InvalidRunError, UnsupportedKeyError
from .run import Run, merge_if_overlapping, overlaps, union
from .runlist import RunList
from .scan import lookup, overlapping_range

__version__ = "0.1.0"
