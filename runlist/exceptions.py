class InvalidRunError(ValueError):
    """
    Raised when a run would be empty, i.e. its start is not strictly
    before its end.
    """
    pass


class UnsupportedKeyError(TypeError):
    """
    Raised when a key has no successor, so no single-point run can be
    built to look it up.
    """
    pass
