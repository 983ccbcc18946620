"""Exception types raised by fencesplit."""


class FencesplitError(Exception):
    """Base class for all fencesplit errors."""


class PatternError(FencesplitError, ValueError):
    """A fence pattern descriptor is malformed or does not compile."""
