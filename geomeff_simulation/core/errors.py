"""
Exceptions raised by the geometric efficiency simulation.
"""


class GeomEffError(Exception):
    """Base class for all simulation errors."""


class InvalidConfiguration(GeomEffError, ValueError):
    """Bad user input: unknown source/detector type, too few points, etc.

    Fatal for a sweep. No partial results are returned.
    """


class SizeMismatch(GeomEffError, AssertionError):
    """Two point batches of different length were combined."""
