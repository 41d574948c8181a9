"""
Exception and warning types raised by elnet.

Fatal conditions (unreadable or short input, invalid dimensionality)
abort the whole computation; no partial bond list is ever returned.
"""


class ElasticNetworkError(Exception):
    """Base class for fatal elastic network errors."""


class NetworkInputError(ElasticNetworkError, ValueError):
    """Coordinate input is unreadable or ends before N particles are read."""


class DimensionalityError(ElasticNetworkError, ValueError):
    """Dimensionality outside {1, 2, 3} or inconsistent with the data."""


class BoxGrowthWarning(UserWarning):
    """A box length was smaller than three cutoffs and has been enlarged."""
