"""
elnet - Elastic network generator.

Turns a set of point coordinates in 1, 2 or 3 dimensions into a list of
harmonic bonds between every pair of points closer than a cutoff radius.

Main features:
- O(N) link-cell neighbor search
- Mixed periodic/open boundaries, chosen per axis
- Text coordinate reader and bond writer compatible with the classic
  "i j K r0" bond format
- YAML configuration and an optional REST API
"""

__version__ = "0.1.0"
__author__ = "elnet Team"
