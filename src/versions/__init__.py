"""Version vectors and version specifications.

This package parses dotted version strings into comparable vectors and
decides whether a vector satisfies an exact, ranged, or wildcard spec.
"""
