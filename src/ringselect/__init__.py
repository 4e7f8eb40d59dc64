"""Ringselect - Ring selection for polygon overlay operations.

Ringselect decides, for every boundary ring of two planar geometries, whether
the ring contributes to the result of a union, intersection or difference, and
whether its winding has to be reversed in the output.

Example:
    $ ringselect a.json b.json --operation difference

This prints every ring of a.json and b.json that survives into a.json - b.json
and that was not already consumed by intersection processing.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
