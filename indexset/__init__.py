"""An ordered hash set with index access, ordered set operations, slices and JSON conversion."""

__version__ = "0.1.0"
__all__ = ["indexset", "iterators", "ranges", "sequence", "serialization", "slice"]