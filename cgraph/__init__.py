"""Building blocks for graph-style pipelines: status values, lifecycle base objects and an ANN node template."""

__version__ = "0.1.0"
__all__ = ["status", "objects", "ann"]